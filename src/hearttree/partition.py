# -*- coding: utf-8 -*-
"""Train/test partitioning of a :class:`~hearttree.dataset.Dataset`."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from loguru import logger

from .config import SplitConfig, check_ratio
from .dataset import Dataset
from .errors import EmptyDatasetError


@dataclass(frozen=True, eq=False)
class Split:
    """Disjoint train and test datasets plus the source row indices of each."""

    train: Dataset
    test: Dataset
    train_indices: np.ndarray
    test_indices: np.ndarray


def n_train_rows(ratio: float, n_rows: int) -> int:
    """``round(ratio * n_rows)`` with halves rounded up."""
    return int(math.floor(ratio * n_rows + 0.5))


def split_with_ratio(dataset: Dataset, ratio: float, *, shuffle: bool = False,
                     random_state: int | None = None) -> Split:
    """
    Divide ``dataset`` into train and test subsets.

    Parameters
    ----------
    dataset : Dataset
        Rows to partition.
    ratio : float
        Fraction of rows that go to train.  Must lie strictly inside (0, 1).
    shuffle : bool, default=False
        If ``False`` the first rows (in file order) form the training set.
        If ``True`` the rows are permuted first.
    random_state : int or None, default=None
        Seed for the permutation.  Ignored when ``shuffle=False``.

    Returns
    -------
    Split

    Raises
    ------
    InvalidRatioError
        If ``ratio`` is not inside (0, 1).
    EmptyDatasetError
        If ``dataset`` has no rows.
    """
    r = check_ratio(ratio)
    n = len(dataset)
    if n == 0:
        raise EmptyDatasetError("cannot split an empty dataset", stage="partition")

    if shuffle:
        order = np.random.default_rng(random_state).permutation(n)
    else:
        order = np.arange(n)
    cut = n_train_rows(r, n)
    train_idx, test_idx = order[:cut], order[cut:]

    logger.debug("Split {} rows into {} train / {} test (shuffle={})",
                 n, len(train_idx), len(test_idx), shuffle)
    return Split(
        train=dataset.take(train_idx),
        test=dataset.take(test_idx),
        train_indices=train_idx,
        test_indices=test_idx,
    )


def split_dataset(dataset: Dataset, config: SplitConfig) -> Split:
    return split_with_ratio(dataset, config.ratio, shuffle=config.shuffle,
                            random_state=config.random_state)
