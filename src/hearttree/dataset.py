# -*- coding: utf-8 -*-
"""
hearttree.dataset
=================

Turns parsed text rows into a numeric :class:`Dataset`.

The label is always the last column.  Every other column is a feature.  The
feature matrix takes its shape from the parsed rows, so any number of rows
and columns is accepted as long as each row matches the header.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
import pandas as pd
from loguru import logger

from .errors import ConversionError, EmptyDatasetError, LabelRangeError, ParseError
from .parser import read_records

_MAX_LABEL = int(np.iinfo(np.int64).max)


@dataclass(frozen=True, eq=False)
class Dataset:
    """
    Feature matrix, label vector and column names.

    Attributes
    ----------
    records : ndarray of shape (n_samples, n_features)
        Float feature matrix.
    targets : ndarray of shape (n_samples,)
        Non-negative integer labels.
    feature_names : tuple[str, ...]
        One name per column of ``records``.
    label_name : str
        Name of the label column.

    Both arrays are made read-only on construction.
    """

    records: np.ndarray
    targets: np.ndarray
    feature_names: tuple[str, ...]
    label_name: str = "target"

    def __post_init__(self):
        records = np.array(self.records, dtype=float)
        targets = np.array(self.targets, dtype=np.int64)
        names = tuple(self.feature_names)
        if records.ndim != 2:
            raise ValueError(f"records must be 2D, got shape {records.shape}")
        if targets.ndim != 1:
            raise ValueError(f"targets must be 1D, got shape {targets.shape}")
        if records.shape[0] != targets.shape[0]:
            raise ValueError(
                f"records has {records.shape[0]} rows but targets has {targets.shape[0]}"
            )
        if records.shape[1] != len(names):
            raise ValueError(
                f"records has {records.shape[1]} columns but {len(names)} feature names were given"
            )
        records.setflags(write=False)
        targets.setflags(write=False)
        object.__setattr__(self, "records", records)
        object.__setattr__(self, "targets", targets)
        object.__setattr__(self, "feature_names", names)

    def __len__(self) -> int:
        return self.records.shape[0]

    @property
    def n_samples(self) -> int:
        return self.records.shape[0]

    @property
    def n_features(self) -> int:
        return self.records.shape[1]

    def take(self, indices) -> "Dataset":
        """Return a new dataset holding the rows at ``indices``, in that order."""
        idx = np.asarray(indices, dtype=np.intp)
        return Dataset(self.records[idx], self.targets[idx], self.feature_names, self.label_name)

    def to_frame(self) -> pd.DataFrame:
        """The dataset as a DataFrame, features first and the label last."""
        df = pd.DataFrame(self.records, columns=list(self.feature_names))
        df[self.label_name] = self.targets
        return df


def _to_float(text: str, row: int, column: int, name: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise ConversionError(row, column, name, text) from None
    if not math.isfinite(value):
        raise ConversionError(row, column, name, text)
    return value


def shape_dataset(header, rows) -> Dataset:
    """
    Convert ``(header, rows)`` from :func:`hearttree.parser.read_records`
    into a :class:`Dataset`.

    Raises
    ------
    ParseError
        If the header has fewer than two columns or a row is not as wide as
        the header.
    EmptyDatasetError
        If there are no data rows.
    ConversionError
        If a field is not a finite real number.  The error names the 0-based
        data row and column.
    LabelRangeError
        If a label truncates to a negative integer or overflows int64.
    """
    header = list(header)
    if len(header) < 2:
        raise ParseError(f"header needs at least two columns, got {len(header)}")
    if not rows:
        raise EmptyDatasetError("dataset has a header but no data rows")

    target_index = len(header) - 1
    records = np.empty((len(rows), target_index), dtype=float)
    targets = np.empty(len(rows), dtype=np.int64)

    for i, fields in enumerate(rows):
        if len(fields) != len(header):
            raise ParseError(f"row {i}: expected {len(header)} fields, found {len(fields)}")
        values = [_to_float(text, i, j, header[j]) for j, text in enumerate(fields)]
        records[i] = values[:target_index]
        # int() truncates toward zero, so -0.5 becomes 0 and is accepted
        label = int(values[target_index])
        if label < 0 or label > _MAX_LABEL:
            raise LabelRangeError(i, values[target_index])
        targets[i] = label

    dataset = Dataset(records, targets, tuple(header[:target_index]), header[target_index])
    logger.debug(
        "Shaped dataset: {} rows x {} features, label {!r}",
        dataset.n_samples, dataset.n_features, dataset.label_name,
    )
    return dataset


def load_dataset(path, delimiter: str = ",") -> Dataset:
    """Read ``path`` and shape it into a :class:`Dataset`."""
    header, rows = read_records(path, delimiter=delimiter)
    return shape_dataset(header, rows)
