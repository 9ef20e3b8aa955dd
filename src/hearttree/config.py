# -*- coding: utf-8 -*-
"""Run configuration: input path, split settings and tree hyperparameters."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from pathlib import Path

from .errors import InvalidRatioError

DEFAULT_DATA_PATH = Path("heart.csv")
DATA_PATH_ENV = "HEARTTREE_DATA"

CRITERIA = ("gini", "entropy")


def check_ratio(ratio) -> float:
    """Return ``ratio`` as a float, or raise if it is not inside (0, 1)."""
    if isinstance(ratio, bool):
        raise InvalidRatioError(f"split ratio must be a number, got {ratio!r}")
    try:
        r = float(ratio)
    except (TypeError, ValueError):
        raise InvalidRatioError(f"split ratio must be a number, got {ratio!r}") from None
    if math.isnan(r) or not 0.0 < r < 1.0:
        raise InvalidRatioError(f"split ratio must be in (0, 1), got {ratio!r}")
    return r


@dataclass(frozen=True)
class TreeParams:
    """
    Hyperparameters handed to the decision tree.

    Parameters
    ----------
    criterion : {"gini", "entropy"}, default="gini"
        Split quality measure.
    max_depth : int or None, default=100
        Maximum depth of the tree.  ``None`` leaves the depth unbounded.
    min_samples_split : int, default=2
        Minimum number of training samples required to split a node.
    min_samples_leaf : int, default=1
        Minimum number of samples required in each leaf.
    random_state : int or None, default=None
        Seed for the estimator's tie-breaking between equally good splits.
    """

    criterion: str = "gini"
    max_depth: int | None = 100
    min_samples_split: int = 2
    min_samples_leaf: int = 1
    random_state: int | None = None

    def __post_init__(self):
        if self.criterion not in CRITERIA:
            raise ValueError(f"criterion must be one of {CRITERIA}, got {self.criterion!r}")
        if self.max_depth is not None and int(self.max_depth) < 1:
            raise ValueError("max_depth must be >= 1 or None")
        if int(self.min_samples_split) < 2:
            raise ValueError("min_samples_split must be >= 2")
        if int(self.min_samples_leaf) < 1:
            raise ValueError("min_samples_leaf must be >= 1")

    def to_estimator_kwargs(self) -> dict:
        return {
            "criterion": self.criterion,
            "max_depth": None if self.max_depth is None else int(self.max_depth),
            "min_samples_split": int(self.min_samples_split),
            "min_samples_leaf": int(self.min_samples_leaf),
            "random_state": self.random_state,
        }


@dataclass(frozen=True)
class SplitConfig:
    """Train/test split settings.  Prefix split unless ``shuffle`` is set."""

    ratio: float = 0.8
    shuffle: bool = False
    random_state: int | None = None

    def __post_init__(self):
        object.__setattr__(self, "ratio", check_ratio(self.ratio))


@dataclass(frozen=True)
class PipelineConfig:
    data_path: Path = DEFAULT_DATA_PATH
    split: SplitConfig = field(default_factory=SplitConfig)
    tree: TreeParams = field(default_factory=TreeParams)

    def __post_init__(self):
        object.__setattr__(self, "data_path", Path(self.data_path))

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "PipelineConfig":
        """Build a config whose default data path honours ``HEARTTREE_DATA``."""
        environ = os.environ if environ is None else environ
        if "data_path" not in overrides and environ.get(DATA_PATH_ENV):
            overrides["data_path"] = Path(environ[DATA_PATH_ENV])
        return cls(**overrides)

    def to_dict(self) -> dict:
        return {
            "data_path": str(self.data_path),
            "split_ratio": self.split.ratio,
            "shuffle": self.split.shuffle,
            "split_random_state": self.split.random_state,
            **self.tree.to_estimator_kwargs(),
        }
