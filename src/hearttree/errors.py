# -*- coding: utf-8 -*-
"""
hearttree.errors
================

Exceptions raised by the pipeline stages.

Every exception derives from :class:`PipelineError` and records the ``stage``
in which it was raised (``"parse"``, ``"shape"``, ``"partition"``,
``"train"`` or ``"evaluate"``).  Each one also derives from the builtin that
best describes it, so callers that only know about ``ValueError`` or
``OSError`` keep working.
"""

from __future__ import annotations

import numpy as np


class PipelineError(Exception):
    """Base class for all pipeline failures."""

    stage: str = "pipeline"

    def __init__(self, message: str, *, stage: str | None = None):
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class DataFileError(PipelineError, OSError):
    """The input file could not be opened or read."""

    stage = "parse"

    def __init__(self, message: str, *, path=None):
        super().__init__(message)
        self.path = path


class ParseError(PipelineError, ValueError):
    """The file is not a header followed by rows of the header's width."""

    stage = "parse"

    def __init__(self, message: str, *, line: int | None = None):
        super().__init__(message)
        self.line = line


class ConversionError(PipelineError, ValueError):
    """A field could not be read as a finite real number."""

    stage = "shape"

    def __init__(self, row: int, column: int, name: str, value: str):
        super().__init__(
            f"row {row}, column {column} ({name!r}): "
            f"cannot convert {value!r} to a finite number"
        )
        self.row = row
        self.column = column
        self.name = name
        self.value = value


class LabelRangeError(PipelineError, ValueError):
    """A label truncates to a negative integer or does not fit in int64."""

    stage = "shape"

    def __init__(self, row: int, value: float):
        super().__init__(f"row {row}: label {value!r} is outside [0, {np.iinfo(np.int64).max}]")
        self.row = row
        self.value = value


class EmptyDatasetError(PipelineError, ValueError):
    """There are no rows to work with."""

    stage = "shape"


class InvalidRatioError(PipelineError, ValueError):
    """The split ratio is not strictly between 0 and 1."""

    stage = "partition"


class TrainingError(PipelineError, RuntimeError):
    """The decision tree could not be fitted."""

    stage = "train"


class LengthMismatchError(PipelineError, ValueError):
    """Predicted and true label vectors differ in length."""

    stage = "evaluate"
