# -*- coding: utf-8 -*-
"""Accuracy and confusion matrix for a vector of predictions."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd
from sklearn.metrics import confusion_matrix

from .errors import EmptyDatasetError, LengthMismatchError


@dataclass(frozen=True)
class Evaluation:
    """
    Outcome of comparing predictions with the true labels.

    ``accuracy == correct / total`` and ``0 <= correct <= total``.
    ``confusion`` has one row per true label and one column per predicted
    label, both ordered as ``labels``.
    """

    accuracy: float
    correct: int
    total: int
    labels: np.ndarray
    confusion: np.ndarray


def evaluate(predictions, truth) -> Evaluation:
    """
    Compare ``predictions`` with ``truth`` position by position.

    Raises
    ------
    LengthMismatchError
        If the two vectors differ in length.
    EmptyDatasetError
        If both vectors are empty.
    """
    y_pred = np.asarray(predictions).ravel()
    y_true = np.asarray(truth).ravel()
    if len(y_pred) != len(y_true):
        raise LengthMismatchError(
            f"{len(y_pred)} predictions but {len(y_true)} true labels"
        )
    total = len(y_true)
    if total == 0:
        raise EmptyDatasetError("no test rows to evaluate", stage="evaluate")

    correct = int(np.count_nonzero(y_pred == y_true))
    labels = np.union1d(y_true, y_pred)
    cm = confusion_matrix(y_true, y_pred, labels=labels)
    return Evaluation(
        accuracy=correct / total,
        correct=correct,
        total=total,
        labels=labels,
        confusion=cm,
    )


def format_accuracy(evaluation: Evaluation) -> str:
    return f"Accuracy: {evaluation.accuracy * 100.0:.2f}%"


def format_confusion(evaluation: Evaluation) -> str:
    """Render the confusion matrix as a small labelled table."""
    labels = [str(k) for k in evaluation.labels]
    df = pd.DataFrame(
        evaluation.confusion,
        index=pd.Index([f"Actual {k}" for k in labels], name=""),
        columns=[f"Pred {k}" for k in labels],
    )
    lines = ["Confusion matrix", df.to_string()]
    if evaluation.confusion.shape == (2, 2):
        tn, fp, fn, tp = evaluation.confusion.ravel()
        lines.append(f"TN={tn}  FP={fp}  FN={fn}  TP={tp}")
    return "\n".join(lines)
