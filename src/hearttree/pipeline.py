# -*- coding: utf-8 -*-
"""
hearttree.pipeline
==================

The whole run in one call: load, split, fit, predict, score.

Nothing here catches exceptions.  Any :class:`~hearttree.errors.PipelineError`
raised by a stage propagates to the caller unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter

import numpy as np
from loguru import logger

from .config import PipelineConfig
from .dataset import Dataset, load_dataset
from .evaluate import Evaluation, evaluate
from .partition import Split, split_dataset
from .tree import TreeClassifier, fit_model, predict


@dataclass(frozen=True)
class PipelineResult:
    dataset: Dataset
    split: Split
    model: TreeClassifier
    predictions: np.ndarray
    evaluation: Evaluation
    elapsed: float

    @property
    def actual(self) -> np.ndarray:
        return self.split.test.targets


def run_pipeline(config: PipelineConfig | None = None) -> PipelineResult:
    config = config if config is not None else PipelineConfig()
    t0 = perf_counter()
    logger.info("Loading {}", config.data_path)
    dataset = load_dataset(config.data_path)

    split = split_dataset(dataset, config.split)
    logger.info("Training on {} rows, testing on {}", len(split.train), len(split.test))

    model = fit_model(split.train, config.tree)
    predictions = predict(model, split.test.records)
    evaluation = evaluate(predictions, split.test.targets)
    elapsed = perf_counter() - t0
    logger.info("Accuracy {:.4f} ({}/{}) in {:.3f} s",
                evaluation.accuracy, evaluation.correct, evaluation.total, elapsed)

    return PipelineResult(
        dataset=dataset,
        split=split,
        model=model,
        predictions=predictions,
        evaluation=evaluation,
        elapsed=elapsed,
    )
