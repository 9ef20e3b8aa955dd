# -*- coding: utf-8 -*-
"""Command-line entry point: run the pipeline once and print the report."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from .config import CRITERIA, DATA_PATH_ENV, PipelineConfig, SplitConfig, TreeParams
from .errors import PipelineError
from .evaluate import format_accuracy, format_confusion
from .log import configure_logging
from .pipeline import PipelineResult, run_pipeline


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="hearttree",
        description="Fit a decision tree on a CSV table and report test accuracy.",
    )
    ap.add_argument("--data", type=Path, default=None,
                    help=f"Input CSV (default: ${DATA_PATH_ENV} or heart.csv).")
    ap.add_argument("--ratio", type=float, default=0.8,
                    help="Fraction of rows used for training, in (0, 1).")
    ap.add_argument("--shuffle", action="store_true",
                    help="Shuffle rows before splitting instead of taking a prefix.")
    ap.add_argument("--seed", type=int, default=None,
                    help="Seed for --shuffle and for the tree's tie-breaking.")
    ap.add_argument("--criterion", choices=CRITERIA, default="gini")
    ap.add_argument("--max-depth", type=_positive_int, default=100)
    ap.add_argument("--show-tree", action="store_true", help="Print the fitted tree.")
    ap.add_argument("--confusion", action="store_true", help="Print the confusion matrix.")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"])
    return ap


def print_report(result: PipelineResult, *, show_tree: bool = False,
                 confusion: bool = False) -> None:
    print(f"Predictions: {result.predictions.tolist()}")
    print(f"Actual targets: {result.actual.tolist()}")
    print(format_accuracy(result.evaluation))
    if confusion:
        print(format_confusion(result.evaluation))
    if show_tree:
        result.model.print_tree()
    print(f"Time elapsed: {result.elapsed:.3f}s")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    overrides = {} if args.data is None else {"data_path": args.data}
    try:
        config = PipelineConfig.from_env(
            split=SplitConfig(ratio=args.ratio, shuffle=args.shuffle, random_state=args.seed),
            tree=TreeParams(criterion=args.criterion, max_depth=args.max_depth,
                            random_state=args.seed),
            **overrides,
        )
        result = run_pipeline(config)
    except PipelineError as e:
        logger.error("{} stage failed: {}", e.stage, e)
        print(f"error [{e.stage}]: {e}", file=sys.stderr)
        return 1

    print_report(result, show_tree=args.show_tree, confusion=args.confusion)
    return 0


if __name__ == "__main__":
    sys.exit(main())
