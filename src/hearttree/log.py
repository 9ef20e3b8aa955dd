# -*- coding: utf-8 -*-
"""loguru sink setup for the command line."""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


def configure_logging(level: str = "WARNING", sink=None) -> int:
    """
    Replace loguru's default handler with a single stderr sink.

    Stdout stays free for the report.  Returns the handler id so callers
    (tests, mostly) can remove it again.
    """
    logger.remove()
    return logger.add(
        sys.stderr if sink is None else sink,
        level=level.upper(),
        format=LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )
