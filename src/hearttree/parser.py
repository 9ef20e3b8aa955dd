# -*- coding: utf-8 -*-
"""
hearttree.parser
================

Reads a delimited text file into a header and a list of raw rows.

The first non-empty line is the header; every later non-empty line must have
exactly as many fields as the header.  Fields are returned as stripped text;
numeric conversion happens in :mod:`hearttree.dataset`.
"""

from __future__ import annotations

import csv
from pathlib import Path

from loguru import logger

from .errors import DataFileError, ParseError


def read_records(path, delimiter: str = ",") -> tuple[list[str], list[list[str]]]:
    """
    Read ``path`` and return ``(header, rows)``.

    Parameters
    ----------
    path : str or os.PathLike
        Location of the input file.
    delimiter : str, default=","
        Field separator.

    Returns
    -------
    header : list[str]
        Column names.  The last one names the label column.
    rows : list[list[str]]
        One list of text fields per data line, in file order.

    Raises
    ------
    DataFileError
        If the file cannot be opened or read.
    ParseError
        If the file has no header, the header has fewer than two columns, or
        a data line does not have exactly ``len(header)`` fields.
    """
    path = Path(path)
    header: list[str] | None = None
    rows: list[list[str]] = []
    try:
        with path.open("r", newline="", encoding="utf-8") as fh:
            reader = csv.reader(fh, delimiter=delimiter)
            try:
                for fields in reader:
                    if not fields:
                        continue
                    if header is None:
                        header = [f.strip() for f in fields]
                        if len(header) < 2:
                            raise ParseError(
                                f"{path}: header needs at least one feature and a label column, "
                                f"got {len(header)} column(s)",
                                line=reader.line_num,
                            )
                        continue
                    if len(fields) != len(header):
                        raise ParseError(
                            f"{path}, line {reader.line_num}: expected {len(header)} fields, "
                            f"found {len(fields)}",
                            line=reader.line_num,
                        )
                    rows.append([f.strip() for f in fields])
            except csv.Error as e:
                raise ParseError(f"{path}, line {reader.line_num}: {e}", line=reader.line_num) from e
    except UnicodeDecodeError as e:
        raise DataFileError(f"cannot decode {path}: {e}", path=path) from e
    except OSError as e:
        raise DataFileError(f"cannot read {path}: {e.strerror or e}", path=path) from e

    if header is None:
        raise ParseError(f"{path}: file is empty, expected a header line", line=1)

    logger.debug("Read {} data rows with {} columns from {}", len(rows), len(header), path)
    return header, rows
