"""
modules/io_tools.py

Utility functions for reading tables from disk (or stdin) as display strings.
"""

import io
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Union

import pandas as pd
from pandas.api.types import is_scalar

logger = logging.getLogger(__name__)

_SUFFIX_FORMATS = {
    ".csv": "csv",
    ".tsv": "tsv",
    ".tab": "tsv",
    ".json": "json",
}


def guess_format(path: Union[str, Path]) -> str:
    """
    Infer the table format from a file suffix.

    Raises:
        ValueError if the suffix is not recognised (stdin has no suffix).
    """
    suffix = Path(path).suffix.lower()
    try:
        return _SUFFIX_FORMATS[suffix]
    except KeyError:
        raise ValueError(
            f"Cannot infer table format from '{path}'; pass one of: csv, tsv, json"
        ) from None


def _read_text(path: Union[str, Path]) -> str:
    if str(path) == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _display(value):
    if is_scalar(value) and pd.isna(value):
        return None
    return str(value)


def _frame_from_json(text: str) -> pd.DataFrame:
    data = json.loads(text)
    if isinstance(data, dict):
        if not all(isinstance(v, list) for v in data.values()):
            raise ValueError("JSON column mapping must map names to lists of cells")
        frame = pd.DataFrame(data)
    elif isinstance(data, list):
        if not all(isinstance(r, (dict, list)) for r in data):
            raise ValueError("JSON table must be a list of records (objects or arrays)")
        frame = pd.DataFrame.from_records(data)
    else:
        raise ValueError("JSON table must be a list of records or a mapping of columns")
    # Keep JSON nulls as missing, everything else as the string a renderer would print.
    for name in frame.columns:
        frame[name] = frame[name].map(_display)
    return frame


def load_table(
    path: Union[str, Path],
    fmt: Optional[str] = None,
) -> pd.DataFrame:
    """
    Load a table with every cell kept as its display string.

    Args:
        path: File to read, or '-' for stdin.
        fmt: 'csv', 'tsv' or 'json'. Inferred from the suffix when None.

    Returns:
        DataFrame of strings. Placeholders such as "NA" and "-" are kept as
        text; empty CSV fields and JSON nulls become missing values.

    Raises:
        ValueError for unknown formats or malformed JSON.
        OSError if the file cannot be read.
    """
    if fmt is None:
        fmt = guess_format(path)
    fmt = fmt.lower()

    text = _read_text(path)
    if fmt in ("csv", "tsv"):
        frame = pd.read_csv(
            io.StringIO(text),
            sep="\t" if fmt == "tsv" else ",",
            dtype=str,
            keep_default_na=False,
            na_values=[""],
        )
    elif fmt == "json":
        try:
            frame = _frame_from_json(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        raise ValueError(f"Unsupported table format: {fmt}")

    logger.debug("Loaded %d rows x %d columns from %s", frame.shape[0], frame.shape[1], path)
    return frame

# ---
