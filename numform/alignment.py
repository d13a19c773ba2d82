"""Detect whether table columns should be left or right aligned.

Formatting helpers that add currency prefixes, percent suffixes or HTML
markup turn numeric columns into strings, after which a table renderer can
no longer tell numbers from text by dtype.  The functions here decide
alignment from the *display string* instead: each column is judged by its
first present cell, which is right-aligned when it looks numeric and is not
a blank or dash placeholder.

The result is a list of caller-chosen tags (``"left"``/``"right"`` or
``"l"``/``"r"``) that can be handed to ``tabulate(colalign=...)``, a
``rich`` column ``justify`` or a LaTeX/Markdown column spec.
"""
from __future__ import annotations

import re
from collections.abc import Mapping, Set
from typing import Any, Iterable, List, Optional, Tuple, Union

import pandas as pd
from pandas.api.types import is_scalar

from .errors import InvalidInputKind, PatternCompilationError

__all__ = [
    "ADDITIONAL_NUMERIC",
    "BLANK_PATTERN",
    "NUMERIC_PATTERN",
    "alignment",
    "classify_alignment",
    "compile_numeric_pattern",
    "representative_value",
    "right_align",
]

# Signs, currency with K/M/B magnitudes, dates/times (5+ chars of digits and
# delimiters) and plain numbers with an optional degree/compass suffix.
NUMERIC_PATTERN = (
    r"^((((\$)?[0-9.,+-]+( ?%|[KMB])?)|([0-9/:.-T ]{5,}))"
    r"|(-?[0-9.]+(&deg;)?[WESNFC]?))$"
)

# Bold HTML delta markers, number-led tokens, currency magnitudes and the
# NaN/NA/Inf literals.
ADDITIONAL_NUMERIC = (
    r"^((<b>(&ndash;|\+)</b>)|(<?([0-9.%-]+)"
    r"|(\$?\s*\d+[KBM])))|(NaN|NA|Inf)$"
)

# Placeholders made only of dashes and whitespace never count as numeric.
BLANK_PATTERN = r"^-*\s*$"

_BLANK_RE = re.compile(BLANK_PATTERN)

# Same characters as R trimws(): other Unicode spaces are kept.
_TRIM_CHARS = " \t\r\n"

Dataset = Union[pd.DataFrame, Mapping]


def compile_numeric_pattern(
    numeric_pattern: Optional[str] = None,
    base_pattern: str = NUMERIC_PATTERN,
) -> "re.Pattern[str]":
    """Return the compiled pattern used to recognise numeric-looking cells.

    ``numeric_pattern`` is OR-ed onto ``base_pattern``; pass ``None`` to use
    the base pattern alone.  A pattern that fails to compile raises
    :class:`PatternCompilationError`.
    """

    parts = [base_pattern]
    if numeric_pattern is not None:
        parts.append(numeric_pattern)
    # Parts compile alone first; an unbalanced ")|(" would close the wrapper group.
    for part in parts:
        try:
            re.compile(part)
        except re.error as exc:
            raise PatternCompilationError(part, str(exc)) from exc
    return re.compile("|".join(f"({part})" for part in parts))


def _is_missing(value: Any) -> bool:
    return is_scalar(value) and bool(pd.isna(value))


def representative_value(cells: Iterable[Any]) -> str:
    """Return the first non-missing cell as a stripped display string.

    An empty string is returned when every cell is missing.
    """

    for cell in cells:
        if not _is_missing(cell):
            return str(cell).strip(_TRIM_CHARS)
    return ""


def _column_length(name: Any, cells: Any) -> int:
    """Return the number of cells, rejecting scalars and unordered collections."""

    if isinstance(cells, (str, bytes, Mapping, Set)) or not hasattr(cells, "__iter__"):
        raise InvalidInputKind(
            f"Column {name!r} is not a sequence of cells ({type(cells).__name__})"
        )
    try:
        return len(cells)
    except TypeError as exc:
        # 0-d numpy arrays define __len__ but are unsized
        raise InvalidInputKind(
            f"Column {name!r} has no length ({type(cells).__name__})"
        ) from exc


def _columns(dataset: Any) -> List[Tuple[Any, Any]]:
    """Return ``(name, cells)`` pairs, validating that ``dataset`` is tabular."""

    if isinstance(dataset, pd.DataFrame):
        return list(dataset.items())

    if not isinstance(dataset, Mapping):
        raise InvalidInputKind(
            f"Expected a DataFrame or a mapping of columns, got {type(dataset).__name__}"
        )

    columns = list(dataset.items())
    lengths = set()
    for name, cells in columns:
        lengths.add(_column_length(name, cells))
    if len(lengths) > 1:
        raise InvalidInputKind(
            f"Columns have unequal lengths: {sorted(lengths)}"
        )
    return columns


def right_align(
    dataset: Dataset,
    numeric_pattern: Optional[str] = None,
    *,
    base_pattern: str = NUMERIC_PATTERN,
) -> List[bool]:
    """Return one flag per column: ``True`` when the column looks numeric."""

    columns = _columns(dataset)
    numeric_re = compile_numeric_pattern(numeric_pattern, base_pattern)

    flags: List[bool] = []
    for _name, cells in columns:
        value = representative_value(cells)
        flags.append(
            numeric_re.search(value) is not None and not _BLANK_RE.search(value)
        )
    return flags


def classify_alignment(
    dataset: Dataset,
    left_tag: str = "left",
    right_tag: Optional[str] = None,
    numeric_pattern: Optional[str] = ADDITIONAL_NUMERIC,
    separator: Optional[str] = None,
    *,
    base_pattern: str = NUMERIC_PATTERN,
) -> Union[List[str], str]:
    """Tag every column of ``dataset`` as left or right aligned.

    Args:
        dataset: A :class:`pandas.DataFrame` or a mapping of column name to an
            equal-length sequence of cells.
        left_tag: Tag for text-like columns.
        right_tag: Tag for numeric-like columns.  Defaults to ``"r"`` when
            ``left_tag`` is ``"l"`` and to ``"right"`` otherwise.
        numeric_pattern: Extra regex treated as numeric.  ``None`` disables it.
        separator: When given, the tags are joined into a single string.
        base_pattern: Overrides :data:`NUMERIC_PATTERN`.

    Returns:
        A list of tags in column order, or the joined string.

    Raises:
        InvalidInputKind: ``dataset`` is not a rectangular table.
        PatternCompilationError: a pattern does not compile.
    """

    if right_tag is None:
        right_tag = "r" if left_tag == "l" else "right"

    flags = right_align(dataset, numeric_pattern, base_pattern=base_pattern)
    tags = [right_tag if flag else left_tag for flag in flags]

    if separator is not None:
        return separator.join(tags)
    return tags


alignment = classify_alignment
