"""
modules/formatting.py

Render tables using the column alignment detected by numform.
"""
import logging
from typing import Any, List, Optional, Sequence, Tuple

import pandas as pd
from pandas.api.types import is_scalar
from rich.table import Table
from tabulate import tabulate

from numform import classify_alignment

logger = logging.getLogger(__name__)

_FORMAT_SPEC = {"right": ">", "r": ">", "center": "^", "c": "^"}
_MARKDOWN_RULE = {"right": "---:", "r": "---:", "center": ":---:", "c": ":---:"}


def _cell(value: Any) -> str:
    if is_scalar(value) and pd.isna(value):
        return ""
    return str(value)


def frame_to_rows(df: pd.DataFrame) -> Tuple[List[str], List[List[str]]]:
    """Return (headers, rows) of display strings; missing cells become ''."""
    headers = [str(c) for c in df.columns]
    rows = [[_cell(v) for v in row] for row in df.itertuples(index=False, name=None)]
    return headers, rows


def detect_alignment(ncols: int, rows: Sequence[Sequence[Any]]) -> List[str]:
    """
    Classify the columns of a list of rows. Short rows are padded with
    missing cells so the columns stay rectangular.
    """
    columns = {
        i: [(row[i] if i < len(row) else None) for row in rows]
        for i in range(ncols)
    }
    return classify_alignment(columns)


def format_table(headers: List[str], rows: List[List[str]], style="plain", padding=1,
                 align: Optional[List[str]] = None) -> str:
    """
    Pretty-print a table with aligned columns.
    - style: "grid" (ASCII box) or "plain" (no borders)
    - align: one tag per column ("left"/"right" or "l"/"r"); detected when None
    """
    H = [str(h) for h in headers]
    R = [[("" if c is None else str(c)) for c in row] for row in rows]
    ncols = len(H)
    if align is None:
        align = detect_alignment(ncols, rows)
    spec = [_FORMAT_SPEC.get(a, "<") for a in align]
    logger.debug("Column alignment: %s", align)

    # column widths
    widths = [len(H[i]) for i in range(ncols)]
    for row in R:
        for i, cell in enumerate(row):
            if i < ncols:
                widths[i] = max(widths[i], len(cell))

    pad = " " * padding
    def fmt_row(cells):
        cells = [(cells[i] if i < len(cells) else "") for i in range(ncols)]
        return "|" + "|".join(f"{pad}{cells[i]:{spec[i]}{widths[i]}}{pad}" for i in range(ncols)) + "|"

    if style == "grid":
        sep = "+" + "+".join("-" * (w + 2 * padding) for w in widths) + "+"
        out = [sep, fmt_row(H), sep]
        out += [fmt_row(r) for r in R]
        out.append(sep)
        return "\n".join(out)
    else:  # plain
        out = [fmt_row(H)]
        out += [fmt_row(r) for r in R]
        return "\n".join(out)


def format_markdown(headers: List[str], rows: List[List[str]],
                    align: Optional[List[str]] = None) -> str:
    """Markdown table; right-aligned columns get a '---:' rule."""
    if align is None:
        align = detect_alignment(len(headers), rows)
    md = "| " + " | ".join(str(h) for h in headers) + " |\n"
    md += "|" + "|".join(_MARKDOWN_RULE.get(a, "---") for a in align) + "|\n"
    for row in rows:
        cells = [("" if c is None else str(c)) for c in row]
        cells += [""] * (len(headers) - len(cells))
        md += "| " + " | ".join(cells[:len(headers)]) + " |\n"
    return md


def format_tabulate(df: pd.DataFrame, tablefmt: str = "github") -> str:
    """Render a DataFrame with tabulate, passing the detected colalign."""
    headers, rows = frame_to_rows(df)
    colalign = classify_alignment(df)
    # disable_numparse keeps "3.10" and "1,200" exactly as formatted upstream
    return tabulate(rows, headers=headers, tablefmt=tablefmt,
                    colalign=colalign, disable_numparse=True)


def build_rich_table(df: pd.DataFrame, title: Optional[str] = None) -> Table:
    """Return a rich Table whose column justification follows the detected alignment."""
    headers, rows = frame_to_rows(df)
    table = Table(title=title)
    for header, justify in zip(headers, classify_alignment(df)):
        table.add_column(header, justify=justify)
    for row in rows:
        table.add_row(*row)
    return table
