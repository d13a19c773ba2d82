from __future__ import annotations

import io
import json
import sys
from pathlib import Path

import pandas as pd
import pytest

PROJECT_ROOT = str(Path(__file__).resolve().parents[1])
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from modules.io_tools import guess_format, load_table
from numform import classify_alignment


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("table.csv", "csv"),
        ("TABLE.CSV", "csv"),
        ("table.tsv", "tsv"),
        ("table.tab", "tsv"),
        ("table.json", "json"),
    ],
)
def test_guess_format(name: str, expected: str) -> None:
    assert guess_format(name) == expected


@pytest.mark.parametrize("name", ["table.xlsx", "table", "-"])
def test_guess_format_rejects_unknown(name: str) -> None:
    with pytest.raises(ValueError):
        guess_format(name)


def test_load_csv_keeps_placeholders_as_text(tmp_path: Path) -> None:
    path = tmp_path / "scores.csv"
    path.write_text("Name,Score,Flag,Note\nAlice,85%,-,NA\nBob,3.10,-,\n", encoding="utf-8")

    df = load_table(path)

    assert list(df.columns) == ["Name", "Score", "Flag", "Note"]
    assert df["Score"].tolist() == ["85%", "3.10"]
    assert df["Note"].iloc[0] == "NA"
    assert pd.isna(df["Note"].iloc[1])
    assert classify_alignment(df) == ["left", "right", "left", "right"]


def test_load_tsv(tmp_path: Path) -> None:
    path = tmp_path / "scores.tsv"
    path.write_text("Team\tWon\nWest Coast\t$1.2M\n", encoding="utf-8")

    df = load_table(path)

    assert classify_alignment(df, "l") == ["l", "r"]


def test_load_json_records_with_nulls(tmp_path: Path) -> None:
    path = tmp_path / "scores.json"
    records = [{"a": None, "b": "x", "n": 1.5}, {"a": "12", "b": "y", "n": 2}]
    path.write_text(json.dumps(records), encoding="utf-8")

    df = load_table(path)

    assert df["n"].tolist() == ["1.5", "2.0"]
    assert classify_alignment(df) == ["right", "left", "right"]


def test_load_json_column_mapping(tmp_path: Path) -> None:
    path = tmp_path / "columns.json"
    path.write_text(json.dumps({"Name": ["Alice", "Bob"], "Score": ["85%", "90%"]}), encoding="utf-8")

    df = load_table(path)

    assert classify_alignment(df, separator="") == "leftright"


@pytest.mark.parametrize(
    "payload",
    ["not json", json.dumps(42), json.dumps({"a": "scalar"}), json.dumps([1, 2])],
)
def test_load_json_rejects_non_tables(tmp_path: Path, payload: str) -> None:
    path = tmp_path / "bad.json"
    path.write_text(payload, encoding="utf-8")

    with pytest.raises(ValueError):
        load_table(path)


def test_load_from_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("a,b\n1,x\n"))

    df = load_table("-", "csv")

    assert classify_alignment(df) == ["right", "left"]


def test_unsupported_format(tmp_path: Path) -> None:
    path = tmp_path / "t.csv"
    path.write_text("a\n1\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_table(path, "xml")


def test_missing_file_raises_oserror(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_table(tmp_path / "missing.csv")


def test_empty_csv_field_is_missing_like_json_null(tmp_path: Path) -> None:
    csv_path = tmp_path / "won.csv"
    csv_path.write_text("Team,Won\nWest Coast,\nEast Coast,$1.2M\n", encoding="utf-8")
    json_path = tmp_path / "won.json"
    json_path.write_text(
        json.dumps({"Team": ["West Coast", "East Coast"], "Won": [None, "$1.2M"]}),
        encoding="utf-8",
    )

    assert classify_alignment(load_table(csv_path)) == ["left", "right"]
    assert classify_alignment(load_table(json_path)) == ["left", "right"]
