"""Tests for the rendered-artifact checks."""

from __future__ import annotations

from pathlib import Path

from computerese.validation.outputs import check_csv_output, check_file_output, check_output


def test_csv_row_count(tmp_path: Path) -> None:
    path = tmp_path / "terms.csv"
    path.write_text("letter,word,meaning,footnotes\nA,a,甲,\nB,b,乙,1\n\n", encoding="utf-8")

    assert check_csv_output(path, 2).unwrap() == "Valid: 2 terms"
    assert check_csv_output(path, 3).unwrap_err() == "Term count mismatch: expected 3, got 2"


def test_csv_missing(tmp_path: Path) -> None:
    outcome = check_csv_output(tmp_path / "terms.csv", 1)
    assert outcome.unwrap_err().startswith("File not found:")


def test_csv_unreadable(tmp_path: Path) -> None:
    path = tmp_path / "terms.csv"
    path.write_bytes(b"\xff\xfe\xfa not utf-8")
    assert check_csv_output(path, 1).unwrap_err().startswith("Error reading CSV:")


def test_file_checks(tmp_path: Path) -> None:
    empty = tmp_path / "terms.pdf"
    empty.write_bytes(b"")
    assert check_file_output(empty, "pdf").unwrap_err().startswith("File is empty")
    assert check_file_output(tmp_path, "pdf").unwrap_err().startswith("Path is not a file")

    doc = tmp_path / "terms.docx"
    doc.write_bytes(b"12345")
    assert check_file_output(doc, "docx").unwrap() == "Valid: DOCX file exists (5 bytes)"


def test_check_output_dispatch(tmp_path: Path) -> None:
    path = tmp_path / "terms.csv"
    path.write_text("header\n", encoding="utf-8")
    assert check_output("csv", path, 0).is_ok()
    assert check_output("markdown", tmp_path / "terms.md", 0).is_err()
