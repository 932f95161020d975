"""Checks for rendered artifacts in the output directory.

- CSV: the file must exist and hold exactly one non-blank data line per
  glossary entry after the header line.
- Every other format: the path must exist, be a regular file, and be
  non-empty. Binary formats are not opened.
"""

from __future__ import annotations

from pathlib import Path

from computerese.core.result import err, ok

from .checks import CheckOutcome


def check_csv_output(path: str | Path, expected_terms: int) -> CheckOutcome:
    """Count CSV data rows (non-blank lines minus the header)."""
    csv_path = Path(path)
    if not csv_path.exists():
        return err(f"File not found: {csv_path}")

    try:
        content = csv_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return err(f"Error reading CSV: {exc}")

    lines = [line for line in content.split("\n") if line.strip()]
    term_count = max(0, len(lines) - 1)
    if term_count != expected_terms:
        return err(f"Term count mismatch: expected {expected_terms}, got {term_count}")
    return ok(f"Valid: {term_count} terms")


def check_file_output(path: str | Path, fmt: str) -> CheckOutcome:
    """Require a non-empty regular file at ``path``."""
    out = Path(path)
    if not out.exists():
        return err(f"File not found: {out}")
    if not out.is_file():
        return err(f"Path is not a file: {out}")

    size = out.stat().st_size
    if size == 0:
        return err(f"File is empty: {out}")
    return ok(f"Valid: {fmt.upper()} file exists ({size} bytes)")


def check_output(fmt: str, path: str | Path, expected_terms: int) -> CheckOutcome:
    """Dispatch to the check appropriate for ``fmt``."""
    if fmt == "csv":
        return check_csv_output(path, expected_terms)
    return check_file_output(path, fmt)


__all__ = ["check_csv_output", "check_file_output", "check_output"]
