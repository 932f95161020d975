"""Consistency checks for canonical data and rendered outputs."""

from __future__ import annotations

from .checks import (
    CheckOutcome,
    check_footnote_integrity,
    check_format,
    check_letter_groups,
    check_required_fields,
    check_term_count,
    run_all_checks,
)
from .outputs import check_csv_output, check_file_output, check_output

__all__ = [
    "CheckOutcome",
    "check_format",
    "check_term_count",
    "check_footnote_integrity",
    "check_required_fields",
    "check_letter_groups",
    "run_all_checks",
    "check_csv_output",
    "check_file_output",
    "check_output",
]
