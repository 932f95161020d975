"""
Consistency checks for a parsed glossary.

Each check is a pure function returning a :class:`CheckOutcome`:
``Ok(message)`` when its rule holds, ``Err(diagnostic)`` when it does not.
The checks never raise and never mutate the glossary, so callers can run any
subset in any order.

Checks
------
format
    ``terms`` and ``footnotes`` are both present. A failure here means the
    remaining checks have nothing meaningful to look at.
term count
    Entry total equals a row count taken independently from the README.
footnote integrity
    Every footnote number an entry references is defined.
required fields
    Every entry has a non-empty ``word`` and ``meaning``.
letter groups
    The letter keys are exactly ``A``..``Z``.

Multi-issue diagnostics list every issue, joined with ``"; "``.
"""

from __future__ import annotations

import string
from collections.abc import Mapping
from typing import Any

from computerese.core.contracts.glossary import Glossary
from computerese.core.result import Result, err, ok

CheckOutcome = Result[str, str]

EXPECTED_LETTERS: frozenset[str] = frozenset(string.ascii_uppercase)


def check_format(data: Glossary | Mapping[str, Any]) -> CheckOutcome:
    """Check that both top-level keys are present (``None`` counts as missing)."""
    if isinstance(data, Glossary):
        fields: Mapping[str, Any] = {"terms": data.terms, "footnotes": data.footnotes}
    else:
        fields = data

    if fields.get("terms") is None:
        return err("Missing 'terms' key")
    if fields.get("footnotes") is None:
        return err("Missing 'footnotes' key")
    return ok("Canonical format is valid")


def check_term_count(glossary: Glossary, source_count: int) -> CheckOutcome:
    """Compare the canonical entry total with the README row count."""
    canonical_count = glossary.total_terms()
    if canonical_count == source_count:
        return ok(f"Term count matches: {canonical_count} terms")
    return err(
        f"Term count mismatch: canonical has {canonical_count}, "
        f"source document has {source_count}"
    )


def check_footnote_integrity(glossary: Glossary) -> CheckOutcome:
    """Report every reference to a footnote number that is not defined."""
    defined = set(glossary.footnotes)
    issues: list[str] = []
    for _, _, entry in glossary.iter_entries():
        for ref in entry.refs:
            if ref not in defined:
                issues.append(f"Term '{entry.word}' references undefined footnote {ref}")

    if issues:
        return err("; ".join(issues))
    return ok("All footnote references are valid")


def check_required_fields(glossary: Glossary) -> CheckOutcome:
    """Report every entry with an empty ``word`` or ``meaning``."""
    issues: list[str] = []
    for letter, index, entry in glossary.iter_entries():
        if not entry.word:
            issues.append(f"{letter}[{index}]: missing 'word' field")
        if not entry.meaning:
            issues.append(f"{letter}[{index}]: missing 'meaning' field")

    if issues:
        return err("; ".join(issues))
    return ok("All terms have required fields")


def check_letter_groups(glossary: Glossary) -> CheckOutcome:
    """Require the letter keys to be exactly A–Z."""
    actual = set(glossary.terms)
    missing = sorted(EXPECTED_LETTERS - actual)
    extra = sorted(actual - EXPECTED_LETTERS)

    issues: list[str] = []
    if missing:
        issues.append(f"Missing letter groups: {', '.join(missing)}")
    if extra:
        issues.append(f"Extra letter groups: {', '.join(extra)}")

    if issues:
        return err("; ".join(issues))
    return ok("All A-Z letter groups present")


def run_all_checks(glossary: Glossary, source_count: int) -> list[tuple[str, CheckOutcome]]:
    """Run every post-format check and return ``(title, outcome)`` pairs.

    No check is skipped because an earlier one failed.
    """
    return [
        ("Term Count", check_term_count(glossary, source_count)),
        ("Footnote Integrity", check_footnote_integrity(glossary)),
        ("Required Fields", check_required_fields(glossary)),
        ("Letter Group Completeness", check_letter_groups(glossary)),
    ]


__all__ = [
    "CheckOutcome",
    "EXPECTED_LETTERS",
    "check_format",
    "check_term_count",
    "check_footnote_integrity",
    "check_required_fields",
    "check_letter_groups",
    "run_all_checks",
]
