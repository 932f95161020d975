"""Unit tests for the glossary consistency checks."""

from __future__ import annotations

from computerese.core.contracts.glossary import Entry, Glossary
from computerese.validation.checks import (
    check_footnote_integrity,
    check_format,
    check_letter_groups,
    check_required_fields,
    check_term_count,
    run_all_checks,
)


def test_format_accepts_glossary(full_glossary: Glossary) -> None:
    outcome = check_format(full_glossary)
    assert outcome.is_ok()
    assert outcome.unwrap() == "Canonical format is valid"


def test_format_reports_missing_keys() -> None:
    assert check_format({"footnotes": {}}).unwrap_err() == "Missing 'terms' key"
    assert check_format({"terms": {}, "footnotes": None}).unwrap_err() == (
        "Missing 'footnotes' key"
    )


def test_term_count(full_glossary: Glossary) -> None:
    assert check_term_count(full_glossary, 26).unwrap() == "Term count matches: 26 terms"
    assert check_term_count(full_glossary, 27).unwrap_err() == (
        "Term count mismatch: canonical has 26, source document has 27"
    )


def test_footnote_integrity_reports_each_dangling_ref(full_glossary: Glossary) -> None:
    assert check_footnote_integrity(full_glossary).is_ok()

    full_glossary.terms["B"][0] = Entry(word="bword", meaning="B释义", footnotes=[1, 9])
    full_glossary.terms["C"][0] = Entry(word="cword", meaning="C释义", footnotes=[4])
    assert check_footnote_integrity(full_glossary).unwrap_err() == (
        "Term 'bword' references undefined footnote 9; "
        "Term 'cword' references undefined footnote 4"
    )


def test_required_fields(full_glossary: Glossary) -> None:
    assert check_required_fields(full_glossary).unwrap() == "All terms have required fields"

    full_glossary.terms["D"].append(Entry(word="", meaning=""))
    assert check_required_fields(full_glossary).unwrap_err() == (
        "D[1]: missing 'word' field; D[1]: missing 'meaning' field"
    )


def test_letter_groups_missing_and_extra(full_glossary: Glossary) -> None:
    assert check_letter_groups(full_glossary).unwrap() == "All A-Z letter groups present"

    del full_glossary.terms["Z"]
    assert check_letter_groups(full_glossary).unwrap_err() == "Missing letter groups: Z"

    full_glossary.terms["1"] = [Entry(word="1st", meaning="第一")]
    assert check_letter_groups(full_glossary).unwrap_err() == (
        "Missing letter groups: Z; Extra letter groups: 1"
    )


def test_run_all_checks_runs_everything() -> None:
    """A failing check never prevents the later ones from running."""
    g = Glossary(terms={"A": [Entry(word="a", meaning="", footnotes=[3])]})
    results = run_all_checks(g, 2)

    assert [name for name, _ in results] == [
        "Term Count",
        "Footnote Integrity",
        "Required Fields",
        "Letter Group Completeness",
    ]
    assert all(outcome.is_err() for _, outcome in results)


def _failing(g: Glossary, source_count: int) -> list[str]:
    return [name for name, outcome in run_all_checks(g, source_count) if outcome.is_err()]


def test_missing_letter_fails_only_letter_groups(full_glossary: Glossary) -> None:
    del full_glossary.terms["Z"]
    assert _failing(full_glossary, 25) == ["Letter Group Completeness"]


def test_dangling_ref_fails_only_footnote_integrity(full_glossary: Glossary) -> None:
    full_glossary.terms["B"][0] = Entry(word="bword", meaning="B释义", footnotes=[5])
    assert _failing(full_glossary, 26) == ["Footnote Integrity"]


def test_empty_meaning_fails_only_required_fields(full_glossary: Glossary) -> None:
    full_glossary.terms["C"][0] = Entry(word="cword", meaning="")
    assert _failing(full_glossary, 26) == ["Required Fields"]


def test_count_mismatch_fails_only_term_count(full_glossary: Glossary) -> None:
    assert _failing(full_glossary, 30) == ["Term Count"]
