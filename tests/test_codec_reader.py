"""Unit tests for the canonical-file reader state machine."""

from __future__ import annotations

from pathlib import Path

import pytest

from computerese.codec.reader import load_canonical, parse_canonical, parse_ref_list, unquote
from computerese.core.contracts.glossary import Entry
from computerese.core.errors import MalformedStructure, NotFound

BASIC = """\
# header comment
terms:
  A:
    - word: abstract
      meaning: 抽象的
    - word: 'a: b'
      meaning: "it's"
      footnotes: [1, 2]
  B:
    - word: bit
      meaning: 二进制位

footnotes:
  1: 第一个注释
  2: '第二个, 注释'
"""


def test_parse_basic_structure() -> None:
    """Letters, entries, quoting and footnotes are all read back."""
    g = parse_canonical(BASIC)

    assert g.sorted_letters() == ["A", "B"]
    assert g.terms["A"][0] == Entry(word="abstract", meaning="抽象的")
    assert g.terms["A"][1] == Entry(word="a: b", meaning="it's", footnotes=[1, 2])
    assert g.footnotes == {1: "第一个注释", 2: "第二个, 注释"}


def test_garbage_line_between_entries_is_ignored() -> None:
    """One unrecognized line degrades nothing else."""
    text = BASIC.replace("  B:\n", "  this is not valid at all\n  B:\n")
    g = parse_canonical(text)
    assert g.total_terms() == 3
    assert [e.word for e in g.terms["B"]] == ["bit"]


def test_word_without_meaning_is_dropped() -> None:
    """A pending entry is committed only by its meaning line."""
    text = "terms:\n  A:\n    - word: orphan\n  B:\n    - word: bit\n      meaning: 位\n"
    g = parse_canonical(text)
    assert g.terms["A"] == []
    assert [e.word for e in g.terms["B"]] == ["bit"]


def test_footnotes_line_accepted_before_meaning() -> None:
    """The footnotes list may appear anywhere while the entry is pending."""
    text = "terms:\n  A:\n    - word: x\n      footnotes: [3, oops, 4]\n      meaning: y\n"
    g = parse_canonical(text)
    assert g.terms["A"] == [Entry(word="x", meaning="y", footnotes=[3, 4])]


def test_lines_before_any_section_are_ignored() -> None:
    """Nothing is read outside ``terms:`` / ``footnotes:``."""
    text = "  A:\n    - word: early\n      meaning: 早\n" + BASIC
    g = parse_canonical(text)
    assert [e.word for e in g.terms["A"]] == ["abstract", "a: b"]


def test_section_switch_drops_pending_entry() -> None:
    """A section header closes the terms section and any pending entry."""
    text = "terms:\n  A:\n    - word: x\nfootnotes:\n  1: note\n"
    g = parse_canonical(text)
    assert g.terms == {"A": []}
    assert g.footnotes == {1: "note"}


def test_unquote_and_ref_list_helpers() -> None:
    """Quote stripping is per end; ref lists drop non-numeric tokens."""
    assert unquote("  'abc'  ") == "abc"
    assert unquote('"abc') == "abc"
    assert unquote('""') == ""
    assert parse_ref_list("[1, x, 2]") == [1, 2]
    assert parse_ref_list("1, 2") is None


def test_load_missing_file_raises_not_found(tmp_path: Path) -> None:
    """A missing canonical file is fatal."""
    with pytest.raises(NotFound) as info:
        load_canonical(tmp_path / "nope.yaml")
    assert "nope.yaml" in str(info.value)


def test_load_empty_terms_raises_malformed(tmp_path: Path) -> None:
    """A file without any complete entry is malformed."""
    path = tmp_path / "data.yaml"
    path.write_text("# only comments\nterms:\nfootnotes:\n  1: x\n", encoding="utf-8")
    with pytest.raises(MalformedStructure):
        load_canonical(path)


def test_load_valid_file(tmp_path: Path) -> None:
    """A valid file loads from disk."""
    path = tmp_path / "data.yaml"
    path.write_text(BASIC, encoding="utf-8")
    assert load_canonical(path).total_terms() == 3


def test_footnotes_line_after_meaning_attaches_to_committed_entry() -> None:
    """The writer emits footnotes after the meaning; a new letter closes the entry."""
    text = (
        "terms:\n  A:\n    - word: x\n      meaning: y\n      footnotes: [2]\n"
        "  B:\n      footnotes: [5]\n    - word: z\n      meaning: w\n"
    )
    g = parse_canonical(text)
    assert g.terms["A"] == [Entry(word="x", meaning="y", footnotes=[2])]
    assert g.terms["B"] == [Entry(word="z", meaning="w")]
