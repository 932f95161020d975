"""Tests for canonical serialization, round-trip and idempotence."""

from __future__ import annotations

from pathlib import Path

from computerese.codec.reader import parse_canonical
from computerese.codec.writer import escape_value, serialize_canonical, write_canonical
from computerese.core.contracts.glossary import Entry, Glossary
from computerese.extract.readme import parse_readme_text


def test_escape_plain_values_untouched() -> None:
    assert escape_value("abstract") == "abstract"
    assert escape_value("抽象的") == "抽象的"
    assert escape_value("ratio:1") == "ratio:1"


def test_escape_special_characters() -> None:
    """Special characters get single quotes; a single quote forces double quotes."""
    assert escape_value("a, b") == "'a, b'"
    assert escape_value("key: value") == "'key: value'"
    assert escape_value("#hash") == "'#hash'"
    assert escape_value("it's") == '"it\'s"'
    assert escape_value('it\'s "x"') == '"it\'s \\"x\\""'


def test_escape_empty_and_leading_space() -> None:
    assert escape_value("") == '""'
    assert escape_value(" lead") == '" lead"'


def test_serialize_layout(sample_glossary: Glossary) -> None:
    """Letters ascend, entries keep order, footnotes come last."""
    text = serialize_canonical(sample_glossary)
    lines = text.split("\n")

    assert lines[0].startswith("#")
    assert not text.endswith("\n")
    body = lines[lines.index("terms:") :]
    assert body[:4] == ["terms:", "  A:", "    - word: abstract", "      meaning: 抽象的"]
    assert "      footnotes: [1, 2]" in body
    assert body[-3:] == [
        "footnotes:",
        "  1: 第一个注释。",
        "  2: 第二个注释， 跨越两行。",
    ]


def test_serialize_sorts_letters_not_entries() -> None:
    g = Glossary(
        terms={
            "B": [Entry(word="zeta", meaning="z"), Entry(word="alpha", meaning="a")],
            "A": [Entry(word="x", meaning="y")],
        }
    )
    g2 = parse_canonical(serialize_canonical(g))
    assert list(g2.terms) == ["A", "B"]
    assert [e.word for e in g2.terms["B"]] == ["zeta", "alpha"]


def test_round_trip_from_extracted_glossary(sample_readme_text: str) -> None:
    """parse(serialize(g)) equals g for extractor output."""
    g = parse_readme_text(sample_readme_text, footnote_cap=6)
    assert parse_canonical(serialize_canonical(g)) == g


def test_round_trip_with_quoted_values() -> None:
    g = Glossary(
        terms={
            "Q": [
                Entry(word="it's", meaning="a: b, c"),
                Entry(word="[x]", meaning='say "hi"', footnotes=[]),
                Entry(word="'quoted'", meaning="#1"),
            ]
        },
        footnotes={10: "it's fine", 3: "plain"},
    )
    assert parse_canonical(serialize_canonical(g)) == g.normalized()


def test_serialization_is_idempotent(sample_glossary: Glossary) -> None:
    first = serialize_canonical(sample_glossary)
    second = serialize_canonical(parse_canonical(first))
    assert first == second


def test_write_canonical_creates_parents(tmp_path: Path, sample_glossary: Glossary) -> None:
    out = write_canonical(sample_glossary, tmp_path / "nested" / "data.yaml")
    assert out.exists()
    assert out.read_text(encoding="utf-8") == serialize_canonical(sample_glossary)
