"""
README extractor: rebuild the glossary from the human-maintained document.

The README is the authoring surface for the glossary. Its layout is:

- one ``## <LETTER>`` heading per letter, each followed by a Markdown table
  with a header row, a separator row and one ``| word | meaning |`` row per
  term;
- footnote markers inside meanings written as ``<sup>n</sup>``;
- a ``# 注释`` notes section at the end holding ``[n] text`` definitions.

Extraction Design
-----------------
Sections
    A letter's section starts right after its heading and ends at the first
    of: the next letter heading, the notes marker, or the end of the document.
    Letters without a heading (or without data rows) contribute nothing; the
    letter-group check reports missing letters later.
Rows
    The first two table rows of every section are skipped unconditionally
    (header and separator). Footnote markers are collected left to right and
    removed from the meaning. Rows whose word or meaning ends up empty are
    discarded.
Footnotes
    ``[n] text`` definitions run until a blank line, the next ``[`` marker
    line, or the end of the document. Only ``1 <= n <= footnote_cap`` is kept.

All functions here are pure apart from :func:`parse_readme`, which reads the
file from disk.
"""

from __future__ import annotations

import re
import string
from collections.abc import Iterator
from pathlib import Path

from computerese.core.contracts.glossary import Entry, Glossary
from computerese.core.errors import NotFound
from computerese.core.settings import get_logger, load_settings

logger = get_logger(__name__)

LETTERS = string.ascii_uppercase
NOTES_MARKER = "# 注释"

_SUP_RE = re.compile(r"<sup>(\d+)</sup>")
# A run of adjacent markers together with the whitespace around it.
_SUP_RUN_RE = re.compile(r"[ \t]*(?:<sup>\d+</sup>[ \t]*)+")
_ROW_RE = re.compile(r"^\|[ \t]*([^|\n]+?)[ \t]*\|[ \t]*([^|\n]+?)[ \t]*\|[ \t]*$", re.MULTILINE)
_ANY_ROW_RE = re.compile(r"^\|.*\|.*\|[ \t]*$", re.MULTILINE)
_FOOTNOTE_RE = re.compile(r"\[(\d+)\]\s*(.+?)(?=\n\n|\n\[|\Z)", re.DOTALL)
_NOTES_RE = re.compile(rf"^{re.escape(NOTES_MARKER)}", re.MULTILINE)


def _heading_re(letter: str) -> re.Pattern[str]:
    return re.compile(rf"^##[ \t]+{letter}[ \t]*$", re.MULTILINE)


def _next_heading_re(letter: str) -> re.Pattern[str] | None:
    if letter == LETTERS[-1]:
        return None
    nxt = chr(ord(letter) + 1)
    return re.compile(rf"^##[ \t]+[{nxt}-Z][ \t]*$", re.MULTILINE)


def iter_letter_sections(text: str) -> Iterator[tuple[str, str]]:
    """Yield ``(letter, section_text)`` for every letter heading found.

    Examples
    --------
    >>> [letter for letter, _ in iter_letter_sections("## A\\n| a | b |\\n## C\\n")]
    ['A', 'C']
    """
    for letter in LETTERS:
        heading = _heading_re(letter).search(text)
        if heading is None:
            continue

        start = heading.end()
        end = len(text)

        next_pattern = _next_heading_re(letter)
        if next_pattern is not None:
            nxt = next_pattern.search(text, start)
            if nxt is not None:
                end = min(end, nxt.start())

        notes = _NOTES_RE.search(text, start)
        if notes is not None:
            end = min(end, notes.start())

        yield letter, text[start:end]


def _marker_gap(match: re.Match[str]) -> str:
    run = _SUP_RE.sub("", match.group(0))
    return " " if run else ""


def strip_footnote_markers(meaning: str) -> tuple[str, list[int]]:
    """Remove ``<sup>n</sup>`` markers from ``meaning`` and return them in order.

    Whitespace around a removed marker collapses to one space, so
    ``"字节 <sup>1</sup> 序"`` becomes ``"字节 序"`` rather than keeping a gap.
    Spacing elsewhere in the meaning is left alone.
    """
    refs = [int(n) for n in _SUP_RE.findall(meaning)]
    cleaned = _SUP_RUN_RE.sub(_marker_gap, meaning).strip()
    return cleaned, refs


def parse_section_rows(section: str) -> list[Entry]:
    """Turn the table rows of one letter section into entries."""
    entries: list[Entry] = []
    for index, row in enumerate(_ROW_RE.finditer(section)):
        if index < 2:
            continue

        word = row.group(1).strip()
        meaning, refs = strip_footnote_markers(row.group(2).strip())
        if not word or not meaning:
            logger.debug("Discarding incomplete row: %r", row.group(0))
            continue

        entries.append(Entry(word=word, meaning=meaning, footnotes=refs or None))
    return entries


def parse_footnote_definitions(text: str, *, footnote_cap: int | None) -> dict[int, str]:
    """Collect ``[n] text`` definitions; numbers above ``footnote_cap`` are ignored.

    Multi-line definitions are joined into one line so they survive the
    line-oriented canonical format.
    """
    footnotes: dict[int, str] = {}
    for match in _FOOTNOTE_RE.finditer(text):
        number = int(match.group(1))
        if number < 1 or (footnote_cap is not None and number > footnote_cap):
            logger.debug("Ignoring footnote [%d] outside cap %s", number, footnote_cap)
            continue
        body = re.sub(r"\s*\n\s*", " ", match.group(2).strip())
        footnotes[number] = body
    return footnotes


def parse_readme_text(text: str, *, footnote_cap: int | None = 6) -> Glossary:
    """Extract a :class:`Glossary` from README text.

    Parameters
    ----------
    text:
        Full README content.
    footnote_cap:
        Highest footnote number to keep; ``None`` keeps every number.
    """
    text = text.replace("\r\n", "\n")
    terms: dict[str, list[Entry]] = {}

    for letter, section in iter_letter_sections(text):
        entries = parse_section_rows(section)
        logger.debug("Letter %s: %d entries", letter, len(entries))
        if entries:
            terms[letter] = entries

    footnotes = parse_footnote_definitions(text, footnote_cap=footnote_cap)
    return Glossary(terms=terms, footnotes=footnotes)


def _counted_sections(text: str) -> Iterator[str]:
    # Sections end at the next letter heading; the notes marker only bounds a
    # section that has no later heading.
    for letter in LETTERS:
        heading = _heading_re(letter).search(text)
        if heading is None:
            continue

        start = heading.end()
        next_pattern = _next_heading_re(letter)
        nxt = next_pattern.search(text, start) if next_pattern is not None else None
        if nxt is not None:
            yield text[start : nxt.start()]
            continue

        notes = _NOTES_RE.search(text, start)
        yield text[start : notes.start() if notes is not None else len(text)]


def count_source_rows(text: str) -> int:
    """Count term rows in README text, independently of :func:`parse_readme_text`.

    Every ``|...|...|`` line in each letter section counts, minus the header
    and separator rows. Sections are sliced separately from
    :func:`iter_letter_sections` and rows are not checked for content, so this
    number can disagree with the extracted entries when the README is broken
    (for example a stray notes marker between two letter sections).
    """
    text = text.replace("\r\n", "\n")
    total = 0
    for section in _counted_sections(text):
        rows = _ANY_ROW_RE.findall(section)
        total += max(0, len(rows) - 2)
    return total


def read_source(path: str | Path) -> str:
    """Read the README at ``path`` or raise :class:`NotFound`."""
    source = Path(path)
    if not source.is_file():
        raise NotFound(source, what="README file")
    return source.read_text(encoding="utf-8")


def parse_readme(path: str | Path, *, footnote_cap: int | None = None) -> Glossary:
    """Read the README at ``path`` and extract its glossary.

    ``footnote_cap`` defaults to the configured ``COMPUTERESE_FOOTNOTE_CAP``.
    """
    cap = footnote_cap if footnote_cap is not None else load_settings().footnote_cap
    return parse_readme_text(read_source(path), footnote_cap=cap)


__all__ = [
    "LETTERS",
    "NOTES_MARKER",
    "iter_letter_sections",
    "strip_footnote_markers",
    "parse_section_rows",
    "parse_footnote_definitions",
    "parse_readme_text",
    "count_source_rows",
    "read_source",
    "parse_readme",
]
