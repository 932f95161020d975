"""Reader for the canonical glossary file (``data.yaml``).

The canonical file *looks* like YAML but is not read with a YAML library.
Only a tiny, fixed subset is ever written, and reading it line by line lets
us be tolerant: a damaged line loses that line's data instead of failing the
whole run.

Grammar
-------
::

    # comment lines and blank lines are ignored everywhere
    terms:
      A:
        - word: abstract
          meaning: 抽象的
          footnotes: [1, 2]
    footnotes:
      1: some annotation

State machine
-------------
The reader classifies every non-blank, non-comment line and moves between
three section states:

``NONE``
    Before any section header. Everything except a header is ignored.
``IN_TERMS``
    Letter lines (``A:``) pick the current letter group. ``- word:`` opens a
    *pending* entry; the ``meaning:`` line completes it and commits it to the
    current letter. ``footnotes: [..]`` attaches references to the pending
    entry, or to the entry just committed when it follows the meaning line
    (the order the writer emits).
``IN_FOOTNOTES``
    ``<n>: <text>`` lines define footnotes.

A pending entry that never receives its meaning line (because a new word,
letter or section starts first) is dropped. This keeps entry counts identical
to the files the tooling has always produced.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from pathlib import Path

from computerese.core.contracts.glossary import Entry, Glossary
from computerese.core.errors import MalformedStructure, NotFound
from computerese.core.settings import get_logger

logger = get_logger(__name__)

_LETTER_RE = re.compile(r"^([A-Z]):$")
_FOOTNOTE_DEF_RE = re.compile(r"^(\d+):\s*(.+)$")
_REF_LIST_RE = re.compile(r"^\[(.*?)\]$")
_QUOTES = "\"'"


class Section(enum.Enum):
    """Top-level section the reader is currently inside."""

    NONE = "none"
    IN_TERMS = "terms"
    IN_FOOTNOTES = "footnotes"


def unquote(value: str) -> str:
    """Trim ``value`` and strip one enclosing quote character from each end.

    The two ends are handled independently, so ``'abc`` becomes ``abc`` as
    well. Backslash escapes inside the value are left untouched.
    """
    value = value.strip()
    if value[:1] in _QUOTES:
        value = value[1:]
    if value[-1:] in _QUOTES:
        value = value[:-1]
    return value


def parse_ref_list(raw: str) -> list[int] | None:
    """Parse ``[1, 2]`` into ``[1, 2]``; non-numeric tokens are discarded.

    Returns ``None`` when ``raw`` is not a bracketed list at all.
    """
    match = _REF_LIST_RE.match(raw.strip())
    if match is None:
        return None
    refs: list[int] = []
    for token in match.group(1).split(","):
        token = token.strip()
        if token.isdecimal():
            refs.append(int(token))
    return refs


def _field_value(stripped: str) -> str:
    """Return everything after the first colon of a ``key: value`` line."""
    _, _, rest = stripped.partition(":")
    return rest


@dataclass
class _ReaderState:
    """Mutable bookkeeping for a single pass over the file."""

    section: Section = Section.NONE
    letter: str | None = None
    pending: Entry | None = None
    # Last committed entry; a footnotes line may still follow its meaning line.
    committed: Entry | None = None
    terms: dict[str, list[Entry]] = field(default_factory=dict)
    footnotes: dict[int, str] = field(default_factory=dict)
    ignored: int = 0
    dropped: int = 0

    def drop_pending(self) -> None:
        self.committed = None
        if self.pending is not None:
            logger.debug("Dropping entry without meaning: %r", self.pending.word)
            self.dropped += 1
            self.pending = None

    def switch_section(self, section: Section) -> None:
        self.drop_pending()
        self.section = section
        self.letter = None


def _feed_terms_line(state: _ReaderState, stripped: str) -> bool:
    """Handle one line inside ``terms:``. Return False if it was not recognized."""
    letter_match = _LETTER_RE.match(stripped)
    if letter_match:
        state.drop_pending()
        state.letter = letter_match.group(1)
        state.terms.setdefault(state.letter, [])
        return True

    if stripped.startswith("- word:"):
        state.drop_pending()
        state.pending = Entry(word=unquote(_field_value(stripped)), meaning="")
        return True

    if stripped.startswith("footnotes:"):
        target = state.pending if state.pending is not None else state.committed
        refs = parse_ref_list(_field_value(stripped))
        if target is None or refs is None:
            return False
        target.footnotes = refs
        return True

    if state.pending is None:
        return False

    if stripped.startswith("meaning:"):
        if state.letter is None:
            return False
        state.pending.meaning = unquote(_field_value(stripped))
        state.terms[state.letter].append(state.pending)
        state.committed = state.pending
        state.pending = None
        return True

    return False


def _feed_footnotes_line(state: _ReaderState, stripped: str) -> bool:
    """Handle one line inside ``footnotes:``. Return False if it was not recognized."""
    match = _FOOTNOTE_DEF_RE.match(stripped)
    if match is None:
        return False
    number = int(match.group(1))
    if number < 1:
        return False
    state.footnotes[number] = unquote(match.group(2))
    return True


def parse_canonical(text: str) -> Glossary:
    """Parse canonical glossary text into a :class:`Glossary`.

    This is a pure function: it never raises for bad lines and performs no
    structural validation. See :func:`load_canonical` for the checked variant.
    """
    state = _ReaderState()

    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        if stripped == "terms:":
            state.switch_section(Section.IN_TERMS)
            continue
        if stripped == "footnotes:":
            state.switch_section(Section.IN_FOOTNOTES)
            continue

        if state.section is Section.IN_TERMS:
            recognized = _feed_terms_line(state, stripped)
        elif state.section is Section.IN_FOOTNOTES:
            recognized = _feed_footnotes_line(state, stripped)
        else:
            recognized = False

        if not recognized:
            state.ignored += 1
            logger.debug("Ignoring line %d: %r", lineno, stripped)

    state.drop_pending()
    if state.ignored or state.dropped:
        logger.info(
            "Canonical parse: %d line(s) ignored, %d incomplete entries dropped",
            state.ignored,
            state.dropped,
        )
    return Glossary(terms=state.terms, footnotes=state.footnotes)


def load_canonical(path: str | Path) -> Glossary:
    """Read and parse the canonical file at ``path``.

    Raises
    ------
    NotFound
        If ``path`` does not exist.
    MalformedStructure
        If the file yields no complete entries at all.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise NotFound(file_path, what="data.yaml file")

    glossary = parse_canonical(file_path.read_text(encoding="utf-8"))
    if glossary.total_terms() == 0:
        raise MalformedStructure("Invalid canonical structure: missing or empty 'terms' section")

    logger.debug(
        "Loaded %d terms in %d letter groups from %s",
        glossary.total_terms(),
        len(glossary.terms),
        file_path,
    )
    return glossary


__all__ = ["Section", "parse_canonical", "load_canonical", "unquote", "parse_ref_list"]
