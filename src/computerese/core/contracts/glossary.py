"""Glossary contracts: the in-memory shape of the terminology data.

Two Pydantic v2 models describe everything the commands exchange:

- `Entry`   : one term (English `word`, Chinese `meaning`, optional footnote refs).
- `Glossary`: entries grouped by initial letter, plus numbered footnotes.

Notes
-----
- The models are deliberately lenient. Empty words or meanings, dangling
  footnote numbers and letter keys outside A–Z are all representable, because
  reporting them is the validator's job, not the parser's.
- `Entry.footnotes` is ``None`` when a term has no references. An empty list
  is accepted and treated the same way by every consumer.
- Letter order inside `terms` carries no meaning; use `sorted_letters()` when
  output must be stable. Entry order inside a letter is authoring order.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field, PositiveInt


class Entry(BaseModel):
    """A single glossary term."""

    word: str = Field(description="English term (headword).")
    meaning: str = Field(description="Chinese meaning or translation.")
    footnotes: list[int] | None = Field(
        default=None,
        description="Footnote numbers referenced by this term, in authoring order.",
    )

    @property
    def refs(self) -> list[int]:
        """Return the footnote references as a (possibly empty) list."""
        return list(self.footnotes or [])

    @property
    def has_footnotes(self) -> bool:
        """Return True when at least one footnote is referenced."""
        return bool(self.footnotes)

    def normalized(self) -> Entry:
        """Return a copy where an empty footnote list is folded to ``None``."""
        return Entry(word=self.word, meaning=self.meaning, footnotes=self.footnotes or None)


class Glossary(BaseModel):
    """Terms grouped by letter, plus footnote definitions keyed by number."""

    terms: dict[str, list[Entry]] = Field(default_factory=dict)
    footnotes: dict[PositiveInt, str] = Field(default_factory=dict)

    def total_terms(self) -> int:
        """Count entries across every letter group."""
        return sum(len(entries) for entries in self.terms.values())

    def sorted_letters(self) -> list[str]:
        """Return the letter keys in ascending order."""
        return sorted(self.terms)

    def sorted_footnotes(self) -> list[tuple[int, str]]:
        """Return ``(number, text)`` pairs in ascending numeric order."""
        return sorted(self.footnotes.items())

    def iter_entries(self) -> Iterator[tuple[str, int, Entry]]:
        """Yield ``(letter, index, entry)`` in sorted-letter, authoring order."""
        for letter in self.sorted_letters():
            for index, entry in enumerate(self.terms[letter]):
                yield letter, index, entry

    def normalized(self) -> Glossary:
        """Return a copy with empty footnote lists folded to ``None``.

        Two glossaries that differ only in empty-versus-absent footnote lists
        compare equal after normalization.
        """
        return Glossary(
            terms={
                letter: [entry.normalized() for entry in entries]
                for letter, entries in self.terms.items()
            },
            footnotes=dict(self.footnotes),
        )


__all__ = ["Entry", "Glossary"]
