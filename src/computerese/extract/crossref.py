"""Cross-reference canonical words against the README tables.

For every word in the canonical glossary we look for a README table row that
starts with that word (``| word |``). Words without such a row usually mean
the README was edited after ``data.yaml`` was regenerated, or the other way
around.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from computerese.core.contracts.glossary import Glossary


class CrossRefReport(BaseModel):
    """Which canonical words were found in the README tables."""

    found: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.found) + len(self.missing)

    @property
    def ok(self) -> bool:
        return not self.missing


def word_in_source(word: str, source_text: str) -> bool:
    """Return True if ``source_text`` has a table row whose first cell is ``word``."""
    pattern = re.compile(rf"^\|\s*{re.escape(word)}\s*\|", re.MULTILINE)
    return pattern.search(source_text) is not None


def find_missing_words(glossary: Glossary, source_text: str) -> CrossRefReport:
    """Check every canonical word, in sorted-letter order, against ``source_text``."""
    report = CrossRefReport()
    for _, _, entry in glossary.iter_entries():
        if word_in_source(entry.word, source_text):
            report.found.append(entry.word)
        else:
            report.missing.append(entry.word)
    return report


__all__ = ["CrossRefReport", "word_in_source", "find_missing_words"]
