"""Source-document extraction: README tables to glossary data."""

from __future__ import annotations

from .crossref import CrossRefReport, find_missing_words
from .readme import count_source_rows, parse_readme, parse_readme_text, read_source

__all__ = [
    "parse_readme",
    "parse_readme_text",
    "count_source_rows",
    "read_source",
    "find_missing_words",
    "CrossRefReport",
]
