"""Canonical-format codec: read and write the ``data.yaml`` glossary file."""

from __future__ import annotations

from .reader import load_canonical, parse_canonical
from .writer import escape_value, serialize_canonical, write_canonical

__all__ = [
    "parse_canonical",
    "load_canonical",
    "serialize_canonical",
    "write_canonical",
    "escape_value",
]
