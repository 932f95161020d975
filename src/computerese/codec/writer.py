"""Writer for the canonical glossary file (``data.yaml``).

Output layout
-------------
- A fixed comment header documenting the structure (static, not data-driven).
- ``terms:``: letters ascending; entries in stored order, never re-sorted.
- A blank line, then ``footnotes:``: numbers ascending.

Quoting
-------
A value is quoted when it contains any of ``" ' [ ] { } , | * & # ! % @ ```
or a colon followed by whitespace, when it is empty, or when it starts with a
space. Values containing ``'`` are wrapped in double quotes with inner ``"``
escaped as ``\\"``; other values that need quoting are wrapped in single
quotes verbatim. A value containing both ``'`` and ``"`` therefore does not
read back byte-identical (the backslash survives); the glossary data never
contains such values.
"""

from __future__ import annotations

import re
from pathlib import Path

from computerese.core.contracts.glossary import Entry, Glossary
from computerese.core.settings import get_logger

logger = get_logger(__name__)

_NEEDS_QUOTES = re.compile(r"[\"'\[\]{},|*&#!%@`]|:\s")

HEADER_LINES: tuple[str, ...] = (
    "# 计算机专业术语对照数据",
    "#",
    "# 数据结构:",
    "#   terms:",
    "#     [A-Z]:                        # 按字母分组的术语列表",
    "#       - word: string              # 英文术语",
    "#         meaning: string           # 中文释义",
    "#         footnotes: [number]       # 脚注引用编号列表（可选）",
    "#   footnotes:",
    "#     [n]: string                   # 脚注定义内容",
    "#",
    "# 说明:",
    "#   - 术语按字母 A-Z 分组存储",
    "#   - footnotes 字段仅当术语有脚注引用时存在",
    "#   - 脚注编号对应文档末尾的脚注定义",
    "",
)


def escape_value(value: str) -> str:
    """Quote ``value`` for the canonical file when it needs it."""
    if _NEEDS_QUOTES.search(value):
        if "'" in value:
            return '"' + value.replace('"', '\\"') + '"'
        return f"'{value}'"
    if not value or value.startswith(" "):
        return f'"{value}"'
    return value


def _entry_lines(entry: Entry) -> list[str]:
    lines = [
        f"    - word: {escape_value(entry.word)}",
        f"      meaning: {escape_value(entry.meaning)}",
    ]
    if entry.has_footnotes:
        lines.append(f"      footnotes: [{', '.join(str(n) for n in entry.footnotes)}]")
    return lines


def serialize_canonical(glossary: Glossary) -> str:
    """Render ``glossary`` as canonical text (no trailing newline)."""
    lines: list[str] = list(HEADER_LINES)

    lines.append("terms:")
    for letter in glossary.sorted_letters():
        lines.append(f"  {letter}:")
        for entry in glossary.terms[letter]:
            lines.extend(_entry_lines(entry))

    lines.append("")
    lines.append("footnotes:")
    for number, text in glossary.sorted_footnotes():
        lines.append(f"  {number}: {escape_value(text)}")

    return "\n".join(lines)


def write_canonical(glossary: Glossary, path: str | Path) -> Path:
    """Serialize ``glossary`` to ``path`` (UTF-8), creating parent directories."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(serialize_canonical(glossary), encoding="utf-8")
    logger.info("Wrote %d terms to %s", glossary.total_terms(), out)
    return out


__all__ = ["HEADER_LINES", "escape_value", "serialize_canonical", "write_canonical"]
