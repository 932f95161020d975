"""Shared fixtures: a small README and the glossary it should extract to."""

from __future__ import annotations

import string
from pathlib import Path

import pytest

from computerese.core.contracts.glossary import Entry, Glossary

SAMPLE_README = """\
# 计算机专业术语对照

Intro paragraph that mentions nothing tabular.

## A

| English | 中文 |
| ------- | ---- |
| abstract | 抽象的 |
| access | 访问<sup>1</sup> |

## B

| English | 中文 |
| ------- | ---- |
| bit | 二进制位<sup>1</sup><sup>2</sup> |
| byte order | 字节序 |

## C

| English | 中文 |
| ------- | ---- |
| cache | 缓存 |

# 注释

[1] 第一个注释。

[2] 第二个注释，
跨越两行。

[7] 超出上限的注释。
"""


@pytest.fixture  # type: ignore[misc]
def sample_readme_text() -> str:
    """README text with three letters, footnote refs, and a footnote beyond the cap."""
    return SAMPLE_README


@pytest.fixture  # type: ignore[misc]
def sample_readme(tmp_path: Path) -> Path:
    """Write the sample README to disk and return its path."""
    path = tmp_path / "sample" / "README.md"
    path.parent.mkdir()
    path.write_text(SAMPLE_README, encoding="utf-8")
    return path


@pytest.fixture  # type: ignore[misc]
def sample_glossary() -> Glossary:
    """The glossary the sample README extracts to."""
    return Glossary(
        terms={
            "A": [
                Entry(word="abstract", meaning="抽象的"),
                Entry(word="access", meaning="访问", footnotes=[1]),
            ],
            "B": [
                Entry(word="bit", meaning="二进制位", footnotes=[1, 2]),
                Entry(word="byte order", meaning="字节序"),
            ],
            "C": [Entry(word="cache", meaning="缓存")],
        },
        footnotes={1: "第一个注释。", 2: "第二个注释， 跨越两行。"},
    )


@pytest.fixture  # type: ignore[misc]
def full_glossary() -> Glossary:
    """A glossary with one clean entry per letter A-Z and one footnote."""
    terms = {
        letter: [Entry(word=f"{letter.lower()}word", meaning=f"{letter}释义")]
        for letter in string.ascii_uppercase
    }
    terms["A"][0] = Entry(word="aword", meaning="A释义", footnotes=[1])
    return Glossary(terms=terms, footnotes={1: "注释"})
