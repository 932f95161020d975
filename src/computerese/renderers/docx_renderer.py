"""
Word (``.docx``) renderer built on python-docx.

Layout
------
- Centered title ``计算机专业术语对照``.
- One ``Heading 1`` per letter, followed by a two-column table
  (bold ``English`` / ``Chinese`` header row, then one row per term).
- Footnote references are appended to the English word as ``[n]`` markers,
  since Word tables have no cheap superscript-link equivalent.
- When footnotes exist, a ``脚注`` heading and one bulleted ``[n] text``
  paragraph per footnote close the document.
"""

from __future__ import annotations

from pathlib import Path

from docx import Document
from docx.document import Document as WordDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt

from computerese.core.contracts.glossary import Entry, Glossary
from computerese.core.settings import get_logger

logger = get_logger(__name__)

TITLE = "计算机专业术语对照"
FOOTNOTES_HEADING = "脚注"


def word_with_markers(entry: Entry) -> str:
    """Return the English word followed by ``[n]`` footnote markers."""
    if not entry.has_footnotes:
        return entry.word
    return entry.word + "".join(f"[{n}]" for n in entry.refs)


def _add_letter_table(document: WordDocument, entries: list[Entry]) -> None:
    table = document.add_table(rows=1, cols=2)
    table.style = "Table Grid"

    header = table.rows[0].cells
    for cell, label in zip(header, ("English", "Chinese"), strict=True):
        run = cell.paragraphs[0].add_run(label)
        run.bold = True

    for entry in entries:
        cells = table.add_row().cells
        cells[0].text = word_with_markers(entry)
        cells[1].text = entry.meaning


def build_document(glossary: Glossary) -> WordDocument:
    """Assemble the in-memory Word document for ``glossary``."""
    document = Document()

    title = document.add_heading(TITLE, level=0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER
    title.paragraph_format.space_after = Pt(20)

    for letter in glossary.sorted_letters():
        heading = document.add_heading(letter, level=1)
        heading.paragraph_format.space_before = Pt(15)
        heading.paragraph_format.space_after = Pt(10)
        _add_letter_table(document, glossary.terms[letter])

    if glossary.footnotes:
        document.add_paragraph("")
        document.add_heading(FOOTNOTES_HEADING, level=1)
        for number, text in glossary.sorted_footnotes():
            paragraph = document.add_paragraph(f"[{number}] {text}", style="List Bullet")
            paragraph.paragraph_format.space_after = Pt(7.5)

    return document


def render_docx(glossary: Glossary, path: str | Path) -> None:
    """Write the glossary as a Word document."""
    out = Path(path).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    build_document(glossary).save(str(out))
    logger.info("DOCX: %d terms written to %s", glossary.total_terms(), out)


__all__ = ["TITLE", "FOOTNOTES_HEADING", "word_with_markers", "build_document", "render_docx"]
