"""Text renderers: CSV, Markdown and HTML.

Each renderer has the shared contract ``render(glossary, path) -> None``:
it writes exactly one UTF-8 file at ``path``, creating parent directories,
and copes with an empty footnote map and any subset of letter groups.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path

from computerese.core.contracts.glossary import Glossary
from computerese.core.settings import get_logger

from .templating import render_template

logger = get_logger(__name__)

CSV_HEADER: tuple[str, ...] = ("letter", "word", "meaning", "footnotes")


def _prepare(path: str | Path) -> Path:
    out = Path(path).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    return out


def glossary_to_csv(glossary: Glossary) -> str:
    """Return CSV text: a header row plus one row per entry, letters ascending."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for letter, _, entry in glossary.iter_entries():
        writer.writerow(
            [letter, entry.word, entry.meaning, ",".join(str(n) for n in entry.refs)]
        )
    return buffer.getvalue()


def render_csv(glossary: Glossary, path: str | Path) -> None:
    """Write the glossary as a flat CSV table."""
    out = _prepare(path)
    out.write_text(glossary_to_csv(glossary), encoding="utf-8")
    logger.info("CSV: %d terms written to %s", glossary.total_terms(), out)


def render_markdown(glossary: Glossary, path: str | Path) -> None:
    """Write the glossary as README-style Markdown tables."""
    out = _prepare(path)
    out.write_text(render_template("terms.md.j2", glossary), encoding="utf-8")
    logger.info("Markdown: %d terms written to %s", glossary.total_terms(), out)


def render_html(glossary: Glossary, path: str | Path) -> None:
    """Write the glossary as a standalone styled HTML page."""
    out = _prepare(path)
    out.write_text(render_template("terms.html.j2", glossary), encoding="utf-8")
    logger.info("HTML: %d terms written to %s", glossary.total_terms(), out)


__all__ = ["CSV_HEADER", "glossary_to_csv", "render_csv", "render_markdown", "render_html"]
