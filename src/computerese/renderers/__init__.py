"""Output renderers and their format registry.

Every renderer follows the same contract, ``render(glossary, path) -> None``,
and writes one artifact. The lookup tables below are process-wide constants:

- :data:`SUPPORTED_FORMATS` – format names in their canonical order.
- :data:`OUTPUT_FILES` – file name each format is written to.
- :data:`RENDERERS` – format name to render function.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from types import MappingProxyType
from typing import Final

from computerese.core.contracts.glossary import Glossary
from computerese.core.settings import get_logger

from .docx_renderer import render_docx
from .pdf import render_pdf
from .text import render_csv, render_html, render_markdown

Renderer = Callable[[Glossary, Path], None]

logger = get_logger(__name__)

SUPPORTED_FORMATS: Final[tuple[str, ...]] = ("csv", "markdown", "html", "docx", "pdf")

OUTPUT_FILES: Final = MappingProxyType(
    {
        "csv": "terms.csv",
        "markdown": "terms.md",
        "html": "terms.html",
        "docx": "terms.docx",
        "pdf": "terms.pdf",
    }
)

RENDERERS: Final = MappingProxyType(
    {
        "csv": render_csv,
        "markdown": render_markdown,
        "html": render_html,
        "docx": render_docx,
        "pdf": render_pdf,
    }
)


def resolve_formats(requested: Iterable[str]) -> list[str]:
    """Expand ``all`` and drop unknown or repeated format names.

    Examples
    --------
    >>> resolve_formats(["pdf", "csv", "pdf", "rtf"])
    ['pdf', 'csv']
    >>> resolve_formats(["all"]) == list(SUPPORTED_FORMATS)
    True
    """
    names = [name.strip().lower() for name in requested]
    if "all" in names:
        return list(SUPPORTED_FORMATS)

    formats: list[str] = []
    for name in names:
        if name not in SUPPORTED_FORMATS:
            logger.warning("Ignoring unsupported format: %r", name)
            continue
        if name not in formats:
            formats.append(name)
    return formats


def output_path_for(fmt: str, output_dir: str | Path) -> Path:
    """Return where format ``fmt`` is written inside ``output_dir``."""
    return Path(output_dir) / OUTPUT_FILES[fmt]


__all__ = [
    "Renderer",
    "SUPPORTED_FORMATS",
    "OUTPUT_FILES",
    "RENDERERS",
    "resolve_formats",
    "output_path_for",
    "render_csv",
    "render_markdown",
    "render_html",
    "render_docx",
    "render_pdf",
]
