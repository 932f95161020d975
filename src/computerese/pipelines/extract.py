"""Extract pipeline: README -> canonical ``data.yaml``."""

from __future__ import annotations

from pathlib import Path

from computerese.codec.writer import write_canonical
from computerese.core.settings import get_logger, load_settings
from computerese.extract.readme import parse_readme_text, read_source

from .reports import ExtractReport

logger = get_logger(__name__)


def run_extract(
    readme_path: str | Path,
    output_path: str | Path,
    *,
    footnote_cap: int | None = None,
) -> ExtractReport:
    """Parse the README at ``readme_path`` and write the canonical file.

    ``footnote_cap`` defaults to the configured ``COMPUTERESE_FOOTNOTE_CAP``.
    Raises :class:`~computerese.core.errors.NotFound` if the README is missing.
    """
    cap = footnote_cap if footnote_cap is not None else load_settings().footnote_cap
    logger.info("Reading %s", readme_path)
    glossary = parse_readme_text(read_source(readme_path), footnote_cap=cap)

    written = write_canonical(glossary, output_path)
    return ExtractReport(
        readme_path=Path(readme_path),
        output_path=written,
        total_terms=glossary.total_terms(),
        letter_groups=len(glossary.terms),
        footnotes=len(glossary.footnotes),
    )


__all__ = ["run_extract"]
