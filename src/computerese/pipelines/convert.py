"""
Convert pipeline: canonical file -> one artifact per requested format.

Flow
----
1. Load the canonical file. A missing file (:class:`NotFound`) or an empty
   one (:class:`MalformedStructure`) aborts the run by propagating.
2. Resolve the requested format names (``all`` expands to every format).
3. In dry-run mode, stop here and report what would be produced.
4. Otherwise call each renderer in turn. A renderer that raises is recorded
   as a failed line for its format and the loop moves on to the next one.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from computerese.codec.reader import load_canonical
from computerese.core.settings import get_logger
from computerese.renderers import RENDERERS, Renderer, output_path_for, resolve_formats

from .reports import CheckLine, ConvertReport

logger = get_logger(__name__)


def run_convert(
    data_path: str | Path,
    output_dir: str | Path,
    formats: Iterable[str] = ("all",),
    *,
    dry_run: bool = False,
    renderers: Mapping[str, Renderer] | None = None,
) -> ConvertReport:
    """Render the canonical glossary at ``data_path`` into ``output_dir``.

    Parameters
    ----------
    data_path:
        Canonical ``data.yaml`` file.
    output_dir:
        Directory that receives ``terms.<ext>`` artifacts.
    formats:
        Format names, or ``["all"]``.
    dry_run:
        Load and resolve formats only; write nothing.
    renderers:
        Override the format -> renderer table (defaults to :data:`RENDERERS`).

    Returns
    -------
    ConvertReport
        One result line per attempted format.
    """
    table = renderers if renderers is not None else RENDERERS
    glossary = load_canonical(data_path)
    selected = resolve_formats(formats)

    report = ConvertReport(
        data_path=Path(data_path),
        output_dir=Path(output_dir),
        total_terms=glossary.total_terms(),
        formats=selected,
        dry_run=dry_run,
    )
    if dry_run:
        logger.info("Dry run: %d format(s) would be generated", len(selected))
        return report

    for fmt in selected:
        target = output_path_for(fmt, output_dir)
        try:
            table[fmt](glossary, target)
        except Exception as exc:
            logger.error("Error converting to %s: %s", fmt.upper(), exc)
            report.results.append(CheckLine(name=fmt, passed=False, message=str(exc)))
            continue
        report.results.append(
            CheckLine(name=fmt, passed=True, message=f"{report.total_terms} terms -> {target}")
        )

    logger.info(
        "Conversion complete: %d/%d formats generated", report.succeeded, len(report.formats)
    )
    return report


__all__ = ["run_convert"]
