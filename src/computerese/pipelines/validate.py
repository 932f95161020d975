"""
Validation pipelines.

validate-canonical
    Format check first; if the canonical file cannot be loaded or lacks a
    top-level section, the run stops there. Otherwise the term-count,
    footnote-integrity, required-fields and letter-group checks all run,
    whatever their individual results.
validate-outputs
    Footnote integrity of the source data gates the run (a broken source
    makes the artifacts meaningless). Then every requested format's
    artifact is checked independently.
check-words
    Every canonical word must appear as the first cell of a README row.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from computerese.codec.reader import load_canonical
from computerese.core.errors import MalformedStructure, NotFound
from computerese.core.settings import get_logger
from computerese.extract.crossref import find_missing_words
from computerese.extract.readme import count_source_rows, read_source
from computerese.renderers import output_path_for, resolve_formats
from computerese.validation.checks import (
    check_footnote_integrity,
    check_format,
    run_all_checks,
)
from computerese.validation.outputs import check_output

from .reports import (
    CanonicalValidationReport,
    CheckLine,
    OutputValidationReport,
    WordCheckReport,
)

logger = get_logger(__name__)

FORMAT_CHECK = "Canonical Format"


def run_validate_canonical(
    readme_path: str | Path, data_path: str | Path
) -> CanonicalValidationReport:
    """Run the five consistency checks against the canonical file.

    A missing README raises :class:`NotFound`; a missing or empty canonical
    file is reported as a failed format check instead.
    """
    report = CanonicalValidationReport(data_path=Path(data_path), readme_path=Path(readme_path))

    try:
        glossary = load_canonical(data_path)
    except (NotFound, MalformedStructure) as exc:
        report.checks.append(CheckLine(name=FORMAT_CHECK, passed=False, message=str(exc)))
        report.aborted = True
        return report

    fmt_line = CheckLine.from_outcome(FORMAT_CHECK, check_format(glossary))
    report.checks.append(fmt_line)
    if not fmt_line.passed:
        report.aborted = True
        return report

    source_count = count_source_rows(read_source(readme_path))
    logger.debug("README row count: %d", source_count)

    for name, outcome in run_all_checks(glossary, source_count):
        report.checks.append(CheckLine.from_outcome(name, outcome))
    return report


def run_validate_outputs(
    data_path: str | Path,
    dist_dir: str | Path,
    formats: Iterable[str] = ("all",),
) -> OutputValidationReport:
    """Check the rendered artifacts for ``formats`` inside ``dist_dir``."""
    report = OutputValidationReport(data_path=Path(data_path), dist_dir=Path(dist_dir))

    try:
        glossary = load_canonical(data_path)
    except (NotFound, MalformedStructure) as exc:
        report.load_error = str(exc)
        return report

    report.expected_terms = glossary.total_terms()
    report.integrity = CheckLine.from_outcome(
        "Footnote Integrity", check_footnote_integrity(glossary)
    )
    if not report.integrity.passed:
        return report

    for fmt in resolve_formats(formats):
        outcome = check_output(fmt, output_path_for(fmt, dist_dir), report.expected_terms)
        report.results.append(CheckLine.from_outcome(fmt, outcome))
    return report


def run_check_words(readme_path: str | Path, data_path: str | Path) -> WordCheckReport:
    """Cross-reference canonical words against README table rows."""
    glossary = load_canonical(data_path)
    crossref = find_missing_words(glossary, read_source(readme_path))
    logger.info("Found %d/%d words in README", len(crossref.found), crossref.total)
    return WordCheckReport(
        data_path=Path(data_path), readme_path=Path(readme_path), crossref=crossref
    )


__all__ = ["run_validate_canonical", "run_validate_outputs", "run_check_words", "FORMAT_CHECK"]
