"""Report contracts returned by the command pipelines.

Pipelines never print. They return one of these models and the CLI decides
how to render it and which exit code it maps to: every report exposes an
``ok`` property that is True only when every attempted unit succeeded.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from computerese.core.errors import ValidationFailure
from computerese.core.result import Result
from computerese.extract.crossref import CrossRefReport


class CheckLine(BaseModel):
    """One pass/fail line of a report."""

    name: str = Field(description="Check title or format name.")
    passed: bool
    message: str

    @classmethod
    def from_outcome(cls, name: str, outcome: Result[str, str]) -> CheckLine:
        """Build a line from a check outcome."""
        return cls(name=name, passed=outcome.is_ok(), message=str(outcome.message()))


class ConvertReport(BaseModel):
    """Outcome of converting the canonical file into output formats."""

    data_path: Path
    output_dir: Path
    total_terms: int
    formats: list[str] = Field(default_factory=list)
    results: list[CheckLine] = Field(default_factory=list)
    dry_run: bool = False

    @property
    def succeeded(self) -> int:
        return sum(1 for line in self.results if line.passed)

    @property
    def ok(self) -> bool:
        if self.dry_run:
            return True
        return self.succeeded == len(self.formats)


class ExtractReport(BaseModel):
    """Outcome of regenerating the canonical file from the README."""

    readme_path: Path
    output_path: Path
    total_terms: int
    letter_groups: int
    footnotes: int


class CanonicalValidationReport(BaseModel):
    """Outcome of the consistency checks on the canonical file."""

    data_path: Path
    readme_path: Path
    checks: list[CheckLine] = Field(default_factory=list)
    aborted: bool = Field(default=False, description="True when the format check stopped the run.")

    @property
    def ok(self) -> bool:
        return not self.aborted and all(line.passed for line in self.checks)

    def raise_for_failures(self) -> None:
        """Raise :class:`ValidationFailure` listing every failed check, if any."""
        failed = [f"{line.name}: {line.message}" for line in self.checks if not line.passed]
        if failed:
            raise ValidationFailure(failed)


class OutputValidationReport(BaseModel):
    """Outcome of checking the rendered artifacts on disk."""

    data_path: Path
    dist_dir: Path
    expected_terms: int = 0
    integrity: CheckLine | None = None
    results: list[CheckLine] = Field(default_factory=list)
    load_error: str | None = None

    @property
    def ok(self) -> bool:
        if self.load_error is not None:
            return False
        if self.integrity is not None and not self.integrity.passed:
            return False
        return all(line.passed for line in self.results)

    def raise_for_failures(self) -> None:
        """Raise :class:`ValidationFailure` unless every artifact check passed."""
        if self.ok:
            return
        if self.load_error is not None:
            raise ValidationFailure([self.load_error])
        lines = [self.integrity] if self.integrity is not None else []
        lines.extend(self.results)
        raise ValidationFailure(
            [f"{line.name}: {line.message}" for line in lines if not line.passed]
        )


class WordCheckReport(BaseModel):
    """Outcome of cross-referencing canonical words against the README."""

    data_path: Path
    readme_path: Path
    crossref: CrossRefReport

    @property
    def ok(self) -> bool:
        return self.crossref.ok


__all__ = [
    "CheckLine",
    "ConvertReport",
    "ExtractReport",
    "CanonicalValidationReport",
    "OutputValidationReport",
    "WordCheckReport",
]
