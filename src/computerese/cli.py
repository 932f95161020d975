# src/computerese/cli.py
"""
computerese Command Line Interface (CLI).

This module implements the terminal interface using `typer` and `rich`.
Each command calls one pipeline, renders the returned report, and exits
with status 0 on full success or 1 if any unit (format, check) failed.

Commands
--------
- **convert**: Render `data.yaml` to CSV, Markdown, HTML, Word and PDF.
- **extract**: Regenerate `data.yaml` from the README tables.
- **validate-canonical**: Run the five consistency checks on `data.yaml`.
- **validate-outputs**: Check the rendered artifacts in the output directory.
- **check-words**: Confirm every canonical word still has a README row.

Usage
-----
    $ computerese extract --readme README.md -o data.yaml
    $ computerese convert -f csv -f docx -o pkg
    $ computerese validate-canonical
    $ computerese validate-outputs -f all --dist-dir pkg
"""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from computerese.core.errors import ComputereseError
from computerese.core.settings import load_settings
from computerese.pipelines import (
    CanonicalValidationReport,
    CheckLine,
    ConvertReport,
    OutputValidationReport,
    run_check_words,
    run_convert,
    run_extract,
    run_validate_canonical,
    run_validate_outputs,
)
from computerese.renderers import SUPPORTED_FORMATS

# Ensure env vars (COMPUTERESE_*) are loaded before any settings are read
load_dotenv()

app = typer.Typer(
    help="computerese: convert and validate the computing terminology glossary.",
    rich_markup_mode="markdown",
    no_args_is_help=True,
)
console = Console()

_FORMAT_HELP = f"Output format(s): {', '.join(SUPPORTED_FORMATS)}, all. Repeatable."
_DATA_HELP = "Path to data.yaml (default: COMPUTERESE_DATA)."
_README_HELP = "Path to README.md (default: COMPUTERESE_README)."


# --------------------------------------------------------------------------- #
# Helpers: Rendering
# --------------------------------------------------------------------------- #


def _path(path: Path) -> str:
    return escape(str(path))


def _mark(passed: bool) -> str:
    return "[green]✓[/green]" if passed else "[red]✗[/red]"


def _print_summary(ok: bool) -> None:
    console.rule()
    if ok:
        console.print("[bold green]All validations passed! ✓[/bold green]")
    else:
        console.print("[bold red]Some validations failed! ✗[/bold red]")
    console.rule()


def _results_table(title: str, lines: list[CheckLine]) -> Table:
    table = Table(title=title, show_lines=False, title_justify="left")
    table.add_column("", width=3)
    table.add_column("Format", style="bold")
    table.add_column("Result", overflow="fold")
    for line in lines:
        table.add_row(_mark(line.passed), line.name.upper(), escape(line.message))
    return table


def _render_convert(report: ConvertReport, verbose: bool) -> None:
    if report.dry_run:
        console.print("[bold cyan]Dry run:[/bold cyan] Validation successful!")
        console.print(f"  - {report.total_terms} terms loaded")
        console.print(f"  - {len(report.formats)} format(s) would be generated")
        return

    if verbose:
        source = _path(report.data_path)
        console.print(f"[dim]Loaded {report.total_terms} terms from {source}[/dim]")
    console.print(_results_table("Conversion Results", report.results))
    color = "green" if report.ok else "red"
    console.print(
        f"[bold {color}]Conversion complete: "
        f"{report.succeeded}/{len(report.formats)} formats generated.[/bold {color}]"
    )


def _render_canonical(report: CanonicalValidationReport) -> None:
    for index, line in enumerate(report.checks, start=1):
        console.print(f"\n[bold]{index}. {line.name} Validation:[/bold]")
        console.print(f"   [{_mark(line.passed)}] {escape(line.message)}")
    if report.aborted:
        console.print("\n[yellow]Stopping validation due to format error.[/yellow]")
    console.print()
    _print_summary(report.ok)


def _render_outputs(report: OutputValidationReport) -> None:
    if report.load_error is not None:
        console.print(f"[bold red]Error:[/bold red] {escape(report.load_error)}")
        return

    console.print(f"  Loaded {report.expected_terms} terms\n")
    if report.integrity is not None:
        console.print("Validating footnote integrity...")
        mark = _mark(report.integrity.passed)
        console.print(f"  [{mark}] {escape(report.integrity.message)}\n")
        if not report.integrity.passed:
            return

    console.print(_results_table("Format Validation Results", report.results))
    _print_summary(report.ok)


def _fail(exc: Exception, verbose: bool = False) -> typer.Exit:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if verbose:
        traceback.print_exc()
    return typer.Exit(code=1)


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def convert(
    fmt: Annotated[
        list[str] | None,
        typer.Option("--format", "-f", help=_FORMAT_HELP),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output directory (default: COMPUTERESE_OUTPUT_DIR)."),
    ] = None,
    data: Annotated[
        Path | None,
        typer.Option("--data", "--data-yaml", help=_DATA_HELP),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Validate the data without generating files."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show detailed progress and tracebacks."),
    ] = False,
) -> None:
    """
    Convert `data.yaml` into the requested output formats.

    Each format is attempted independently; one failing renderer does not
    stop the others.
    """
    cfg = load_settings()
    data_path = data or cfg.data_path
    output_dir = output or cfg.output_dir

    if verbose:
        console.print(
            Panel.fit(
                f"[bold cyan]computerese convert[/bold cyan]\nLoading: [u]{_path(data_path)}[/u]",
                border_style="cyan",
            )
        )

    try:
        report = run_convert(data_path, output_dir, fmt or ["all"], dry_run=dry_run)
    except ComputereseError as exc:
        raise _fail(exc, verbose) from exc

    _render_convert(report, verbose)
    if not report.ok:
        raise typer.Exit(code=1)


@app.command()  # type: ignore[misc]
def extract(
    readme: Annotated[
        Path | None,
        typer.Option("--readme", help=_README_HELP),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Path to write data.yaml (default: COMPUTERESE_DATA)."),
    ] = None,
) -> None:
    """Parse the README tables and regenerate `data.yaml`."""
    cfg = load_settings()
    readme_path = readme or cfg.readme_path
    output_path = output or cfg.data_path

    console.print(f"Reading {_path(readme_path)}...")
    try:
        report = run_extract(readme_path, output_path)
    except ComputereseError as exc:
        raise _fail(exc) from exc

    console.print(
        f"Extracted {report.total_terms} terms across {report.letter_groups} letter groups"
    )
    console.print(f"Extracted {report.footnotes} footnote definitions")
    console.print(
        Panel(
            f"Saved to: [link={report.output_path.resolve().as_uri()}]"
            f"{_path(report.output_path)}[/link]",
            title="data.yaml",
            border_style="green",
        )
    )


@app.command("validate-canonical")  # type: ignore[misc]
def validate_canonical(
    readme: Annotated[
        Path | None,
        typer.Option("--readme", help=_README_HELP),
    ] = None,
    data: Annotated[
        Path | None,
        typer.Option("--data", "--data-yaml", help=_DATA_HELP),
    ] = None,
) -> None:
    """Validate `data.yaml` integrity against the README."""
    cfg = load_settings()
    try:
        report = run_validate_canonical(readme or cfg.readme_path, data or cfg.data_path)
    except ComputereseError as exc:
        raise _fail(exc) from exc

    _render_canonical(report)
    if not report.ok:
        raise typer.Exit(code=1)


@app.command("validate-outputs")  # type: ignore[misc]
def validate_outputs(
    fmt: Annotated[
        list[str] | None,
        typer.Option("--format", "-f", help=_FORMAT_HELP),
    ] = None,
    data: Annotated[
        Path | None,
        typer.Option("--data", "--data-yaml", help=_DATA_HELP),
    ] = None,
    dist_dir: Annotated[
        Path | None,
        typer.Option(
            "--dist-dir",
            help="Directory holding the artifacts (default: COMPUTERESE_OUTPUT_DIR).",
        ),
    ] = None,
) -> None:
    """Validate rendered artifacts for data integrity."""
    cfg = load_settings()
    data_path = data or cfg.data_path
    console.print(f"Loading {_path(data_path)}...")

    report = run_validate_outputs(data_path, dist_dir or cfg.output_dir, fmt or ["all"])
    _render_outputs(report)
    if not report.ok:
        raise typer.Exit(code=1)


@app.command("check-words")  # type: ignore[misc]
def check_words(
    readme: Annotated[
        Path | None,
        typer.Option("--readme", help=_README_HELP),
    ] = None,
    data: Annotated[
        Path | None,
        typer.Option("--data", "--data-yaml", help=_DATA_HELP),
    ] = None,
) -> None:
    """Check that every word in `data.yaml` still has a README table row."""
    cfg = load_settings()
    try:
        report = run_check_words(readme or cfg.readme_path, data or cfg.data_path)
    except ComputereseError as exc:
        raise _fail(exc) from exc

    crossref = report.crossref
    console.print(f"Total words in data.yaml: {crossref.total}")
    console.print(f"Found in README: {len(crossref.found)}")
    console.print(f"Missing from README: {len(crossref.missing)}")

    if crossref.missing:
        console.print("\n[bold yellow]=== Missing Words ===[/bold yellow]")
        for word in crossref.missing:
            console.print(f"  - {word}", markup=False)
        raise typer.Exit(code=1)

    console.print("\n[green]✓ All words found in README![/green]")


if __name__ == "__main__":
    app()
