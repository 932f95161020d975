"""
PDF renderer: print the HTML rendering with a headless browser.

The HTML template is written to a temporary file and handed to an external
Chromium-compatible executable::

    chromium --headless --disable-gpu --no-pdf-header-footer \\
             --print-to-pdf=<out> file:///tmp/.../terms.html

Paper size and margins (A4, one inch) come from the template's ``@page`` rule.
The call blocks until the browser exits (bounded by ``pdf_timeout``). Any
failure, whether the binary is missing, it exits non-zero, it times out, or
it produces no file, is raised as :class:`RendererFailure` so the convert
pipeline can record it against the ``pdf`` format alone.

Configuration
-------------
``COMPUTERESE_PDF_BROWSER``
    Executable name or path (default ``chromium``).
``COMPUTERESE_PDF_TIMEOUT``
    Seconds to wait for the browser (default 120).
``CI`` / ``GITHUB_ACTIONS``
    When truthy, ``--no-sandbox`` flags are added; CI containers usually
    cannot use the Chromium sandbox.
"""

from __future__ import annotations

import shutil
import subprocess
import tempfile
from pathlib import Path

from computerese.core.contracts.glossary import Glossary
from computerese.core.errors import RendererFailure
from computerese.core.settings import Settings, get_logger, load_settings

from .templating import render_template

logger = get_logger(__name__)

_SANDBOX_FLAGS: tuple[str, ...] = ("--no-sandbox", "--disable-setuid-sandbox")


def build_browser_command(
    browser: str, html_path: Path, pdf_path: Path, *, in_ci: bool
) -> list[str]:
    """Return the argv used to print ``html_path`` to ``pdf_path``."""
    command = [
        browser,
        "--headless",
        "--disable-gpu",
        "--no-pdf-header-footer",
        f"--print-to-pdf={pdf_path}",
    ]
    if in_ci:
        command.extend(_SANDBOX_FLAGS)
    command.append(html_path.as_uri())
    return command


def render_pdf(
    glossary: Glossary,
    path: str | Path,
    *,
    config: Settings | None = None,
) -> None:
    """Write the glossary as a printable PDF document."""
    cfg = config or load_settings()
    out = Path(path).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)

    browser = shutil.which(cfg.pdf_browser) or cfg.pdf_browser
    html = render_template("terms.html.j2", glossary)

    with tempfile.TemporaryDirectory(prefix="computerese-pdf-") as tmp:
        html_path = Path(tmp) / "terms.html"
        html_path.write_text(html, encoding="utf-8")
        command = build_browser_command(browser, html_path, out, in_ci=cfg.in_ci)
        logger.debug("Running %s", " ".join(command))

        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=cfg.pdf_timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise RendererFailure("pdf", f"browser not found: {cfg.pdf_browser}") from exc
        except subprocess.TimeoutExpired as exc:
            raise RendererFailure("pdf", f"browser timed out after {cfg.pdf_timeout:g}s") from exc

    if completed.returncode != 0:
        detail = (completed.stderr or "").strip().splitlines()
        reason = detail[-1] if detail else "no output"
        raise RendererFailure("pdf", f"browser exited with code {completed.returncode}: {reason}")

    if not out.is_file() or out.stat().st_size == 0:
        raise RendererFailure("pdf", f"browser produced no PDF at {out}")

    logger.info("PDF: %d terms written to %s", glossary.total_terms(), out)


__all__ = ["build_browser_command", "render_pdf"]
