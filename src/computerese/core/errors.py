"""Exception hierarchy for computerese.

Two of these are fatal and abort the command that hits them:

- :class:`NotFound` – a required input file is absent.
- :class:`MalformedStructure` – a canonical file parsed to nothing usable.

The other two describe per-unit failures that callers usually accumulate
into a report instead of raising:

- :class:`ValidationFailure` – one or more consistency checks failed.
- :class:`RendererFailure` – a single output format could not be produced.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class ComputereseError(Exception):
    """Base exception for all computerese errors."""


class NotFound(ComputereseError, FileNotFoundError):
    """Raised when a required input file does not exist.

    Attributes:
        path: The path that was looked up
        what: Short label for the missing input (e.g. ``"data.yaml"``)
    """

    def __init__(self, path: str | Path, what: str = "input file") -> None:
        self.path = Path(path)
        self.what = what
        super().__init__(f"{what} not found: {self.path}")

    def __str__(self) -> str:
        return f"{self.what} not found: {self.path}"


class MalformedStructure(ComputereseError):
    """Raised when a canonical file yields no usable glossary data."""


class ValidationFailure(ComputereseError):
    """Raised when a caller wants failed checks as an exception.

    Attributes:
        messages: One diagnostic per failed check
    """

    def __init__(self, messages: Sequence[str]) -> None:
        self.messages = list(messages)
        super().__init__("; ".join(self.messages) or "validation failed")


class RendererFailure(ComputereseError):
    """Raised when an output renderer cannot produce its artifact.

    Attributes:
        fmt: Output format name (``"pdf"``, ``"docx"``, ...)
        message: What went wrong
    """

    def __init__(self, fmt: str, message: str) -> None:
        self.fmt = fmt
        self.message = message
        super().__init__(f"{fmt.upper()} renderer failed: {message}")


__all__ = [
    "ComputereseError",
    "NotFound",
    "MalformedStructure",
    "ValidationFailure",
    "RendererFailure",
]
