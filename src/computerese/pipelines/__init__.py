"""Pipeline entry points for computerese commands.

Currently exposed:

- :func:`run_convert` – canonical file to rendered artifacts.
- :func:`run_extract` – README to canonical file.
- :func:`run_validate_canonical` – consistency checks on the canonical file.
- :func:`run_validate_outputs` – checks on rendered artifacts.
- :func:`run_check_words` – canonical words vs. README rows.
"""

from __future__ import annotations

from .convert import run_convert
from .extract import run_extract
from .reports import (
    CanonicalValidationReport,
    CheckLine,
    ConvertReport,
    ExtractReport,
    OutputValidationReport,
    WordCheckReport,
)
from .validate import (
    FORMAT_CHECK,
    run_check_words,
    run_validate_canonical,
    run_validate_outputs,
)

__all__ = [
    "run_convert",
    "run_extract",
    "run_validate_canonical",
    "run_validate_outputs",
    "run_check_words",
    "FORMAT_CHECK",
    "CheckLine",
    "ConvertReport",
    "ExtractReport",
    "CanonicalValidationReport",
    "OutputValidationReport",
    "WordCheckReport",
]
