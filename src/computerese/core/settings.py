"""Centralized application configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files in the working directory: .env, .env.local

Every path default is relative to the working directory, which is normally
the root of the glossary repository (where `README.md` and `data.yaml` live).
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed application configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `COMPUTERESE_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    data_path : Path
        Canonical glossary file; maps from `COMPUTERESE_DATA`.
    readme_path : Path
        Human-maintained source document; maps from `COMPUTERESE_README`.
    output_dir : Path
        Directory rendered artifacts are written to; maps from `COMPUTERESE_OUTPUT_DIR`.
    footnote_cap : int
        Highest footnote number the README extractor keeps; maps from
        `COMPUTERESE_FOOTNOTE_CAP`.
    pdf_browser : str
        Headless Chromium-compatible executable used to print PDFs.
    pdf_timeout : float
        Seconds to wait for the PDF browser before giving up.
    ci_flag : Optional[str]
        Raw `CI` (or `GITHUB_ACTIONS`) value; see `in_ci`.
    """

    environment: EnvName = Field(default="dev", alias="COMPUTERESE_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")

    data_path: Path = Field(default=Path("data.yaml"), alias="COMPUTERESE_DATA")
    readme_path: Path = Field(default=Path("README.md"), alias="COMPUTERESE_README")
    output_dir: Path = Field(default=Path("pkg"), alias="COMPUTERESE_OUTPUT_DIR")
    footnote_cap: int = Field(default=6, ge=1, alias="COMPUTERESE_FOOTNOTE_CAP")

    pdf_browser: str = Field(default="chromium", alias="COMPUTERESE_PDF_BROWSER")
    pdf_timeout: float = Field(default=120.0, gt=0, alias="COMPUTERESE_PDF_TIMEOUT")
    ci_flag: str | None = Field(
        default=None, validation_alias=AliasChoices("CI", "GITHUB_ACTIONS")
    )

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def is_test(self) -> bool:
        """Return True if running in the test environment."""
        return self.environment == "test"

    @property
    def in_ci(self) -> bool:
        """Return True when a CI runner flag is set to a truthy value."""
        return (self.ci_flag or "").strip().lower() in {"true", "1", "yes"}

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    We keep this behind an LRU cache so tests can force a rebuild via
    `load_settings.cache_clear()` after mutating `os.environ`.
    """
    os.environ.setdefault("COMPUTERESE_ENV", "dev")
    return Settings()


# Export a ready-to-use singleton (import-time read of env / .env files).
settings: Settings = load_settings()


def get_logger(name: str = "computerese") -> logging.Logger:
    """Return a process-global logger configured to the current `LOG_LEVEL`."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
