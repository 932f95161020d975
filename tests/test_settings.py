"""Typed tests for the settings loader.

These tests verify four guarantees:
1) Importing the module-level `settings` yields a `Settings` instance.
2) Environment variables override defaults after clearing the loader cache.
3) `get_logger()` respects the configured LOG_LEVEL.
4) The CI flag is interpreted leniently.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from computerese.core.settings import Settings, get_logger, load_settings, settings


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _fresh_settings() -> Iterator[None]:
    """Rebuild the cached settings around every test."""
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def test_settings_instance_type() -> None:
    """`settings` should be an instance of the typed `Settings` model."""
    assert isinstance(settings, Settings)


def test_env_overrides_with_cache_clear(monkeypatch: Any) -> None:
    """Changing env vars takes effect after `load_settings.cache_clear()`."""
    monkeypatch.setenv("COMPUTERESE_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("COMPUTERESE_DATA", "glossary/data.yaml")
    monkeypatch.setenv("COMPUTERESE_FOOTNOTE_CAP", "9")

    s = load_settings()

    assert s.environment == "test"
    assert s.is_test
    assert s.log_level == "DEBUG"
    assert s.data_path == Path("glossary/data.yaml")
    assert s.footnote_cap == 9


def test_get_logger_respects_level(monkeypatch: Any) -> None:
    """`get_logger()` applies the numeric level derived from `LOG_LEVEL`."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    logger = get_logger("computerese.tests.settings")

    assert logger.level == logging.ERROR
    assert logger.handlers, "Expected at least one StreamHandler to be attached."


@pytest.mark.parametrize(  # type: ignore[misc]
    ("value", "expected"),
    [("true", True), ("1", True), ("YES", True), ("false", False), ("", False)],
)
def test_ci_flag(monkeypatch: Any, value: str, expected: bool) -> None:
    """`in_ci` accepts the usual truthy spellings and never fails to load."""
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    monkeypatch.setenv("CI", value)
    assert load_settings().in_ci is expected
