"""Core package initializer for computerese.

Holds the shared plumbing used by every command:
    from computerese.core.settings import settings, load_settings, Settings, get_logger
    from computerese.core.errors import NotFound, MalformedStructure
"""

from __future__ import annotations

__all__ = ["__doc__"]
