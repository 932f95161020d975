"""Jinja2 environment shared by the Markdown, HTML and PDF renderers.

Templates live in ``computerese/templates`` and receive the same context:

- ``groups``: list of ``(letter, entries)`` pairs, letters ascending;
- ``footnotes``: list of ``(number, text)`` pairs, numbers ascending.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from computerese.core.contracts.glossary import Glossary


def _md_cell(value: str) -> str:
    """Escape a value for use inside a Markdown table cell."""
    return value.replace("|", "\\|").replace("\n", " ")


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Return the cached template environment."""
    env = Environment(
        loader=PackageLoader("computerese", "templates"),
        autoescape=select_autoescape(enabled_extensions=("html.j2",), default=False),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["md_cell"] = _md_cell
    return env


def template_context(glossary: Glossary) -> dict[str, Any]:
    """Build the sorted render context for ``glossary``."""
    return {
        "groups": [(letter, glossary.terms[letter]) for letter in glossary.sorted_letters()],
        "footnotes": glossary.sorted_footnotes(),
    }


def render_template(name: str, glossary: Glossary) -> str:
    """Render template ``name`` with the context for ``glossary``."""
    return get_environment().get_template(name).render(**template_context(glossary))


__all__ = ["get_environment", "template_context", "render_template"]
