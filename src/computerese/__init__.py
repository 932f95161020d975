"""computerese: the computing terminology cross-reference glossary toolkit.

The canonical glossary lives in a small line-oriented data file. This package
reads and writes that file, regenerates it from the human-maintained README,
validates it, and renders it to CSV, Markdown, HTML, Word and PDF.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
