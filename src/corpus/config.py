"""Static configuration for the UDHR corpus layout."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

# ---------------------------------------------------------------------------
# Corpus layout.

INDEX_FILENAME = "index.xml"
DOCUMENT_FILENAME = "udhr_{code}.xml"
DOCUMENT_URL = "https://www.unicode.org/udhr/d/udhr_{code}.html"

# Catalog stages that mark a translation as complete enough to measure.
ACCEPTED_STAGES: Tuple[str, ...] = ("4", "5")


def document_path(corpus_root: Path, code: str) -> Path:
    """Location of the document for `code` under the corpus root."""
    return corpus_root / DOCUMENT_FILENAME.format(code=code)


__all__ = [
    "ACCEPTED_STAGES",
    "DOCUMENT_FILENAME",
    "DOCUMENT_URL",
    "INDEX_FILENAME",
    "document_path",
]
