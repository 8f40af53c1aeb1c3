"""Per-document measurement: catalog entry -> body text -> DocumentRecord."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from src.corpus.catalog import CatalogEntry
from src.corpus.config import document_path
from src.corpus.extractor import extract_body_text
from src.metrics.records import DocumentRecord
from src.metrics.unicode import measure_text


def measure_document(entry: CatalogEntry, corpus_root: Path) -> DocumentRecord:
    """Extract and measure the document a catalog entry points to."""
    path = document_path(corpus_root, entry.code)
    text = extract_body_text(path.read_bytes(), source=str(path))
    return DocumentRecord(
        name=entry.name,
        metrics=measure_text(text),
        code=entry.code,
        script=entry.script,
    )


def measure_documents(entries: Iterable[CatalogEntry], corpus_root: Path) -> List[DocumentRecord]:
    """Measure documents one at a time, in catalog order."""
    return [measure_document(entry, corpus_root) for entry in entries]


__all__ = ["measure_document", "measure_documents"]
