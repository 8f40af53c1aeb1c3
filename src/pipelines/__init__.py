"""Shared pipeline helpers for turning catalog entries into measurements."""

from .measure import measure_document, measure_documents

__all__ = [
    "measure_document",
    "measure_documents",
]
