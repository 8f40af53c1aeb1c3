"""Corpus access: catalog parsing and body-text extraction."""

from .catalog import CatalogEntry, CatalogError, load_catalog, parse_catalog
from .extractor import MalformedDocumentError, extract_body_text

__all__ = [
    "CatalogEntry",
    "CatalogError",
    "MalformedDocumentError",
    "extract_body_text",
    "load_catalog",
    "parse_catalog",
]
