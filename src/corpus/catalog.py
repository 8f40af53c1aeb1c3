"""
Parser for the UDHR corpus index (`index.xml`).
"""

from __future__ import annotations

import sys
import unicodedata
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from .config import ACCEPTED_STAGES, INDEX_FILENAME
from .extractor import local_name


class CatalogError(ValueError):
    """Raised when the corpus index cannot be read as a catalog."""


@dataclass(frozen=True)
class CatalogEntry:
    """One `<udhr>` element of the index."""

    name: str
    code: str
    script: str
    stage: Optional[str]

    @property
    def included(self) -> bool:
        return self.stage in ACCEPTED_STAGES


def parse_catalog(markup: Union[str, bytes], source: Optional[str] = None) -> List[CatalogEntry]:
    """Return every catalog entry in index order, included or not."""
    try:
        root = ET.fromstring(markup)
    except ET.ParseError as exc:
        where = f"{source}: " if source else ""
        raise CatalogError(f"{where}{exc}") from exc

    return [_to_entry(element) for element in root.iter() if _is_udhr(element)]


def load_catalog(corpus_root: Path) -> List[CatalogEntry]:
    """Read `index.xml` from the corpus root and keep the entries past the stage gate.

    Raises:
        FileNotFoundError: The index is missing.
        CatalogError: The index is malformed, or an included entry lacks a
            name or a code.
    """
    index_path = corpus_root / INDEX_FILENAME
    entries = parse_catalog(index_path.read_bytes(), source=str(index_path))
    included = list(select_included(entries))
    print(
        f"[corpus] Catalog {index_path} lists {len(entries)} documents; {len(included)} pass the stage gate.",
        file=sys.stderr,
    )
    return included


def select_included(entries: Sequence[CatalogEntry]) -> Iterator[CatalogEntry]:
    for entry in entries:
        if not entry.included:
            continue
        if not entry.name:
            raise CatalogError(f"Catalog entry with code {entry.code!r} has no name.")
        if not entry.code:
            raise CatalogError(f"Catalog entry {entry.name!r} has no code.")
        yield entry


# ---------------------------------------------------------------------------
# Internal helpers


def _is_udhr(element: ET.Element) -> bool:
    return isinstance(element.tag, str) and local_name(element.tag) == "udhr"


def _to_entry(element: ET.Element) -> CatalogEntry:
    attributes = {local_name(key): value for key, value in element.attrib.items()}
    return CatalogEntry(
        name=unicodedata.normalize("NFC", attributes.get("n", "")),
        code=attributes.get("f", ""),
        script=attributes.get("iso15924", ""),
        stage=attributes.get("stage"),
    )


__all__ = ["CatalogEntry", "CatalogError", "load_catalog", "parse_catalog", "select_included"]
