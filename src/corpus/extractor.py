"""
Body-text extraction for UDHR documents.

The document tree is replayed as a flat stream of start/text/end events and
fed through a small exclusion state machine so that the preamble and any
translator notes never reach the measured text.
"""

from __future__ import annotations

import unicodedata
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, List, Literal, Optional, Tuple, Union

EventKind = Literal["start", "end", "text"]
MarkupEvent = Tuple[EventKind, str]

_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")


class MalformedDocumentError(ValueError):
    """Raised when a document cannot be parsed or its regions are inconsistent."""


class Region(Enum):
    PREAMBLE = "preamble"
    NOTE = "note"


_REGION_BY_TAG = {region.value: region for region in Region}


@dataclass(frozen=True)
class ExclusionState:
    """Set of regions currently open; text is kept only when none is."""

    active: FrozenSet[Region] = frozenset()

    @property
    def accepts_text(self) -> bool:
        return not self.active

    def enter(self, region: Region) -> "ExclusionState":
        if region in self.active:
            raise MalformedDocumentError(f"Nested <{region.value}> region.")
        return ExclusionState(self.active | {region})

    def exit(self, region: Region) -> "ExclusionState":
        if region not in self.active:
            raise MalformedDocumentError(f"Closing <{region.value}> without a matching start.")
        return ExclusionState(self.active - {region})


def local_name(tag: str) -> str:
    """Strip the `{namespace}` prefix ElementTree puts on qualified tags."""
    return tag.rsplit("}", 1)[-1]


def iter_markup_events(element: ET.Element) -> Iterator[MarkupEvent]:
    """Replay an element subtree as start/text/end events in document order."""
    name = local_name(element.tag) if isinstance(element.tag, str) else ""
    yield "start", name
    if element.text is not None:
        yield "text", element.text
    for child in element:
        yield from iter_markup_events(child)
        if child.tail is not None:
            yield "text", child.tail
    yield "end", name


def is_ascii_whitespace(text: str) -> bool:
    return all(char in _ASCII_WHITESPACE for char in text)


def collect_body_text(events: Iterable[MarkupEvent]) -> str:
    """Concatenate the text runs that fall outside every excluded region."""
    state = ExclusionState()
    parts: List[str] = []
    for kind, value in events:
        if kind == "text":
            if state.accepts_text and not is_ascii_whitespace(value):
                parts.append(value)
            continue
        region = _REGION_BY_TAG.get(value)
        if region is None:
            continue
        state = state.enter(region) if kind == "start" else state.exit(region)
    return "".join(parts)


def parse_markup(markup: Union[str, bytes], source: Optional[str] = None) -> ET.Element:
    try:
        return ET.fromstring(markup)
    except ET.ParseError as exc:
        where = f"{source}: " if source else ""
        raise MalformedDocumentError(f"{where}{exc}") from exc


def extract_body_text(markup: Union[str, bytes], source: Optional[str] = None) -> str:
    """Return the NFC-normalized body text of a UDHR document.

    Args:
        markup: Raw document content. Bytes are preferred so the XML
            declaration decides the encoding.
        source: Optional label (usually the file path) used in error messages.

    Raises:
        MalformedDocumentError: The markup does not parse, or a preamble/note
            region is opened twice or closed without being opened.
    """
    root = parse_markup(markup, source)
    try:
        text = collect_body_text(iter_markup_events(root))
    except MalformedDocumentError as exc:
        if source is None:
            raise
        raise MalformedDocumentError(f"{source}: {exc}") from exc
    return unicodedata.normalize("NFC", text)


__all__ = [
    "ExclusionState",
    "MalformedDocumentError",
    "MarkupEvent",
    "Region",
    "collect_body_text",
    "extract_body_text",
    "is_ascii_whitespace",
    "iter_markup_events",
    "local_name",
    "parse_markup",
]
