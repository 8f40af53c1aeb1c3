"""Size metrics for a normalized string under several text models."""

from __future__ import annotations

from dataclasses import dataclass

import regex
from wcwidth import wcwidth

_GRAPHEME = regex.compile(r"\X")


@dataclass(frozen=True)
class TextMetrics:
    """The five sizes of one string."""

    utf8: int
    utf16: int
    utf32: int
    graphemes: int
    width: int


def count_utf8(text: str) -> int:
    return len(text.encode("utf-8"))


def count_utf16(text: str) -> int:
    # Astral code points take a surrogate pair, i.e. two units.
    return len(text.encode("utf-16-le")) // 2


def count_utf32(text: str) -> int:
    return len(text)


def count_graphemes(text: str) -> int:
    """Number of extended grapheme clusters (UAX #29)."""
    return sum(1 for _ in _GRAPHEME.finditer(text))


def display_width(text: str) -> int:
    """Terminal column width: wide characters count 2, combining marks 0.

    Control characters, which `wcwidth` reports as -1, count 0. Spacing
    combining marks (category Mc, such as Devanagari vowel signs) also count
    0 under `wcwidth`, although some width tables give them 1 column, so
    KA followed by the AA vowel sign measures 1 here rather than 2.
    """
    return sum(max(wcwidth(char), 0) for char in text)


def measure_text(text: str) -> TextMetrics:
    """Measure `text` once under every metric."""
    return TextMetrics(
        utf8=count_utf8(text),
        utf16=count_utf16(text),
        utf32=count_utf32(text),
        graphemes=count_graphemes(text),
        width=display_width(text),
    )


__all__ = [
    "TextMetrics",
    "count_graphemes",
    "count_utf16",
    "count_utf32",
    "count_utf8",
    "display_width",
    "measure_text",
]
