"""Shared data records for document measurements and their statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

from .unicode import TextMetrics

MetricName = Literal["utf8", "utf16", "utf32", "graphemes", "width"]
METRIC_NAMES: Tuple[MetricName, ...] = ("utf8", "utf16", "utf32", "graphemes", "width")

# Column captions used by the report and the plots.
METRIC_LABELS = {
    "utf8": "UTF-8",
    "utf16": "UTF-16",
    "utf32": "UTF-32",
    "graphemes": "EGC",
    "width": "EAW",
}


@dataclass(frozen=True)
class DocumentRecord:
    """Measurements for one document (or one summary row of the report)."""

    name: str
    metrics: TextMetrics
    code: Optional[str] = None
    script: Optional[str] = None

    def value(self, metric: MetricName) -> int:
        return getattr(self.metrics, metric)


@dataclass(frozen=True)
class MetricStatistics:
    """Summary of one metric across every document of a run."""

    metric: MetricName
    median: int
    mean: int
    minimum: int
    maximum: int
    maximum_excluding_outlier: int
    ranking: Tuple[int, ...]


__all__ = ["METRIC_LABELS", "METRIC_NAMES", "DocumentRecord", "MetricName", "MetricStatistics"]
