"""Text size metrics, their per-corpus statistics and the deviation scale."""

from .aggregation import EmptyCorpusError, aggregate_records, summarize_metric
from .deviation import CellColor, colorize, deviation_percent
from .records import METRIC_LABELS, METRIC_NAMES, DocumentRecord, MetricName, MetricStatistics
from .unicode import TextMetrics, measure_text

__all__ = [
    "METRIC_LABELS",
    "METRIC_NAMES",
    "CellColor",
    "DocumentRecord",
    "EmptyCorpusError",
    "MetricName",
    "MetricStatistics",
    "TextMetrics",
    "aggregate_records",
    "colorize",
    "deviation_percent",
    "measure_text",
    "summarize_metric",
]
