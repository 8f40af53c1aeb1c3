"""Per-metric order statistics over the documents of a run."""

from __future__ import annotations

from typing import Dict, Mapping, Sequence

import numpy as np

from .records import METRIC_NAMES, DocumentRecord, MetricName, MetricStatistics
from .unicode import TextMetrics


class EmptyCorpusError(RuntimeError):
    """Raised when statistics are requested over zero documents."""


def summarize_metric(records: Sequence[DocumentRecord], metric: MetricName) -> MetricStatistics:
    """Compute the statistics of a single metric.

    Records are ranked with a stable argsort, so the input order is never
    touched and ties keep their original relative order. The median is the
    upper median (index ``n // 2``) and the mean truncates towards zero.
    """
    if not records:
        raise EmptyCorpusError(f"No documents to summarise for metric '{metric}'.")

    values = np.asarray([record.value(metric) for record in records], dtype=np.int64)
    ranking = np.argsort(values, kind="stable")
    ordered = values[ranking]
    count = len(ordered)

    return MetricStatistics(
        metric=metric,
        median=int(ordered[count // 2]),
        mean=int(values.sum()) // count,
        minimum=int(ordered[0]),
        maximum=int(ordered[-1]),
        maximum_excluding_outlier=int(ordered[-2]) if count > 1 else int(ordered[-1]),
        ranking=tuple(int(idx) for idx in ranking),
    )


def aggregate_records(records: Sequence[DocumentRecord]) -> Dict[MetricName, MetricStatistics]:
    """Summarise every metric independently over the same record collection."""
    if not records:
        raise EmptyCorpusError("No documents passed the catalog stage gate; nothing to aggregate.")
    return {metric: summarize_metric(records, metric) for metric in METRIC_NAMES}


def summary_metrics(statistics: Mapping[MetricName, MetricStatistics], field: str) -> TextMetrics:
    """Gather one statistic (e.g. ``"minimum"``) of every metric into a row."""
    return TextMetrics(**{metric: getattr(statistics[metric], field) for metric in METRIC_NAMES})


__all__ = ["EmptyCorpusError", "aggregate_records", "summarize_metric", "summary_metrics"]
