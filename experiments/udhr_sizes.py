from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping

from src.corpus.catalog import load_catalog
from src.metrics.aggregation import EmptyCorpusError, aggregate_records
from src.metrics.records import DocumentRecord, MetricName, MetricStatistics
from src.pipelines import measure_documents
from src.report import render_report


@dataclass(frozen=True)
class SizeReport:
    """Everything one run produces: the records and their statistics."""

    records: List[DocumentRecord]
    statistics: Mapping[MetricName, MetricStatistics]

    def to_html(self) -> str:
        return render_report(self.records, self.statistics)


def run_udhr_sizes(corpus_root: Path) -> SizeReport:
    print(f"[report] Measuring UDHR corpus under {corpus_root}.", file=sys.stderr)
    entries = load_catalog(corpus_root)
    if not entries:
        raise EmptyCorpusError(f"No catalog entry under {corpus_root} passed the stage gate.")

    records = measure_documents(entries, corpus_root)
    print(f"[report] Measured {len(records)} documents; aggregating ...", file=sys.stderr)
    statistics = aggregate_records(records)

    graphemes = statistics["graphemes"]
    print(
        f"[report] Grapheme clusters: min={graphemes.minimum} median={graphemes.median} "
        f"mean={graphemes.mean} max={graphemes.maximum}.",
        file=sys.stderr,
    )
    return SizeReport(records=records, statistics=statistics)


__all__ = ["SizeReport", "run_udhr_sizes"]
