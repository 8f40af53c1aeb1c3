"""HTML comparison table for a measured corpus."""

from __future__ import annotations

import html
from typing import List, Mapping, Sequence

from src.corpus.config import DOCUMENT_URL
from src.metrics.aggregation import summary_metrics
from src.metrics.deviation import colorize, deviation_percent
from src.metrics.records import METRIC_LABELS, METRIC_NAMES, DocumentRecord, MetricName, MetricStatistics

# Metric whose ascending order decides the order of the body rows.
ROW_ORDER_METRIC: MetricName = "utf8"

_CELL = "<td style='background-color: hsl({hue}, {saturation:.6f}%, 65%);'>{content}</td>"

# (label, statistic) pairs of the coloured footer rows; "Median" is rendered separately.
_LEADING_SUMMARY = (("Min", "minimum"),)
_TRAILING_SUMMARY = (
    ("Mean", "mean"),
    ("Max (ignoring outlier)", "maximum_excluding_outlier"),
    ("Max", "maximum"),
)


def render_count(count: int, median: int) -> str:
    """Two coloured cells: the count and its deviation from the median."""
    color = colorize(median, count)
    return _CELL.format(hue=color.hue, saturation=color.saturation, content=count) + _CELL.format(
        hue=color.hue,
        saturation=color.saturation,
        content=f"{deviation_percent(count, median):.1f}",
    )


def render_row(record: DocumentRecord, statistics: Mapping[MetricName, MetricStatistics]) -> List[str]:
    name = html.escape(record.name, quote=False)
    if record.code:
        heading = f'<th><a href="{DOCUMENT_URL.format(code=record.code)}">{name}</a></th>'
    else:
        heading = f"<th>{name}</th>"
    lines = ["<tr>", heading]
    lines.extend(render_count(record.value(metric), statistics[metric].median) for metric in METRIC_NAMES)
    lines.append(f"<td>{html.escape(record.script or '', quote=False)}</td>")
    lines.append("</tr>")
    return lines


def render_median_row(statistics: Mapping[MetricName, MetricStatistics]) -> str:
    cells = "".join(f"<td>{statistics[metric].median}</td><td></td>" for metric in METRIC_NAMES)
    return f"<tr><th>Median</th>{cells}<td></td></tr>"


def render_report(
    records: Sequence[DocumentRecord],
    statistics: Mapping[MetricName, MetricStatistics],
) -> str:
    """Render the full `<table id=counts>` markup, one line per row fragment."""
    header_cells = "".join(f"<th>{METRIC_LABELS[metric]}</th><th>Δ%</th>" for metric in METRIC_NAMES)
    lines = [
        "<table id=counts>",
        "<thead>",
        f"<tr><th>Name</th>{header_cells}<th>Script</th></tr>",
        "</thead>",
        "<tbody>",
    ]
    for index in statistics[ROW_ORDER_METRIC].ranking:
        lines.extend(render_row(records[index], statistics))
    lines.append("</tbody>")

    lines.append("<tfoot>")
    for label, field in _LEADING_SUMMARY:
        lines.extend(render_row(_summary_record(label, statistics, field), statistics))
    lines.append(render_median_row(statistics))
    for label, field in _TRAILING_SUMMARY:
        lines.extend(render_row(_summary_record(label, statistics, field), statistics))
    lines.append("</tfoot>")
    lines.append("</table>")
    return "\n".join(lines) + "\n"


def _summary_record(label: str, statistics: Mapping[MetricName, MetricStatistics], field: str) -> DocumentRecord:
    return DocumentRecord(name=label, metrics=summary_metrics(statistics, field))


__all__ = ["ROW_ORDER_METRIC", "render_count", "render_median_row", "render_report", "render_row"]
