"""Tests for the HTML report renderer and the deviation plot data."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest
from plotly.graph_objects import Figure

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from experiments.plots import build_deviation_figure, deviation_frame, plot_metric_deviations
from src.metrics.aggregation import aggregate_records
from src.metrics.records import METRIC_NAMES, DocumentRecord
from src.metrics.unicode import TextMetrics
from src.report.html import render_count, render_median_row, render_report, render_row


def _records() -> list[DocumentRecord]:
    return [
        DocumentRecord("English", TextMetrics(30, 30, 30, 30, 30), code="eng", script="Latn"),
        DocumentRecord("Japanese", TextMetrics(10, 5, 5, 5, 10), code="jpn", script="Jpan"),
        DocumentRecord("Q & A", TextMetrics(20, 20, 20, 20, 20), code="qaa", script=None),
    ]


# ---------------------------------------------------------------------------
# Cell and row rendering


def test_render_count_at_median_is_unsaturated_green() -> None:
    cells = render_count(20, 20)
    assert cells == (
        "<td style='background-color: hsl(120, 0.000000%, 65%);'>20</td>"
        "<td style='background-color: hsl(120, 0.000000%, 65%);'>0.0</td>"
    )


def test_render_count_above_median_is_red() -> None:
    cells = render_count(40, 20)
    assert cells.startswith("<td style='background-color: hsl(0, 59.460356%, 65%);'>40</td>")
    assert cells.endswith(">100.0</td>")


def test_render_count_below_median_shows_negative_deviation() -> None:
    assert render_count(15, 20).endswith(">-25.0</td>")


def test_render_row_links_documents_and_escapes_names() -> None:
    records = _records()
    stats = aggregate_records(records)
    lines = render_row(records[2], stats)
    assert lines[0] == "<tr>"
    assert lines[1] == '<th><a href="https://www.unicode.org/udhr/d/udhr_qaa.html">Q &amp; A</a></th>'
    assert len(lines) == 1 + 1 + 5 + 1 + 1
    assert lines[-2] == "<td></td>"
    assert lines[-1] == "</tr>"


def test_render_median_row() -> None:
    stats = aggregate_records(_records())
    assert render_median_row(stats) == (
        "<tr><th>Median</th><td>20</td><td></td><td>20</td><td></td><td>20</td><td></td>"
        "<td>20</td><td></td><td>20</td><td></td><td></td></tr>"
    )


# ---------------------------------------------------------------------------
# Full table


def test_render_report_layout() -> None:
    records = _records()
    markup = render_report(records, aggregate_records(records))
    lines = markup.splitlines()

    assert lines[:5] == [
        "<table id=counts>",
        "<thead>",
        "<tr><th>Name</th><th>UTF-8</th><th>Δ%</th><th>UTF-16</th><th>Δ%</th><th>UTF-32</th><th>Δ%</th>"
        "<th>EGC</th><th>Δ%</th><th>EAW</th><th>Δ%</th><th>Script</th></tr>",
        "</thead>",
        "<tbody>",
    ]
    assert lines[-2:] == ["</tfoot>", "</table>"]
    assert markup.endswith("</table>\n")


def test_render_report_orders_rows_by_utf8() -> None:
    records = _records()
    markup = render_report(records, aggregate_records(records))
    body = markup.split("<tbody>")[1].split("</tbody>")[0]
    positions = [body.index(name) for name in ("Japanese", "Q &amp; A", "English")]
    assert positions == sorted(positions)


def test_render_report_footer_rows() -> None:
    records = _records()
    markup = render_report(records, aggregate_records(records))
    footer = markup.split("<tfoot>")[1]
    labels = ["<th>Min</th>", "<th>Median</th>", "<th>Mean</th>", "<th>Max (ignoring outlier)</th>", "<th>Max</th>"]
    positions = [footer.index(label) for label in labels]
    assert positions == sorted(positions)
    assert "udhr_" not in footer


# ---------------------------------------------------------------------------
# Plot data


def test_deviation_frame_follows_metric_ranking() -> None:
    records = _records()
    stats = aggregate_records(records)
    df = deviation_frame(records, stats["utf16"])
    assert list(df["name"]) == ["Japanese", "Q & A", "English"]
    assert list(df["value"]) == [5, 20, 30]
    assert df["deviation"].iloc[1] == pytest.approx(0.0)
    assert df["deviation"].iloc[0] == pytest.approx(-75.0)
    assert list(df["hue"]) == [120, 120, 0]


def test_build_deviation_figure_uses_cell_colours() -> None:
    records = _records()
    df = deviation_frame(records, aggregate_records(records)["utf16"])
    fig = build_deviation_figure(df, "utf16")

    assert len(fig.data) == 1
    bar = fig.data[0]
    assert bar.orientation == "h"
    assert list(bar.y) == ["Japanese", "Q & A", "English"]
    assert list(bar.marker.color) == [
        "hsl(120, 80.6%, 65%)",
        "hsl(120, 0.0%, 65%)",
        "hsl(0, 43.9%, 65%)",
    ]
    assert "UTF-16" in fig.layout.title.text


def test_plot_metric_deviations_shows_one_chart_per_metric(monkeypatch: pytest.MonkeyPatch) -> None:
    shown = []
    monkeypatch.setattr(Figure, "show", lambda self, *args, **kwargs: shown.append(self))
    records = _records()

    figures = plot_metric_deviations(records, aggregate_records(records))

    assert len(figures) == len(METRIC_NAMES)
    assert shown == figures


def test_plot_metric_deviations_can_skip_display(monkeypatch: pytest.MonkeyPatch) -> None:
    shown = []
    monkeypatch.setattr(Figure, "show", lambda self, *args, **kwargs: shown.append(self))
    records = _records()

    figures = plot_metric_deviations(records, aggregate_records(records), show=False)

    assert len(figures) == len(METRIC_NAMES)
    assert shown == []
