"""Bar charts of each document's deviation from the corpus median."""

from __future__ import annotations

from typing import List, Mapping, Sequence

import pandas as pd
import plotly.express as px
from plotly.graph_objects import Figure

from src.metrics.deviation import colorize, deviation_percent
from src.metrics.records import METRIC_LABELS, METRIC_NAMES, DocumentRecord, MetricName, MetricStatistics


def deviation_frame(
    records: Sequence[DocumentRecord],
    statistics: MetricStatistics,
) -> pd.DataFrame:
    """One row per document, in ascending order of the metric."""
    median = statistics.median
    rows = []
    for index in statistics.ranking:
        record = records[index]
        value = record.value(statistics.metric)
        color = colorize(median, value)
        rows.append(
            {
                "name": record.name,
                "script": record.script or "",
                "value": value,
                "deviation": deviation_percent(value, median),
                "hue": color.hue,
                "saturation": color.saturation,
            }
        )
    return pd.DataFrame(rows, columns=["name", "script", "value", "deviation", "hue", "saturation"])


def build_deviation_figure(df: pd.DataFrame, metric: MetricName) -> Figure:
    label = METRIC_LABELS[metric]
    colors = [f"hsl({hue}, {saturation:.1f}%, 65%)" for hue, saturation in zip(df["hue"], df["saturation"])]
    fig = px.bar(
        df,
        x="deviation",
        y="name",
        orientation="h",
        hover_data=["value", "script"],
        title=f"UDHR size per document – {label} deviation from median",
        labels={"deviation": f"{label} Δ% vs. median", "name": "Document"},
    )
    fig.update_traces(marker_color=colors)
    fig.update_layout(height=max(400, 14 * len(df)))
    return fig


def plot_metric_deviations(
    records: Sequence[DocumentRecord],
    statistics: Mapping[MetricName, MetricStatistics],
    show: bool = True,
) -> List[Figure]:
    """Build one chart per metric and display it; nothing is written to disk."""
    figures: List[Figure] = []
    for metric in METRIC_NAMES:
        fig = build_deviation_figure(deviation_frame(records, statistics[metric]), metric)
        if show:
            fig.show()
        figures.append(fig)
    return figures


__all__ = ["build_deviation_figure", "deviation_frame", "plot_metric_deviations"]
