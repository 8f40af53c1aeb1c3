"""Plotting utilities for size report results."""

from .metric_deviation import build_deviation_figure, deviation_frame, plot_metric_deviations

__all__ = [
    "build_deviation_figure",
    "deviation_frame",
    "plot_metric_deviations",
]
