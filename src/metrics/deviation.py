"""Relative deviation from the median and the colour scale derived from it."""

from __future__ import annotations

import math
from dataclasses import dataclass

ABOVE_HUE = 0
BELOW_HUE = 120
SATURATION_EXPONENT = 0.75


@dataclass(frozen=True)
class CellColor:
    """HSL hue (degrees) and saturation (percent) of a report cell."""

    hue: int
    saturation: float


def deviation_percent(value: int, median: int) -> float:
    """Signed deviation of `value` from `median`, in percent.

    A zero median yields signed infinity, or NaN when the value is zero as well.
    """
    delta = float(value - median)
    if median == 0:
        return math.copysign(math.inf, delta) if delta else math.nan
    return delta / median * 100.0


def colorize(baseline: int, comparison: int) -> CellColor:
    """Colour for `comparison` measured against `baseline`.

    The hue picks the direction: red when the comparison is larger, green
    otherwise. This matches the colours of the published UDHR size table;
    some written descriptions of the scale give the two hues the other way
    round. The saturation grows with the ratio of the smaller to the larger
    value on a 0.75 power curve, so small differences stay visible.
    """
    if baseline < comparison:
        hue, factor = ABOVE_HUE, baseline / comparison
    elif baseline == 0:
        hue, factor = BELOW_HUE, 1.0
    else:
        hue, factor = BELOW_HUE, comparison / baseline
    return CellColor(hue=hue, saturation=(1.0 - factor) ** SATURATION_EXPONENT * 100.0)


__all__ = ["ABOVE_HUE", "BELOW_HUE", "CellColor", "colorize", "deviation_percent"]
