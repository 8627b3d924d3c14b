from __future__ import annotations

from decimal import Decimal
import math
from typing import Callable, Iterable

import numpy as np

from axis_plot.types import PlotTick


def generate_nice_ticks(vmin: float, vmax: float, target: int) -> np.ndarray:
    """Tick values on a 1/2/5 x 10^k grid, restricted to ``[vmin, vmax]``.

    The range is never widened to the next grid line, so every value can be
    handed straight to ``AxisPlotter.set_x_ticks`` / ``set_y_ticks``.
    """
    if target <= 0:
        raise ValueError("target must be > 0")
    if not vmin < vmax:
        raise ValueError("vmin must be < vmax")

    span = _nice_number(vmax - vmin, round_result=False)
    step = _nice_number(span / max(target - 1, 1), round_result=True)
    first = np.ceil(vmin / step) * step
    last = np.floor(vmax / step) * step
    if first > last:
        return np.asarray([], dtype=np.float64)

    ticks = np.arange(first, last + 0.5 * step, step, dtype=np.float64)
    # Normalize floating-point drift so values like -4.44e-16 become 0.
    ticks = np.rint(ticks / step) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return np.clip(ticks, vmin, vmax)


def format_tick(value: float, *, step: float | None = None) -> str:
    """Label for a tick value; ``step`` (the tick spacing) sets the decimals."""
    if not math.isfinite(value):
        return str(value)
    if step is not None and step > 0 and abs(value) <= step * 1e-9:
        value = 0.0
    magnitude = abs(value)
    if magnitude and (magnitude >= 1e6 or magnitude < 1e-6 or (step is not None and step < 1e-4)):
        return f"{value:.4e}"

    text = f"{value:.{_decimals_for_step(step)}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_tick_labels(values: Iterable[float]) -> list[str]:
    vals = [float(v) for v in values]
    if len(vals) < 2:
        return [format_tick(v) for v in vals]
    step = abs(vals[1] - vals[0])
    return [format_tick(v, step=step) for v in vals]


def ticks_from_values(values: Iterable[float], fmt: Callable[[float], str] | None = None) -> list[PlotTick]:
    vals = [float(v) for v in values]
    labels = [fmt(v) for v in vals] if fmt is not None else format_tick_labels(vals)
    return [PlotTick(value=v, label=label) for v, label in zip(vals, labels, strict=True)]


def nice_ticks(vmin: float, vmax: float, target: int = 5) -> list[PlotTick]:
    return ticks_from_values(generate_nice_ticks(vmin, vmax, target).tolist())


_NICE_FACTORS = (1.0, 2.0, 5.0)
# Rounding picks the closest factor; ceiling picks the first factor not below the fraction.
_ROUND_LIMITS = (1.5, 3.0, 7.0)


def _nice_number(value: float, *, round_result: bool) -> float:
    base = 10.0 ** math.floor(math.log10(value))
    frac = value / base
    limits = _ROUND_LIMITS if round_result else _NICE_FACTORS
    for factor, limit in zip(_NICE_FACTORS, limits, strict=True):
        if frac < limit or (not round_result and frac == limit):
            return factor * base
    return 10.0 * base


def _decimals_for_step(step: float | None) -> int:
    if step is None or not (step > 0 and math.isfinite(step)):
        return 6
    exponent = Decimal(repr(step)).normalize().as_tuple().exponent
    return min(12, max(0, -int(exponent)))
