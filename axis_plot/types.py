from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlotTick:
    value: float
    label: str


@dataclass(frozen=True)
class PlotPoint:
    x: float
    y: float
