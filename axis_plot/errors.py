from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from axis_plot.types import PlotTick


class PlotContractError(ValueError):
    """Raised when a caller breaks a plotter precondition."""


class InvalidGeometryError(PlotContractError):
    pass


class TickOutOfRangeError(PlotContractError):
    def __init__(self, axis: str, tick: "PlotTick", bounds: tuple[float, float]) -> None:
        lo, hi = bounds
        super().__init__(f"{axis} tick {tick.label!r} at {tick.value!r} is outside [{lo!r}, {hi!r}]")
        self.axis = axis
        self.tick = tick
        self.bounds = bounds


class PlotDataError(ValueError):
    pass


class PlotConfigError(ValueError):
    pass
