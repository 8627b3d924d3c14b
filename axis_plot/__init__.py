from axis_plot.adapters import points_from_pairs, points_from_xy
from axis_plot.config import PlotConfig, build_plotter, load_plot_config, load_plotter
from axis_plot.errors import (
    InvalidGeometryError,
    PlotConfigError,
    PlotContractError,
    PlotDataError,
    TickOutOfRangeError,
)
from axis_plot.plotter import AxisPlotter
from axis_plot.renderer import PlotRenderer, render_plot
from axis_plot.ticks import nice_ticks, ticks_from_values
from axis_plot.types import PlotPoint, PlotTick

__all__ = [
    "AxisPlotter",
    "InvalidGeometryError",
    "PlotConfig",
    "PlotConfigError",
    "PlotContractError",
    "PlotDataError",
    "PlotPoint",
    "PlotRenderer",
    "PlotTick",
    "TickOutOfRangeError",
    "build_plotter",
    "load_plot_config",
    "load_plotter",
    "nice_ticks",
    "points_from_pairs",
    "points_from_xy",
    "render_plot",
    "ticks_from_values",
]
