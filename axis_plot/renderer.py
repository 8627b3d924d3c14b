from __future__ import annotations

from typing import Iterable, Protocol

from axis_plot.plotter import AxisPlotter
from axis_plot.types import PlotPoint


class PlotRenderer(Protocol):
    """Drawing surface driven by ``render_plot``.

    Each method has the signature of the matching ``AxisPlotter`` callback.
    Tick drawing is split per axis so the surface can align labels
    differently below the x axis and beside the y axis.
    """

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        ...

    def draw_x_tick(self, x: int, y: int, relative_position: float, label: str) -> None:
        ...

    def draw_y_tick(self, x: int, y: int, relative_position: float, label: str) -> None:
        ...

    def draw_point(self, x: int, y: int, point: PlotPoint) -> None:
        ...

    def draw_segment(self, x0: int, y0: int, x1: int, y1: int, start: PlotPoint, end: PlotPoint) -> None:
        ...


def render_plot(
    plotter: AxisPlotter,
    renderer: PlotRenderer,
    points: Iterable[PlotPoint] = (),
    *,
    axes: bool = True,
    ticks: bool = True,
    markers: bool = True,
    lines: bool = True,
) -> None:
    # Data first so axes and labels stay on top.
    pts = list(points)
    if lines:
        plotter.draw_lines_between_points(pts, renderer.draw_segment)
    if markers:
        plotter.draw_points(pts, renderer.draw_point)
    if axes:
        plotter.draw_x_axis(renderer.draw_line)
        plotter.draw_y_axis(renderer.draw_line)
    if ticks:
        plotter.draw_x_ticks(renderer.draw_x_tick)
        plotter.draw_y_ticks(renderer.draw_y_tick)
