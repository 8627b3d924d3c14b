from __future__ import annotations

import logging
import math
from typing import Callable, Iterable

from axis_plot.errors import InvalidGeometryError, PlotContractError, TickOutOfRangeError
from axis_plot.types import PlotPoint, PlotTick

LOGGER = logging.getLogger(__name__)

DrawLineFn = Callable[[int, int, int, int], None]
DrawTickFn = Callable[[int, int, float, str], None]
DrawPointFn = Callable[[int, int, PlotPoint], None]
DrawSegmentFn = Callable[[int, int, int, int, PlotPoint, PlotPoint], None]


class AxisPlotter:
    """Maps a 2D linear value space onto a pixel rectangle.

    The plotter never draws anything itself. Every draw method computes pixel
    positions and hands them to a caller-supplied callback, so the same
    plotter works with any 2D surface (numpy canvas, terminal, e-paper, ...).

    Geometry and ranges are fixed at construction. Only the two tick lists can
    be replaced afterwards.
    """

    def __init__(
        self,
        pos_x: int,
        pos_y: int,
        width: int,
        height: int,
        min_x: float,
        max_x: float,
        min_y: float,
        max_y: float,
    ) -> None:
        pos_x = _coerce_pixel("pos_x", pos_x)
        pos_y = _coerce_pixel("pos_y", pos_y)
        width = _coerce_pixel("width", width)
        height = _coerce_pixel("height", height)
        if width <= 0 or height <= 0:
            raise InvalidGeometryError(f"width and height must be > 0 (got {width}x{height})")
        for name, value in (("min_x", min_x), ("max_x", max_x), ("min_y", min_y), ("max_y", max_y)):
            if not math.isfinite(value):
                raise InvalidGeometryError(f"{name} must be finite (got {value!r})")
        if not min_x < max_x:
            raise InvalidGeometryError(f"min_x must be < max_x (got {min_x!r} >= {max_x!r})")
        if not min_y < max_y:
            raise InvalidGeometryError(f"min_y must be < max_y (got {min_y!r} >= {max_y!r})")
        self._pos_x = pos_x
        self._pos_y = pos_y
        self._width = width
        self._height = height
        self._min_x = float(min_x)
        self._max_x = float(max_x)
        self._min_y = float(min_y)
        self._max_y = float(max_y)
        self._x_ticks: tuple[PlotTick, ...] = ()
        self._y_ticks: tuple[PlotTick, ...] = ()

    @property
    def pos_x(self) -> int:
        return self._pos_x

    @property
    def pos_y(self) -> int:
        return self._pos_y

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def x_range(self) -> tuple[float, float]:
        return (self._min_x, self._max_x)

    @property
    def y_range(self) -> tuple[float, float]:
        return (self._min_y, self._max_y)

    @property
    def x_ticks(self) -> tuple[PlotTick, ...]:
        return self._x_ticks

    @property
    def y_ticks(self) -> tuple[PlotTick, ...]:
        return self._y_ticks

    def set_x_ticks(self, ticks: Iterable[PlotTick]) -> None:
        self._x_ticks = _validated_ticks("x", ticks, self._min_x, self._max_x)
        LOGGER.debug("x ticks replaced (%d ticks)", len(self._x_ticks))

    def set_y_ticks(self, ticks: Iterable[PlotTick]) -> None:
        self._y_ticks = _validated_ticks("y", ticks, self._min_y, self._max_y)
        LOGGER.debug("y ticks replaced (%d ticks)", len(self._y_ticks))

    def pixel_x_for_value(self, x: float) -> int:
        offset = (self._width - 1) * (x - self._min_x) / (self._max_x - self._min_x)
        return self._pos_x + _round_half_up(offset)

    def pixel_y_for_value(self, y: float) -> int:
        # Screen y grows downward, axis y grows upward.
        offset = (self._height - 1) * (self._max_y - y) / (self._max_y - self._min_y)
        return self._pos_y + _round_half_up(offset)

    def relative_x_position(self, x: float) -> float:
        return (x - self._min_x) / (self._max_x - self._min_x)

    def relative_y_position(self, y: float) -> float:
        return (y - self._min_y) / (self._max_y - self._min_y)

    def draw_x_axis(self, draw_line: DrawLineFn) -> None:
        y = self._baseline_y()
        draw_line(self._pos_x, y, self._pos_x + self._width - 1, y)

    def draw_y_axis(self, draw_line: DrawLineFn) -> None:
        draw_line(self._pos_x, self._baseline_y(), self._pos_x, self._pos_y)

    def draw_x_ticks(self, draw_tick: DrawTickFn) -> None:
        """Call ``draw_tick(x, y, relative_position, label)`` for each x tick.

        ``y`` is the x-axis baseline. The relative position (0 at ``min_x``,
        1 at ``max_x``) lets the callback pick left/center/right alignment.
        """
        y = self._baseline_y()
        for tick in self._x_ticks:
            draw_tick(self.pixel_x_for_value(tick.value), y, self.relative_x_position(tick.value), tick.label)

    def draw_y_ticks(self, draw_tick: DrawTickFn) -> None:
        """Call ``draw_tick(x, y, relative_position, label)`` for each y tick.

        ``x`` is the y-axis baseline. The relative position (0 at ``min_y``,
        1 at ``max_y``) lets the callback pick bottom/middle/top alignment.
        """
        for tick in self._y_ticks:
            draw_tick(self._pos_x, self.pixel_y_for_value(tick.value), self.relative_y_position(tick.value), tick.label)

    def draw_points(self, points: Iterable[PlotPoint], draw_point: DrawPointFn) -> None:
        """Call ``draw_point(x, y, point)`` for each point, in input order.

        Out-of-range points are still mapped; clipping belongs to the callback.
        A point with a NaN or infinite coordinate raises ``PlotContractError``
        when it is reached; points before it have already been drawn.
        """
        for point in points:
            x, y = self._point_pixels(point)
            draw_point(x, y, point)

    def draw_lines_between_points(self, points: Iterable[PlotPoint], draw_line: DrawSegmentFn) -> None:
        """Call ``draw_line(x0, y0, x1, y1, start, end)`` for each consecutive pair.

        Non-finite points raise ``PlotContractError`` like ``draw_points``.
        """
        prev: tuple[int, int, PlotPoint] | None = None
        for point in points:
            x, y = self._point_pixels(point)
            if prev is not None:
                prev_x, prev_y, prev_point = prev
                draw_line(prev_x, prev_y, x, y, prev_point, point)
            prev = (x, y, point)

    def _point_pixels(self, point: PlotPoint) -> tuple[int, int]:
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            raise PlotContractError(f"point {point!r} has a non-finite coordinate")
        return self.pixel_x_for_value(point.x), self.pixel_y_for_value(point.y)

    def _baseline_y(self) -> int:
        return self._pos_y + self._height - 1

    def __repr__(self) -> str:
        return (
            f"AxisPlotter(pos=({self._pos_x}, {self._pos_y}), size={self._width}x{self._height}, "
            f"x=[{self._min_x}, {self._max_x}], y=[{self._min_y}, {self._max_y}])"
        )


def _validated_ticks(axis: str, ticks: Iterable[PlotTick], lo: float, hi: float) -> tuple[PlotTick, ...]:
    staged = tuple(ticks)
    for tick in staged:
        if not lo <= tick.value <= hi:
            raise TickOutOfRangeError(axis, tick, (lo, hi))
    return staged


def _coerce_pixel(name: str, value: int) -> int:
    try:
        pixel = int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidGeometryError(f"{name} must be an integer (got {value!r})") from exc
    if isinstance(value, bool) or pixel != value:
        raise InvalidGeometryError(f"{name} must be an integer (got {value!r})")
    return pixel


def _round_half_up(value: float) -> int:
    if not math.isfinite(value):
        raise PlotContractError(f"pixel offset is not finite (got {value!r})")
    return int(math.floor(value + 0.5))
