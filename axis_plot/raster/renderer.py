from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from axis_plot.raster.canvas import RGBA, new_canvas
from axis_plot.raster.draw_lines import draw_line_segment
from axis_plot.raster.draw_markers import draw_marker
from axis_plot.raster.draw_text import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE_PX, draw_text, text_size
from axis_plot.types import PlotPoint


@dataclass(frozen=True)
class RasterStyle:
    background: RGBA = (0, 0, 0, 255)
    axis_color: RGBA = (200, 200, 200, 255)
    tick_color: RGBA = (200, 200, 200, 255)
    label_color: RGBA = (230, 230, 230, 255)
    point_color: RGBA = (62, 149, 255, 255)
    line_color: RGBA = (62, 149, 255, 255)
    tick_length: int = 3
    label_gap: int = 2
    marker_size: int = 3
    line_width: int = 1
    font_family: str = DEFAULT_FONT_FAMILY
    font_size_px: float = DEFAULT_FONT_SIZE_PX


class RasterRenderer:
    """Draws plotter callbacks onto an RGBA numpy canvas of shape (H, W, 4)."""

    def __init__(self, canvas: np.ndarray, style: RasterStyle | None = None) -> None:
        if canvas.ndim != 3 or canvas.shape[2] != 4 or canvas.dtype != np.uint8:
            raise ValueError("canvas must be a uint8 array of shape (H, W, 4)")
        self.canvas = canvas
        self.style = style or RasterStyle()

    @classmethod
    def blank(cls, width: int, height: int, style: RasterStyle | None = None) -> "RasterRenderer":
        style = style or RasterStyle()
        return cls(new_canvas(width, height, color=style.background), style)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        draw_line_segment(self.canvas, x0, y0, x1, y1, self.style.axis_color)

    def draw_x_tick(self, x: int, y: int, relative_position: float, label: str) -> None:
        s = self.style
        draw_line_segment(self.canvas, x, y, x, y + s.tick_length, s.tick_color)
        w, _ = self._text_size(label)
        # Slide the label from left-aligned (0) through centered to right-aligned (1).
        left = x - int(round(w * relative_position))
        self._draw_label(left, y + s.tick_length + s.label_gap, label)

    def draw_y_tick(self, x: int, y: int, relative_position: float, label: str) -> None:
        s = self.style
        draw_line_segment(self.canvas, x - s.tick_length, y, x, y, s.tick_color)
        w, h = self._text_size(label)
        top = y - int(round(h * (1.0 - relative_position)))
        self._draw_label(x - s.tick_length - s.label_gap - w, top, label)

    def draw_point(self, x: int, y: int, point: PlotPoint) -> None:
        draw_marker(self.canvas, x, y, self.style.point_color, size=self.style.marker_size)

    def draw_segment(self, x0: int, y0: int, x1: int, y1: int, start: PlotPoint, end: PlotPoint) -> None:
        draw_line_segment(self.canvas, x0, y0, x1, y1, self.style.line_color, width=self.style.line_width)

    def _text_size(self, label: str) -> tuple[int, int]:
        return text_size(label, font_family=self.style.font_family, font_size_px=self.style.font_size_px)

    def _draw_label(self, x: int, y: int, label: str) -> None:
        draw_text(
            self.canvas,
            x,
            y,
            label,
            self.style.label_color,
            font_family=self.style.font_family,
            font_size_px=self.style.font_size_px,
        )
