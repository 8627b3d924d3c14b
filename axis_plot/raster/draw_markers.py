from __future__ import annotations

import numpy as np

from axis_plot.raster.canvas import RGBA, draw_hline


def draw_marker(dst: np.ndarray, x: int, y: int, color: RGBA, size: int = 1) -> None:
    radius = max(0, size // 2)
    for yy in range(y - radius, y + radius + 1):
        draw_hline(dst, x - radius, x + radius, yy, color)
