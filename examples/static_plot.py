from __future__ import annotations

from pathlib import Path
import sys

import numpy as np
from PIL import Image

from axis_plot import AxisPlotter, nice_ticks, points_from_xy, render_plot
from axis_plot.raster import RasterRenderer


def main(out_path: str = "static_plot.png") -> None:
    x = np.linspace(0.0, 10.0, 41)
    y = 2.5 + 2.0 * np.sin(x)

    plotter = AxisPlotter(40, 10, 260, 150, 0.0, 10.0, 0.0, 5.0)
    plotter.set_x_ticks(nice_ticks(0.0, 10.0, 6))
    plotter.set_y_ticks(nice_ticks(0.0, 5.0, 6))

    renderer = RasterRenderer.blank(320, 190)
    render_plot(plotter, renderer, points_from_xy(y, x=x))
    Image.fromarray(renderer.canvas).save(Path(out_path))


if __name__ == "__main__":
    main(*sys.argv[1:2])
