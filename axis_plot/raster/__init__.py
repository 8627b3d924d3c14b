from .canvas import draw_hline, draw_pixel, draw_vline, new_canvas
from .draw_lines import draw_line_segment
from .draw_markers import draw_marker
from .draw_text import draw_text, text_size
from .renderer import RasterRenderer, RasterStyle

__all__ = [
    "RasterRenderer",
    "RasterStyle",
    "draw_hline",
    "draw_line_segment",
    "draw_marker",
    "draw_pixel",
    "draw_text",
    "draw_vline",
    "new_canvas",
    "text_size",
]
