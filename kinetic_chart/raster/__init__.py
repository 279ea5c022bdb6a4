from .canvas import RGBA, draw_pixel, fill_rect, new_canvas
from .draw_lines import draw_polyline

__all__ = [
    "RGBA",
    "draw_pixel",
    "draw_polyline",
    "fill_rect",
    "new_canvas",
]
