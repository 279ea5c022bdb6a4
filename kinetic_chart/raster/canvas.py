from __future__ import annotations

import numpy as np


RGBA = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    _blend(dst[y : y + 1, x : x + 1], color)


def fill_rect(dst: np.ndarray, left: float, top: float, right: float, bottom: float, color: RGBA) -> None:
    """Fill the pixels whose centers fall inside the rectangle, clipped to `dst`."""
    x0 = max(0, _round_half_up(left))
    x1 = min(dst.shape[1], _round_half_up(right))
    y0 = max(0, _round_half_up(top))
    y1 = min(dst.shape[0], _round_half_up(bottom))
    if x0 >= x1 or y0 >= y1:
        return
    _blend(dst[y0:y1, x0:x1], color)


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


def _blend(view: np.ndarray, color: RGBA) -> None:
    a = color[3] / 255.0
    if a >= 1.0:
        view[:, :, :3] = np.asarray(color[:3], dtype=np.uint8)
    else:
        src = np.asarray(color[:3], dtype=np.float32)
        view[:, :, :3] = (src * a + view[:, :, :3].astype(np.float32) * (1.0 - a)).astype(np.uint8)
    view[:, :, 3] = 255
