from __future__ import annotations

import math

import numpy as np

from kinetic_chart.raster.canvas import RGBA, draw_pixel


def draw_polyline(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, width: int = 1) -> None:
    """Stroke consecutive points; segments touching a non-finite point are skipped."""
    if xs.size < 2:
        return
    h, w = dst.shape[0], dst.shape[1]
    reach = max(0, width // 2)
    bounds = (-reach, -reach, w - 1 + reach, h - 1 + reach)
    fx = np.asarray(xs, dtype=np.float64).tolist()
    fy = np.asarray(ys, dtype=np.float64).tolist()
    for i in range(len(fx) - 1):
        x0, y0, x1, y1 = fx[i], fy[i], fx[i + 1], fy[i + 1]
        if not (math.isfinite(x0) and math.isfinite(y0) and math.isfinite(x1) and math.isfinite(y1)):
            continue
        clipped = _clip_segment(x0, y0, x1, y1, *bounds)
        if clipped is None:
            continue
        cx0, cy0, cx1, cy1 = (int(np.rint(v)) for v in clipped)
        _draw_line_segment(dst, cx0, cy0, cx1, cy1, color=color, width=width)


def _clip_segment(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    xmin: float,
    ymin: float,
    xmax: float,
    ymax: float,
) -> tuple[float, float, float, float] | None:
    # Liang-Barsky against the canvas rectangle grown by the brush reach.
    dx = x1 - x0
    dy = y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 - xmin), (dx, xmax - x0), (-dy, y0 - ymin), (dy, ymax - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        r = q / p
        if p < 0:
            if r > t1:
                return None
            t0 = max(t0, r)
        else:
            if r < t0:
                return None
            t1 = min(t1, r)
    return (x0 + t0 * dx, y0 + t0 * dy, x0 + t1 * dx, y0 + t1 * dy)


def _draw_line_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _draw_square_brush(dst, x0, y0, color=color, width=width)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _draw_square_brush(dst: np.ndarray, x: int, y: int, color: RGBA, width: int) -> None:
    if width <= 1:
        draw_pixel(dst, x, y, color)
        return
    lo = -(width // 2)
    hi = lo + width
    for yy in range(y + lo, y + hi):
        for xx in range(x + lo, x + hi):
            draw_pixel(dst, xx, yy, color)
