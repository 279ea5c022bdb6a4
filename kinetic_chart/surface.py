from __future__ import annotations

from typing import Protocol

import numpy as np

from kinetic_chart.path import RenderPath
from kinetic_chart.raster import RGBA, draw_polyline, fill_rect, new_canvas


class DrawingSurface(Protocol):
    def fill_rect(self, left: float, top: float, right: float, bottom: float, color: RGBA) -> None:
        ...

    def save(self) -> None:
        ...

    def restore(self) -> None:
        ...

    def translate(self, dx: float, dy: float) -> None:
        ...

    def stroke_path(self, path: RenderPath, color: RGBA, width: float) -> None:
        ...


class RasterSurface:
    """numpy RGBA drawing surface with a translation stack."""

    def __init__(self, width: int, height: int, background: RGBA = (255, 255, 255, 255)) -> None:
        self._pixels = new_canvas(width, height, color=background)
        self._origin = (0.0, 0.0)
        self._saved: list[tuple[float, float]] = []

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    @property
    def origin(self) -> tuple[float, float]:
        return self._origin

    def fill_rect(self, left: float, top: float, right: float, bottom: float, color: RGBA) -> None:
        ox, oy = self._origin
        fill_rect(self._pixels, left + ox, top + oy, right + ox, bottom + oy, color)

    def save(self) -> None:
        self._saved.append(self._origin)

    def restore(self) -> None:
        if not self._saved:
            raise RuntimeError("restore() called without a matching save()")
        self._origin = self._saved.pop()

    def translate(self, dx: float, dy: float) -> None:
        ox, oy = self._origin
        self._origin = (ox + float(dx), oy + float(dy))

    def stroke_path(self, path: RenderPath, color: RGBA, width: float) -> None:
        if len(path) < 2:
            return
        moved = path.translated(*self._origin)
        # Width 0 is a one pixel hairline.
        brush = max(1, int(round(width)))
        draw_polyline(self._pixels, moved.xs, moved.ys, color=color, width=brush)
