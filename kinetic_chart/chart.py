from __future__ import annotations

import logging
from typing import Any, Callable, Literal

import numpy as np

from kinetic_chart.errors import ChartDataError
from kinetic_chart.metrics import ChartArea, ChartTransform, check_series_length, compute_transform
from kinetic_chart.path import RenderPath, build_path
from kinetic_chart.style import ChartStyle
from kinetic_chart.surface import DrawingSurface

LOGGER = logging.getLogger(__name__)

ChartState = Literal["UNINITIALIZED", "CONFIGURED", "LAID_OUT", "READY"]
Padding = tuple[int, int, int, int]


class KineticChart:
    """Single-series time chart: a zero axis, a left axis and one stroked line.

    Geometry arrives through `on_layout`, data through `set_data`. Transform and
    path are recomputed together whenever either changes, and only once both a
    non-empty area and data are present.
    """

    def __init__(
        self,
        style: ChartStyle | None = None,
        *,
        padding: Padding = (0, 0, 0, 0),
        on_invalidate: Callable[[], None] | None = None,
    ) -> None:
        if any(p < 0 for p in padding):
            raise ValueError("padding must be non-negative")
        self._style = style
        self._padding = tuple(int(p) for p in padding)
        self._on_invalidate = on_invalidate or (lambda: None)

        self._area = ChartArea()
        self._times: np.ndarray | None = None
        self._values: np.ndarray | None = None
        self._length = 0
        self._min = 0.0
        self._max = 0.0
        self._step_x = 0
        self._step_y = 0.0

        self._transform: ChartTransform | None = None
        self._path = RenderPath()

    @property
    def state(self) -> ChartState:
        if self._style is None:
            return "UNINITIALIZED"
        if self._area.is_empty:
            return "CONFIGURED"
        if self._times is None:
            return "LAID_OUT"
        return "READY"

    @property
    def style(self) -> ChartStyle | None:
        return self._style

    @property
    def area(self) -> ChartArea:
        return self._area

    @property
    def transform(self) -> ChartTransform | None:
        return self._transform

    @property
    def path(self) -> RenderPath:
        return self._path

    @property
    def length(self) -> int:
        return self._length

    @property
    def bounds(self) -> tuple[float, float]:
        return (self._min, self._max)

    @property
    def grid_steps(self) -> tuple[int, float]:
        return (self._step_x, self._step_y)

    def configure(self, style: ChartStyle) -> None:
        if self._style is not None:
            raise RuntimeError("chart style is read once and cannot be replaced")
        self._style = style

    def on_layout(self, changed: bool, left: int, top: int, right: int, bottom: int) -> None:
        if not changed:
            return
        pad_left, pad_top, pad_right, pad_bottom = self._padding
        self._area = ChartArea(
            left=pad_left,
            top=pad_top,
            right=right - left - pad_right,
            bottom=bottom - top - pad_bottom,
        )
        if self._area.is_empty:
            LOGGER.debug("chart area %s is empty; skipping recompute", self._area)
            return
        if self._times is not None:
            self._recalculate()

    def set_data(
        self,
        times: Any,
        values: Any,
        length: int,
        vmin: float,
        vmax: float,
        step_x: int,
        step_y: float,
    ) -> None:
        """Replace the series and bounds.

        The first `length` entries of `times` (nanoseconds) and `values` are
        copied, so the caller may reuse or mutate its arrays afterwards. If the
        area is not laid out yet the recompute waits for `on_layout`.
        """
        t = np.asarray(times)
        v = np.asarray(values)
        if t.ndim != 1 or v.ndim != 1:
            raise ChartDataError("times and values must be 1-D")
        check_series_length(length, t, v)
        if not (np.isfinite(vmin) and np.isfinite(vmax)):
            raise ChartDataError(f"bounds must be finite, got ({vmin}, {vmax})")

        self._times = t[:length].astype(np.int64, copy=True)
        self._values = v[:length].astype(np.float64, copy=True)
        self._length = int(length)
        self._min = float(vmin)
        self._max = float(vmax)
        self._step_x = int(step_x)
        self._step_y = float(step_y)

        if length > 1 and np.any(np.diff(self._times) < 0):
            LOGGER.warning("sample times are not monotonic; the line will fold back on itself")
        gaps = int(np.count_nonzero(~np.isfinite(self._values)))
        if gaps:
            LOGGER.warning("%d non-finite sample values; the line breaks around them", gaps)

        if self._area.is_empty:
            LOGGER.debug("chart not laid out yet; deferring recompute")
            return
        self._recalculate()
        self._on_invalidate()

    def draw(self, surface: DrawingSurface) -> bool:
        if self.state != "READY":
            LOGGER.debug("draw skipped in state %s", self.state)
            return False
        assert self._style is not None and self._transform is not None

        area = self._area
        zero_y = self._transform.zero_y
        thickness = self._style.axis_thickness
        axis_color = self._style.axis_rgba

        # Horizontal axis on the zero line.
        surface.fill_rect(area.left, zero_y - thickness / 2, area.right, zero_y + thickness / 2, axis_color)

        if self._length != 0:
            surface.save()
            surface.translate(area.left, zero_y)
            surface.stroke_path(self._path, self._style.line_rgba, self._style.line_thickness)
            surface.restore()

        # Vertical axis on the left, over the path.
        surface.fill_rect(area.left - thickness, area.top, area.left, area.bottom, axis_color)
        return True

    def _recalculate(self) -> None:
        assert self._times is not None and self._values is not None
        if self._min == self._max:
            LOGGER.debug("value range is empty (%s); keeping previous vertical scale", self._min)
        self._transform = compute_transform(
            self._area,
            self._times,
            self._length,
            self._min,
            self._max,
            previous=self._transform,
        )
        self._path = build_path(self._transform, self._times, self._values, self._length)
