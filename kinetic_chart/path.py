from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

from kinetic_chart.metrics import ChartTransform, check_series_length


Point = tuple[float, float]


@dataclass(frozen=True, eq=False)
class RenderPath:
    """Polyline in chart-local coordinates, anchored at the first sample."""

    xs: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.float64))
    ys: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.float64))

    def __post_init__(self) -> None:
        if self.xs.shape != self.ys.shape:
            raise ValueError(f"xs and ys shape mismatch: {self.xs.shape} != {self.ys.shape}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RenderPath):
            return NotImplemented
        return np.array_equal(self.xs, other.xs, equal_nan=True) and np.array_equal(self.ys, other.ys, equal_nan=True)

    def __len__(self) -> int:
        return int(self.xs.size)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points())

    @property
    def is_empty(self) -> bool:
        return self.xs.size == 0

    def points(self) -> list[Point]:
        return list(zip(self.xs.tolist(), self.ys.tolist()))

    def segments(self) -> Iterator[tuple[Point, Point]]:
        pts = self.points()
        for i in range(len(pts) - 1):
            yield pts[i], pts[i + 1]

    def translated(self, dx: float, dy: float) -> RenderPath:
        return RenderPath(xs=self.xs + float(dx), ys=self.ys + float(dy))


def build_path(transform: ChartTransform, times: np.ndarray, values: np.ndarray, length: int) -> RenderPath:
    """Map the first `length` samples into chart-local coordinates.

    X is nanoseconds since the first sample divided by `div_x`, so the first
    point always sits at x=0. Y is the raw value times `mult_y`; the caller
    translates the path to the zero line before stroking.
    """
    check_series_length(length, times, values)
    if length == 0:
        return RenderPath()

    t = np.asarray(times[:length], dtype=np.int64)
    v = np.asarray(values[:length], dtype=np.float64)

    xs = (t - t[0]).astype(np.float64) / transform.div_x
    xs[0] = 0.0
    ys = v * transform.mult_y
    return RenderPath(xs=xs, ys=ys)
