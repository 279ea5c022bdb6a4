from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from kinetic_chart.errors import ChartDataError


@dataclass(frozen=True)
class ChartArea:
    """Integer pixel rectangle the chart draws into, padding already removed."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def is_empty(self) -> bool:
        return self.left >= self.right or self.top >= self.bottom


@dataclass(frozen=True)
class ChartTransform:
    mult_y: float = 0.0
    div_x: float = 1.0
    zero_y: float = 0.0


def compute_transform(
    area: ChartArea,
    times: np.ndarray,
    length: int,
    vmin: float,
    vmax: float,
    previous: ChartTransform | None = None,
) -> ChartTransform:
    """Pre-calculate the values that map samples into chart coordinates.

    `mult_y` is negative for a non-degenerate range because pixel rows grow
    downward. When `vmin == vmax` the previous `mult_y` is kept (0.0 if there
    is none) and the zero line is clamped to the top of the area. `div_x` keeps
    its previous value while there are no samples or the area has no width, and
    is forced to 1.0 whenever it would be zero.
    """
    check_series_length(length, times)
    vmin = float(vmin)
    vmax = float(vmax)

    mult_y = previous.mult_y if previous is not None else 0.0
    if vmax != vmin:
        mult_y = area.height / (vmin - vmax)

    div_x = previous.div_x if previous is not None else 0.0
    if length > 0 and area.width != 0:
        span_ns = int(times[length - 1]) - int(times[0])
        div_x = span_ns / area.width
    if div_x == 0:
        div_x = 1.0

    if vmax != vmin:
        zero_y = area.top + area.height * vmax / (vmax - vmin)
    else:
        zero_y = float(area.top)

    return ChartTransform(mult_y=float(mult_y), div_x=float(div_x), zero_y=float(zero_y))


def check_series_length(length: int, *arrays: np.ndarray) -> None:
    if length < 0:
        raise ChartDataError(f"length must be >= 0, got {length}")
    for arr in arrays:
        if length > len(arr):
            raise IndexError(f"length {length} exceeds array size {len(arr)}")
