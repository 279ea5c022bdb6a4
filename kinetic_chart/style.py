from __future__ import annotations

from dataclasses import asdict, dataclass
import logging
from pathlib import Path
import re
import tomllib
from typing import Any, Mapping

from kinetic_chart.errors import ChartStyleError
from kinetic_chart.raster import RGBA

LOGGER = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")


@dataclass(frozen=True)
class ChartStyle:
    """Styling values read once when a chart is configured."""

    line_thickness: float = 0.0
    line_color: str = "#000000"
    axis_color: str = "#444444"
    axis_thickness: int = 1

    @property
    def line_rgba(self) -> RGBA:
        return parse_hex_color(self.line_color)

    @property
    def axis_rgba(self) -> RGBA:
        return parse_hex_color(self.axis_color)


DEFAULT_STYLE = ChartStyle()


def parse_hex_color(value: str) -> RGBA:
    if not isinstance(value, str) or not _HEX_COLOR.match(value):
        raise ChartStyleError(f"not a hex color (#RRGGBB or #RRGGBBAA): {value!r}")
    digits = value[1:]
    if len(digits) == 6:
        digits += "ff"
    r, g, b, a = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
    return (r, g, b, a)


def validate_chart_style(overrides: Mapping[str, Any] | None = None) -> ChartStyle:
    """Validate and merge style overrides against the defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_STYLE)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ChartStyleError(f"Unknown chart style key: {key}")
            raw[key] = value

    for key in ("line_color", "axis_color"):
        if not isinstance(raw[key], str) or not _HEX_COLOR.match(raw[key]):
            raise ChartStyleError(f"Style `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    thickness = raw["line_thickness"]
    if isinstance(thickness, bool) or not isinstance(thickness, (int, float)) or float(thickness) < 0:
        raise ChartStyleError("Style `line_thickness` must be a non-negative number")

    axis = raw["axis_thickness"]
    if isinstance(axis, bool) or not isinstance(axis, int) or axis <= 0:
        raise ChartStyleError("Style `axis_thickness` must be a positive integer")

    return ChartStyle(
        line_thickness=float(thickness),
        line_color=str(raw["line_color"]),
        axis_color=str(raw["axis_color"]),
        axis_thickness=int(axis),
    )


def load_chart_style(path: str | Path) -> ChartStyle:
    style_path = Path(path)
    if not style_path.exists():
        raise FileNotFoundError(f"chart style not found: {style_path}")
    with style_path.open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get("chart", {})
    if not isinstance(table, dict):
        raise ChartStyleError("`chart` must be a TOML table")
    style = validate_chart_style(table)
    LOGGER.info("loaded chart style from %s", style_path)
    return style
