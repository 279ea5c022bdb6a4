from kinetic_chart.chart import ChartState, KineticChart
from kinetic_chart.errors import ChartDataError, ChartStyleError
from kinetic_chart.metrics import ChartArea, ChartTransform, compute_transform
from kinetic_chart.path import RenderPath, build_path
from kinetic_chart.style import DEFAULT_STYLE, ChartStyle, load_chart_style, validate_chart_style
from kinetic_chart.surface import DrawingSurface, RasterSurface

__all__ = [
    "ChartArea",
    "ChartDataError",
    "ChartState",
    "ChartStyle",
    "ChartStyleError",
    "ChartTransform",
    "DEFAULT_STYLE",
    "DrawingSurface",
    "KineticChart",
    "RasterSurface",
    "RenderPath",
    "build_path",
    "compute_transform",
    "load_chart_style",
    "validate_chart_style",
]
