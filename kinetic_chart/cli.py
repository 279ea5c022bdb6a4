from __future__ import annotations

import argparse
import csv
import logging
from pathlib import Path
import tomllib

from kinetic_chart.chart import KineticChart
from kinetic_chart.errors import ChartDataError, ChartStyleError
from kinetic_chart.export import save_png
from kinetic_chart.style import DEFAULT_STYLE, load_chart_style
from kinetic_chart.surface import RasterSurface

LOGGER = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="kinetic-chart")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a CSV of (time_ns, value) samples to a PNG.")
    render.add_argument("samples", type=Path)
    render.add_argument("output", type=Path)
    render.add_argument("--min", dest="vmin", type=float, required=True)
    render.add_argument("--max", dest="vmax", type=float, required=True)
    render.add_argument("--width", type=int, default=640)
    render.add_argument("--height", type=int, default=200)
    render.add_argument("--padding", type=int, default=8, help="Padding on every side, in pixels.")
    render.add_argument("--style", type=Path, default=None, help="TOML file with a [chart] table.")
    render.add_argument("--step-x", type=int, default=0, help="Grid step in nanoseconds.")
    render.add_argument("--step-y", type=float, default=0.0)

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        if args.width <= 0 or args.height <= 0:
            parser.error("--width/--height must be > 0")
        if args.padding < 0:
            parser.error("--padding must be >= 0")
        try:
            style = load_chart_style(args.style) if args.style is not None else DEFAULT_STYLE
            times, values = read_samples(args.samples)
        except (OSError, tomllib.TOMLDecodeError, ChartDataError, ChartStyleError) as exc:
            parser.error(str(exc))

        chart = KineticChart(style, padding=(args.padding,) * 4)
        chart.on_layout(True, 0, 0, args.width, args.height)
        chart.set_data(times, values, len(times), args.vmin, args.vmax, args.step_x, args.step_y)
        surface = RasterSurface(args.width, args.height)
        chart.draw(surface)
        out = save_png(surface, args.output)
        LOGGER.info("rendered %d samples to %s", len(times), out)
        print(out)
        return 0

    parser.error(f"unknown command: {args.command}")
    return 2


def read_samples(path: Path) -> tuple[list[int], list[float]]:
    """Read `time_ns,value` rows; a non-numeric first row is treated as a header."""
    times: list[int] = []
    values: list[float] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        for lineno, row in enumerate(csv.reader(f), start=1):
            if not row or not "".join(row).strip():
                continue
            if len(row) < 2:
                raise ChartDataError(f"{path}:{lineno}: expected time_ns,value")
            try:
                t = int(row[0].strip())
                v = float(row[1].strip())
            except ValueError as exc:
                if lineno == 1:
                    continue
                raise ChartDataError(f"{path}:{lineno}: {exc}") from exc
            times.append(t)
            values.append(v)
    return times, values
