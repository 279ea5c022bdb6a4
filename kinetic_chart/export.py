from __future__ import annotations

from pathlib import Path

from PIL import Image

from kinetic_chart.surface import RasterSurface


def to_image(surface: RasterSurface) -> Image.Image:
    return Image.fromarray(surface.pixels.copy())


def save_png(surface: RasterSurface, path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    to_image(surface).save(out, format="PNG")
    return out
