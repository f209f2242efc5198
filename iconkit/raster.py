"""SVG rasterization.

The logo is rendered once at full resolution; every raster-derived icon is
resized from that bitmap instead of re-rendering the vector source.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import cairosvg
from PIL import Image

from .config import RASTER_SIZE
from .utils import IconBuildError, open_png


@dataclass(frozen=True)
class Raster:
    png: bytes          # encoded PNG, written verbatim as the Linux icon
    image: Image.Image  # decoded RGBA copy used for resizing


def render_svg(svg_path, size: int = RASTER_SIZE) -> Raster:
    svg_path = Path(svg_path)
    try:
        data = svg_path.read_bytes()
    except OSError as exc:
        raise IconBuildError(f"Cannot read source SVG {svg_path}: {exc}") from exc
    try:
        png = cairosvg.svg2png(bytestring=data, output_width=size, output_height=size)
        img = open_png(png)
    except Exception as exc:
        raise IconBuildError(f"Failed to rasterize {svg_path}: {exc}") from exc
    return Raster(png=png, image=img)
