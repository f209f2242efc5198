from __future__ import annotations

import io
from typing import Iterable

from PIL import Image

from .config import ICO_SIZES
from .utils import IconBuildError, resize_square


def build_ico(img: Image.Image, sizes: Iterable[int] = ICO_SIZES) -> bytes:
    """Multi-resolution ICO with one PNG frame per size."""
    sizes = sorted(set(sizes))
    if not sizes or sizes[-1] > 256:
        raise IconBuildError(f"ICO sizes must be 1..256, got {sizes}")
    frames = [resize_square(img, s) for s in sizes]
    largest = frames[-1]
    buf = io.BytesIO()
    largest.save(
        buf,
        format="ICO",
        sizes=[(s, s) for s in sizes],
        append_images=frames[:-1],
    )
    return buf.getvalue()

