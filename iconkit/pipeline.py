from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Tuple

from .config import FAVICON_SIZE, RASTER_SIZE, IconLayout
from .favicon import write_favicon
from .icns import build_icns
from .ico import build_ico
from .raster import render_svg
from .utils import IconBuildError, human_size


def generate_icons(root, echo: Callable[..., None] = print) -> List[Tuple[str, Path]]:
    """Render static/logo.svg and write the PNG, ICO, ICNS and favicon outputs.

    Steps run strictly in order and any failure propagates to the caller;
    outputs already written are left in place. Returns (platform, path)
    for each generated file.
    """
    layout = IconLayout.from_root(root)
    # Checked before touching the filesystem so a bad root leaves nothing behind
    if not layout.source.is_file():
        raise IconBuildError(f"Source SVG not found: {layout.source}")
    layout.static_dir.mkdir(exist_ok=True)

    echo('Generating icon files...')

    echo(f'Rendering {RASTER_SIZE}x{RASTER_SIZE} PNG...')
    raster = render_svg(layout.source, RASTER_SIZE)

    echo('Writing Linux PNG icon...')
    layout.png.write_bytes(raster.png)

    echo('Writing Windows ICO icon...')
    layout.ico.write_bytes(build_ico(raster.image))

    echo('Writing favicon.svg...')
    write_favicon(layout.source, layout.favicon, *FAVICON_SIZE)

    echo('Writing macOS ICNS icon...')
    layout.icns.write_bytes(build_icns(raster.image))

    outputs = layout.outputs()
    echo('All platform icons generated.')
    echo('Output directory:', layout.static_dir)
    echo('Generated files:')
    for label, path in outputs:
        echo(f'  - {path.name} ({label}, {human_size(path.stat().st_size)})')
    return outputs
