from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple

RASTER_SIZE = 1024

# Windows picks the closest frame at render time
ICO_SIZES: Tuple[int, ...] = (16, 24, 32, 48, 64, 128, 256)

# Order matters: entries are appended to the container as listed
ICNS_ENTRIES: Tuple[Tuple[int, str], ...] = (
    (16, "icp4"),
    (32, "icp5"),
    (64, "icp6"),
    (128, "ic07"),
    (256, "ic08"),
    (512, "ic09"),
    (1024, "ic10"),
)

FAVICON_SIZE = (32, 32)


@dataclass(frozen=True)
class IconLayout:
    """Input and output locations under a project root."""

    root: Path
    static_dir: Path
    source: Path
    png: Path
    ico: Path
    icns: Path
    favicon: Path

    @classmethod
    def from_root(cls, root) -> "IconLayout":
        root = Path(root)
        static = root / "static"
        return cls(
            root=root,
            static_dir=static,
            source=static / "logo.svg",
            png=static / "icon.png",
            ico=static / "icon.ico",
            icns=static / "icon.icns",
            favicon=static / "favicon.svg",
        )

    def outputs(self) -> list[tuple[str, Path]]:
        """(label, path) for every generated file, in summary order."""
        desktop = [(label, icon_for_platform(system, self)) for system, (label, _) in PLATFORM_ICONS.items()]
        return desktop + [("Web", self.favicon)]


# platform.system() -> (display label, IconLayout attribute) used by the desktop packager
PLATFORM_ICONS: Dict[str, Tuple[str, str]] = {
    "Linux": ("Linux", "png"),
    "Windows": ("Windows", "ico"),
    "Darwin": ("macOS", "icns"),
}


def icon_for_platform(system: str, layout: IconLayout) -> Path:
    """Icon file the desktop packager bundles on ``system`` (a platform.system() name)."""
    return getattr(layout, PLATFORM_ICONS[system][1])
