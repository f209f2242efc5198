#!/usr/bin/env python3
"""Generate platform app icons from static/logo.svg.
Run:
  python build_icons.py
Creates static/icon.png (Linux), static/icon.ico (Windows),
static/icon.icns (macOS) and static/favicon.svg (web) for the desktop
packager and the web build.
"""
import sys
import traceback
from pathlib import Path

from iconkit.pipeline import generate_icons


def main(root=None):
    root = Path(root) if root is not None else Path(__file__).resolve().parent
    try:
        generate_icons(root)
    except Exception as e:
        print('Icon generation failed:', e)
        traceback.print_exc()
        sys.exit(1)

if __name__ == '__main__':
    main()
