"""Web favicon: the logo SVG with a fixed root width/height.

Only the root ``<svg ...>`` start tag is edited; everything else in the
document is kept byte for byte.
"""
from __future__ import annotations

import re
import shutil
from pathlib import Path

from .config import FAVICON_SIZE
from .utils import IconBuildError

_COMMENT = re.compile(r"<!--.*?-->", re.S)
_ROOT_TAG = re.compile(r"""<svg\b(?:[^>"']|"[^"]*"|'[^']*')*>""")
_ATTR = re.compile(r"""(\s)([^\s=/>"']+)(\s*=\s*)("[^"]*"|'[^']*'|[^\s"'>/]+)""")


def _root_tag_span(text: str) -> tuple[int, int]:
    comments = [m.span() for m in _COMMENT.finditer(text)]
    for m in _ROOT_TAG.finditer(text):
        if not any(start <= m.start() < end for start, end in comments):
            return m.span()
    raise IconBuildError("No <svg> root element found")


def _set_attr(tag: str, name: str, value) -> str:
    found = False

    def repl(m):
        nonlocal found
        if found or m.group(2) != name:
            return m.group(0)
        found = True
        quote = m.group(4)[0] if m.group(4)[0] in "\"'" else '"'
        return f"{m.group(1)}{name}{m.group(3)}{quote}{value}{quote}"

    tag = _ATTR.sub(repl, tag)
    if found:
        return tag
    end = len(tag) - (2 if tag.endswith("/>") else 1)
    head = tag[:end].rstrip()
    return f'{head} {name}="{value}"{tag[len(head):]}'


def set_svg_size(text: str, width=FAVICON_SIZE[0], height=FAVICON_SIZE[1]) -> str:
    start, end = _root_tag_span(text)
    tag = _set_attr(text[start:end], "width", width)
    tag = _set_attr(tag, "height", height)
    return text[:start] + tag + text[end:]


def write_favicon(src, dst, width=FAVICON_SIZE[0], height=FAVICON_SIZE[1]) -> Path:
    dst = Path(dst)
    shutil.copyfile(src, dst)
    # newline='' keeps the source's line endings intact
    with open(dst, "r", encoding="utf-8", newline="") as f:
        text = f.read()
    text = set_svg_size(text, width, height)
    with open(dst, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    return dst
