"""Apple ICNS container.

Layout: ``b"icns"`` + big-endian u32 total length, then one element per
image: 4-byte OSType + big-endian u32 element length (header included) +
PNG payload.
"""
from __future__ import annotations

import struct
from typing import Iterable, List, NamedTuple, Tuple

from PIL import Image

from .config import ICNS_ENTRIES
from .utils import IconBuildError, resize_png

MAGIC = b"icns"
HEADER = struct.Struct(">4sI")


class IcnsEntry(NamedTuple):
    os_type: str
    data: bytes


def pack_icns(entries: Iterable[IcnsEntry]) -> bytes:
    body = b""
    for entry in entries:
        code = entry.os_type.encode("ascii")
        if len(code) != 4:
            raise IconBuildError(f"OSType must be 4 characters: {entry.os_type!r}")
        body += HEADER.pack(code, HEADER.size + len(entry.data)) + entry.data
    return HEADER.pack(MAGIC, HEADER.size + len(body)) + body


def build_icns(img: Image.Image, entries: Iterable[Tuple[int, str]] = ICNS_ENTRIES) -> bytes:
    return pack_icns(IcnsEntry(code, resize_png(img, size)) for size, code in entries)


def parse_icns(data: bytes) -> List[IcnsEntry]:
    if len(data) < HEADER.size:
        raise IconBuildError("ICNS data too short")
    magic, total = HEADER.unpack_from(data, 0)
    if magic != MAGIC:
        raise IconBuildError(f"Bad ICNS magic: {magic!r}")
    if total != len(data):
        raise IconBuildError(f"ICNS length mismatch: header says {total}, got {len(data)}")
    entries = []
    pos = HEADER.size
    while pos < total:
        if pos + HEADER.size > total:
            raise IconBuildError("Truncated ICNS element header")
        code, length = HEADER.unpack_from(data, pos)
        if length < HEADER.size or pos + length > total:
            raise IconBuildError(f"Bad ICNS element length for {code!r}")
        entries.append(IcnsEntry(code.decode("ascii"), data[pos + HEADER.size:pos + length]))
        pos += length
    return entries
