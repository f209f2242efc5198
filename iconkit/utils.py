import io

from PIL import Image


class IconBuildError(Exception):
    """Fatal failure while generating icon assets."""


def human_size(num: int) -> str:
    units = ["B", "KB", "MB", "GB", "TB"]
    size = float(num)
    for unit in units:
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} PB"


def png_bytes(img: Image.Image) -> bytes:
    # no pnginfo: bytes depend only on pixels
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def resize_square(img: Image.Image, size: int) -> Image.Image:
    if img.size == (size, size):
        return img.copy()
    return img.resize((size, size), Image.LANCZOS)


def resize_png(img: Image.Image, size: int) -> bytes:
    return png_bytes(resize_square(img, size))


def open_png(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    img = img.convert("RGBA")
    return img
