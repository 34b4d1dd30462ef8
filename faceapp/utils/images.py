"""Helpers that turn caller-supplied images into upload payloads."""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Iterable, Union

from PIL import Image

IMAGE_EXTENSIONS = {
    ".jpg",
    ".jpeg",
    ".png",
    ".webp",
    ".bmp",
    ".tiff",
    ".tif",
    ".gif",
    ".heic",
}

ImageSource = Union[bytes, bytearray, memoryview, str, Path, IO[bytes], Image.Image]


def is_image_file(path: Path, *, extensions: Iterable[str] | None = None) -> bool:
    """Return True if the given path has a supported image extension."""
    exts = {ext.lower() for ext in (extensions or IMAGE_EXTENSIONS)}
    return path.suffix.lower() in exts


def encode_png(image: Image.Image) -> bytes:
    """Encode a Pillow image as PNG, matching the upload filename."""
    buffer = io.BytesIO()
    converted = image if image.mode in {"RGB", "RGBA", "L"} else image.convert("RGBA")
    converted.save(buffer, format="PNG")
    return buffer.getvalue()


def read_image_bytes(source: ImageSource) -> bytes:
    """Return the raw bytes for a path, buffer, file object or Pillow image.

    Strings are always treated as filesystem paths. The content itself is not
    inspected.
    """
    if isinstance(source, bytes):
        return source
    if isinstance(source, (bytearray, memoryview)):
        return bytes(source)
    if isinstance(source, (str, Path)):
        path = Path(source).expanduser()
        if not path.exists():
            raise FileNotFoundError(path)
        if path.is_dir():
            raise IsADirectoryError(path)
        return path.read_bytes()
    if isinstance(source, Image.Image):
        return encode_png(source)
    read = getattr(source, "read", None)
    if callable(read):
        data = read()
        if isinstance(data, str):
            raise TypeError("File objects must be opened in binary mode.")
        return bytes(data)
    raise TypeError(f"Unsupported image source: {type(source).__name__}")
