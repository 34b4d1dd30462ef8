import io
from pathlib import Path

import pytest
from PIL import Image

from faceapp.utils.images import encode_png, is_image_file, read_image_bytes


def test_is_image_file_matches_extensions(tmp_path):
    assert is_image_file(tmp_path / "face.JPG")
    assert not is_image_file(tmp_path / "notes.txt")
    assert is_image_file(tmp_path / "face.raw", extensions=[".RAW"])


def test_read_image_bytes_passes_buffers_through():
    assert read_image_bytes(b"abc") == b"abc"
    assert read_image_bytes(bytearray(b"abc")) == b"abc"
    assert read_image_bytes(memoryview(b"abc")) == b"abc"


def test_read_image_bytes_from_path(tmp_path):
    path = tmp_path / "face.png"
    path.write_bytes(b"png-bytes")

    assert read_image_bytes(path) == b"png-bytes"
    assert read_image_bytes(str(path)) == b"png-bytes"


def test_read_image_bytes_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_image_bytes(tmp_path / "missing.png")


def test_read_image_bytes_rejects_directory(tmp_path):
    with pytest.raises(IsADirectoryError):
        read_image_bytes(tmp_path)


def test_read_image_bytes_from_file_objects():
    assert read_image_bytes(io.BytesIO(b"stream")) == b"stream"
    with pytest.raises(TypeError):
        read_image_bytes(io.StringIO("text"))


def test_read_image_bytes_encodes_pillow_images_as_png():
    payload = read_image_bytes(Image.new("P", (3, 3)))

    with Image.open(io.BytesIO(payload)) as decoded:
        assert decoded.format == "PNG"
        assert decoded.size == (3, 3)


def test_encode_png_keeps_rgb():
    payload = encode_png(Image.new("RGB", (1, 1), color=(1, 2, 3)))
    with Image.open(io.BytesIO(payload)) as decoded:
        assert decoded.getpixel((0, 0)) == (1, 2, 3)


def test_read_image_bytes_rejects_unknown_types():
    with pytest.raises(TypeError):
        read_image_bytes(42)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        read_image_bytes([Path("a.png")])  # type: ignore[arg-type]
