"""Utility helpers for the FaceApp client."""

from .images import encode_png, is_image_file, read_image_bytes

__all__ = ["encode_png", "is_image_file", "read_image_bytes"]
