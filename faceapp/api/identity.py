"""Random device identifiers for the X-FaceApp-DeviceID header."""

from __future__ import annotations

import secrets
import string

DEVICE_ID_LENGTH = 16
_ALPHABET = string.ascii_letters + string.digits


def generate_device_id(length: int = DEVICE_ID_LENGTH) -> str:
    """Return a random alphanumeric device identifier."""
    if length < 1:
        raise ValueError("Device ID length must be at least 1.")
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))
