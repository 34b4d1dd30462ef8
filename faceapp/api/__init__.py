"""Low-level access to the FaceApp HTTP API."""

from .base import (
    NO_FILTER,
    DiscoverySession,
    FaceAppError,
    FilterDescriptor,
    InvalidFilterID,
    NoFacesDetected,
    TransportError,
)
from .client import FaceAppClient
from .identity import generate_device_id

__all__ = [
    "NO_FILTER",
    "DiscoverySession",
    "FaceAppClient",
    "FaceAppError",
    "FilterDescriptor",
    "InvalidFilterID",
    "NoFacesDetected",
    "TransportError",
    "generate_device_id",
]
