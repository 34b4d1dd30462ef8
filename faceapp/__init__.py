"""Top-level package for the FaceApp filter client."""

from .api import (
    DiscoverySession,
    FaceAppClient,
    FaceAppError,
    FilterDescriptor,
    InvalidFilterID,
    NoFacesDetected,
    TransportError,
    generate_device_id,
)
from .config import ClientConfig
from .services.filters import FilterService, list_filters, process

__all__ = [
    "ClientConfig",
    "DiscoverySession",
    "FaceAppClient",
    "FaceAppError",
    "FilterDescriptor",
    "FilterService",
    "InvalidFilterID",
    "NoFacesDetected",
    "TransportError",
    "generate_device_id",
    "list_filters",
    "process",
]
