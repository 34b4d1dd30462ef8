"""Service layer combining the FaceApp API calls."""

from .filters import FilterService, list_filters, process

__all__ = ["FilterService", "list_filters", "process"]
