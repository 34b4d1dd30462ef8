"""Data structures and errors shared by the FaceApp client."""

from __future__ import annotations

from dataclasses import dataclass, field

NO_FILTER = "no-filter"


@dataclass(slots=True)
class FilterDescriptor:
    """A filter the remote service reports as applicable to an uploaded photo."""

    id: str
    title: str
    cropped: bool | None = None

    def as_dict(self) -> dict[str, str | bool]:
        payload: dict[str, str | bool] = {"id": self.id, "title": self.title}
        if self.cropped is not None:
            payload["cropped"] = self.cropped
        return payload


@dataclass(slots=True)
class DiscoverySession:
    """Result of one upload: the session code and the filters on offer.

    ``code`` scopes subsequent filter requests to the uploaded photo and is only
    honoured for the ``device_id`` that performed the upload.
    """

    code: str
    device_id: str
    filters: list[FilterDescriptor] = field(default_factory=list)

    def filter_ids(self) -> list[str]:
        return [item.id for item in self.filters]


class FaceAppError(RuntimeError):
    """Base class for every error raised by this package."""


class TransportError(FaceAppError):
    """Raised when an HTTP exchange with the remote service fails.

    ``status_code`` is ``None`` for connection-level failures. ``error_code``
    holds the ``err.code`` value of a JSON error body when one was sent.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_code: str | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
        self.body = body


class NoFacesDetected(FaceAppError):
    """Raised when the uploaded photo has no detectable face."""

    def __init__(self, message: str = "No faces found in photo") -> None:
        super().__init__(message)


class InvalidFilterID(FaceAppError):
    """Raised when a filter identifier is not valid for the session."""

    def __init__(self, filter_id: str, message: str = "Invalid filter ID") -> None:
        super().__init__(f"{message}: {filter_id}")
        self.filter_id = filter_id
