"""High-level operations: apply a filter to a photo and enumerate filters."""

from __future__ import annotations

import logging

from ..api.base import (
    NO_FILTER,
    FilterDescriptor,
    InvalidFilterID,
    NoFacesDetected,
    TransportError,
)
from ..api.client import FaceAppClient
from ..config import ClientConfig
from ..utils.images import ImageSource, read_image_bytes

logger = logging.getLogger(__name__)

PHOTO_NO_FACES = "photo_no_faces"
BAD_FILTER_ID = "bad_filter_id"


class FilterService:
    """Composes photo upload and filter download into single calls."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        client: FaceAppClient | None = None,
    ) -> None:
        self.config = config or (client.config if client is not None else ClientConfig())
        self.client = client or FaceAppClient(self.config)

    def apply_filter(self, image: ImageSource, filter_id: str = NO_FILTER) -> bytes:
        """Upload ``image`` and return it rendered with ``filter_id``.

        Raises ``NoFacesDetected`` or ``InvalidFilterID`` when the service
        rejects the request with a known code; any other failure is raised as
        the original ``TransportError``.
        """
        image_bytes = read_image_bytes(image)
        try:
            session = self.client.discover_filters(image_bytes)
            return self.client.fetch_filtered_image(session, filter_id)
        except TransportError as exc:
            if exc.status_code != 400:
                raise
            if exc.error_code == PHOTO_NO_FACES:
                logger.info("FaceApp found no faces in the uploaded photo.")
                raise NoFacesDetected() from exc
            if exc.error_code == BAD_FILTER_ID:
                logger.info("FaceApp rejected filter '%s'.", filter_id)
                raise InvalidFilterID(filter_id) from exc
            raise

    def list_filters(self, minimal: bool = False) -> list[FilterDescriptor] | list[str]:
        """Return the filters offered for the sample photo.

        With ``minimal`` only the filter identifiers are returned. Errors are
        propagated as raised by the client.
        """
        sample = self.client.fetch_sample_image()
        session = self.client.discover_filters(sample)
        if minimal:
            return session.filter_ids()
        return list(session.filters)


def process(image: ImageSource, filter_id: str = NO_FILTER) -> bytes:
    """Apply ``filter_id`` to ``image`` using the default configuration."""
    return FilterService().apply_filter(image, filter_id)


def list_filters(minimal: bool = False) -> list[FilterDescriptor] | list[str]:
    """List the available filters using the default configuration."""
    return FilterService().list_filters(minimal=minimal)
