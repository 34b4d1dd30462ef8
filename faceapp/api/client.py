"""HTTP client for the FaceApp photo and filter endpoints."""

from __future__ import annotations

import logging
from typing import Any

import requests
from requests import Response, Session

from ..config import ClientConfig
from .base import NO_FILTER, DiscoverySession, FilterDescriptor, TransportError
from .identity import generate_device_id

logger = logging.getLogger(__name__)

DEVICE_ID_HEADER = "X-FaceApp-DeviceID"
UPLOAD_FILENAME = "image.png"


def _error_code(response: Response) -> str | None:
    """Extract ``err.code`` from a JSON error body, if there is one."""
    try:
        payload = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    err = payload.get("err")
    if not isinstance(err, dict):
        return None
    code = err.get("code")
    return code if isinstance(code, str) else None


class FaceAppClient:
    """Uploads photos, lists their filters and downloads filtered renders."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        session: Session | None = None,
        device_id: str | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._session = session or requests.Session()
        self._device_id = device_id or self._config.device_id

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ----- Public operations -----------------------------------------------

    def discover_filters(self, image_bytes: bytes) -> DiscoverySession:
        """Upload ``image_bytes`` and return the session code with its filters."""
        device_id = self._device_id or generate_device_id()
        endpoint = f"{self._config.base_url}/api/v3.0/photos"
        response = self._session_post(
            endpoint,
            files={"file": (UPLOAD_FILENAME, image_bytes)},
            device_id=device_id,
        )
        session = self._parse_discovery(response, device_id)
        logger.info(
            "Uploaded photo as %s; %d filter(s) available.", session.code, len(session.filters)
        )
        return session

    def fetch_filtered_image(self, session: DiscoverySession, filter_id: str = NO_FILTER) -> bytes:
        """Download the render of ``filter_id`` for a previously uploaded photo."""
        endpoint = (
            f"{self._config.base_url}/api/v3.0/photos/{session.code}/filters/{filter_id}"
        )
        response = self._session_get(endpoint, device_id=session.device_id)
        return response.content

    def fetch_sample_image(self) -> bytes:
        """Download the bundled sample photo used to enumerate filters."""
        response = self._session_get(self._config.sample_image_url)
        return response.content

    # ----- Response handling -----------------------------------------------

    @staticmethod
    def _parse_discovery(response: Response, device_id: str) -> DiscoverySession:
        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise TransportError(
                "Photo upload returned a non-JSON body.",
                status_code=response.status_code,
                body=response.text,
            ) from exc

        code = payload.get("code") if isinstance(payload, dict) else None
        entries = payload.get("add_to") if isinstance(payload, dict) else None
        if not isinstance(code, str) or not code or not isinstance(entries, list):
            raise TransportError(
                "Photo upload returned an unexpected payload.",
                status_code=response.status_code,
                body=response.text,
            )

        filters: list[FilterDescriptor] = []
        for entry in entries:
            filter_id = entry.get("filter_id") if isinstance(entry, dict) else None
            if not isinstance(filter_id, str):
                logger.debug("Skipping filter entry without an identifier: %r", entry)
                continue
            cropped = entry.get("cropped")
            filters.append(
                FilterDescriptor(
                    id=filter_id,
                    title=filter_id,
                    cropped=cropped if isinstance(cropped, bool) else None,
                )
            )
        return DiscoverySession(code=code, device_id=device_id, filters=filters)

    # ----- HTTP helpers ----------------------------------------------------

    def _headers(self, device_id: str | None = None) -> dict[str, str]:
        headers = {"User-Agent": self._config.user_agent}
        if device_id:
            headers[DEVICE_ID_HEADER] = device_id
        return headers

    def _session_post(
        self,
        url: str,
        *,
        files: dict[str, tuple[str, bytes]],
        device_id: str,
    ) -> Response:
        logger.debug("POST %s (device %s)", url, device_id)
        try:
            response = self._session.post(
                url,
                files=files,
                headers=self._headers(device_id),
                timeout=self._config.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Failed to contact {url}: {exc}") from exc
        return self._check_status(response)

    def _session_get(self, url: str, *, device_id: str | None = None) -> Response:
        logger.debug("GET %s (device %s)", url, device_id)
        try:
            response = self._session.get(
                url,
                headers=self._headers(device_id),
                timeout=self._config.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Failed to contact {url}: {exc}") from exc
        return self._check_status(response)

    @staticmethod
    def _check_status(response: Response) -> Response:
        if response.status_code >= 400:
            raise TransportError(
                f"FaceApp returned HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
                error_code=_error_code(response),
                body=response.text,
            )
        return response
