"""Client configuration models and persistence helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

DEFAULT_BASE_URL = "https://node-03.faceapp.io"
DEFAULT_USER_AGENT = "FaceApp/2.0.553 (Linux; Android 6.0)"
DEFAULT_SAMPLE_IMAGE_URL = "https://i.imgur.com/nVsxMNp.jpg"


class ClientConfig(BaseModel):
    """Validates and stores the settings used to talk to the FaceApp API."""

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the FaceApp API node.",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="Client identification sent as the User-Agent header.",
    )
    sample_image_url: str = Field(
        default=DEFAULT_SAMPLE_IMAGE_URL,
        description="Image with a detectable face, used to enumerate filters.",
    )
    device_id: str | None = Field(
        default=None,
        description=(
            "Fixed device identifier. When unset a new one is generated for every upload."
        ),
    )
    timeout: float | None = Field(
        default=None,
        gt=0.0,
        le=600.0,
        description="Timeout (seconds) for HTTP calls. None waits indefinitely.",
    )

    @model_validator(mode="after")
    def _normalise_urls(self) -> ClientConfig:
        base = self.base_url.strip()
        if not base:
            raise ValueError("Base URL must not be empty.")
        if "://" not in base:
            raise ValueError("Base URL must include a scheme such as https://node-03.faceapp.io.")
        self.base_url = base.rstrip("/")

        sample = self.sample_image_url.strip()
        if "://" not in sample:
            raise ValueError("Sample image URL must include a scheme.")
        self.sample_image_url = sample
        return self

    @model_validator(mode="after")
    def _validate_identity(self) -> ClientConfig:
        if not self.user_agent.strip():
            raise ValueError("User agent must not be empty.")
        if self.device_id is not None:
            if not self.device_id or any(ch.isspace() for ch in self.device_id):
                raise ValueError("Device ID must be a non-empty string without whitespace.")
        return self

    def as_dict(self) -> dict[str, Any]:
        """Serialize the configuration to primitive Python types."""
        return self.model_dump(mode="json")

    @classmethod
    def load(cls, path: Path) -> ClientConfig:
        """Load configuration from a YAML or JSON file."""
        data = _read_config_file(path)
        try:
            return cls.model_validate(data)
        except ValidationError as exc:  # pragma: no cover - pass through details
            raise ValueError(f"Invalid configuration file at {path}: {exc}") from exc

    def save(self, path: Path) -> None:
        """Persist configuration to a YAML or JSON file."""
        _write_config_file(path, self.as_dict())


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        return yaml.safe_load(text) or {}
    return json.loads(text)


def _write_config_file(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() in {".yaml", ".yml"}:
        yaml_text = yaml.safe_dump(
            data,
            allow_unicode=False,
            sort_keys=False,
        )
        path.write_text(yaml_text, encoding="utf-8")
    else:
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
