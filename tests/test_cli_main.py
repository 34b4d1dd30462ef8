"""Tests for the CLI entry point."""

from __future__ import annotations

import json

import pytest

from faceapp.__main__ import main as cli_main
from faceapp.api.base import FilterDescriptor, NoFacesDetected
from faceapp.config import ClientConfig


class DummyService:
    instances: list["DummyService"] = []

    def __init__(self, config: ClientConfig) -> None:
        self.config = config
        self.applied: list[tuple[object, str]] = []
        DummyService.instances.append(self)

    def list_filters(self, minimal: bool = False):
        filters = [
            FilterDescriptor(id="smile", title="smile"),
            FilterDescriptor(id="old", title="old", cropped=True),
        ]
        return [item.id for item in filters] if minimal else filters

    def apply_filter(self, image, filter_id: str = "no-filter") -> bytes:
        self.applied.append((image, filter_id))
        return b"filtered"


@pytest.fixture(autouse=True)
def dummy_service(monkeypatch):
    DummyService.instances = []
    monkeypatch.setattr("faceapp.__main__.FilterService", DummyService)
    return DummyService


def test_cli_lists_filters(capsys):
    cli_main(["--list-filters"])

    payload = json.loads(capsys.readouterr().out)
    assert payload == [
        {"id": "smile", "title": "smile"},
        {"id": "old", "title": "old", "cropped": True},
    ]


def test_cli_lists_minimal_filters(capsys):
    cli_main(["--list-filters", "--minimal"])

    assert json.loads(capsys.readouterr().out) == ["smile", "old"]


def test_cli_requires_input():
    with pytest.raises(SystemExit):
        cli_main([])


def test_cli_applies_filter_with_default_output(tmp_path, capsys):
    image_path = tmp_path / "face.jpg"
    image_path.write_bytes(b"fake")

    cli_main(["--input", str(image_path), "--filter", "smile"])

    expected = tmp_path / "face-smile.png"
    assert expected.read_bytes() == b"filtered"
    assert capsys.readouterr().out.strip() == str(expected)
    assert DummyService.instances[0].applied == [(image_path, "smile")]


def test_cli_writes_explicit_output(tmp_path):
    image_path = tmp_path / "face.jpg"
    image_path.write_bytes(b"fake")
    output = tmp_path / "out" / "result.jpg"

    cli_main(["-i", str(image_path), "-o", str(output)])

    assert output.read_bytes() == b"filtered"
    assert DummyService.instances[0].applied[0][1] == "no-filter"


def test_cli_loads_config_file(tmp_path):
    config_path = tmp_path / "faceapp.yaml"
    ClientConfig(base_url="http://faceapp.test", device_id="fixed").save(config_path)

    cli_main(["--config", str(config_path), "--list-filters"])

    config = DummyService.instances[0].config
    assert config.base_url == "http://faceapp.test"
    assert config.device_id == "fixed"


def test_cli_reports_service_errors(monkeypatch, tmp_path, capsys):
    image_path = tmp_path / "face.jpg"
    image_path.write_bytes(b"fake")

    def raise_no_faces(self, image, filter_id="no-filter"):
        raise NoFacesDetected()

    monkeypatch.setattr(DummyService, "apply_filter", raise_no_faces)

    with pytest.raises(SystemExit) as info:
        cli_main(["-i", str(image_path)])

    assert info.value.code == 1
    assert "No faces found in photo" in capsys.readouterr().err
    assert not (tmp_path / "face-no-filter.png").exists()
