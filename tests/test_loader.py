from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from ec2domain.errors import PayloadError
from ec2domain.loader import decode_document, load_document

PAYLOAD = {"volumeSet": {"item": [{"volumeId": "vol-1", "attachmentSet": None}]}}


def test_load_json_and_yaml(tmp_path: Path) -> None:
    json_path = tmp_path / "volumes.json"
    json_path.write_text(json.dumps(PAYLOAD), encoding="utf-8")
    yaml_path = tmp_path / "volumes.yml"
    yaml_path.write_text(yaml.safe_dump(PAYLOAD), encoding="utf-8")

    assert load_document(json_path) == PAYLOAD
    assert load_document(yaml_path) == PAYLOAD


def test_load_toml(tmp_path: Path) -> None:
    path = tmp_path / "reservation.toml"
    path.write_text('reservationId = "r-1"\ngroupIds = ["default"]\ninstances = []\n', encoding="utf-8")

    assert load_document(path) == {"reservationId": "r-1", "groupIds": ["default"], "instances": []}


def test_extensionless_document_is_detected(tmp_path: Path) -> None:
    path = tmp_path / "capture"
    path.write_text(json.dumps([{"volumeId": "vol-1"}]), encoding="utf-8")

    assert load_document(path) == [{"volumeId": "vol-1"}]


def test_scalar_document_is_rejected() -> None:
    with pytest.raises(PayloadError):
        decode_document("just text", suffix=".yaml")


def test_missing_or_broken_file(tmp_path: Path) -> None:
    with pytest.raises(PayloadError):
        load_document(tmp_path / "absent.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(PayloadError):
        load_document(broken)
