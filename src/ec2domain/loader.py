from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

import yaml

from ec2domain.errors import PayloadError

Document = dict[str, Any] | list[Any]


def decode_document(raw: str, *, suffix: str) -> Document:
    if suffix in {".yaml", ".yml"}:
        parsed = yaml.safe_load(raw)
    elif suffix == ".json":
        parsed = json.loads(raw)
    elif suffix == ".toml":
        parsed = tomllib.loads(raw)
    else:
        # Extension-less captures: TOML, then YAML, then JSON.
        for decode in (tomllib.loads, yaml.safe_load, json.loads):
            try:
                parsed = decode(raw)
                break
            except (ValueError, yaml.YAMLError):
                continue
        else:
            raise PayloadError("failed to auto-detect document format (expected yaml/json/toml)")

    if not isinstance(parsed, (dict, list)):
        raise PayloadError("document must decode to an object/map or a list")
    return parsed


def load_document(path: str | Path) -> Document:
    """Read a captured, already-decoded API response from disk."""

    target = Path(path).expanduser()
    try:
        raw = target.read_text(encoding="utf-8")
        return decode_document(raw, suffix=target.suffix.lower())
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise PayloadError(f"failed to read document '{target}': {exc}") from exc
