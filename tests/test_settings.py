from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from ec2domain.log import LOGGER_NAME, configure_logging
from ec2domain.settings import RuntimeSettings


def _clear_region_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("EC2DOMAIN_DEFAULT_REGION", "EC2DOMAIN_REGION", "AWS_REGION", "AWS_DEFAULT_REGION"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_region_env(monkeypatch)
    monkeypatch.delenv("EC2DOMAIN_OUTPUT", raising=False)
    monkeypatch.delenv("EC2DOMAIN_NULL_TIMESTAMPS", raising=False)
    monkeypatch.delenv("EC2DOMAIN_LOG_LEVEL", raising=False)

    settings = RuntimeSettings()
    assert settings.default_region is None
    assert settings.output == "json"
    assert settings.null_timestamps == "error"
    assert settings.log_level == "WARNING"


def test_region_env_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_region_env(monkeypatch)
    monkeypatch.setenv("AWS_DEFAULT_REGION", "ap-southeast-1")
    assert RuntimeSettings().default_region == "ap-southeast-1"

    monkeypatch.setenv("EC2DOMAIN_DEFAULT_REGION", "us-west-1")
    assert RuntimeSettings().default_region == "us-west-1"


def test_prefixed_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EC2DOMAIN_OUTPUT", "table")
    monkeypatch.setenv("EC2DOMAIN_NULL_TIMESTAMPS", "last")
    monkeypatch.setenv("EC2DOMAIN_LOG_LEVEL", "debug")

    settings = RuntimeSettings()
    assert settings.output == "table"
    assert settings.null_timestamps == "last"
    assert settings.log_level == "debug"


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging("debug")
    configure_logging(logging.INFO)

    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
    assert sum(isinstance(handler, RichHandler) for handler in logger.handlers) == 1
