from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeSettings(BaseSettings):
    """Environment-driven defaults for the command line tools."""

    model_config = SettingsConfigDict(
        env_prefix="EC2DOMAIN_",
        extra="ignore",
        populate_by_name=True,
        case_sensitive=False,
    )

    default_region: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "EC2DOMAIN_DEFAULT_REGION",
            "EC2DOMAIN_REGION",
            "AWS_REGION",
            "AWS_DEFAULT_REGION",
        ),
    )
    log_level: str = "WARNING"
    output: Literal["json", "yaml", "table"] = "json"
    null_timestamps: Literal["error", "first", "last"] = "error"
