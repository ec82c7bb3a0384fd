"""Volume attachment snapshots."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import AliasChoices, Field, field_validator

from ec2domain.errors import InvalidStatus, MissingRegion, NullTimestamp
from ec2domain.models.common import DomainModel, Region, render, sign


class AttachmentStatus(StrEnum):
    """Attachment state as reported by the provider.

    A snapshot vocabulary only: transition legality belongs to the provider.
    """

    ATTACHING = "attaching"
    ATTACHED = "attached"
    DETACHING = "detaching"
    DETACHED = "detached"
    BUSY = "busy"

    def to_token(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: str | None) -> AttachmentStatus:
        if not isinstance(token, str):
            raise InvalidStatus(token)
        try:
            return cls[token.upper()]
        except KeyError:
            raise InvalidStatus(token) from None


class Attachment(DomainModel):
    """One reported relationship between a volume and an instance."""

    required_errors = {"region": MissingRegion}

    region: Region
    volume_id: str | None = Field(default=None, validation_alias=AliasChoices("volume_id", "volumeId", "VolumeId"))
    instance_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("instance_id", "instanceId", "InstanceId"),
    )
    device: str | None = Field(default=None, validation_alias=AliasChoices("device", "Device"))
    status: AttachmentStatus | None = Field(
        default=None,
        validation_alias=AliasChoices("status", "Status", "State"),
    )
    attach_time: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("attach_time", "attachTime", "AttachTime"),
    )

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, value: Any) -> Any:
        if value is None or isinstance(value, AttachmentStatus):
            return value
        return AttachmentStatus.from_token(value)

    @field_validator("attach_time")
    @classmethod
    def normalize_attach_time(cls, value: datetime | None) -> datetime | None:
        # Naive timestamps are UTC.
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def compare(self, other: Attachment) -> int:
        """Order by attach time; both sides must carry one."""

        if self.attach_time is None or other.attach_time is None:
            raise NullTimestamp(
                f"cannot order attachments without attach_time: {self.volume_id!r} vs {other.volume_id!r}"
            )
        return sign(self.attach_time, other.attach_time)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Attachment):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Attachment):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Attachment):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Attachment):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return render(
            "Attachment",
            [
                ("region", self.region),
                ("volumeId", self.volume_id),
                ("instanceId", self.instance_id),
                ("device", self.device),
                ("attachTime", self.attach_time.isoformat() if self.attach_time else None),
                ("status", self.status),
            ],
        )
