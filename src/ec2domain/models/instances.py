from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, Field

from ec2domain.errors import MissingRegion
from ec2domain.models.common import DomainModel, Region, render


class RunningInstance(DomainModel):
    """Instance description carried inside a reservation."""

    required_errors = {"region": MissingRegion}

    region: Region
    instance_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("instance_id", "instanceId", "InstanceId"),
    )
    image_id: str | None = Field(default=None, validation_alias=AliasChoices("image_id", "imageId", "ImageId"))
    instance_type: str | None = Field(
        default=None,
        validation_alias=AliasChoices("instance_type", "instanceType", "InstanceType"),
    )
    state: str | None = None
    key_name: str | None = Field(default=None, validation_alias=AliasChoices("key_name", "keyName", "KeyName"))
    availability_zone: str | None = Field(
        default=None,
        validation_alias=AliasChoices("availability_zone", "availabilityZone", "AvailabilityZone"),
    )
    private_dns_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("private_dns_name", "privateDnsName", "PrivateDnsName"),
    )
    dns_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("dns_name", "dnsName", "PublicDnsName"),
    )
    launch_time: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("launch_time", "launchTime", "LaunchTime"),
    )

    def __str__(self) -> str:
        return render(
            "RunningInstance",
            [
                ("region", self.region),
                ("instanceId", self.instance_id),
                ("imageId", self.image_id),
                ("instanceType", self.instance_type),
                ("state", self.state),
                ("availabilityZone", self.availability_zone),
            ],
        )
