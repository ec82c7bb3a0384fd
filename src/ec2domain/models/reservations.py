"""Reservation aggregate: the instances launched by one run-instances call."""

from __future__ import annotations

from pydantic import AliasChoices, Field, field_serializer

from ec2domain.errors import MissingGroupIds, MissingInstances, MissingRegion, MissingReservationId
from ec2domain.models.common import DomainModel, Region, render, sign
from ec2domain.models.instances import RunningInstance


def _instance_key(instance: RunningInstance) -> str:
    return instance.model_dump_json()


class Reservation(DomainModel):
    """Point-in-time aggregate of instances sharing one launch batch.

    Group ids and instances are frozen sets, so two reservations built from the
    same members in a different order are equal. Contained instances are trusted
    to share the reservation's region; that is not re-checked here.
    """

    required_errors = {
        "region": MissingRegion,
        "group_ids": MissingGroupIds,
        "instances": MissingInstances,
    }

    region: Region
    group_ids: frozenset[str] = Field(validation_alias=AliasChoices("group_ids", "groupIds"))
    instances: frozenset[RunningInstance] = Field(
        validation_alias=AliasChoices("instances", "running_instances", "runningInstances"),
    )
    owner_id: str | None = Field(default=None, validation_alias=AliasChoices("owner_id", "ownerId", "OwnerId"))
    requester_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("requester_id", "requesterId", "RequesterId"),
    )
    reservation_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("reservation_id", "reservationId", "ReservationId"),
    )

    @property
    def running_instances(self) -> frozenset[RunningInstance]:
        return self.instances

    @field_serializer("group_ids")
    def serialize_group_ids(self, group_ids: frozenset[str]) -> list[str]:
        return sorted(group_ids)

    @field_serializer("instances")
    def serialize_instances(self, instances: frozenset[RunningInstance]) -> list[RunningInstance]:
        return sorted(instances, key=_instance_key)

    def compare(self, other: Reservation) -> int:
        # Identity short-circuits before the id check; callers sorting lists
        # that repeat an unpopulated placeholder rely on it.
        if self is other:
            return 0
        if self.reservation_id is None or other.reservation_id is None:
            raise MissingReservationId(
                f"cannot order reservations without reservation_id: {self.reservation_id!r} vs {other.reservation_id!r}"
            )
        return sign(self.reservation_id, other.reservation_id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Reservation):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Reservation):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Reservation):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Reservation):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self) -> str:
        instance_ids = sorted(str(instance.instance_id) for instance in self.instances)
        return render(
            "Reservation",
            [
                ("region", self.region),
                ("groupIds", "[" + ", ".join(sorted(self.group_ids)) + "]"),
                ("instances", "[" + ", ".join(instance_ids) + "]"),
                ("ownerId", self.owner_id),
                ("requesterId", self.requester_id),
                ("reservationId", self.reservation_id),
            ],
        )
