from __future__ import annotations

from functools import cmp_to_key
from typing import Any

import pytest
from pydantic import ValidationError

from ec2domain.errors import MissingGroupIds, MissingInstances, MissingRegion, MissingReservationId
from ec2domain.models import Region, Reservation, RunningInstance


def _reservation(**overrides: Any) -> Reservation:
    fields: dict[str, Any] = {
        "region": "us-east-1",
        "group_ids": ["default"],
        "instances": [],
        "owner_id": "123456789012",
        "requester_id": None,
        "reservation_id": "r-1",
    }
    fields.update(overrides)
    return Reservation(**fields)


def test_instance_order_does_not_affect_equality(inst1: RunningInstance, inst2: RunningInstance) -> None:
    first = _reservation(instances=[inst1, inst2])
    second = _reservation(instances=[inst2, inst1])

    assert first == second
    assert hash(first) == hash(second)
    assert first.instances == frozenset({inst1, inst2})
    assert first.running_instances is first.instances


def test_group_order_and_duplicates_are_ignored() -> None:
    first = _reservation(group_ids=["web", "default", "web"])
    second = _reservation(group_ids=("default", "web"))

    assert first == second
    assert first.group_ids == frozenset({"default", "web"})


def test_accessors_return_supplied_values(region: Region, inst1: RunningInstance) -> None:
    reservation = Reservation(
        region=region,
        group_ids={"default"},
        instances={inst1},
        owner_id="owner",
        requester_id="requester",
        reservation_id="r-9",
    )
    assert reservation.region == region
    assert reservation.group_ids == {"default"}
    assert reservation.instances == {inst1}
    assert reservation.owner_id == "owner"
    assert reservation.requester_id == "requester"
    assert reservation.reservation_id == "r-9"


@pytest.mark.parametrize(
    ("field", "error"),
    [
        ("region", MissingRegion),
        ("group_ids", MissingGroupIds),
        ("instances", MissingInstances),
    ],
)
def test_required_fields_reject_null(field: str, error: type[Exception]) -> None:
    with pytest.raises(error):
        _reservation(**{field: None})


def test_missing_instances_key_is_rejected() -> None:
    with pytest.raises(MissingInstances):
        Reservation(region="us-east-1", group_ids=[])


def test_empty_collections_are_allowed() -> None:
    reservation = _reservation(group_ids=[], instances=[], owner_id=None, reservation_id=None)
    assert reservation.group_ids == frozenset()
    assert reservation.instances == frozenset()
    assert reservation.reservation_id is None


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("region", "eu-west-1"),
        ("group_ids", ["other"]),
        ("owner_id", None),
        ("requester_id", "someone"),
        ("reservation_id", "r-2"),
    ],
)
def test_every_field_takes_part_in_equality(field: str, value: Any) -> None:
    assert _reservation() != _reservation(**{field: value})


def test_instances_take_part_in_equality(inst1: RunningInstance, inst2: RunningInstance) -> None:
    assert _reservation(instances=[inst1]) != _reservation(instances=[inst1, inst2])


def test_collections_cannot_be_mutated(inst1: RunningInstance) -> None:
    reservation = _reservation(instances=[inst1])
    with pytest.raises(AttributeError):
        reservation.group_ids.add("other")  # type: ignore[attr-defined]
    with pytest.raises(ValidationError):
        reservation.reservation_id = "r-2"  # type: ignore[misc]


def test_instances_from_another_region_are_trusted(inst1: RunningInstance) -> None:
    reservation = _reservation(region="eu-west-1", instances=[inst1])
    assert reservation.region == Region("eu-west-1")
    assert inst1 in reservation.instances


def test_compare_by_reservation_id() -> None:
    first = _reservation(reservation_id="r-1", owner_id="zzz")
    second = _reservation(reservation_id="r-2", owner_id="aaa")

    assert first.compare(second) == -1
    assert second.compare(first) == 1
    assert first.compare(_reservation(reservation_id="r-1", group_ids=["other"])) == 0
    assert first < second
    assert sorted([second, first]) == [first, second]


def test_compare_with_self_skips_reservation_id_check() -> None:
    placeholder = _reservation(reservation_id=None)

    assert placeholder.compare(placeholder) == 0
    assert sorted([placeholder, placeholder], key=cmp_to_key(Reservation.compare)) == [placeholder, placeholder]


def test_compare_distinct_reservations_requires_ids() -> None:
    placeholder = _reservation(reservation_id=None)
    twin = _reservation(reservation_id=None)
    populated = _reservation(reservation_id="r-1")

    assert placeholder == twin
    with pytest.raises(MissingReservationId):
        placeholder.compare(twin)
    with pytest.raises(MissingReservationId):
        placeholder.compare(populated)
    with pytest.raises(MissingReservationId):
        populated.compare(placeholder)


def test_rendering_is_deterministic_and_labelled(inst1: RunningInstance, inst2: RunningInstance) -> None:
    first = _reservation(group_ids=["web", "default"], instances=[inst2, inst1])
    second = _reservation(group_ids=["default", "web"], instances=[inst1, inst2])

    rendered = str(first)
    assert rendered == str(second)
    assert rendered == (
        "Reservation [region=us-east-1, groupIds=[default, web], instances=[i-1, i-2], "
        "ownerId=123456789012, requesterId=None, reservationId=r-1]"
    )


def test_dump_lists_members_in_stable_order(inst1: RunningInstance, inst2: RunningInstance) -> None:
    dumped = _reservation(group_ids=["web", "default"], instances=[inst2, inst1]).model_dump(mode="json")

    assert dumped["region"] == "us-east-1"
    assert dumped["group_ids"] == ["default", "web"]
    assert [item["instance_id"] for item in dumped["instances"]] == ["i-1", "i-2"]


def test_instances_differing_outside_id_dump_in_stable_order(region: Region) -> None:
    first = RunningInstance(region=region, instance_id="i-1", key_name="b-key")
    second = RunningInstance(region=region, instance_id="i-1", key_name="a-key")
    forward = Reservation(region=region, group_ids=["default"], instances=[first, second])
    backward = Reservation(region=region, group_ids=["default"], instances=[second, first])

    dumped = forward.model_dump(mode="json")["instances"]

    assert [instance["key_name"] for instance in dumped] == ["a-key", "b-key"]
    assert backward.model_dump_json() == forward.model_dump_json()
