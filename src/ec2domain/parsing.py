"""Map decoded compute API responses onto snapshot models.

Payloads arrive already deserialized: either the query-API shape, where
collections are ``...Set`` keys optionally wrapped as ``{"item": [...]}``, or
the capitalized shape returned by boto-style clients (``Volumes``,
``Reservations``, ``Instances``). Only key names are mapped here; field values
are validated by the models themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ec2domain.errors import PayloadError
from ec2domain.models import Attachment, Region, Reservation, RunningInstance

logger = logging.getLogger(__name__)

RegionInput = Region | str | None


def _mapping(value: Any, *, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise PayloadError(f"expected {what} to be a mapping, got {type(value).__name__}")
    return value


def _collection(payload: Mapping[str, Any], *keys: str) -> list[Any] | None:
    """Return the first collection present under ``keys``, or ``None``."""

    for key in keys:
        if key not in payload:
            continue
        value = payload[key]
        if isinstance(value, Mapping) and "item" in value:
            value = value["item"]
        if value is None:
            return []
        if isinstance(value, Mapping):
            return [value]
        if isinstance(value, (list, tuple)):
            return list(value)
        raise PayloadError(f"expected '{key}' to be a list, got {type(value).__name__}")
    return None


def _first(payload: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def parse_attachment(item: Any, *, region: RegionInput) -> Attachment:
    data = dict(_mapping(item, what="attachment"))
    data["region"] = region
    return Attachment.model_validate(data)


def parse_attachments(payload: Any, *, region: RegionInput) -> list[Attachment]:
    """Collect attachments from a describe-volumes response.

    Accepts a full response, a single volume with its attachment set, or a
    plain list of attachment mappings. Attachments that omit the volume id
    inherit it from their enclosing volume.
    """

    if isinstance(payload, (list, tuple)):
        attachments = [parse_attachment(item, region=region) for item in payload]
        logger.debug("parsed %d attachments for region %s", len(attachments), region)
        return attachments

    body = _mapping(payload, what="describe-volumes response")
    volumes = _collection(body, "volumeSet", "Volumes")
    if volumes is None:
        if _collection(body, "attachmentSet", "Attachments") is None:
            return [parse_attachment(body, region=region)]
        volumes = [body]

    attachments: list[Attachment] = []
    for volume in volumes:
        volume_body = _mapping(volume, what="volume")
        volume_id = _first(volume_body, "volumeId", "VolumeId")
        for item in _collection(volume_body, "attachmentSet", "Attachments") or []:
            data = dict(_mapping(item, what="attachment"))
            if volume_id is not None and _first(data, "volume_id", "volumeId", "VolumeId") is None:
                data["volumeId"] = volume_id
            attachments.append(parse_attachment(data, region=region))

    logger.debug("parsed %d attachments from %d volumes for region %s", len(attachments), len(volumes), region)
    return attachments


def parse_running_instance(item: Any, *, region: RegionInput) -> RunningInstance:
    data = dict(_mapping(item, what="instance"))

    state = data.pop("instanceState", None)
    state = data.pop("State", None) if state is None else state
    if isinstance(state, Mapping):
        data["state"] = _first(state, "name", "Name")
    elif state is not None:
        data["state"] = state

    placement = data.pop("placement", None)
    placement = data.pop("Placement", None) if placement is None else placement
    if isinstance(placement, Mapping):
        data["availability_zone"] = _first(placement, "availabilityZone", "AvailabilityZone")

    data["region"] = region
    return RunningInstance.model_validate(data)


def _group_id(group: Any) -> str:
    if isinstance(group, str):
        return group
    body = _mapping(group, what="security group")
    value = _first(body, "groupId", "GroupName", "GroupId")
    if not isinstance(value, str):
        raise PayloadError(f"security group entry has no name or id: {dict(body)!r}")
    return value


def parse_reservation(item: Any, *, region: RegionInput) -> Reservation:
    data = dict(_mapping(item, what="reservation"))

    groups = _collection(data, "groupSet", "Groups")
    if groups is not None:
        data["group_ids"] = [_group_id(group) for group in groups]

    instances = _collection(data, "instancesSet", "Instances")
    if instances is not None:
        data["instances"] = [parse_running_instance(instance, region=region) for instance in instances]

    data["region"] = region
    return Reservation.model_validate(data)


def parse_reservations(payload: Any, *, region: RegionInput) -> list[Reservation]:
    """Collect reservations from a describe-instances or run-instances response."""

    if isinstance(payload, (list, tuple)):
        items: list[Any] = list(payload)
    else:
        body = _mapping(payload, what="describe-instances response")
        found = _collection(body, "reservationSet", "Reservations")
        items = [body] if found is None else found

    reservations = [parse_reservation(item, region=region) for item in items]
    logger.debug("parsed %d reservations for region %s", len(reservations), region)
    return reservations
