"""Listing helpers built on the natural ordering of snapshots."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key
from typing import Literal, Protocol, TypeVar

from ec2domain.models import Attachment, Region, Reservation

NullPolicy = Literal["error", "first", "last"]
NULL_POLICIES: tuple[NullPolicy, ...] = ("error", "first", "last")


class RegionScoped(Protocol):
    @property
    def region(self) -> Region: ...


T = TypeVar("T", bound=RegionScoped)


def sort_attachments(items: Iterable[Attachment], *, nulls: NullPolicy = "error") -> list[Attachment]:
    """Sort attachments by attach time.

    ``nulls`` decides where attachments without an attach time go. The default
    ``"error"`` lets :class:`~ec2domain.errors.NullTimestamp` escape.
    """

    if nulls not in NULL_POLICIES:
        raise ValueError(f"unknown null timestamp policy: {nulls}")

    attachments = list(items)
    if nulls == "error":
        return sorted(attachments, key=cmp_to_key(Attachment.compare))

    dated = sorted(
        (item for item in attachments if item.attach_time is not None),
        key=cmp_to_key(Attachment.compare),
    )
    undated = [item for item in attachments if item.attach_time is None]
    if nulls == "first":
        return undated + dated
    return dated + undated


def sort_reservations(items: Iterable[Reservation]) -> list[Reservation]:
    return sorted(items, key=cmp_to_key(Reservation.compare))


def latest_attachment(items: Iterable[Attachment]) -> Attachment | None:
    return max(items, key=cmp_to_key(Attachment.compare), default=None)


def group_by_region(items: Iterable[T]) -> dict[Region, list[T]]:
    grouped: dict[Region, list[T]] = {}
    for item in items:
        grouped.setdefault(item.region, []).append(item)
    return grouped
