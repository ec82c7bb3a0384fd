from __future__ import annotations

from dataclasses import dataclass


class EC2DomainError(Exception):
    """Base error type for the ec2domain package."""


class MissingFieldError(EC2DomainError):
    """Raised when a resource is constructed without a required field."""

    field = ""

    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(f"{resource}: {self.field} must not be null")


class MissingRegion(MissingFieldError):
    field = "region"


class MissingGroupIds(MissingFieldError):
    field = "group_ids"


class MissingInstances(MissingFieldError):
    field = "instances"


@dataclass(slots=True)
class InvalidStatus(EC2DomainError):
    """Raised for an attachment status token outside the known vocabulary."""

    token: str | None

    def __str__(self) -> str:
        return f"invalid attachment status: {self.token!r}"


class OrderingError(EC2DomainError):
    """Raised when a resource lacks the field its natural ordering needs."""


class NullTimestamp(OrderingError):
    """Raised when ordering attachments that have no attach time."""


class MissingReservationId(OrderingError):
    """Raised when ordering distinct reservations without a reservation id."""


class PayloadError(EC2DomainError):
    """Raised when a decoded response or input document has the wrong shape."""
