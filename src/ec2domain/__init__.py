from ec2domain.errors import (
    EC2DomainError,
    InvalidStatus,
    MissingFieldError,
    MissingGroupIds,
    MissingInstances,
    MissingRegion,
    MissingReservationId,
    NullTimestamp,
    OrderingError,
    PayloadError,
)
from ec2domain.models import Attachment, AttachmentStatus, Region, Reservation, RunningInstance
from ec2domain.ordering import group_by_region, latest_attachment, sort_attachments, sort_reservations
from ec2domain.parsing import (
    parse_attachment,
    parse_attachments,
    parse_reservation,
    parse_reservations,
    parse_running_instance,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Attachment",
    "AttachmentStatus",
    "EC2DomainError",
    "InvalidStatus",
    "MissingFieldError",
    "MissingGroupIds",
    "MissingInstances",
    "MissingRegion",
    "MissingReservationId",
    "NullTimestamp",
    "OrderingError",
    "PayloadError",
    "Region",
    "Reservation",
    "RunningInstance",
    "group_by_region",
    "latest_attachment",
    "parse_attachment",
    "parse_attachments",
    "parse_reservation",
    "parse_reservations",
    "parse_running_instance",
    "sort_attachments",
    "sort_reservations",
]
