from ec2domain.models.attachments import Attachment, AttachmentStatus
from ec2domain.models.common import KNOWN_REGIONS, DomainModel, Region
from ec2domain.models.instances import RunningInstance
from ec2domain.models.reservations import Reservation

__all__ = [
    "Attachment",
    "AttachmentStatus",
    "DomainModel",
    "KNOWN_REGIONS",
    "Region",
    "Reservation",
    "RunningInstance",
]
