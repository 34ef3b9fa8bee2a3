from dataclasses import dataclass
from enum import Enum


class FileStatus(str, Enum):
    """On-chain order status of a file."""

    NOT_FOUND = "NotFound"
    PENDING = "Pending"
    SUCCESS = "Success"
    EXPIRED = "Expired"


@dataclass(frozen=True)
class Classification:
    """Status, replica count and on-chain size label for one record."""

    status: FileStatus
    replica_count: int
    onchain_size_display: str
