from dataclasses import dataclass


@dataclass(frozen=True)
class OnchainRecord:
    """Normalized `market.filesV2` entry. file_size is None when not found."""

    file_size: int | None = None
    reported_replica_count: int = 0
    expired_at: int = 0


NOT_FOUND = OnchainRecord()
