from status_checker.chain.models import OnchainRecord
from status_checker.classification.models import Classification, FileStatus

UNKNOWN_SIZE = "Unknown"


def classify(record: OnchainRecord, current_height: int) -> Classification:
    """Turn an on-chain record into a status at the given block height.

    Expiry is checked before replicas: an expired order is reported Expired
    even when providers still hold replicas.
    """
    if record.file_size is None:
        return Classification(
            status=FileStatus.NOT_FOUND,
            replica_count=0,
            onchain_size_display=UNKNOWN_SIZE,
        )

    replica_count = record.reported_replica_count or 0
    if current_height >= record.expired_at:
        status = FileStatus.EXPIRED
    elif replica_count > 0:
        status = FileStatus.SUCCESS
    else:
        status = FileStatus.PENDING

    return Classification(
        status=status,
        replica_count=replica_count,
        onchain_size_display=str(record.file_size),
    )
