import pytest

from status_checker.chain.models import OnchainRecord


@pytest.fixture()
def onchain_records() -> dict[str, OnchainRecord]:
    """Records for a chain at height 1000: replicated, pending, expired."""
    return {
        "QmReplicated": OnchainRecord(file_size=2048, reported_replica_count=5, expired_at=5000),
        "QmPending": OnchainRecord(file_size=512, reported_replica_count=0, expired_at=5000),
        "QmExpired": OnchainRecord(file_size=4096, reported_replica_count=7, expired_at=900),
    }


@pytest.fixture()
def input_lines() -> list[str]:
    return [
        "holiday photos QmReplicated 2048",
        "notes.txt\tQmPending\t512",
        "archive QmExpired 4096",
        "missing file QmMissing 10",
        "garbage line without size",
        "",
    ]
