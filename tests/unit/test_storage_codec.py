import pytest

from status_checker.chain.exceptions import ChainQueryError
from status_checker.chain.models import OnchainRecord
from status_checker.chain.storage_codec import (
    decode_file_info,
    encode_bytes,
    encode_compact,
    files_v2_storage_key,
    twox64,
    twox128,
)

CID = "QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG"


def _file_info_bytes(file_size: int, expired_at: int, replicas: int) -> bytes:
    return b"".join(
        [
            file_size.to_bytes(8, "little"),
            (file_size * 2).to_bytes(8, "little"),  # spower
            expired_at.to_bytes(4, "little"),
            (expired_at - 10).to_bytes(4, "little"),  # calculated_at
            (10**12).to_bytes(16, "little"),  # amount
            (5 * 10**11).to_bytes(16, "little"),  # prepaid
            replicas.to_bytes(4, "little"),
            (0).to_bytes(4, "little"),  # remaining_paid_count
            b"\x00",  # empty replicas map
        ]
    )


class TestHashing:
    def test_twox128_known_prefixes(self) -> None:
        assert twox128(b"System").hex() == "26aa394eea5630e07c48ae0c9558cef7"
        assert twox128(b"Account").hex() == "b99d880ec681799c0cf30e8886371da9"

    def test_twox64_is_first_half_of_twox128(self) -> None:
        assert twox64(b"Market") == twox128(b"Market")[:8]


class TestCompactEncoding:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, b"\x00"),
            (1, b"\x04"),
            (63, b"\xfc"),
            (64, b"\x01\x01"),
            (16383, b"\xfd\xff"),
            (16384, b"\x02\x00\x01\x00"),
            (2**30, b"\x03\x00\x00\x00\x40"),
        ],
    )
    def test_encodes(self, value: int, expected: bytes) -> None:
        assert encode_compact(value) == expected

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            encode_compact(-1)

    def test_bytes_are_length_prefixed(self) -> None:
        assert encode_bytes(b"abc") == b"\x0cabc"


class TestStorageKey:
    def test_layout(self) -> None:
        key = files_v2_storage_key(CID)
        encoded = encode_bytes(CID.encode())

        prefix = "0x" + (twox128(b"Market") + twox128(b"FilesV2")).hex()
        assert key.startswith(prefix)
        assert key.endswith(encoded.hex())
        assert key[len(prefix) : len(prefix) + 16] == twox64(encoded).hex()
        assert len(key) == 2 + 2 * (32 + 8 + len(encoded))


class TestDecodeFileInfo:
    def test_none_is_not_found(self) -> None:
        assert decode_file_info(None) == OnchainRecord()

    def test_decodes_head_fields(self) -> None:
        value = "0x" + _file_info_bytes(file_size=123456, expired_at=4_000_000, replicas=12).hex()

        record = decode_file_info(value)

        assert record == OnchainRecord(
            file_size=123456, reported_replica_count=12, expired_at=4_000_000
        )

    def test_truncated_value_raises(self) -> None:
        with pytest.raises(ChainQueryError, match="too short"):
            decode_file_info("0x" + "00" * 20)

    def test_non_hex_value_raises(self) -> None:
        with pytest.raises(ChainQueryError, match="not hex"):
            decode_file_info("0xzz")
