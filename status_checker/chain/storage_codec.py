"""Storage key hashing and SCALE decoding for Crust `market.filesV2`.

FilesV2 is a `twox_64_concat` map keyed by the cid bytes (`Vec<u8>`). Its value
starts with fixed-width little-endian fields:

    file_size u64, spower u64, expired_at u32, calculated_at u32,
    amount u128, prepaid u128, reported_replica_count u32,
    remaining_paid_count u32, replicas BTreeMap<..>

Only the fixed-width head is decoded.
"""

import xxhash

from status_checker.chain.exceptions import ChainQueryError
from status_checker.chain.models import OnchainRecord

PALLET = b"Market"
STORAGE_ITEM = b"FilesV2"

_FILE_SIZE = slice(0, 8)
_EXPIRED_AT = slice(16, 20)
_REPORTED_REPLICA_COUNT = slice(56, 60)
FILE_INFO_HEAD_SIZE = 64


def twox64(data: bytes) -> bytes:
    return xxhash.xxh64(data, seed=0).intdigest().to_bytes(8, "little")


def twox128(data: bytes) -> bytes:
    return b"".join(
        xxhash.xxh64(data, seed=seed).intdigest().to_bytes(8, "little")
        for seed in (0, 1)
    )


def encode_compact(value: int) -> bytes:
    """SCALE compact encoding of a non-negative integer."""
    if value < 0:
        raise ValueError("compact values must be non-negative")
    if value < 1 << 6:
        return (value << 2).to_bytes(1, "little")
    if value < 1 << 14:
        return ((value << 2) | 0b01).to_bytes(2, "little")
    if value < 1 << 30:
        return ((value << 2) | 0b10).to_bytes(4, "little")
    raw = value.to_bytes((value.bit_length() + 7) // 8, "little")
    return bytes([((len(raw) - 4) << 2) | 0b11]) + raw


def encode_bytes(data: bytes) -> bytes:
    """SCALE encoding of `Vec<u8>`: compact length prefix then the bytes."""
    return encode_compact(len(data)) + data


def files_v2_storage_key(cid: str) -> str:
    """Hex storage key for `market.filesV2(cid)`."""
    encoded = encode_bytes(cid.encode("utf-8"))
    key = twox128(PALLET) + twox128(STORAGE_ITEM) + twox64(encoded) + encoded
    return "0x" + key.hex()


def decode_file_info(value: str | None) -> OnchainRecord:
    """Decode a hex `FileInfoV2` value; None means the cid has no order."""
    if value is None:
        return OnchainRecord()
    try:
        raw = bytes.fromhex(value.removeprefix("0x"))
    except ValueError as exc:
        raise ChainQueryError(f"Storage value is not hex: {exc}") from exc
    if len(raw) < FILE_INFO_HEAD_SIZE:
        raise ChainQueryError(
            f"Storage value too short: {len(raw)} bytes, need {FILE_INFO_HEAD_SIZE}"
        )
    return OnchainRecord(
        file_size=int.from_bytes(raw[_FILE_SIZE], "little"),
        reported_replica_count=int.from_bytes(raw[_REPORTED_REPLICA_COUNT], "little"),
        expired_at=int.from_bytes(raw[_EXPIRED_AT], "little"),
    )
