from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedLine:
    """One input line split into name, content identifier and claimed size."""

    file_name: str
    file_cid: str
    file_size: int
