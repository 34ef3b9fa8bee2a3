from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from status_checker.config.settings import Settings


class SaveLogMode(str, Enum):
    DEFAULT = "default"
    TABLE2 = "table2"


def parse_boolean(value: str) -> bool:
    return value.strip().lower() == "true"


def resolve_save_enabled(
    save_log_mode: str | None,
    out: Path | None,
    save_log: str | None,
) -> bool:
    """Decide whether the report is saved to a file.

    An explicit --save-log-mode wins, then --out, then --save-log.
    """
    if save_log_mode is not None:
        return True
    if out is not None:
        return True
    if save_log is not None:
        return parse_boolean(save_log)
    return False


@dataclass(frozen=True)
class RunConfig:
    """Options for a single run, built once and passed down explicitly."""

    input_path: Path | None
    out_path: Path | None
    save_enabled: bool
    save_log_mode: SaveLogMode
    min_replicas_count: int
    address: str

    @classmethod
    def from_options(
        cls,
        settings: Settings,
        *,
        input_path: Path | None = None,
        out: Path | None = None,
        save_log: str | None = None,
        min_replicas_count: int | None = None,
        save_log_mode: str | None = None,
        address: str | None = None,
    ) -> "RunConfig":
        return cls(
            input_path=input_path,
            out_path=out,
            save_enabled=resolve_save_enabled(save_log_mode, out, save_log),
            save_log_mode=SaveLogMode(save_log_mode or SaveLogMode.DEFAULT.value),
            min_replicas_count=(
                min_replicas_count
                if min_replicas_count is not None
                else settings.min_replicas_count
            ),
            address=(address or settings.chain_address).rstrip("/"),
        )
