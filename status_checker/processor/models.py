from dataclasses import dataclass, field

from status_checker.classification.models import FileStatus
from status_checker.parsing.models import ParsedLine

INCORRECT_FORMAT = "Incorrect format"


@dataclass(frozen=True)
class ResultRecord:
    """Outcome of a successful query for one input line."""

    file_name: str
    file_cid: str
    display_size: str
    status: FileStatus
    replica_count: int
    input_size: int


@dataclass(frozen=True)
class SkippedEntry:
    """An input line that produced no result.

    `parsed` is None when the line never parsed, and set when the line parsed
    but its query failed.
    """

    line_number: int
    raw_line: str
    reason: str
    parsed: ParsedLine | None = None


@dataclass
class BatchOutcome:
    """Accumulates results and skipped lines in input order."""

    current_height: int
    results: list[ResultRecord] = field(default_factory=list)
    skipped: list[SkippedEntry] = field(default_factory=list)

    @property
    def failed_queries(self) -> list[SkippedEntry]:
        return [entry for entry in self.skipped if entry.parsed is not None]
