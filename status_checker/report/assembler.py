from collections.abc import Sequence

from status_checker.classification.models import FileStatus
from status_checker.config.run_config import SaveLogMode
from status_checker.logging.logger import Log
from status_checker.processor.models import BatchOutcome, ResultRecord

FULL_REPORT_HEADER = ("FILE_NAME", "FILE_CID", "FILE_SIZE", "FILE_ONCHAIN_STATUS", "FILE_REPLICAS")
ATTENTION_HEADER = ("FILE_NAME", "FILE_CID", "FILE_SIZE(INPUT FILE SIZE ONLY)")
FAILURE_HEADER = ("FILE_NAME", "FILE_CID", "FILE_SIZE(INPUT FILE SIZE ONLY)", "REASON")

ROW_SEPARATOR = "----"
TABLE_SEPARATOR = "===="

Row = tuple[str, ...]


def _join(row: Sequence[object]) -> str:
    return "\t".join(str(field) for field in row)


class ReportAssembler:
    """Builds the full report, attention list and failure list as text.

    The attention list holds files that are not Success or have fewer
    replicas than `min_replicas_count`.
    """

    def __init__(
        self,
        min_replicas_count: int,
        save_log_mode: SaveLogMode = SaveLogMode.DEFAULT,
    ) -> None:
        self._min_replicas_count = min_replicas_count
        self._save_log_mode = save_log_mode

    def full_report_rows(self, results: Sequence[ResultRecord]) -> list[Row]:
        return [
            (
                r.file_name,
                r.file_cid,
                r.display_size,
                r.status.value,
                str(r.replica_count),
            )
            for r in results
        ]

    def attention_rows(self, results: Sequence[ResultRecord]) -> list[Row]:
        return [
            (r.file_name, r.file_cid, str(r.input_size))
            for r in results
            if r.status != FileStatus.SUCCESS or r.replica_count < self._min_replicas_count
        ]

    def failure_rows(self, outcome: BatchOutcome) -> list[Row]:
        return [
            (e.parsed.file_name, e.parsed.file_cid, str(e.parsed.file_size), e.reason)
            for e in outcome.failed_queries
        ]

    def assemble(self, outcome: BatchOutcome) -> str | None:
        """Render the report text, or None when there is nothing to write."""
        attention = self.attention_rows(outcome.results)

        if self._save_log_mode == SaveLogMode.TABLE2:
            if not attention:
                Log.info("Attention list is empty, nothing to write in table2 mode")
                return None
            return "\n".join(_join(row) for row in attention)

        lines = self._table(FULL_REPORT_HEADER, self.full_report_rows(outcome.results))
        lines.append(TABLE_SEPARATOR)
        lines.extend(self._table(ATTENTION_HEADER, attention))

        failures = self.failure_rows(outcome)
        if failures:
            lines.append(TABLE_SEPARATOR)
            lines.extend(self._table(FAILURE_HEADER, failures))
        return "\n".join(lines)

    @staticmethod
    def _table(header: Row, rows: list[Row]) -> list[str]:
        return [_join(header), ROW_SEPARATOR, *(_join(row) for row in rows)]
