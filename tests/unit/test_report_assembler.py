from status_checker.classification.models import FileStatus
from status_checker.config.run_config import SaveLogMode
from status_checker.parsing.models import ParsedLine
from status_checker.processor.models import BatchOutcome, ResultRecord, SkippedEntry
from status_checker.report.assembler import ReportAssembler


def _make_result(
    name: str = "file",
    cid: str = "QmA",
    status: FileStatus = FileStatus.SUCCESS,
    replicas: int = 2,
    input_size: int = 100,
) -> ResultRecord:
    return ResultRecord(
        file_name=name,
        file_cid=cid,
        display_size=f"100 ({input_size})",
        status=status,
        replica_count=replicas,
        input_size=input_size,
    )


def _make_outcome(
    results: list[ResultRecord] | None = None,
    skipped: list[SkippedEntry] | None = None,
) -> BatchOutcome:
    return BatchOutcome(current_height=1, results=results or [], skipped=skipped or [])


class TestAttentionRows:
    def test_under_replicated_success_is_listed(self) -> None:
        assembler = ReportAssembler(min_replicas_count=3)
        assert assembler.attention_rows([_make_result(replicas=2)]) == [("file", "QmA", "100")]

    def test_success_at_threshold_is_not_listed(self) -> None:
        assembler = ReportAssembler(min_replicas_count=2)
        assert assembler.attention_rows([_make_result(replicas=2)]) == []

    def test_non_success_always_listed(self) -> None:
        assembler = ReportAssembler(min_replicas_count=0)
        results = [
            _make_result(cid="QmP", status=FileStatus.PENDING, replicas=0),
            _make_result(cid="QmE", status=FileStatus.EXPIRED, replicas=9),
            _make_result(cid="QmN", status=FileStatus.NOT_FOUND, replicas=0),
        ]
        assert [row[1] for row in assembler.attention_rows(results)] == ["QmP", "QmE", "QmN"]

    def test_uses_input_size_only(self) -> None:
        assembler = ReportAssembler(min_replicas_count=3)
        row = assembler.attention_rows([_make_result(input_size=777)])[0]
        assert row[2] == "777"


class TestFailureRows:
    def test_only_parsed_entries_are_listed(self) -> None:
        skipped = [
            SkippedEntry(line_number=1, raw_line="junk", reason="Incorrect format"),
            SkippedEntry(
                line_number=2,
                raw_line="f QmF 9",
                reason="node timeout",
                parsed=ParsedLine("f", "QmF", 9),
            ),
        ]
        outcome = _make_outcome(skipped=skipped)

        rows = ReportAssembler(min_replicas_count=3).failure_rows(outcome)

        assert rows == [("f", "QmF", "9", "node timeout")]
        assert outcome.failed_queries == [skipped[1]]


class TestDefaultMode:
    def test_two_tables_without_failures(self) -> None:
        outcome = _make_outcome([_make_result(replicas=5), _make_result(cid="QmB", replicas=1)])

        report = ReportAssembler(min_replicas_count=3).assemble(outcome)

        assert report == "\n".join(
            [
                "FILE_NAME\tFILE_CID\tFILE_SIZE\tFILE_ONCHAIN_STATUS\tFILE_REPLICAS",
                "----",
                "file\tQmA\t100 (100)\tSuccess\t5",
                "file\tQmB\t100 (100)\tSuccess\t1",
                "====",
                "FILE_NAME\tFILE_CID\tFILE_SIZE(INPUT FILE SIZE ONLY)",
                "----",
                "file\tQmB\t100",
            ]
        )

    def test_failure_table_appended_when_present(self) -> None:
        skipped = [
            SkippedEntry(
                line_number=1,
                raw_line="f QmF 9",
                reason="node timeout",
                parsed=ParsedLine("f", "QmF", 9),
            )
        ]
        report = ReportAssembler(min_replicas_count=3).assemble(_make_outcome(skipped=skipped))

        assert report is not None
        lines = report.split("\n")
        assert lines.count("====") == 2
        assert lines[-3:] == [
            "FILE_NAME\tFILE_CID\tFILE_SIZE(INPUT FILE SIZE ONLY)\tREASON",
            "----",
            "f\tQmF\t9\tnode timeout",
        ]

    def test_empty_outcome_still_has_headers(self) -> None:
        report = ReportAssembler(min_replicas_count=3).assemble(_make_outcome())
        assert report is not None
        assert report.split("\n")[1:3] == ["----", "===="]


class TestTable2Mode:
    def test_only_attention_rows(self) -> None:
        assembler = ReportAssembler(min_replicas_count=3, save_log_mode=SaveLogMode.TABLE2)
        outcome = _make_outcome([_make_result(replicas=5), _make_result(cid="QmB", replicas=0)])

        assert assembler.assemble(outcome) == "file\tQmB\t100"

    def test_empty_attention_list_produces_nothing(self) -> None:
        assembler = ReportAssembler(min_replicas_count=3, save_log_mode=SaveLogMode.TABLE2)
        outcome = _make_outcome([_make_result(replicas=5)])

        assert assembler.assemble(outcome) is None
