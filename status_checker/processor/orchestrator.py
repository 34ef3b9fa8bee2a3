from collections.abc import Iterable

from status_checker.chain.client_base import BaseChainClient
from status_checker.classification.classifier import classify
from status_checker.logging.logger import Log
from status_checker.parsing.line_parser import parse_line_or_raise
from status_checker.parsing.models import ParsedLine
from status_checker.processor.exceptions import FormatError, QueryError
from status_checker.processor.models import (
    INCORRECT_FORMAT,
    BatchOutcome,
    ResultRecord,
    SkippedEntry,
)
from status_checker.retry.retry_policy import RetryPolicy


class QueryOrchestrator:
    """Parses, queries and classifies input lines one at a time.

    Pipeline per line: parse -> query (with retries) -> classify.
    Lines are processed strictly in order with a single query in flight.
    """

    def __init__(self, client: BaseChainClient, retry_policy: RetryPolicy) -> None:
        self._client = client
        self._retry_policy = retry_policy

    async def run(self, lines: Iterable[str]) -> BatchOutcome:
        """Process every line; each lands in exactly one of results or skipped.

        Raises:
            ChainConnectionError: if the current block height cannot be fetched.
        """
        current_height = await self._client.get_current_height()
        Log.info(f"Current block height: {current_height}")
        outcome = BatchOutcome(current_height=current_height)

        for line_number, line in enumerate(lines, start=1):
            try:
                parsed = parse_line_or_raise(line)
            except FormatError:
                outcome.skipped.append(
                    SkippedEntry(line_number=line_number, raw_line=line, reason=INCORRECT_FORMAT)
                )
                continue
            try:
                outcome.results.append(await self._check(parsed, current_height))
            except QueryError as exc:
                Log.error(f"Error querying CID {parsed.file_cid}: {exc}")
                outcome.skipped.append(
                    SkippedEntry(
                        line_number=line_number,
                        raw_line=line,
                        reason=str(exc),
                        parsed=parsed,
                    )
                )

        Log.info(
            f"Processed {len(outcome.results) + len(outcome.skipped)} lines: "
            f"{len(outcome.results)} checked, {len(outcome.skipped)} skipped"
        )
        return outcome

    async def _check(self, parsed: ParsedLine, current_height: int) -> ResultRecord:
        record = await self._retry_policy.call(
            lambda: self._client.query_file(parsed.file_cid),
            label=f"CID {parsed.file_cid}",
        )
        classification = classify(record, current_height)
        Log.info(
            f"{parsed.file_name} ({parsed.file_cid}): {classification.status.value}, "
            f"{classification.replica_count} replicas"
        )
        return ResultRecord(
            file_name=parsed.file_name,
            file_cid=parsed.file_cid,
            display_size=f"{classification.onchain_size_display} ({parsed.file_size})",
            status=classification.status,
            replica_count=classification.replica_count,
            input_size=parsed.file_size,
        )
