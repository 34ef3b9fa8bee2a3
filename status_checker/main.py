import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

import click

from status_checker.chain.client_base import BaseChainClient
from status_checker.chain.exceptions import ChainConnectionError
from status_checker.chain.factory import ChainClientFactory
from status_checker.config.run_config import RunConfig, SaveLogMode
from status_checker.config.settings import Settings
from status_checker.logging.logger import Log
from status_checker.processor.line_source import load_lines, read_stream
from status_checker.processor.models import BatchOutcome
from status_checker.processor.orchestrator import QueryOrchestrator
from status_checker.report.assembler import ReportAssembler
from status_checker.report.writer import ReportWriter
from status_checker.retry.retry_policy import RetryPolicy

INTERACTIVE_PROMPT = "Please enter your input (press Ctrl+D when done to start querying):"


def build_retry_policy(settings: Settings) -> RetryPolicy:
    return RetryPolicy(
        max_attempts=settings.query_max_attempts,
        base_delay_seconds=settings.query_retry_base_delay_seconds,
        max_delay_seconds=settings.query_retry_max_delay_seconds,
    )


async def run_check(
    config: RunConfig,
    client: BaseChainClient,
    retry_policy: RetryPolicy,
    lines: Sequence[str],
) -> BatchOutcome:
    """Connect -> query every line -> write the report -> release the connection.

    Raises:
        ChainConnectionError: if the connection or current height is unavailable.
    """
    try:
        await client.connect()
        outcome = await QueryOrchestrator(client, retry_policy).run(lines)

        assembler = ReportAssembler(config.min_replicas_count, config.save_log_mode)
        writer = ReportWriter(save_enabled=config.save_enabled, out_path=config.out_path)
        writer.write(assembler.assemble(outcome))
        writer.write_skipped(outcome.skipped)
        return outcome
    finally:
        await _release(client)


async def _release(client: BaseChainClient) -> None:
    try:
        await client.close()
    except Exception as exc:
        Log.warning(f"Failed to close chain connection: {exc}")


@click.command()
@click.option(
    "--input",
    "input_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to input text file. Reads stdin when omitted.",
)
@click.option(
    "--out",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to output log file. Implies saving.",
)
@click.option("--save-log", help="Whether to save the log file (true/false).")
@click.option(
    "--min-replicas-count",
    type=click.IntRange(min=0),
    help="Minimum replicas count before a file leaves the attention list.",
)
@click.option(
    "--save-log-mode",
    type=click.Choice([mode.value for mode in SaveLogMode]),
    help="default: all tables; table2: attention list rows only. Implies saving.",
)
@click.option("--address", help="Chain RPC endpoint.")
def main(
    input_path: Path | None,
    out: Path | None,
    save_log: str | None,
    min_replicas_count: int | None,
    save_log_mode: str | None,
    address: str | None,
) -> None:
    """Check on-chain storage status for `<name> <cid> <size>` lines."""
    settings = Settings()
    Log.configure(settings.log_level)
    config = RunConfig.from_options(
        settings,
        input_path=input_path,
        out=out,
        save_log=save_log,
        min_replicas_count=min_replicas_count,
        save_log_mode=save_log_mode,
        address=address,
    )

    if config.input_path is not None:
        lines = load_lines(config.input_path)
    else:
        click.echo(INTERACTIVE_PROMPT)
        lines = read_stream(click.get_text_stream("stdin", encoding="utf-8", errors="replace"))

    try:
        client = ChainClientFactory.create(settings, config.address)
    except ValueError as exc:
        Log.error(f"Fatal: {exc}")
        sys.exit(1)

    try:
        asyncio.run(run_check(config, client, build_retry_policy(settings), lines))
    except ChainConnectionError as exc:
        Log.error(f"Fatal: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
