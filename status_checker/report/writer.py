import time
from collections.abc import Callable, Sequence
from pathlib import Path

import click

from status_checker.logging.logger import Log
from status_checker.processor.exceptions import ReportWriteError
from status_checker.processor.models import SkippedEntry


def default_report_path(directory: Path | None = None) -> Path:
    """Build `check_status_<unix-ms>.log` in `directory` (cwd by default)."""
    directory = directory if directory is not None else Path.cwd()
    return directory / f"check_status_{time.time_ns() // 1_000_000}.log"


class ReportWriter:
    """Sends the assembled report to a file or the console."""

    def __init__(
        self,
        *,
        save_enabled: bool,
        out_path: Path | None = None,
        echo: Callable[[str], None] = click.echo,
    ) -> None:
        self._save_enabled = save_enabled
        self._out_path = out_path
        self._echo = echo

    def write(self, report: str | None) -> Path | None:
        """Emit the report; returns the file path when it was saved."""
        if report is None:
            return None
        if not self._save_enabled:
            self._echo("Results:")
            self._echo(report)
            return None

        path = self._out_path.resolve() if self._out_path else default_report_path()
        try:
            content = self._save(path, report)
        except ReportWriteError as exc:
            Log.error(f"{exc}; printing results to the console instead")
            self._echo("Results:")
            self._echo(report)
            return None

        self._echo(f"Results have been written to {path}")
        self._echo("Log file content:")
        self._echo(content)
        return path

    def write_skipped(self, skipped: Sequence[SkippedEntry]) -> None:
        if not skipped:
            return
        self._echo("The following lines were skipped due to errors:")
        for entry in skipped:
            self._echo(f"Line {entry.line_number}: {entry.reason}")

    @staticmethod
    def _save(path: Path, report: str) -> str:
        try:
            path.write_text(report, encoding="utf-8")
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ReportWriteError(f"Cannot write report to {path}: {exc}") from exc
