import logging

import click


class ClickEchoHandler(logging.Handler):
    """Writes records through click so they follow the active stderr stream."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


class Log:
    """Centralized logging for the checker.

    Operator diagnostics go to stderr; report tables are echoed to stdout by
    the report writer, so piping stdout captures only the report.
    """

    _logger: logging.Logger = logging.getLogger("status_checker")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach the stderr handler once."""
        cls._logger.setLevel(log_level.upper())
        cls._logger.propagate = False
        if not cls._logger.handlers:
            handler = ClickEchoHandler()
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
