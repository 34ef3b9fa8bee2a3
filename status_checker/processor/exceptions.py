class CheckerError(Exception):
    """Base exception for all status-check errors."""


class FormatError(CheckerError):
    """Raised when an input line cannot be split into name, cid and size."""


class QueryError(CheckerError):
    """Raised when a single identifier query fails after exhausting retries."""


class ReportWriteError(CheckerError):
    """Raised when the report cannot be written to its destination file."""
