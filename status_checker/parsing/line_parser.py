"""Right-to-left parser for `<name> <cid> <size>` input lines.

The name may contain spaces, so fields are recovered from the end of the line:
a run of digits (size), optional blanks, a run of letters and digits (cid),
optional blanks, and whatever remains is the name. The cid must be a whole
token: punctuation directly to its left rejects the line.
"""

import string

from status_checker.logging.logger import Log
from status_checker.parsing.models import ParsedLine
from status_checker.processor.exceptions import FormatError

DIGITS = frozenset(string.digits)
CID_CHARS = frozenset(string.ascii_letters + string.digits)
BLANKS = frozenset(" \t")


def _scan_left(line: str, end: int, allowed: frozenset[str]) -> int:
    """Return the index just left of the maximal run of `allowed` ending at `end`."""
    i = end
    while i >= 0 and line[i] in allowed:
        i -= 1
    return i


def parse_line(line: str) -> ParsedLine | None:
    """Parse one raw line, returning None when it does not match the format."""
    line = line.strip()
    if not line:
        Log.debug("Rejected line: empty")
        return None

    size_end = len(line) - 1
    i = _scan_left(line, size_end, DIGITS)
    file_size = line[i + 1 : size_end + 1]
    if not file_size:
        Log.debug(f"Rejected line {line!r}: no size found")
        return None

    cid_end = _scan_left(line, i, BLANKS)
    i = _scan_left(line, cid_end, CID_CHARS)
    file_cid = line[i + 1 : cid_end + 1]
    if not file_cid:
        Log.debug(f"Rejected line {line!r}: no identifier found")
        return None
    # punctuation glued to the cid means the cid token itself is malformed
    if i >= 0 and line[i] not in BLANKS:
        Log.debug(f"Rejected line {line!r}: identifier contains {line[i]!r}")
        return None

    i = _scan_left(line, i, BLANKS)
    file_name = line[: i + 1].strip().replace("/", "")
    if not file_name:
        Log.debug(f"Rejected line {line!r}: no name found")
        return None

    try:
        size = int(file_size)
    except ValueError:
        Log.debug(f"Rejected line {line!r}: size has {len(file_size)} digits")
        return None

    return ParsedLine(file_name=file_name, file_cid=file_cid, file_size=size)


def parse_line_or_raise(line: str) -> ParsedLine:
    """Like parse_line, but raise FormatError instead of returning None."""
    parsed = parse_line(line)
    if parsed is None:
        raise FormatError(f"Incorrect format: {line.strip()!r}")
    return parsed
