from pathlib import Path
from typing import TextIO


def load_lines(path: Path) -> list[str]:
    """Read an input file into lines without their line endings.

    Undecodable bytes become U+FFFD so a damaged line is judged on its own.

    Raises:
        FileNotFoundError: if the file does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8", errors="replace").splitlines()


def read_stream(stream: TextIO) -> list[str]:
    """Read lines from an interactive stream until end-of-input."""
    return [line.rstrip("\r\n") for line in stream]
