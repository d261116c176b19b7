"""
Mission text sources.

Reads raw mission lines from a text stream or a file. Failures surface as
InputReadError so callers can tell I/O problems apart from ParseError.
"""

from pathlib import Path
from typing import IO, Union

from ..errors import InputReadError
from ..logging.config import get_logger

logger = get_logger(__name__)


def read_lines(stream: IO[str], source: str = "<stream>") -> list[str]:
    """Read every line from ``stream`` until EOF, without line terminators."""
    try:
        lines = stream.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Failed to read mission input: {e}", source=source) from e

    logger.debug("Mission input read", source=source, line_count=len(lines))
    return lines


def read_mission_file(path: Union[str, Path]) -> list[str]:
    """Read mission lines from a UTF-8 text file."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            return read_lines(f, source=str(path))
    except OSError as e:
        raise InputReadError(f"Cannot open mission file {path}: {e}", source=str(path)) from e
