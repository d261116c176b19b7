"""
Mission error classifications for invalid input and rejected execution.

These exceptions are fatal to the current run: they are surfaced to the
caller verbatim and no partial output is produced once one fires.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from ..data.models import Position


class MissionError(Exception):
    """Base class for malformed missions and rejected rover moves."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = False


class ParseError(MissionError):
    """Mission text is malformed or logically invalid."""

    def __init__(self, message: str, line: Optional[str] = None,
                 rover_index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.line = line
        self.rover_index = rover_index


class OutOfBoundsError(MissionError):
    """A rover tried to leave the plateau under the STRICT boundary policy."""

    def __init__(self, message: str, rover_index: int, instruction_index: int,
                 position: "Position", **kwargs):
        super().__init__(message, **kwargs)
        self.rover_index = rover_index
        self.instruction_index = instruction_index
        self.position = position
