"""
State machine data models for rover execution.

This module defines the boundary policies, the per-step outcome of an
instruction, and the immutable rover state record threaded through the
runner.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..data.models import Position, move, rotate_left, rotate_right


class BoundaryPolicy(str, Enum):
    """How the runner reacts to a forward move that would leave the plateau."""
    STRICT = "strict"               # Abort the whole run
    IGNORE = "ignore"               # Skip that move, keep going with the same rover
    STOP_ON_OOB = "stop_on_oob"     # Stop this rover, later rovers still run


class StepOutcome(str, Enum):
    """Result of stepping a single instruction."""
    ROTATED = "rotated"
    MOVED = "moved"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class Rover:
    """Runtime state of one rover: its current pose and nothing else."""

    position: Position

    def rotate_left(self) -> "Rover":
        """Rover turned 90 degrees counter-clockwise in place."""
        return Rover(self.position.with_heading(rotate_left(self.position.heading)))

    def rotate_right(self) -> "Rover":
        """Rover turned 90 degrees clockwise in place."""
        return Rover(self.position.with_heading(rotate_right(self.position.heading)))

    def peek_move(self) -> Position:
        """Pose one step forward in the current heading, without committing it."""
        return move(self.position, self.position.heading)

    def move(self) -> "Rover":
        """Rover advanced to the peeked position."""
        return Rover(self.peek_move())


@dataclass(frozen=True)
class PlanResult:
    """Outcome of executing one rover plan."""

    rover_index: int
    final_position: Position
    executed: int = 0                 # Instructions applied (rotations and moves)
    skipped: tuple[int, ...] = ()     # 1-based indexes of ignored moves
    halted_at: Optional[int] = None   # 1-based index where STOP_ON_OOB ended the plan

    @property
    def halted(self) -> bool:
        return self.halted_at is not None
