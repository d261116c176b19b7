"""
Canonical data models for rover missions.

This module defines the immutable geometry primitives (directions and
positions) and the mission description built from them by the parser.
"""

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    """Compass heading; the value is the single-letter code used in mission text."""
    N = "N"
    E = "E"
    S = "S"
    W = "W"


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.N: (0, 1),
    Direction.E: (1, 0),
    Direction.S: (0, -1),
    Direction.W: (-1, 0),
}

# N -> W -> S -> E -> N
_LEFT_OF: dict[Direction, Direction] = {
    Direction.N: Direction.W,
    Direction.W: Direction.S,
    Direction.S: Direction.E,
    Direction.E: Direction.N,
}

# N -> E -> S -> W -> N
_RIGHT_OF: dict[Direction, Direction] = {
    Direction.N: Direction.E,
    Direction.E: Direction.S,
    Direction.S: Direction.W,
    Direction.W: Direction.N,
}


def rotate_left(direction: Direction) -> Direction:
    """Heading after a 90 degree counter-clockwise turn."""
    return _LEFT_OF[direction]


def rotate_right(direction: Direction) -> Direction:
    """Heading after a 90 degree clockwise turn."""
    return _RIGHT_OF[direction]


def delta(direction: Direction) -> tuple[int, int]:
    """Unit (dx, dy) of one forward step in the given heading."""
    return _DELTAS[direction]


@dataclass(frozen=True)
class Position:
    """Grid coordinate plus heading (a pose)."""
    x: int
    y: int
    heading: Direction

    def with_heading(self, heading: Direction) -> "Position":
        """Same coordinates, new heading."""
        return Position(self.x, self.y, heading)

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.heading.value}"


def move(position: Position, heading: Direction) -> Position:
    """
    Step one cell in ``heading`` from ``position``.

    The step direction only supplies the delta; the result keeps the
    heading of ``position`` itself.
    """
    dx, dy = delta(heading)
    return Position(position.x + dx, position.y + dy, position.heading)


@dataclass(frozen=True)
class Plateau:
    """Inclusive rectangular region [0, max_x] x [0, max_y]."""
    max_x: int
    max_y: int

    def __post_init__(self):
        if self.max_x < 0 or self.max_y < 0:
            raise ValueError(
                f"Plateau bounds must be non-negative: {self.max_x} {self.max_y}"
            )

    def contains(self, x: int, y: int) -> bool:
        """True when (x, y) lies on the plateau."""
        return 0 <= x <= self.max_x and 0 <= y <= self.max_y


@dataclass(frozen=True)
class RoverPlan:
    """Starting pose and L/R/M instruction string for one rover."""
    start: Position
    instructions: str


@dataclass(frozen=True)
class Mission:
    """Plateau plus rover plans in execution order."""
    plateau: Plateau
    plans: tuple[RoverPlan, ...] = ()

    def __post_init__(self):
        # Accept any sequence but store a tuple so the mission stays immutable
        object.__setattr__(self, "plans", tuple(self.plans))

    @property
    def rover_count(self) -> int:
        return len(self.plans)
