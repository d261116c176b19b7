"""Pytest configuration and shared fixtures."""

import pytest

from mars_rovers.data.models import Direction, Mission, Plateau, Position, RoverPlan
from mars_rovers.logging.config import configure_logging


@pytest.fixture(autouse=True)
def structured_logging():
    """Route structlog through stdlib logging so log lines never reach stdout."""
    configure_logging(level="DEBUG")


@pytest.fixture
def plateau_5x5() -> Plateau:
    """Canonical 5x5 plateau."""
    return Plateau(5, 5)


@pytest.fixture
def canonical_lines() -> list[str]:
    """Two-rover mission text from the classic example."""
    return [
        "5 5",
        "1 2 N",
        "LMLMLMLMM",
        "3 3 E",
        "MMRMMRMRRM",
    ]


@pytest.fixture
def canonical_mission(plateau_5x5: Plateau) -> Mission:
    """Mission equivalent to ``canonical_lines``."""
    return Mission(
        plateau=plateau_5x5,
        plans=[
            RoverPlan(Position(1, 2, Direction.N), "LMLMLMLMM"),
            RoverPlan(Position(3, 3, Direction.E), "MMRMMRMRRM"),
        ],
    )


@pytest.fixture
def corner_mission(plateau_5x5: Plateau):
    """Factory for a single rover starting at the north-east corner facing north."""
    def _make(instructions: str) -> Mission:
        return Mission(
            plateau=plateau_5x5,
            plans=[RoverPlan(Position(5, 5, Direction.N), instructions)],
        )
    return _make
