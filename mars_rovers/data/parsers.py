"""
Mission text parser for converting raw input lines into a Mission.

Expected format:

    5 5            plateau upper-right corner "X Y"
    1 2 N          rover 1 start "X Y HEADING", heading in {N, E, S, W}
    LMLMLMLMM      rover 1 instructions, one or more of L, R, M
    3 3 E          rover 2 ...
    MMRMMRMRRM

Blank lines are ignored anywhere. Validation is fail-fast: the plateau is
checked before any rover, and within a rover the position format is checked
before the heading, the heading before the instructions, and the
instructions before the start bounds.
"""

from collections.abc import Iterable, Sequence
from typing import NoReturn, Optional

from ..errors import ParseError
from ..logging.config import get_logger
from .models import Mission, Plateau, Position, RoverPlan
from .validators import (
    is_blank,
    is_valid_instruction_string,
    parse_heading_token,
    parse_int_token,
)

logger = get_logger(__name__)


def parse_mission(lines: Optional[Iterable[Optional[str]]]) -> Mission:
    """
    Parse mission input lines into a validated Mission.

    Args:
        lines: Raw mission text, one entry per line

    Returns:
        Mission with the plateau and rover plans in document order

    Raises:
        ParseError: If the input is empty, malformed or logically invalid
    """
    # None, no lines at all and only blank lines are all treated as empty input
    non_empty = [line for line in (lines or ()) if not is_blank(line)]
    if not non_empty:
        _fail("Input cannot be empty", stage="input")

    plateau = parse_plateau(non_empty[0])
    plans = parse_rover_plans(non_empty[1:], plateau)

    logger.debug(
        "Mission parsed",
        max_x=plateau.max_x,
        max_y=plateau.max_y,
        rover_count=len(plans)
    )
    return Mission(plateau=plateau, plans=plans)


def parse_plateau(plateau_line: str) -> Plateau:
    """Parse the "X Y" plateau line."""
    invalid_msg = f'Plateau line invalid (expected "X Y"): "{plateau_line}"'
    parts = plateau_line.split()

    if len(parts) != 2:
        _fail(invalid_msg, stage="plateau", line=plateau_line)

    max_x = parse_int_token(parts[0])
    max_y = parse_int_token(parts[1])
    if max_x is None or max_y is None:
        _fail(invalid_msg, stage="plateau", line=plateau_line)

    if max_x < 0 or max_y < 0:
        _fail(
            f"Plateau coordinates must be non-negative: {max_x} {max_y}",
            stage="plateau",
            line=plateau_line
        )

    return Plateau(max_x, max_y)


def parse_rover_plans(rover_lines: Sequence[str], plateau: Plateau) -> list[RoverPlan]:
    """Parse position/instruction line pairs into rover plans."""
    if len(rover_lines) % 2 != 0:
        _fail(
            "Rover specifications must come in pairs (position line + instructions line)",
            stage="rovers"
        )

    plans = []
    for i in range(0, len(rover_lines), 2):
        rover_index = i // 2 + 1
        position_line = rover_lines[i]
        instructions_line = rover_lines[i + 1]

        start = parse_rover_position(position_line, rover_index)
        instructions = parse_instructions(instructions_line, rover_index)

        if not plateau.contains(start.x, start.y):
            _fail(
                f"Rover #{rover_index} start out of bounds: ({start.x},{start.y}) "
                f"> plateau ({plateau.max_x},{plateau.max_y})",
                stage="bounds",
                line=position_line,
                rover_index=rover_index
            )

        plans.append(RoverPlan(start=start, instructions=instructions))

    return plans


def parse_rover_position(position_line: str, rover_index: int) -> Position:
    """Parse an "X Y HEADING" rover start line."""
    invalid_msg = (
        f'Rover #{rover_index} position invalid (expected "X Y HEADING"): "{position_line}"'
    )
    parts = position_line.split()

    if len(parts) != 3:
        _fail(invalid_msg, stage="position", line=position_line, rover_index=rover_index)

    x = parse_int_token(parts[0])
    y = parse_int_token(parts[1])
    if x is None or y is None:
        _fail(invalid_msg, stage="position", line=position_line, rover_index=rover_index)

    heading = parse_heading_token(parts[2])
    if heading is None:
        _fail(
            f'Rover #{rover_index} invalid heading (expected N, E, S, or W): "{parts[2]}"',
            stage="heading",
            line=position_line,
            rover_index=rover_index
        )

    return Position(x, y, heading)


def parse_instructions(instructions_line: str, rover_index: int) -> str:
    """Validate and trim a rover instruction line."""
    instructions = instructions_line.strip()

    if not instructions:
        _fail(
            f"Rover #{rover_index} instructions cannot be empty",
            stage="instructions",
            line=instructions_line,
            rover_index=rover_index
        )

    if not is_valid_instruction_string(instructions):
        _fail(
            f'Rover #{rover_index} invalid instructions (expected only L, R, M): "{instructions}"',
            stage="instructions",
            line=instructions_line,
            rover_index=rover_index
        )

    return instructions


def format_mission(mission: Mission) -> list[str]:
    """
    Serialize a mission into canonical mission text.

    ``parse_mission(format_mission(mission)) == mission`` for every mission
    the parser can produce.
    """
    lines = [f"{mission.plateau.max_x} {mission.plateau.max_y}"]
    for plan in mission.plans:
        lines.append(str(plan.start))
        lines.append(plan.instructions)
    return lines


def _fail(message: str, stage: str, line: Optional[str] = None,
          rover_index: Optional[int] = None) -> NoReturn:
    logger.warning("Mission rejected", stage=stage, rover_index=rover_index, reason=message)
    raise ParseError(
        message,
        line=line,
        rover_index=rover_index,
        context={"stage": stage}
    )
