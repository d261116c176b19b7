"""
Core rover instruction step function.

A rover is advanced one instruction at a time. Rotations always succeed;
a forward move is only committed when the target cell lies on the plateau.
Deciding what a blocked move means is left to the runner's boundary policy.
"""

from ..data.models import Plateau
from ..errors import InstructionInvariantError
from .models import Rover, StepOutcome

ROTATE_LEFT = "L"
ROTATE_RIGHT = "R"
MOVE_FORWARD = "M"


def step(rover: Rover, instruction: str, plateau: Plateau) -> tuple[Rover, StepOutcome]:
    """
    Apply a single instruction to a rover.

    Args:
        rover: Current rover state
        instruction: One of L, R, M
        plateau: Bounds the forward move is checked against

    Returns:
        The resulting rover and what happened. A BLOCKED outcome returns the
        input rover unchanged.

    Raises:
        InstructionInvariantError: If the instruction is not L, R or M
    """
    if instruction == ROTATE_LEFT:
        return rover.rotate_left(), StepOutcome.ROTATED

    if instruction == ROTATE_RIGHT:
        return rover.rotate_right(), StepOutcome.ROTATED

    if instruction == MOVE_FORWARD:
        target = rover.peek_move()
        if plateau.contains(target.x, target.y):
            return rover.move(), StepOutcome.MOVED
        return rover, StepOutcome.BLOCKED

    raise InstructionInvariantError(
        f"Invalid instruction character: {instruction}",
        instruction=instruction
    )
