"""
Mission runner.

Executes every rover plan of a mission in order against a boundary policy
and collects the final poses. Rovers run strictly one after another; a
STRICT violation aborts the whole run.
"""

from typing import Optional, Union

from ..data.models import Mission, Plateau, Position, RoverPlan
from ..errors import OutOfBoundsError
from ..logging.config import get_mission_logger, log_boundary_violation
from .machine import step
from .models import BoundaryPolicy, PlanResult, Rover, StepOutcome

mission_logger = get_mission_logger(__name__)


def run_mission(
    mission: Mission,
    policy: Union[BoundaryPolicy, str] = BoundaryPolicy.STRICT
) -> list[Position]:
    """
    Execute all rover plans and return their final positions in plan order.

    Raises:
        OutOfBoundsError: Under STRICT, on the first move leaving the plateau
        InstructionInvariantError: If a plan holds a character other than L, R, M
    """
    return [result.final_position for result in execute_mission(mission, policy)]


def execute_mission(
    mission: Mission,
    policy: Union[BoundaryPolicy, str] = BoundaryPolicy.STRICT
) -> list[PlanResult]:
    """Execute all rover plans, returning a detailed result per rover."""
    policy = BoundaryPolicy(policy)
    mission_logger.info(
        "Mission started",
        rover_count=mission.rover_count,
        policy=policy.value
    )

    results = []
    for rover_index, plan in enumerate(mission.plans, start=1):
        results.append(execute_plan(plan, mission.plateau, policy, rover_index))

    mission_logger.info("Mission completed", rover_count=len(results))
    return results


def execute_plan(
    plan: RoverPlan,
    plateau: Plateau,
    policy: BoundaryPolicy,
    rover_index: int
) -> PlanResult:
    """
    Run one rover plan from its start pose.

    Args:
        plan: Start pose and instructions
        plateau: Bounds for forward moves
        policy: Boundary policy applied to blocked moves
        rover_index: 1-based position of the plan in the mission

    Returns:
        PlanResult with the final pose and any skipped or halting moves
    """
    rover = Rover(plan.start)
    executed = 0
    skipped: list[int] = []

    for instruction_index, instruction in enumerate(plan.instructions, start=1):
        rover, outcome = step(rover, instruction, plateau)

        if outcome is not StepOutcome.BLOCKED:
            executed += 1
            continue

        log_boundary_violation(
            mission_logger,
            rover_index=rover_index,
            instruction_index=instruction_index,
            policy=policy.value,
            position=rover.position
        )

        if policy is BoundaryPolicy.STRICT:
            pos = rover.position
            raise OutOfBoundsError(
                f"Rover #{rover_index} instruction {instruction_index} out of bounds "
                f"from ({pos.x},{pos.y},{pos.heading.value})",
                rover_index=rover_index,
                instruction_index=instruction_index,
                position=pos
            )

        if policy is BoundaryPolicy.STOP_ON_OOB:
            return _finish(rover_index, rover, executed, skipped, halted_at=instruction_index)

        skipped.append(instruction_index)

    return _finish(rover_index, rover, executed, skipped)


def _finish(
    rover_index: int,
    rover: Rover,
    executed: int,
    skipped: list[int],
    halted_at: Optional[int] = None
) -> PlanResult:
    result = PlanResult(
        rover_index=rover_index,
        final_position=rover.position,
        executed=executed,
        skipped=tuple(skipped),
        halted_at=halted_at
    )
    mission_logger.debug(
        "Rover finished",
        rover_index=rover_index,
        final_position=str(result.final_position),
        executed=executed,
        skipped=len(skipped),
        halted=result.halted
    )
    return result
