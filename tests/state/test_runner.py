"""Tests for the mission runner and its boundary policies."""

from unittest.mock import patch

import pytest

from mars_rovers.data.models import Direction, Mission, Plateau, Position, RoverPlan
from mars_rovers.errors import InstructionInvariantError, OutOfBoundsError
from mars_rovers.state.models import BoundaryPolicy
from mars_rovers.state.runner import execute_mission, execute_plan, run_mission


class TestRunMission:

    def test_canonical_strict(self, canonical_mission):
        positions = run_mission(canonical_mission, BoundaryPolicy.STRICT)
        assert positions == [Position(1, 3, Direction.N), Position(5, 1, Direction.E)]

    def test_default_policy_is_strict(self, corner_mission):
        with pytest.raises(OutOfBoundsError):
            run_mission(corner_mission("M"))

    def test_policy_accepts_string_value(self, corner_mission):
        assert run_mission(corner_mission("M"), "ignore") == [Position(5, 5, Direction.N)]

    def test_empty_mission(self):
        assert run_mission(Mission(Plateau(2, 2)), BoundaryPolicy.STRICT) == []

    def test_mission_not_mutated(self, canonical_mission):
        before = canonical_mission
        run_mission(canonical_mission, BoundaryPolicy.IGNORE)
        assert canonical_mission == before
        assert canonical_mission.plans[0].start == Position(1, 2, Direction.N)


class TestStrictPolicy:

    def test_violation_reports_pre_move_pose(self, corner_mission):
        with pytest.raises(OutOfBoundsError) as exc_info:
            run_mission(corner_mission("M"), BoundaryPolicy.STRICT)
        error = exc_info.value
        assert str(error) == "Rover #1 instruction 1 out of bounds from (5,5,N)"
        assert error.rover_index == 1
        assert error.instruction_index == 1
        assert error.position == Position(5, 5, Direction.N)

    def test_indexes_are_one_based(self, plateau_5x5):
        mission = Mission(plateau_5x5, [
            RoverPlan(Position(0, 0, Direction.N), "M"),
            RoverPlan(Position(0, 4, Direction.E), "LMM"),
        ])
        with pytest.raises(OutOfBoundsError) as exc_info:
            run_mission(mission, BoundaryPolicy.STRICT)
        assert str(exc_info.value) == "Rover #2 instruction 3 out of bounds from (0,5,N)"

    def test_later_rovers_never_run(self, plateau_5x5):
        mission = Mission(plateau_5x5, [
            RoverPlan(Position(0, 0, Direction.S), "M"),
            RoverPlan(Position(1, 1, Direction.N), "X"),
        ])
        # The second plan would raise an invariant error if it were reached
        with pytest.raises(OutOfBoundsError):
            run_mission(mission, BoundaryPolicy.STRICT)


class TestIgnorePolicy:

    def test_skips_only_the_blocked_move(self, corner_mission):
        positions = run_mission(corner_mission("MRMRM"), BoundaryPolicy.IGNORE)
        assert positions == [Position(5, 4, Direction.S)]

    def test_records_skipped_indexes(self, corner_mission):
        results = execute_mission(corner_mission("MMRM"), BoundaryPolicy.IGNORE)
        assert results[0].skipped == (1, 2, 4)
        assert results[0].executed == 1
        assert not results[0].halted

    def test_all_rovers_run(self, plateau_5x5):
        mission = Mission(plateau_5x5, [
            RoverPlan(Position(0, 0, Direction.W), "MMR"),
            RoverPlan(Position(2, 2, Direction.N), "MM"),
        ])
        assert run_mission(mission, BoundaryPolicy.IGNORE) == [
            Position(0, 0, Direction.N),
            Position(2, 4, Direction.N),
        ]


class TestStopOnOobPolicy:

    def test_halts_at_first_violation(self, corner_mission):
        positions = run_mission(corner_mission("MRMRM"), BoundaryPolicy.STOP_ON_OOB)
        assert positions == [Position(5, 5, Direction.N)]

    def test_only_current_rover_stops(self, plateau_5x5):
        mission = Mission(plateau_5x5, [
            RoverPlan(Position(1, 4, Direction.N), "MMRM"),
            RoverPlan(Position(3, 3, Direction.E), "MMRMMRMRRM"),
        ])
        results = execute_mission(mission, BoundaryPolicy.STOP_ON_OOB)
        assert results[0].final_position == Position(1, 5, Direction.N)
        assert results[0].halted_at == 2
        assert results[1].final_position == Position(5, 1, Direction.E)
        assert not results[1].halted

    def test_rotation_before_violation_is_kept(self, corner_mission):
        positions = run_mission(corner_mission("RMLM"), BoundaryPolicy.STOP_ON_OOB)
        assert positions == [Position(5, 5, Direction.E)]


class TestPolicyEquivalence:

    @pytest.mark.parametrize("instructions", ["L", "RRRR", "LRLRLL", "RLRLRLRLR"])
    def test_rotation_only_plans_match_across_policies(self, corner_mission, instructions):
        mission = corner_mission(instructions)
        outputs = [run_mission(mission, policy) for policy in BoundaryPolicy]
        assert outputs[0] == outputs[1] == outputs[2]

    def test_valid_mission_matches_across_policies(self, canonical_mission):
        outputs = [run_mission(canonical_mission, policy) for policy in BoundaryPolicy]
        assert outputs[0] == outputs[1] == outputs[2]


class TestExecutePlan:

    def test_invalid_instruction_raises(self, plateau_5x5):
        plan = RoverPlan(Position(0, 0, Direction.N), "MLQ")
        with pytest.raises(InstructionInvariantError, match="Invalid instruction character: Q"):
            execute_plan(plan, plateau_5x5, BoundaryPolicy.IGNORE, rover_index=1)

    def test_counts_executed_instructions(self, plateau_5x5):
        plan = RoverPlan(Position(0, 0, Direction.N), "MMRMM")
        result = execute_plan(plan, plateau_5x5, BoundaryPolicy.STRICT, rover_index=7)
        assert result.rover_index == 7
        assert result.executed == 5
        assert result.final_position == Position(2, 2, Direction.E)


class TestRunnerLogging:

    def test_boundary_violation_logged(self, corner_mission):
        with patch("mars_rovers.state.runner.log_boundary_violation") as log_violation:
            run_mission(corner_mission("MLM"), BoundaryPolicy.IGNORE)

        log_violation.assert_called_once()
        kwargs = log_violation.call_args.kwargs
        assert kwargs["rover_index"] == 1
        assert kwargs["instruction_index"] == 1
        assert kwargs["policy"] == "ignore"
        assert kwargs["position"] == Position(5, 5, Direction.N)

    def test_no_violation_no_log(self, canonical_mission):
        with patch("mars_rovers.state.runner.log_boundary_violation") as log_violation:
            run_mission(canonical_mission, BoundaryPolicy.STRICT)
        log_violation.assert_not_called()
