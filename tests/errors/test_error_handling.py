"""
Error handling tests for the mission engine.

Covers the error hierarchy and how each failure surfaces from the parser,
the runner and the I/O collaborators.
"""

import io

import pytest

from mars_rovers.data.models import Direction, Position
from mars_rovers.data.parsers import parse_mission
from mars_rovers.data.sources import read_lines, read_mission_file
from mars_rovers.errors import (
    ConfigurationError,
    DeliveryError,
    InputReadError,
    InstructionInvariantError,
    MissionError,
    OutOfBoundsError,
    ParseError,
    SystemFailureError,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_mission_error_hierarchy(self):
        base_error = MissionError("base error")
        assert base_error.recoverable is False
        assert base_error.context == {}

        parse_error = ParseError("bad line", line="5 X", rover_index=None)
        assert isinstance(parse_error, MissionError)
        assert parse_error.line == "5 X"

        oob_error = OutOfBoundsError(
            "off the edge",
            rover_index=2,
            instruction_index=4,
            position=Position(0, 0, Direction.S)
        )
        assert isinstance(oob_error, MissionError)
        assert oob_error.rover_index == 2
        assert oob_error.instruction_index == 4
        assert oob_error.position == Position(0, 0, Direction.S)

    def test_system_failure_hierarchy(self):
        for error in (
            InstructionInvariantError("bad char", instruction="X"),
            InputReadError("cannot read", source="<stdin>"),
            DeliveryError("cannot write", delivery_method="file"),
            ConfigurationError("bad config", errors=["x"]),
        ):
            assert isinstance(error, SystemFailureError)
            assert error.recoverable is False

    def test_mission_and_system_errors_are_distinct(self):
        assert not issubclass(ParseError, SystemFailureError)
        assert not issubclass(InputReadError, MissionError)

    def test_parse_error_carries_stage_context(self):
        with pytest.raises(ParseError) as exc_info:
            parse_mission(["5 5", "1 2 N", "LMX"])
        assert exc_info.value.context == {"stage": "instructions"}
        assert exc_info.value.rover_index == 1


class TestInputErrors:
    """Test input supplier failures."""

    def test_read_lines_strips_terminators(self):
        stream = io.StringIO("5 5\r\n1 2 N\nLMLMLMLMM\n")
        assert read_lines(stream) == ["5 5", "1 2 N", "LMLMLMLMM"]

    def test_read_lines_empty_stream(self):
        assert read_lines(io.StringIO("")) == []

    def test_read_lines_os_error(self):
        class BrokenStream(io.StringIO):
            def read(self, *args):
                raise OSError("device not ready")

        with pytest.raises(InputReadError) as exc_info:
            read_lines(BrokenStream(), source="tape")
        assert "device not ready" in str(exc_info.value)
        assert exc_info.value.source == "tape"

    def test_read_mission_file(self, tmp_path):
        mission_file = tmp_path / "mission.txt"
        mission_file.write_text("5 5\n1 2 N\nM\n", encoding="utf-8")
        assert read_mission_file(mission_file) == ["5 5", "1 2 N", "M"]

    def test_missing_mission_file(self, tmp_path):
        with pytest.raises(InputReadError, match="Cannot open mission file"):
            read_mission_file(tmp_path / "nope.txt")

    def test_undecodable_mission_file(self, tmp_path):
        mission_file = tmp_path / "binary.txt"
        mission_file.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(InputReadError):
            read_mission_file(mission_file)
