#!/usr/bin/env python3
"""
Basic Usage Example - Mars Rovers Mission Engine

This script demonstrates the library API. It shows how to:
- Parse mission text into a Mission
- Run the mission under each boundary policy
- Inspect per-rover results and handle errors

Run: python examples/basic_usage.py
"""

from mars_rovers.data.parsers import format_mission, parse_mission
from mars_rovers.errors import OutOfBoundsError, ParseError
from mars_rovers.logging.config import configure_logging
from mars_rovers.state.models import BoundaryPolicy
from mars_rovers.state.runner import execute_mission, run_mission

MISSION_TEXT = """\
5 5
1 2 N
LMLMLMLMM
5 5 N
MRMRM
"""


def main():
    configure_logging(level="INFO")

    mission = parse_mission(MISSION_TEXT.splitlines())
    print("Parsed mission:")
    for line in format_mission(mission):
        print(f"  {line}")

    for policy in BoundaryPolicy:
        print(f"\nPolicy: {policy.value}")
        try:
            for result in execute_mission(mission, policy):
                note = ""
                if result.skipped:
                    note = f" (skipped moves {list(result.skipped)})"
                elif result.halted:
                    note = f" (halted at instruction {result.halted_at})"
                print(f"  Rover #{result.rover_index}: {result.final_position}{note}")
        except OutOfBoundsError as e:
            print(f"  Aborted: {e}")

    try:
        run_mission(parse_mission(["5 X"]))
    except ParseError as e:
        print(f"\nRejected mission: {e}")


if __name__ == "__main__":
    main()
