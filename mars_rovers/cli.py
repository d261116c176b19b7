"""
Command-line interface for the mission engine.

Reads mission text from a file or stdin, executes it and prints one final
position per rover. Exit codes:

    0  success
    1  parse, execution, input or output error
    2  usage or configuration error
"""

import argparse
import sys
from typing import IO, Any, Optional, Sequence

from . import __version__
from .config.loader import ConfigLoader
from .data.sources import read_lines, read_mission_file
from .engine import MissionEngine
from .errors import (
    ConfigurationError,
    DeliveryError,
    InputReadError,
    OutOfBoundsError,
    ParseError,
)
from .logging.config import configure_logging, get_logger
from .state.models import BoundaryPolicy

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mars-rovers",
        description="Execute a rover mission and print each rover's final position.",
    )

    policy = parser.add_argument_group(
        "boundary policy",
        "How to treat moves that would leave the plateau; the last flag wins."
    )
    policy.add_argument(
        "--strict", dest="boundary_policy", action="store_const",
        const=BoundaryPolicy.STRICT.value,
        help="fail on out-of-bounds moves (default)",
    )
    policy.add_argument(
        "--ignore-oob", dest="boundary_policy", action="store_const",
        const=BoundaryPolicy.IGNORE.value,
        help="skip out-of-bounds moves",
    )
    policy.add_argument(
        "--stop-on-oob", dest="boundary_policy", action="store_const",
        const=BoundaryPolicy.STOP_ON_OOB.value,
        help="stop a rover at its first out-of-bounds move",
    )

    parser.add_argument("--input", "-i", metavar="PATH",
                        help="mission file to read (default: stdin)")
    parser.add_argument("--output", "-o", metavar="PATH",
                        help="write final positions to a file instead of stdout")
    parser.add_argument("--config", "-c", metavar="PATH",
                        help="YAML configuration file")
    parser.add_argument("--log-level", metavar="LEVEL",
                        help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    parser.add_argument("--log-json", action="store_true", default=None,
                        help="emit logs as JSON")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Translate command-line flags into configuration overrides."""
    overrides: dict[str, Any] = {}

    if args.boundary_policy is not None:
        overrides.setdefault("runner", {})["boundary_policy"] = args.boundary_policy
    if args.log_level is not None:
        overrides.setdefault("logging", {})["level"] = args.log_level
    if args.log_json is not None:
        overrides.setdefault("logging", {})["format_json"] = args.log_json
    if args.output is not None:
        overrides.setdefault("output", {})["path"] = args.output

    return overrides


def main(argv: Optional[Sequence[str]] = None, stdin: Optional[IO[str]] = None) -> int:
    """
    Run the CLI and return the process exit code.

    Args:
        argv: Command-line arguments, sys.argv[1:] when omitted
        stdin: Mission text stream used when no --input is given
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse has already printed usage or help
        return e.code if isinstance(e.code, int) else EXIT_USAGE

    try:
        config = ConfigLoader.create(args.config).load(overrides_from_args(args))
    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    configure_logging(level=config.logging.level, format_json=config.logging.format_json)

    try:
        if args.input:
            lines = read_mission_file(args.input)
        else:
            lines = read_lines(stdin or sys.stdin, source="<stdin>")

        MissionEngine(config).run(lines)
        return EXIT_OK

    except ParseError as e:
        print(f"Parse Error: {e}", file=sys.stderr)
    except OutOfBoundsError as e:
        print(f"Execution Error: {e}", file=sys.stderr)
    except InputReadError as e:
        print(f"Input Error: {e}", file=sys.stderr)
    except DeliveryError as e:
        print(f"Output Error: {e}", file=sys.stderr)
    except Exception as e:
        logger.exception("Unexpected failure")
        print(f"Unexpected Error: {e}", file=sys.stderr)

    return EXIT_FAILURE


def main_entry() -> None:
    """Console script entry point."""
    sys.exit(main())
