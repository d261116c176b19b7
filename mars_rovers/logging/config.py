"""
Centralized logging configuration for the mission engine.

This module provides standardized logging configuration using structlog
for all components. Log records go to stderr by default because stdout
carries the mission output lines.
"""
import logging
import sys
from typing import IO, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    stream: Optional[IO[str]] = None,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        stream: Destination stream, stderr when omitted
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stderr,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_mission_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for mission execution events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for rover execution
    """
    return structlog.get_logger(name, subsystem="mission")


def log_boundary_violation(
    logger: FilteringBoundLogger,
    rover_index: int,
    instruction_index: int,
    policy: str,
    position: Any,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a rejected forward move with standardized format.

    Args:
        logger: Structlog logger instance
        rover_index: 1-based index of the rover in the mission
        instruction_index: 1-based index of the instruction within the plan
        policy: Name of the boundary policy in effect
        position: Pose of the rover before the rejected move
        context: Additional context data
    """
    bound_logger = logger.bind(
        rover_index=rover_index,
        instruction_index=instruction_index,
        policy=policy,
        position=str(position),
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if policy == "strict":
        bound_logger.warning("Boundary violation")
    else:
        bound_logger.info("Boundary violation")
