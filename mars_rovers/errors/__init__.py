"""
Error classification system for mission processing.

This module provides the exception hierarchy for failures encountered while
reading, parsing and executing rover missions.
"""

from .mission_errors import (
    MissionError,
    ParseError,
    OutOfBoundsError,
)
from .system_failures import (
    SystemFailureError,
    InstructionInvariantError,
    InputReadError,
    DeliveryError,
    ConfigurationError,
)

__all__ = [
    # Mission Errors
    "MissionError",
    "ParseError",
    "OutOfBoundsError",
    # System Failures
    "SystemFailureError",
    "InstructionInvariantError",
    "InputReadError",
    "DeliveryError",
    "ConfigurationError",
]
