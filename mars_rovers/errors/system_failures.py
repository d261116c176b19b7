"""
System failure error classifications.

These exceptions represent contract breaches between components or failures
of the environment around the mission core (input, output, configuration).
"""

from typing import Any, Dict, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InstructionInvariantError(SystemFailureError):
    """An instruction outside L, R, M reached the runner."""

    def __init__(self, message: str, instruction: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.instruction = instruction


class InputReadError(SystemFailureError):
    """Mission text could not be read from its source."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source


class DeliveryError(SystemFailureError):
    """Final positions could not be written to the output sink."""

    def __init__(self, message: str, delivery_method: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.delivery_method = delivery_method


class ConfigurationError(SystemFailureError):
    """Configuration file or overrides are missing or invalid."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
