"""Base classes for result delivery mechanisms."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

import structlog

from ..data.models import Position


class DeliveryStatus(Enum):
    """Result delivery status."""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class DeliveryResult:
    """Result of a delivery attempt."""
    status: DeliveryStatus
    lines_written: int = 0
    message: Optional[str] = None


def format_position(position: Position) -> str:
    """Render a final pose as an output line: "<x> <y> <heading>"."""
    return f"{position.x} {position.y} {position.heading.value}"


class BaseResultDelivery(ABC):
    """Base class for result delivery mechanisms."""

    def __init__(self, name: str):
        self.name = name
        self.logger = structlog.get_logger(f"mars_rovers.delivery.{name}")
        self._delivery_count = 0

    @abstractmethod
    def deliver(self, positions: Sequence[Position]) -> DeliveryResult:
        """
        Deliver final positions to the configured destination.

        Args:
            positions: Final rover poses in plan order

        Returns:
            Delivery result

        Raises:
            DeliveryError: If the destination cannot be written
        """
        pass

    def format_lines(self, positions: Sequence[Position]) -> list[str]:
        """Output lines for the given positions, one per rover."""
        return [format_position(position) for position in positions]

    def get_stats(self) -> dict[str, Any]:
        """Get delivery statistics."""
        return {
            "name": self.name,
            "delivery_count": self._delivery_count,
        }
