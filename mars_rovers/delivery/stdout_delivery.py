"""Standard output result delivery mechanism."""

import sys
from typing import IO, Optional, Sequence

from ..data.models import Position
from ..errors import DeliveryError
from .base import BaseResultDelivery, DeliveryResult, DeliveryStatus


class StdoutResultDelivery(BaseResultDelivery):
    """Prints one line per rover to standard output."""

    def __init__(self, name: str = "stdout", stream: Optional[IO[str]] = None):
        super().__init__(name)
        self._stream = stream

    @property
    def stream(self) -> IO[str]:
        # Resolved lazily so a replaced sys.stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def deliver(self, positions: Sequence[Position]) -> DeliveryResult:
        """Deliver positions to stdout."""
        lines = self.format_lines(positions)

        try:
            for line in lines:
                print(line, file=self.stream)
            self.stream.flush()
        except OSError as e:
            self.logger.error(
                "Failed to print positions",
                delivery_name=self.name,
                error=str(e)
            )
            raise DeliveryError(f"Stdout error: {e}", delivery_method="stdout") from e

        self._delivery_count += len(lines)
        self.logger.debug("Positions printed", delivery_name=self.name, line_count=len(lines))
        return DeliveryResult(
            status=DeliveryStatus.SUCCESS,
            lines_written=len(lines),
            message="Printed to stdout"
        )
