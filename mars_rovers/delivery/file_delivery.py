"""File-based result delivery mechanism."""

from pathlib import Path
from typing import Sequence, Union

from ..data.models import Position
from ..errors import DeliveryError
from .base import BaseResultDelivery, DeliveryResult, DeliveryStatus


class FileResultDelivery(BaseResultDelivery):
    """Writes one line per rover to a text file, replacing earlier content."""

    def __init__(self, output_path: Union[str, Path], name: str = "file",
                 create_dirs: bool = True):
        super().__init__(name)
        self.output_path = Path(output_path)
        self.create_dirs = create_dirs

    def deliver(self, positions: Sequence[Position]) -> DeliveryResult:
        """Deliver positions to the output file."""
        lines = self.format_lines(positions)

        try:
            if self.create_dirs:
                self.output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.output_path, "w", encoding="utf-8") as f:
                for line in lines:
                    f.write(line + "\n")
        except OSError as e:
            self.logger.error(
                "Failed to write positions",
                delivery_name=self.name,
                output_path=str(self.output_path),
                error=str(e)
            )
            raise DeliveryError(
                f"File system error: {e}",
                delivery_method="file"
            ) from e

        self._delivery_count += len(lines)
        self.logger.info(
            "Positions written to file",
            delivery_name=self.name,
            output_path=str(self.output_path),
            line_count=len(lines)
        )
        return DeliveryResult(
            status=DeliveryStatus.SUCCESS,
            lines_written=len(lines),
            message=f"Written to {self.output_path}"
        )
