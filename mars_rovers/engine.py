"""
Main mission engine coordinator.

Orchestrates the mission pipeline:
Mission Text → Parser → Mission → Runner (+ policy) → Final Positions → Delivery
"""

from dataclasses import dataclass
from typing import Iterable, Optional

import structlog

from .config.defaults import DefaultConfig, get_default_config
from .data.models import Mission, Position
from .data.parsers import parse_mission
from .delivery.base import BaseResultDelivery, DeliveryResult
from .delivery.file_delivery import FileResultDelivery
from .delivery.stdout_delivery import StdoutResultDelivery
from .state.models import BoundaryPolicy, PlanResult
from .state.runner import execute_mission

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class MissionReport:
    """Outcome of a completed mission run."""
    mission: Mission
    policy: BoundaryPolicy
    plan_results: tuple[PlanResult, ...]

    @property
    def positions(self) -> list[Position]:
        """Final positions in plan order."""
        return [result.final_position for result in self.plan_results]

    @property
    def skipped_moves(self) -> int:
        return sum(len(result.skipped) for result in self.plan_results)

    @property
    def halted_rovers(self) -> list[int]:
        return [result.rover_index for result in self.plan_results if result.halted]


class MissionEngine:
    """
    Coordinator for a single-shot mission run.

    Parses the mission text, executes every rover plan under the configured
    boundary policy and hands the final positions to a delivery sink. Nothing
    is delivered unless parsing and execution both succeed.
    """

    def __init__(
        self,
        config: Optional[DefaultConfig] = None,
        delivery: Optional[BaseResultDelivery] = None
    ) -> None:
        self.config = config or get_default_config()
        self.policy = self.config.runner.policy()
        self.delivery = delivery or self.create_delivery(self.config)
        self.logger = logger.bind(policy=self.policy.value)

    @staticmethod
    def create_delivery(config: DefaultConfig) -> BaseResultDelivery:
        """Select the output sink from configuration."""
        if config.output.path:
            return FileResultDelivery(config.output.path)
        return StdoutResultDelivery()

    def execute(self, lines: Iterable[str]) -> MissionReport:
        """
        Parse and execute mission text without delivering results.

        Raises:
            ParseError: If the mission text is invalid
            OutOfBoundsError: Under STRICT, on the first out-of-bounds move
        """
        mission = parse_mission(lines)
        plan_results = execute_mission(mission, self.policy)

        report = MissionReport(
            mission=mission,
            policy=self.policy,
            plan_results=tuple(plan_results)
        )
        self.logger.info(
            "Mission executed",
            rover_count=mission.rover_count,
            skipped_moves=report.skipped_moves,
            halted_rovers=report.halted_rovers
        )
        return report

    def run(self, lines: Iterable[str]) -> MissionReport:
        """Execute mission text and deliver the final positions."""
        report = self.execute(lines)
        result: DeliveryResult = self.delivery.deliver(report.positions)
        self.logger.debug(
            "Results delivered",
            delivery_name=self.delivery.name,
            lines_written=result.lines_written
        )
        return report
