"""Default configuration parameters for the mission engine."""

from dataclasses import dataclass
from typing import Optional

from ..state.models import BoundaryPolicy


@dataclass(frozen=True)
class RunnerParams:
    """Mission runner parameters."""
    boundary_policy: str = BoundaryPolicy.STRICT.value    # strict | ignore | stop_on_oob

    def policy(self) -> BoundaryPolicy:
        return BoundaryPolicy(self.boundary_policy)


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class OutputParams:
    """Result output parameters."""
    path: Optional[str] = None          # None writes to stdout


@dataclass(frozen=True)
class DefaultConfig:
    """Complete engine configuration."""
    runner: RunnerParams
    logging: LoggingParams
    output: OutputParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        runner=RunnerParams(),
        logging=LoggingParams(),
        output=OutputParams(),
    )


def config_from_dict(config: dict) -> DefaultConfig:
    """Build a typed configuration from a merged configuration dict."""
    return DefaultConfig(
        runner=RunnerParams(**config.get("runner", {})),
        logging=LoggingParams(**config.get("logging", {})),
        output=OutputParams(**config.get("output", {})),
    )
