"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from ..state.models import BoundaryPolicy

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
KNOWN_SECTIONS = {
    "runner": {"boundary_policy"},
    "logging": {"level", "format_json"},
    "output": {"path"},
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_runner_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate runner parameters."""
        errors = []

        if "boundary_policy" in params:
            value = params["boundary_policy"]
            allowed = [policy.value for policy in BoundaryPolicy]
            if value not in allowed:
                errors.append(ValidationError(
                    field="runner.boundary_policy",
                    message=f"Must be one of: {', '.join(allowed)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of: {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="logging.format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_output_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate output parameters."""
        errors = []

        if "path" in params:
            value = params["path"]
            if value is not None and (not isinstance(value, str) or not value.strip()):
                errors.append(ValidationError(
                    field="output.path",
                    message="Must be a non-empty string or null",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, value in config.items():
            if section not in KNOWN_SECTIONS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=value
                ))
                continue

            if not isinstance(value, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=value
                ))
                continue

            for key in value:
                if key not in KNOWN_SECTIONS[section]:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration key",
                        value=value[key]
                    ))

        if isinstance(config.get("runner"), dict):
            errors.extend(ConfigValidator.validate_runner_params(config["runner"]))

        if isinstance(config.get("logging"), dict):
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        if isinstance(config.get("output"), dict):
            errors.extend(ConfigValidator.validate_output_params(config["output"]))

        return errors
