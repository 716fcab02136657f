"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from .defaults import LoggingParams, MessageParams

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_message_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate sample message parameters."""
        errors = []

        if "samples" in params:
            value = params["samples"]
            if not isinstance(value, (list, tuple)) or len(value) == 0:
                errors.append(ValidationError(
                    field="samples",
                    message="Must be a non-empty list of strings",
                    value=value
                ))
            elif not all(isinstance(item, str) for item in value):
                errors.append(ValidationError(
                    field="samples",
                    message="Every sample must be a string",
                    value=value
                ))

        if "seed" in params:
            value = params["seed"]
            # bool is an int subclass
            if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
                errors.append(ValidationError(
                    field="seed",
                    message="Must be an integer or null",
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
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=flag,
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged configuration."""
        errors = []

        sections = {
            "messages": (MessageParams, cls.validate_message_params),
            "logging": (LoggingParams, cls.validate_logging_params),
        }

        for section, (params_class, validate) in sections.items():
            if section not in config:
                continue

            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue

            for key in sorted(set(params) - set(params_class.__dataclass_fields__)):
                errors.append(ValidationError(
                    field=f"{section}.{key}",
                    message="Unknown configuration key",
                    value=params[key]
                ))

            errors.extend(validate(params))

        unknown = set(config) - set(sections)
        for section in sorted(unknown):
            errors.append(ValidationError(
                field=section,
                message="Unknown configuration section",
                value=config[section]
            ))

        return errors
