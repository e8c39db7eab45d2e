"""Configuration validation utilities."""

import logging
from dataclasses import dataclass
from typing import Any

_KNOWN_AUTHORIZATION_OPTIONS = {"alert", "badge", "sound", "provisional"}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_storage_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate storage parameters."""
        errors = []

        for name in ("directory", "file_name"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value.strip():
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-empty string",
                        value=value
                    ))

        if "file_name" in params:
            value = params["file_name"]
            if isinstance(value, str) and ("/" in value or "\\" in value):
                errors.append(ValidationError(
                    field="file_name",
                    message="Must be a bare file name without directories",
                    value=value
                ))

        if "file_mode" in params:
            value = params["file_mode"]
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 0o777:
                errors.append(ValidationError(
                    field="file_mode",
                    message="Must be an integer permission mode between 0 and 0o777",
                    value=value
                ))

        for name in ("fsync", "pretty", "quarantine_unreadable"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a boolean",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_reminder_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate reminder parameters."""
        errors = []

        if "hour" in params:
            value = params["hour"]
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 23:
                errors.append(ValidationError(
                    field="hour",
                    message="Must be an integer between 0 and 23",
                    value=value
                ))

        if "minute" in params:
            value = params["minute"]
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 59:
                errors.append(ValidationError(
                    field="minute",
                    message="Must be an integer between 0 and 59",
                    value=value
                ))

        if "title_template" in params:
            value = params["title_template"]
            if not isinstance(value, str) or "{name}" not in value:
                errors.append(ValidationError(
                    field="title_template",
                    message="Must be a string containing the {name} placeholder",
                    value=value
                ))

        if "authorization_options" in params:
            value = params["authorization_options"]
            if not isinstance(value, (list, tuple)) or not value:
                errors.append(ValidationError(
                    field="authorization_options",
                    message="Must be a non-empty list",
                    value=value
                ))
            else:
                unknown = [opt for opt in value if opt not in _KNOWN_AUTHORIZATION_OPTIONS]
                if unknown:
                    errors.append(ValidationError(
                        field="authorization_options",
                        message=f"Unknown options: {', '.join(map(str, unknown))}",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_scan_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate scan parameters."""
        errors = []

        if "separator" in params:
            value = params["separator"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="separator",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or not isinstance(
                    logging.getLevelName(value.upper()), int):
                errors.append(ValidationError(
                    field="level",
                    message="Must be a standard logging level name",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        section_validators = {
            "storage": ConfigValidator.validate_storage_params,
            "reminders": ConfigValidator.validate_reminder_params,
            "scan": ConfigValidator.validate_scan_params,
            "logging": ConfigValidator.validate_logging_params,
        }

        for section, validate in section_validators.items():
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping of settings",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors
