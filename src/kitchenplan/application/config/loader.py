"""Project file loader with error handling.

This module loads and validates JSON project files. File system errors,
JSON syntax errors, schema violations and broken product references all
surface as a single ConfigError type with clear, actionable messages.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from kitchenplan.application.config.schemas import ProjectConfiguration
from kitchenplan.application.config.validator import check_references

logger = logging.getLogger(__name__)

# Prefix pydantic adds to ValueError messages from field and model validators
VALUE_ERROR_PREFIX = "Value error, "


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, per-field
            validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("room", "width"))
        'room.width'
        >>> _format_json_path(("instances", 2, "rotation"))
        'instances[2].rotation'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract and format validation errors from a Pydantic ValidationError.

    Discriminated unions add the tag to the location (for example
    ``catalog.0.kind.corner.corner_type``); the tag is kept since it names
    the kind that failed. Messages raised by our own validators lose the
    "Value error, " prefix pydantic puts in front of them.
    """
    details: list[dict[str, Any]] = []
    for err in error.errors():
        message = err["msg"]
        if err["type"] == "value_error":
            message = message.removeprefix(VALUE_ERROR_PREFIX)
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": message,
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    """Format validation error details into a multi-line message."""
    lines = ["Configuration validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None) -> ProjectConfiguration:
    """Schema-validate ``data`` and check its cross references."""
    try:
        config = ProjectConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e

    references = check_references(config)
    if not references.is_valid:
        details = [
            {
                "path": error.path,
                "message": error.message,
                "value": error.value,
                "error_type": "reference",
            }
            for error in references.errors
        ]
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )

    logger.debug(
        f"Loaded project with {len(config.catalog)} products and "
        f"{len(config.instances)} instances"
    )
    return config


def load_config(path: Path) -> ProjectConfiguration:
    """Load and validate a project from a JSON file.

    Args:
        path: Path to the JSON project file

    Returns:
        A validated ProjectConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated.
            The error_type attribute indicates the specific error category:
            - "file_not_found": File does not exist
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation or product reference failed

    Example:
        >>> try:
        ...     config = load_config(Path("kitchen.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        ) from e

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> ProjectConfiguration:
    """Load and validate a project from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data, None)
