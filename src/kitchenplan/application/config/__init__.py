"""Project file schema, loading and conversion.

Public API:
    - ProjectConfiguration: Root configuration model
    - load_config: Load a project from a JSON file
    - load_config_from_dict: Load a project from a dictionary
    - ConfigError: Exception for configuration errors
    - validate_config: Cross-reference checks and placement advisories
    - config_to_session: Build the SessionConfig for a project

Example:
    >>> from pathlib import Path
    >>> from kitchenplan.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ...     print(f"Room: {config.room.width}x{config.room.depth}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from kitchenplan.application.config.adapter import (
    config_to_catalog,
    config_to_dimensions,
    config_to_instances,
    config_to_overrides,
    config_to_room,
    config_to_session,
    config_to_snap_settings,
)
from kitchenplan.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from kitchenplan.application.config.schemas import (
    SUPPORTED_VERSIONS,
    DimensionsSchema,
    InstanceSchema,
    ProductSchema,
    ProjectConfiguration,
    RoomSchema,
    SnapSchema,
)
from kitchenplan.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_placement_advisories,
    check_references,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "DimensionsSchema",
    "InstanceSchema",
    "ProductSchema",
    "ProjectConfiguration",
    "RoomSchema",
    "SnapSchema",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_placement_advisories",
    "check_references",
    "config_to_catalog",
    "config_to_dimensions",
    "config_to_instances",
    "config_to_overrides",
    "config_to_room",
    "config_to_session",
    "config_to_snap_settings",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
