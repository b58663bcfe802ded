"""Validate command for checking project files.

This module provides the `validate` command that checks a JSON project
file for errors and placement warnings.
"""

from pathlib import Path
from typing import Annotated

import typer

from kitchenplan.application.config import (
    ConfigError,
    ProjectConfiguration,
    ValidationResult,
    load_config,
    validate_config,
)


def display_load_error(error: ConfigError) -> None:
    """Display a project loading error on stderr.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def _display_summary(config: ProjectConfiguration) -> None:
    room = config.room
    typer.echo(
        f"Room: {room.width:g} x {room.depth:g} x {room.height:g} mm "
        f"({room.shape.value})"
    )
    typer.echo(f"Products: {len(config.catalog)}")
    typer.echo(f"Instances: {len(config.instances)}")
    typer.echo()


def _display_validation_result(result: ValidationResult) -> None:
    """Display validation results including errors and warnings."""
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Project is valid.")


def validate_command(
    project_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file to validate"),
    ],
) -> None:
    """Validate a kitchen project file.

    Checks the project file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, impossible kinds, etc.)
    - Unknown product references and duplicate ids
    - Placement advisories (items outside the room or overlapping)

    Exit codes:
        0 - Project is valid with no warnings
        1 - Project has errors (cannot be used)
        2 - Project is valid but has warnings

    Example:
        kitchenplan validate kitchen.json
    """
    typer.echo(f"Validating {project_file}...")
    typer.echo()

    try:
        config = load_config(project_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    _display_summary(config)
    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)
