"""Typer CLI for kitchen cabinet planning."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from kitchenplan.application import ServiceFactory
from kitchenplan.application.config import (
    ConfigError,
    config_to_session,
    load_config,
)
from kitchenplan.application.session import SessionConfig
from kitchenplan.cli.commands import display_load_error, validate_command
from kitchenplan.domain.recipes import default_recipe_table
from kitchenplan.infrastructure import RecipeTableFormatter


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


app = typer.Typer(
    name="kitchenplan",
    help="Resolve cabinet recipes, assemble part lists and snap placements.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """Kitchen cabinet planning tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_session(project_file: Path) -> SessionConfig:
    """Load a project file or exit with the formatted error."""
    try:
        config = load_config(project_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    return config_to_session(config)


@app.command()
def assemble(
    project_file: Annotated[
        Path, typer.Argument(help="Path to the JSON project file")
    ],
    instance_id: Annotated[
        str | None,
        typer.Option("--instance", "-i", help="Only assemble this instance"),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = OutputFormat.TEXT,
) -> None:
    """Print the part list of each placed cabinet."""
    session = _load_session(project_file)
    factory = ServiceFactory(session)
    command = factory.create_assemble_command()

    if instance_id is not None:
        instance = session.instance(instance_id)
        if instance is None:
            typer.echo(f"Error: unknown instance '{instance_id}'", err=True)
            raise typer.Exit(code=1)
        outputs = [command.execute(instance)]
    else:
        outputs = command.execute_all()

    if output_format == OutputFormat.JSON:
        typer.echo(factory.get_json_exporter().export_assemblies(outputs))
    else:
        typer.echo(factory.get_part_list_formatter().format_all(outputs))


@app.command()
def snap(
    project_file: Annotated[
        Path, typer.Argument(help="Path to the JSON project file")
    ],
    instance_id: Annotated[str, typer.Argument(help="Instance to place")],
    x: Annotated[float, typer.Argument(help="Drop point x in mm")],
    z: Annotated[float, typer.Argument(help="Drop point z in mm")],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = OutputFormat.TEXT,
) -> None:
    """Resolve a drop position against the other placed items."""
    session = _load_session(project_file)
    instance = session.instance(instance_id)
    if instance is None:
        typer.echo(f"Error: unknown instance '{instance_id}'", err=True)
        raise typer.Exit(code=1)

    factory = ServiceFactory(session)
    output = factory.create_place_command().execute(instance, x, z)

    if output_format == OutputFormat.JSON:
        typer.echo(factory.get_json_exporter().export_placement(output))
    else:
        typer.echo(factory.get_snap_result_formatter().format(output))


@app.command()
def recipes() -> None:
    """List the built-in recipe table."""
    typer.echo(RecipeTableFormatter().format(default_recipe_table()))


if __name__ == "__main__":
    app()
