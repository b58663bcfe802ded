"""CLI command implementations for the kitchenplan application."""

from kitchenplan.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
