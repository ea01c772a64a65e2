"""CLI command implementations for the cabinetplan application.

This package contains subcommands for the cabinetplan CLI, including:
- validate: Check a layout file without laying it out
"""

from cabinetplan.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
