"""Validate command for checking layout files.

This module provides the `validate` command that loads a layout file and
checks every zone's geometry without running the layout engines.
"""

from pathlib import Path
from typing import Annotated

import typer

from cabinetplan.application.config import ConfigError, config_to_zones, load_config
from cabinetplan.domain.services import check_zone_geometry


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error.

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
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON layout file to validate"),
    ],
) -> None:
    """Validate a layout file.

    Checks the file for:
    - JSON syntax errors
    - Schema errors (missing fields, bad enum values, duplicate cabinet ids)
    - Zone geometry (obstacles outside the wall, cabinets past the wall end)

    Exit codes:
        0 - Layout file is valid with no warnings
        1 - Layout file has errors (cannot be used)
        2 - Layout file is valid but has warnings

    Example:
        cabinetplan validate kitchen.json
    """
    typer.echo(f"Validating {config_file}...")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    errors: list[str] = []
    warnings: list[str] = []
    for zone in config_to_zones(config):
        for issue in check_zone_geometry(zone, allow_overhang=True):
            errors.append(f"{zone.id}: {issue.message}")
        # Overhanging cabinets are accepted by collision resolution but
        # rejected by auto-fill.
        for cabinet in zone.cabinets:
            if cabinet.width > 0 and cabinet.from_left >= 0 and cabinet.right > zone.total_length:
                warnings.append(
                    f"{zone.id}: Cabinet {cabinet.id} ends at {cabinet.right}, "
                    f"past wall end {zone.total_length}"
                )

    if errors:
        typer.echo("Errors:", err=True)
        for message in errors:
            typer.echo(f"  {message}", err=True)
    if warnings:
        typer.echo("Warnings:")
        for message in warnings:
            typer.echo(f"  {message}")

    if errors:
        typer.echo(
            f"Validation failed: {len(errors)} error(s), {len(warnings)} warning(s)",
            err=True,
        )
        raise typer.Exit(code=1)
    if warnings:
        typer.echo(f"Validation passed with {len(warnings)} warning(s)")
        raise typer.Exit(code=2)
    typer.echo("Validation passed. Layout file is valid.")
