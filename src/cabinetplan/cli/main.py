"""Typer CLI for wall layout and sheet nesting."""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from cabinetplan.application import LayoutZoneCommand
from cabinetplan.application.config import (
    ConfigError,
    config_to_options,
    config_to_parts,
    config_to_settings,
    config_to_sheet_spec,
    config_to_zones,
    load_config,
    load_cutting_config,
)
from cabinetplan.cli.commands import display_load_error, validate_command
from cabinetplan.domain.value_objects import LayoutIssue
from cabinetplan.infrastructure import (
    BinPackingService,
    CuttingPlanFormatter,
    JsonExporter,
    WallLayoutFormatter,
    format_issues,
)


class OutputFormat(str, Enum):
    """Output formats shared by the layout and nest commands."""

    TEXT = "text"
    JSON = "json"


app = typer.Typer(
    name="cabinetplan",
    help="Lay out cabinets along walls and nest their parts onto stock sheets.",
)

app.command(name="validate")(validate_command)


def _exit_code(issues: list[LayoutIssue]) -> int:
    if any(issue.is_error for issue in issues):
        return 1
    if issues:
        return 2
    return 0


@app.command()
def layout(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON layout file"),
    ],
    no_auto_fill: Annotated[
        bool,
        typer.Option("--no-auto-fill", help="Only resolve collisions; keep auto-filled cabinets as given"),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = OutputFormat.TEXT,
) -> None:
    """Lay out every zone in a layout file.

    Exit codes: 0 success, 2 success with warnings, 1 errors.
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    settings = config_to_settings(config.settings)
    options = config_to_options(config.options)
    command = LayoutZoneCommand()
    results = [
        command.execute(zone, settings, options, auto_fill=not no_auto_fill)
        for zone in config_to_zones(config)
    ]
    issues = [issue for result in results for issue in result.issues]

    if output_format is OutputFormat.JSON:
        typer.echo(JsonExporter().export_layout(results))
    else:
        formatter = WallLayoutFormatter()
        for result in results:
            if result.zone is not None:
                typer.echo(formatter.format(result.zone))
                typer.echo()
        if issues:
            typer.echo(format_issues(issues), err=True)

    raise typer.Exit(code=_exit_code(issues))


@app.command()
def nest(
    parts_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON cutting file (sheet and parts)"),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = OutputFormat.TEXT,
    kerf: Annotated[
        int | None,
        typer.Option("--kerf", min=0, max=20, help="Saw blade width in mm (overrides the file)"),
    ] = None,
) -> None:
    """Nest a part list onto stock sheets.

    Exit codes: 0 success, 2 success with warnings, 1 errors.
    """
    try:
        config = load_cutting_config(parts_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    service = BinPackingService(
        config_to_sheet_spec(config.sheet, kerf),
        min_offcut_size=config.sheet.min_offcut_size,
    )
    result = service.optimize(config_to_parts(config))
    issues = list(result.issues)

    if output_format is OutputFormat.JSON:
        typer.echo(JsonExporter().export_packing(result))
    else:
        typer.echo(CuttingPlanFormatter().format(result))
        if issues:
            typer.echo(format_issues(issues), err=True)

    raise typer.Exit(code=_exit_code(issues))


if __name__ == "__main__":
    app()
