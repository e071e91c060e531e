"""Validate command for checking pricing configuration files."""

from pathlib import Path
from typing import Annotated

import typer

from dressing.application.config import (
    ConfigError,
    config_to_pricing_table,
    load_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON pricing configuration to validate"),
    ],
) -> None:
    """Validate a pricing configuration file.

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors (cannot be used)

    Example:
        dressing validate prices.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        table = config_to_pricing_table(load_config(config_file))
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    typer.echo(
        f"Validation passed. {len(table.transport_zones)} transport zone(s): "
        f"{', '.join(table.zone_codes)}"
    )


def _display_load_error(error: ConfigError) -> None:
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
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)
