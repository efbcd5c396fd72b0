"""Validate command for checking event script files.

This module provides the `validate` command that checks a JSON event
script for syntax and schema errors, and for a saved layout that breaks
the divider spacing rules.
"""

from pathlib import Path
from typing import Annotated

import typer

from shelves.application.config import (
    ConfigError,
    ScriptConfiguration,
    config_to_dividers,
    config_to_shelf,
    load_script,
)
from shelves.domain.constraint_solver import is_legal_position


def validate_command(
    script_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON event script to validate"),
    ],
) -> None:
    """Validate an event script.

    Exit codes:
        0 - Script is valid with no warnings
        1 - Script has errors (cannot be replayed)
        2 - Script is valid but its saved layout has spacing warnings

    Example:
        shelves validate session.json
    """
    typer.echo(f"Validating {script_file}...")
    typer.echo()

    try:
        script = load_script(script_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    warnings = _layout_warnings(script)
    if warnings:
        typer.echo("Warnings:")
        for warning in warnings:
            typer.echo(f"  {warning}")
        typer.echo()
        typer.echo("Script is valid with warnings.")
        raise typer.Exit(code=2)

    typer.echo(
        f"Script is valid: {len(script.layout.dividers)} saved dividers, "
        f"{len(script.events)} events."
    )


def _layout_warnings(script: ScriptConfiguration) -> list[str]:
    """Saved dividers that sit outside the walls or too close to a peer."""
    config = config_to_shelf(script.shelf)
    dividers = config_to_dividers(script)
    warnings: list[str] = []
    for divider in dividers:
        if not is_legal_position(
            divider.position, divider.orientation, divider.id, dividers, config
        ):
            warnings.append(
                f"layout.dividers: {divider.id} at {divider.position:g} is out of "
                f"bounds or closer than {config.tolerances.min_gap:g} to another "
                f"{divider.orientation.value} divider"
            )
    return warnings


def _display_load_error(error: ConfigError) -> None:
    """Display a script loading error."""
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
            typer.echo(f"  {detail.get('path', 'unknown')}: {detail.get('message')}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)
