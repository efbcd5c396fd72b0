"""Typer CLI for the shelf divider editor."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from shelves.application import ReplayScriptCommand
from shelves.application.config import ConfigError, load_script
from shelves.cli.commands import validate_command
from shelves.domain import (
    PointerPosition,
    ShelfConfig,
    Units,
    calculate_divider_distances,
    detect_ghost_divider,
)
from shelves.infrastructure import (
    DistanceFormatter,
    ReplayTraceFormatter,
    SnapshotFormatter,
    SnapshotJsonExporter,
)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


app = typer.Typer(
    name="shelves",
    help="Replay and inspect divider edits for a shelf configurator.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every state transition")
    ] = False,
) -> None:
    """Replay and inspect divider edits for a shelf configurator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_or_exit(script_file: Path):
    try:
        return load_script(script_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def replay(
    script_file: Annotated[
        Path, typer.Argument(help="Path to the JSON event script to replay")
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format for the final snapshot"),
    ] = OutputFormat.TEXT,
    trace: Annotated[
        bool, typer.Option("--trace", help="Print the state after every event")
    ] = False,
) -> None:
    """Replay an event script and print the final divider layout."""
    script = _load_or_exit(script_file)
    result = ReplayScriptCommand().execute(script)

    if trace:
        typer.echo(ReplayTraceFormatter().format(result.steps))
        typer.echo()

    if output_format is OutputFormat.JSON:
        typer.echo(SnapshotJsonExporter().export(result.snapshot))
    else:
        typer.echo(SnapshotFormatter().format(result.snapshot))


@app.command()
def ghost(
    width: Annotated[float, typer.Option("--width", "-w", help="Shelf width")],
    height: Annotated[float, typer.Option("--height", "-h", help="Shelf height")],
    depth: Annotated[float, typer.Option("--depth", "-d", help="Shelf depth")],
    x: Annotated[float, typer.Option("--x", help="Offset from the interior centerline")],
    y: Annotated[float, typer.Option("--y", help="Offset from the interior floor")],
    thickness: Annotated[
        float, typer.Option("--thickness", "-t", help="Material thickness")
    ] = 0.75,
    units: Annotated[Units, typer.Option("--units", "-u", help="Unit system")] = Units.IMPERIAL,
) -> None:
    """Show where a new divider would be previewed on an empty shelf."""
    try:
        config = ShelfConfig(
            width=width,
            height=height,
            depth=depth,
            material_thickness=thickness,
            units=units,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    pointer = PointerPosition(x=0, y=0, position_x=x, position_y=y)
    preview = detect_ghost_divider(pointer, [], [], config)
    if preview is None:
        typer.echo("No ghost: pointer is outside the shelf interior.")
        raise typer.Exit(code=1)

    status = "addable" if preview.addable else "blocked"
    typer.echo(f"Ghost: {preview.orientation.value} at {preview.position:g} ({status})")


@app.command()
def distances(
    script_file: Annotated[
        Path, typer.Argument(help="Path to the JSON event script to replay")
    ],
    divider_id: Annotated[
        str, typer.Option("--divider", help="Id of the divider to measure from")
    ],
) -> None:
    """Replay a script and show clear space around one divider."""
    script = _load_or_exit(script_file)
    snapshot = ReplayScriptCommand().execute(script).snapshot
    context = snapshot.context

    divider = context.find_divider(divider_id)
    if divider is None or context.shelf_config is None:
        typer.echo(f"Error: no divider with id '{divider_id}'", err=True)
        raise typer.Exit(code=1)

    measurements = calculate_divider_distances(
        divider, context.dividers_for(divider.orientation), context.shelf_config
    )
    typer.echo(f"Divider {divider.id} ({divider.orientation.value} at {divider.position:g})")
    typer.echo(DistanceFormatter().format(measurements, context.shelf_config.units))


if __name__ == "__main__":
    app()
