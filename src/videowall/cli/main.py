"""Typer CLI for video wall calculation."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from videowall.application import CalculateWallCommand, CalculationOutput, CalculatorInput
from videowall.application.config import (
    ConfigError,
    config_to_input,
    load_config,
    merge_config_with_cli,
)
from videowall.cli.commands import validate_command
from videowall.domain import (
    CABINET_DIMENSIONS,
    MAX_GRID_SIZE,
    CabinetType,
    LengthUnit,
    convert_unit,
)
from videowall.infrastructure import (
    GridDiagramFormatter,
    JsonExporter,
    ResultFormatter,
    format_value,
)

OUTPUT_FORMATS = ("text", "json", "grid", "all")


app = typer.Typer(
    name="videowall",
    help="Size a video wall from any two of aspect ratio, height, width and diagonal.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _print_output(output: CalculationOutput, output_format: str, unit: LengthUnit) -> None:
    """Render a successful calculation in the requested format."""
    if output_format == "json":
        typer.echo(JsonExporter().export(output, unit))
        return

    if output_format in ("text", "all"):
        typer.echo(ResultFormatter().format(output, unit))

    if output_format in ("grid", "all") and output.result is not None:
        diagram = GridDiagramFormatter()
        if output_format == "all":
            typer.echo()
        typer.echo(diagram.format(output.result.lower, "Lower Configuration Grid"))
        typer.echo()
        typer.echo(diagram.format(output.result.upper, "Upper Configuration Grid"))


@app.command()
def calculate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    aspect_ratio: Annotated[
        float | None,
        typer.Option("--aspect-ratio", "-a", help="Aspect ratio as width/height (e.g. 1.7778)"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Wall height in the input unit"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Wall width in the input unit"),
    ] = None,
    diagonal: Annotated[
        float | None,
        typer.Option("--diagonal", "-d", help="Wall diagonal in the input unit"),
    ] = None,
    unit: Annotated[
        LengthUnit | None,
        typer.Option("--unit", "-u", help="Unit of the entered lengths"),
    ] = None,
    cabinet: Annotated[
        CabinetType | None,
        typer.Option("--cabinet", help="Cabinet type"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: text, json, grid, all"),
    ] = None,
    display_unit: Annotated[
        LengthUnit | None,
        typer.Option("--display-unit", help="Unit for displayed lengths (default: input unit)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Find the closest cabinet grids for a wall.

    Provide exactly two of --aspect-ratio, --height, --width and --diagonal,
    or a JSON configuration file. CLI options override config file values.

    Examples:
        videowall calculate --width 6000 --height 3375
        videowall calculate --aspect-ratio 1.7778 --diagonal 120 --unit inches
        videowall calculate --config lobby-wall.json --format json
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if config_file is not None:
        try:
            config = load_config(config_file)
            config = merge_config_with_cli(
                config,
                aspect_ratio=aspect_ratio,
                height=height,
                width=width,
                diagonal=diagonal,
                unit=unit,
                cabinet_type=cabinet,
                output_format=output_format,
                display_unit=display_unit,
            )
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

        calculator_input = config_to_input(config)
        output_format = config.output.format
        display_unit = config.display_unit
    else:
        calculator_input = CalculatorInput(
            aspect_ratio=aspect_ratio,
            height=height,
            width=width,
            diagonal=diagonal,
            unit=(unit or LengthUnit.MILLIMETER).value,
            cabinet_type=(cabinet or CabinetType.WIDE).value,
        )

    if output_format is None:
        output_format = "text"
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    output = CalculateWallCommand().execute(calculator_input)

    if not output.is_valid:
        typer.echo("Errors:", err=True)
        for error in output.errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(code=1)

    _print_output(output, output_format, display_unit or output.unit)


@app.command()
def convert(
    value: Annotated[float, typer.Argument(help="Length to convert")],
    from_unit: Annotated[
        LengthUnit,
        typer.Option("--from", help="Unit the value is expressed in"),
    ],
    to_unit: Annotated[
        LengthUnit,
        typer.Option("--to", help="Unit to convert to"),
    ],
) -> None:
    """Convert a length between units.

    Example:
        videowall convert 120 --from inches --to mm
    """
    converted = convert_unit(value, from_unit, to_unit)
    typer.echo(f"{format_value(converted, to_unit)} {to_unit.value}")


@app.command()
def cabinets() -> None:
    """List the available cabinet types."""
    typer.echo("Available cabinets:")
    typer.echo()
    for cabinet_type, dims in CABINET_DIMENSIONS.items():
        typer.echo(
            f"  {cabinet_type.value:<6} {dims.width:g} x {dims.height:g} mm "
            f"(up to {MAX_GRID_SIZE} x {MAX_GRID_SIZE} cabinets)"
        )


if __name__ == "__main__":
    app()
