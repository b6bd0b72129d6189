"""The ``validate`` command: check a configuration file without calculating."""

from pathlib import Path
from typing import Annotated

import typer

from videowall.application.config import (
    CalculatorConfiguration,
    ConfigError,
    load_config,
    validate_config,
)


def _load_error_lines(error: ConfigError) -> list[str]:
    if error.error_type == "json_parse":
        return [
            f"Invalid JSON syntax at line {d['line']}, column {d['column']}: {d['message']}"
            for d in error.details
        ]
    if error.error_type == "validation":
        return [f"{d['path'] or '<root>'}: {d['message']}" for d in error.details]
    if error.error_type == "file_not_found":
        return [f"File not found: {error.path}"]
    return [error.message]


def _summary(config: CalculatorConfiguration) -> str:
    known = " and ".join(
        f"{name.replace('_', ' ')} {getattr(config.inputs, name):g}"
        for name in config.inputs.active_inputs
    )
    return f"Known: {known} ({config.unit.value}, {config.cabinet_type.value} cabinets)"


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Check a wall configuration file.

    Reports JSON and schema errors, then warns about a diagonal that is not
    longer than the known side and about targets no grid can bracket.

    Exit codes: 0 valid, 1 unusable, 2 valid with warnings.

    Example:
        videowall validate lobby-wall.json
    """
    typer.echo(f"Validating {config_file}...")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        typer.echo("Errors:", err=True)
        for line in _load_error_lines(e):
            typer.echo(f"  {line}", err=True)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    typer.echo(_summary(config))
    result = validate_config(config)

    for warning in result.warnings:
        typer.echo(f"Warning: {warning.path}: {warning.message}")
        if warning.suggestion:
            typer.echo(f"  Suggestion: {warning.suggestion}")

    if result.has_warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
    raise typer.Exit(code=result.exit_code)
