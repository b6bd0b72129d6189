"""Configuration merging utilities for CLI override support.

Precedence is: CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from typing import Any

from videowall.application.config.loader import parse_config
from videowall.application.config.schema import CalculatorConfiguration
from videowall.domain.dimension_resolver import DIMENSION_FIELDS
from videowall.domain.value_objects import CabinetType, LengthUnit


def merge_config_with_cli(
    config: CalculatorConfiguration,
    *,
    aspect_ratio: float | None = None,
    height: float | None = None,
    width: float | None = None,
    diagonal: float | None = None,
    unit: LengthUnit | None = None,
    cabinet_type: CabinetType | None = None,
    output_format: str | None = None,
    display_unit: LengthUnit | None = None,
) -> CalculatorConfiguration:
    """Merge CLI arguments with configuration values.

    Dimension overrides follow the two-known-quantities rule: when the CLI
    supplies two or more quantities they replace the configured inputs
    entirely; a single quantity only replaces that field.

    Args:
        config: The base CalculatorConfiguration to merge with
        aspect_ratio: Override for inputs.aspect_ratio (if not None)
        height: Override for inputs.height (if not None)
        width: Override for inputs.width (if not None)
        diagonal: Override for inputs.diagonal (if not None)
        unit: Override for unit (if not None)
        cabinet_type: Override for cabinet_type (if not None)
        output_format: Override for output.format (if not None)
        display_unit: Override for output.unit (if not None)

    Returns:
        A new CalculatorConfiguration with merged values

    Raises:
        ConfigError: If the merged values no longer form a valid configuration.

    Example:
        >>> merged = merge_config_with_cli(config, height=3000.0)
        >>> merged.inputs.height
        3000.0
    """
    cli_inputs = {
        "aspect_ratio": aspect_ratio,
        "height": height,
        "width": width,
        "diagonal": diagonal,
    }
    data: dict[str, Any] = config.model_dump(mode="json")
    data["inputs"] = _build_inputs_data(config, cli_inputs)

    if unit is not None:
        data["unit"] = unit.value
    if cabinet_type is not None:
        data["cabinet_type"] = cabinet_type.value
    if output_format is not None:
        data["output"]["format"] = output_format
    if display_unit is not None:
        data["output"]["unit"] = display_unit.value

    return parse_config(data)


def _build_inputs_data(
    config: CalculatorConfiguration,
    cli_inputs: dict[str, float | None],
) -> dict[str, float]:
    """Build the inputs block with CLI overrides applied."""
    overrides = {name: value for name, value in cli_inputs.items() if value is not None}
    if len(overrides) >= 2:
        return overrides

    inputs = {
        name: getattr(config.inputs, name)
        for name in DIMENSION_FIELDS
        if getattr(config.inputs, name) is not None
    }
    inputs.update(overrides)
    return inputs
