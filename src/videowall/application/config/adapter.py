"""Adapter to convert CalculatorConfiguration to the application DTO."""

from videowall.application.config.schema import CalculatorConfiguration
from videowall.application.dtos import CalculatorInput


def config_to_input(config: CalculatorConfiguration) -> CalculatorInput:
    """Convert a CalculatorConfiguration to a CalculatorInput DTO.

    Example:
        >>> config = load_config(Path("lobby-wall.json"))
        >>> output = CalculateWallCommand().execute(config_to_input(config))
    """
    inputs = config.inputs
    return CalculatorInput(
        aspect_ratio=inputs.aspect_ratio,
        height=inputs.height,
        width=inputs.width,
        diagonal=inputs.diagonal,
        unit=config.unit.value,
        cabinet_type=config.cabinet_type.value,
    )
