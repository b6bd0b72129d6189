"""Application layer - use cases and orchestration."""

from .commands import CalculateWallCommand, convert_inputs
from .dtos import CalculationOutput, CalculatorInput

__all__ = [
    "CalculateWallCommand",
    "CalculationOutput",
    "CalculatorInput",
    "convert_inputs",
]
