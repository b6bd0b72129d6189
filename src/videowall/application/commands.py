"""Application commands (use cases) for video wall calculation."""

from __future__ import annotations

import logging

from videowall.domain import (
    MAX_GRID_SIZE,
    DimensionInput,
    DimensionResolver,
    GridSearch,
    GridSearchResult,
    LengthUnit,
    SearchMode,
    sides_not_shorter_than_diagonal,
)

from .dtos import CalculationOutput, CalculatorInput

logger = logging.getLogger(__name__)


class CalculateWallCommand:
    """Command to resolve wall dimensions and find the closest cabinet grids.

    Runs on every input change in an interactive front end, so it never
    raises for bad input: errors and warnings are reported on the output.
    """

    def __init__(
        self,
        dimension_resolver: DimensionResolver | None = None,
        grid_search: GridSearch | None = None,
    ) -> None:
        self.dimension_resolver = dimension_resolver or DimensionResolver()
        self.grid_search = grid_search or GridSearch()

    def execute(self, calculator_input: CalculatorInput) -> CalculationOutput:
        """Execute the calculation.

        Args:
            calculator_input: Entered quantities, unit and cabinet type.

        Returns:
            CalculationOutput with resolved dimensions and the lower/upper
            configurations. Either configuration may be absent.
        """
        errors = calculator_input.validate()
        if errors:
            logger.debug(f"Rejected calculator input: {errors}")
            return CalculationOutput(errors=errors)

        dimension_input = calculator_input.to_dimension_input()
        cabinet_type = calculator_input.to_cabinet_type()
        pair = dimension_input.known_pair
        mode = SearchMode.for_pair(pair)

        dimensions = self.dimension_resolver.resolve(dimension_input)
        target_other = (
            dimensions.diagonal if mode is SearchMode.WIDTH_DIAGONAL else dimensions.height
        )
        result = self.grid_search.search(mode, dimensions.width, target_other, cabinet_type)

        return CalculationOutput(
            dimensions=dimensions,
            result=result,
            mode=mode,
            unit=dimension_input.unit,
            cabinet_type=cabinet_type,
            warnings=self._collect_warnings(dimension_input, result),
        )

    def _collect_warnings(
        self, dimension_input: DimensionInput, result: GridSearchResult
    ) -> list[str]:
        warnings = [
            f"Diagonal must be longer than the {side}; the wall shape is degenerate"
            for side in sides_not_shorter_than_diagonal(dimension_input)
        ]

        if result.lower is None and result.upper is None:
            warnings.append("No configuration found; no wall matches these dimensions")
        elif result.lower is None:
            warnings.append("No lower configuration found")
        elif result.upper is None:
            warnings.append(
                f"No upper configuration found within a {MAX_GRID_SIZE}x{MAX_GRID_SIZE} grid"
            )

        if warnings:
            logger.warning(f"Calculation for {dimension_input} produced warnings: {warnings}")
        return warnings


def convert_inputs(
    calculator_input: CalculatorInput, unit: LengthUnit
) -> CalculatorInput:
    """Re-express the entered lengths in another unit.

    Mirrors switching the unit selector in the form: lengths are converted,
    the aspect ratio is kept.
    """
    converted = calculator_input.to_dimension_input().converted_to(unit)
    return CalculatorInput(
        aspect_ratio=converted.aspect_ratio,
        height=converted.height,
        width=converted.width,
        diagonal=converted.diagonal,
        unit=unit.value,
        cabinet_type=calculator_input.cabinet_type,
    )
