"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from videowall.domain import (
    CabinetType,
    DimensionInput,
    DimensionSet,
    GridSearchResult,
    LengthUnit,
    SearchMode,
)
from videowall.domain.dimension_resolver import DIMENSION_FIELDS


@dataclass
class CalculatorInput:
    """Input DTO for a wall calculation.

    Exactly two of the four quantities must be set. Lengths are in ``unit``.
    """

    aspect_ratio: float | None = None
    height: float | None = None
    width: float | None = None
    diagonal: float | None = None
    unit: str = LengthUnit.MILLIMETER.value
    cabinet_type: str = CabinetType.WIDE.value

    @property
    def active_inputs(self) -> list[str]:
        """Names of the quantities that were entered."""
        return [name for name in DIMENSION_FIELDS if getattr(self, name) is not None]

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        active = self.active_inputs
        if len(active) != 2:
            errors.append(
                "Exactly two of aspect ratio, height, width and diagonal must be "
                f"provided (got {len(active)})"
            )
        for name in active:
            value = getattr(self, name)
            label = name.replace("_", " ").capitalize()
            if not math.isfinite(value):
                errors.append(f"{label} must be a finite number")
            elif value <= 0:
                errors.append(f"{label} must be positive")
        valid_units = [u.value for u in LengthUnit]
        if self.unit not in valid_units:
            errors.append(f"Unit must be one of: {', '.join(valid_units)}")
        valid_cabinets = [c.value for c in CabinetType]
        if self.cabinet_type not in valid_cabinets:
            errors.append(f"Cabinet type must be one of: {', '.join(valid_cabinets)}")
        return errors

    def to_dimension_input(self) -> DimensionInput:
        """Convert to the DimensionInput domain value object."""
        return DimensionInput(
            aspect_ratio=self.aspect_ratio,
            height=self.height,
            width=self.width,
            diagonal=self.diagonal,
            unit=LengthUnit(self.unit),
        )

    def to_cabinet_type(self) -> CabinetType:
        return CabinetType(self.cabinet_type)


@dataclass
class CalculationOutput:
    """Output DTO containing the resolved target and the closest grids.

    Attributes:
        dimensions: Resolved target dimensions in millimetres.
        result: Closest lower and upper configurations.
        mode: Which dimension pair the grid search compared.
        unit: Unit the values were entered in, used for display.
        cabinet_type: Cabinet the grids are built from.
        errors: Validation errors; when present nothing was computed.
        warnings: Non-blocking notes such as an absent lower or upper grid.
    """

    dimensions: DimensionSet | None = None
    result: GridSearchResult | None = None
    mode: SearchMode | None = None
    unit: LengthUnit = LengthUnit.MILLIMETER
    cabinet_type: CabinetType = CabinetType.WIDE
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the calculation ran."""
        return len(self.errors) == 0

    @property
    def has_results(self) -> bool:
        """Check if both a lower and an upper configuration are available."""
        return self.result is not None and self.result.is_complete
