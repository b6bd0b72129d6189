"""Geometry advisory checks for a loaded configuration.

Schema validation already guarantees two positive known quantities, so a
loaded configuration can always be calculated. The checks here look at what
the calculation will produce: a diagonal that is not longer than the known
side, or a target that no grid within the search ceiling can bracket. They
only ever warn.
"""

from dataclasses import dataclass, field

from videowall.application.config.adapter import config_to_input
from videowall.application.config.schema import CalculatorConfiguration
from videowall.domain import (
    MAX_GRID_SIZE,
    DimensionResolver,
    GridSearch,
    SearchMode,
    sides_not_shorter_than_diagonal,
)


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Warnings collected from the advisory checks."""

    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 when clean, 2 when there are warnings."""
        return 2 if self.warnings else 0

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.warnings.extend(other.warnings)
        return self


def check_geometry(config: CalculatorConfiguration) -> ValidationResult:
    """Warn when the diagonal cannot enclose the known side."""
    result = ValidationResult()
    inputs = config.inputs
    dimension_input = config_to_input(config).to_dimension_input()
    for side in sides_not_shorter_than_diagonal(dimension_input):
        result.add_warning(
            path="inputs.diagonal",
            message=(
                f"Diagonal ({inputs.diagonal:g}) is not longer than "
                f"{side} ({getattr(inputs, side):g}); no wall can match"
            ),
            suggestion=f"Enter a diagonal larger than the {side}",
        )
    return result


def check_search_range(config: CalculatorConfiguration) -> ValidationResult:
    """Warn when the target falls outside what the grid search can bracket."""
    result = ValidationResult()
    dimension_input = config_to_input(config).to_dimension_input()
    dimensions = DimensionResolver().resolve(dimension_input)
    if not dimensions.is_finite:
        return result

    mode = SearchMode.for_pair(dimension_input.known_pair)
    target_other = (
        dimensions.diagonal if mode is SearchMode.WIDTH_DIAGONAL else dimensions.height
    )
    search = GridSearch().search(
        mode, dimensions.width, target_other, config.cabinet_type
    )
    cabinet = config.cabinet_type.dimensions

    if search.lower is None:
        result.add_warning(
            path="inputs",
            message="Target is smaller than a single cabinet; no lower configuration exists",
            suggestion=(
                f"Use at least {cabinet.width:g} x {cabinet.height:g} mm "
                f"for '{config.cabinet_type.value}' cabinets"
            ),
        )
    if search.upper is None:
        result.add_warning(
            path="inputs",
            message=(
                f"Target exceeds a {MAX_GRID_SIZE}x{MAX_GRID_SIZE} grid; "
                "no upper configuration exists"
            ),
            suggestion=(
                f"Largest wall is {MAX_GRID_SIZE * cabinet.width:g} x "
                f"{MAX_GRID_SIZE * cabinet.height:g} mm"
            ),
        )
    return result


def validate_config(config: CalculatorConfiguration) -> ValidationResult:
    """Run every advisory check on a schema-valid configuration.

    The range check is skipped when the geometry is degenerate, since the
    search result would only repeat the geometry warning.
    """
    result = check_geometry(config)
    if not result.has_warnings:
        result.merge(check_search_range(config))
    return result
