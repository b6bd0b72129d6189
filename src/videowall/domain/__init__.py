"""Domain layer - dimension resolution and grid search."""

from .dimension_resolver import (
    DimensionInput,
    DimensionInputError,
    DimensionResolver,
    KnownPair,
    resolve_dimensions,
    sides_not_shorter_than_diagonal,
)
from .grid_search import (
    EXACT_MATCH_TOLERANCE,
    MAX_GRID_SIZE,
    GridSearch,
    SearchMode,
    find_closest_configurations,
    find_closest_configurations_by_diagonal,
)
from .units import convert_unit, from_millimeters, to_millimeters
from .value_objects import (
    CABINET_DIMENSIONS,
    UNIT_FACTORS,
    CabinetDimensions,
    CabinetType,
    DimensionSet,
    GridSearchResult,
    LengthUnit,
    WallConfiguration,
)

__all__ = [
    "CABINET_DIMENSIONS",
    "CabinetDimensions",
    "CabinetType",
    "DimensionInput",
    "DimensionInputError",
    "DimensionResolver",
    "DimensionSet",
    "EXACT_MATCH_TOLERANCE",
    "GridSearch",
    "GridSearchResult",
    "KnownPair",
    "LengthUnit",
    "MAX_GRID_SIZE",
    "SearchMode",
    "UNIT_FACTORS",
    "WallConfiguration",
    "convert_unit",
    "find_closest_configurations",
    "find_closest_configurations_by_diagonal",
    "from_millimeters",
    "resolve_dimensions",
    "sides_not_shorter_than_diagonal",
    "to_millimeters",
]
