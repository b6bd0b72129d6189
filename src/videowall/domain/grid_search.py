"""Nearest cabinet grid search.

Every columns x rows grid up to the ceiling is tried in a fixed order:
columns outer, rows inner. That order is also the tie-break order, so the
loops must stay flat and row-major.

An exact match (both compared dimensions within EXACT_MATCH_TOLERANCE of
the targets) short-circuits the search: it becomes the lower result and
the grid one larger in each direction becomes the upper result. Otherwise
the best grid at-or-below and at-or-above the target are kept separately,
scored by a per-mode error metric.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator
from enum import Enum

from .dimension_resolver import KnownPair
from .value_objects import CabinetType, GridSearchResult, WallConfiguration

logger = logging.getLogger(__name__)

MAX_GRID_SIZE = 50
EXACT_MATCH_TOLERANCE = 0.5  # mm

# (configuration, target_a, target_b) -> error
ErrorMetric = Callable[[WallConfiguration, float, float], float]
# configuration -> the two dimensions compared against the targets
DimensionSelector = Callable[[WallConfiguration], tuple[float, float]]


class SearchMode(str, Enum):
    """Which pair of physical dimensions the search compares."""

    WIDTH_HEIGHT = "width_height"
    WIDTH_DIAGONAL = "width_diagonal"

    @classmethod
    def for_pair(cls, pair: KnownPair) -> "SearchMode":
        """Width and diagonal entered together are matched on width/diagonal;
        every other pair is matched on width/height."""
        if pair is KnownPair.WIDTH_DIAGONAL:
            return cls.WIDTH_DIAGONAL
        return cls.WIDTH_HEIGHT


def _width_height(config: WallConfiguration) -> tuple[float, float]:
    return config.width, config.height


def _width_diagonal(config: WallConfiguration) -> tuple[float, float]:
    return config.width, config.diagonal


def _euclidean_error(config: WallConfiguration, width: float, height: float) -> float:
    return math.sqrt((config.width - width) ** 2 + (config.height - height) ** 2)


def _total_error(config: WallConfiguration, width: float, diagonal: float) -> float:
    return abs(config.width - width) + abs(config.diagonal - diagonal)


class GridSearch:
    """Finds the closest achievable grids around a target size.

    Args:
        max_size: Largest column and row count tried.
        tolerance: Absolute tolerance in millimetres for an exact match.
    """

    def __init__(
        self,
        max_size: int = MAX_GRID_SIZE,
        tolerance: float = EXACT_MATCH_TOLERANCE,
    ) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self.tolerance = tolerance

    def by_width_height(
        self,
        target_width: float,
        target_height: float,
        cabinet_type: CabinetType,
    ) -> GridSearchResult:
        """Closest grids by width and height, scored by Euclidean distance."""
        return self._search(
            target_width, target_height, cabinet_type, _width_height, _euclidean_error
        )

    def by_width_diagonal(
        self,
        target_width: float,
        target_diagonal: float,
        cabinet_type: CabinetType,
    ) -> GridSearchResult:
        """Closest grids by width and diagonal, scored by summed absolute error."""
        return self._search(
            target_width, target_diagonal, cabinet_type, _width_diagonal, _total_error
        )

    def search(
        self,
        mode: SearchMode,
        target_width: float,
        target_other: float,
        cabinet_type: CabinetType,
    ) -> GridSearchResult:
        """Dispatch to the entry point for ``mode``.

        ``target_other`` is the height or the diagonal depending on the mode.
        """
        if mode is SearchMode.WIDTH_DIAGONAL:
            return self.by_width_diagonal(target_width, target_other, cabinet_type)
        return self.by_width_height(target_width, target_other, cabinet_type)

    def _candidates(self, cabinet_type: CabinetType) -> Iterator[WallConfiguration]:
        for columns in range(1, self.max_size + 1):
            for rows in range(1, self.max_size + 1):
                yield WallConfiguration(columns, rows, cabinet_type)

    def _search(
        self,
        target_a: float,
        target_b: float,
        cabinet_type: CabinetType,
        select: DimensionSelector,
        error_of: ErrorMetric,
    ) -> GridSearchResult:
        exact = self._find_exact(target_a, target_b, cabinet_type, select)
        if exact is not None:
            upper = WallConfiguration(
                min(exact.columns + 1, self.max_size),
                min(exact.rows + 1, self.max_size),
                cabinet_type,
            )
            logger.debug(f"Exact match at {exact.columns}x{exact.rows}")
            return GridSearchResult(lower=exact, upper=upper)

        lower: WallConfiguration | None = None
        upper: WallConfiguration | None = None
        lower_error = math.inf
        upper_error = math.inf

        for config in self._candidates(cabinet_type):
            a, b = select(config)
            error = error_of(config, target_a, target_b)

            if a <= target_a and b <= target_b and error < lower_error:
                lower = config
                lower_error = error

            if a >= target_a and b >= target_b and error < upper_error:
                upper = config
                upper_error = error

        logger.debug(
            f"Closest grids for ({target_a}, {target_b}): "
            f"lower={_describe(lower)}, upper={_describe(upper)}"
        )
        return GridSearchResult(lower=lower, upper=upper)

    def _find_exact(
        self,
        target_a: float,
        target_b: float,
        cabinet_type: CabinetType,
        select: DimensionSelector,
    ) -> WallConfiguration | None:
        for config in self._candidates(cabinet_type):
            a, b = select(config)
            if abs(a - target_a) < self.tolerance and abs(b - target_b) < self.tolerance:
                return config
        return None


def _describe(config: WallConfiguration | None) -> str:
    if config is None:
        return "none"
    return f"{config.columns}x{config.rows}"


def find_closest_configurations(
    target_width: float,
    target_height: float,
    cabinet_type: CabinetType,
) -> GridSearchResult:
    """Module-level shortcut for ``GridSearch().by_width_height``."""
    return GridSearch().by_width_height(target_width, target_height, cabinet_type)


def find_closest_configurations_by_diagonal(
    target_width: float,
    target_diagonal: float,
    cabinet_type: CabinetType,
) -> GridSearchResult:
    """Module-level shortcut for ``GridSearch().by_width_diagonal``."""
    return GridSearch().by_width_diagonal(target_width, target_diagonal, cabinet_type)
