"""Derive full wall dimensions from any two known quantities.

The caller supplies exactly two of aspect ratio, height, width and diagonal.
The pair that is present selects one of six derivations; the two missing
quantities are computed and returned together with the known ones as a
DimensionSet in millimetres.

Impossible geometry (a diagonal shorter than the known side) is not an
error here: the missing side becomes NaN and the caller's search simply
finds nothing.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum

from .units import convert_unit, to_millimeters
from .value_objects import DimensionSet, LengthUnit, diagonal_of, ratio_of

logger = logging.getLogger(__name__)

DIMENSION_FIELDS: tuple[str, ...] = ("aspect_ratio", "height", "width", "diagonal")
LENGTH_FIELDS: tuple[str, ...] = ("height", "width", "diagonal")


class DimensionInputError(ValueError):
    """Raised when the number of known quantities is not exactly two.

    Attributes:
        present: Names of the fields that were supplied.
    """

    def __init__(self, present: tuple[str, ...]) -> None:
        self.present = present
        supplied = ", ".join(present) if present else "none"
        super().__init__(
            f"Exactly two of {', '.join(DIMENSION_FIELDS)} must be provided "
            f"(got {len(present)}: {supplied})"
        )


class KnownPair(Enum):
    """Which two quantities are known."""

    ASPECT_RATIO_HEIGHT = frozenset({"aspect_ratio", "height"})
    ASPECT_RATIO_WIDTH = frozenset({"aspect_ratio", "width"})
    ASPECT_RATIO_DIAGONAL = frozenset({"aspect_ratio", "diagonal"})
    HEIGHT_WIDTH = frozenset({"height", "width"})
    HEIGHT_DIAGONAL = frozenset({"height", "diagonal"})
    WIDTH_DIAGONAL = frozenset({"width", "diagonal"})

    @classmethod
    def from_fields(cls, present: tuple[str, ...]) -> "KnownPair":
        """Select the pair matching the supplied field names.

        Raises:
            DimensionInputError: If not exactly two fields are present.
        """
        if len(present) != 2:
            raise DimensionInputError(present)
        return cls(frozenset(present))


@dataclass(frozen=True)
class DimensionInput:
    """Entered quantities before resolution.

    Lengths are expressed in ``unit``; aspect_ratio is unitless. None marks
    a quantity that was not entered.
    """

    aspect_ratio: float | None = None
    height: float | None = None
    width: float | None = None
    diagonal: float | None = None
    unit: LengthUnit = LengthUnit.MILLIMETER

    @property
    def present_fields(self) -> tuple[str, ...]:
        """Names of the entered quantities, in canonical order."""
        return tuple(name for name in DIMENSION_FIELDS if getattr(self, name) is not None)

    @property
    def known_pair(self) -> KnownPair:
        return KnownPair.from_fields(self.present_fields)

    def converted_to(self, unit: LengthUnit) -> "DimensionInput":
        """Re-express every entered length in another unit.

        The aspect ratio is unitless and is carried over unchanged.
        """
        changes: dict[str, float | None] = {}
        for name in LENGTH_FIELDS:
            value = getattr(self, name)
            changes[name] = None if value is None else convert_unit(value, self.unit, unit)
        return replace(self, unit=unit, **changes)

    def length_in_mm(self, name: str) -> float:
        value = getattr(self, name)
        if value is None:
            raise DimensionInputError(self.present_fields)
        return to_millimeters(value, self.unit)


def sides_not_shorter_than_diagonal(dimension_input: DimensionInput) -> list[str]:
    """Names of entered sides the entered diagonal does not exceed.

    A diagonal equal to a side leaves the other side at zero; a shorter one
    leaves it undefined. Both are reported.
    """
    if dimension_input.diagonal is None:
        return []
    return [
        side
        for side in ("height", "width")
        if getattr(dimension_input, side) is not None
        and dimension_input.diagonal <= getattr(dimension_input, side)
    ]


def _sqrt_or_nan(value: float) -> float:
    """Square root that yields NaN for a negative radicand."""
    if value < 0 or math.isnan(value):
        return math.nan
    return math.sqrt(value)


class DimensionResolver:
    """Resolves a DimensionInput into a complete DimensionSet."""

    def resolve(self, dimension_input: DimensionInput) -> DimensionSet:
        """Derive the two unknown quantities from the two known ones.

        Args:
            dimension_input: Entered quantities; exactly two must be present.

        Returns:
            DimensionSet with lengths in millimetres.

        Raises:
            DimensionInputError: If not exactly two quantities are present.
        """
        pair = dimension_input.known_pair
        dimensions = self._resolve_pair(pair, dimension_input)
        logger.debug(f"Resolved {pair.name.lower()} to {dimensions}")
        return dimensions

    def _resolve_pair(self, pair: KnownPair, data: DimensionInput) -> DimensionSet:
        if pair is KnownPair.ASPECT_RATIO_HEIGHT:
            aspect_ratio = data.aspect_ratio
            height = data.length_in_mm("height")
            width = height * aspect_ratio
            diagonal = diagonal_of(width, height)
        elif pair is KnownPair.ASPECT_RATIO_WIDTH:
            aspect_ratio = data.aspect_ratio
            width = data.length_in_mm("width")
            height = ratio_of(width, aspect_ratio)
            diagonal = diagonal_of(width, height)
        elif pair is KnownPair.ASPECT_RATIO_DIAGONAL:
            aspect_ratio = data.aspect_ratio
            diagonal = data.length_in_mm("diagonal")
            height = diagonal / math.sqrt(1 + aspect_ratio * aspect_ratio)
            width = height * aspect_ratio
        elif pair is KnownPair.HEIGHT_WIDTH:
            height = data.length_in_mm("height")
            width = data.length_in_mm("width")
            diagonal = diagonal_of(width, height)
            aspect_ratio = ratio_of(width, height)
        elif pair is KnownPair.HEIGHT_DIAGONAL:
            height = data.length_in_mm("height")
            diagonal = data.length_in_mm("diagonal")
            width = _sqrt_or_nan(diagonal * diagonal - height * height)
            aspect_ratio = ratio_of(width, height)
        elif pair is KnownPair.WIDTH_DIAGONAL:
            width = data.length_in_mm("width")
            diagonal = data.length_in_mm("diagonal")
            height = _sqrt_or_nan(diagonal * diagonal - width * width)
            aspect_ratio = ratio_of(width, height)
        else:
            raise AssertionError(f"Unhandled known pair: {pair!r}")

        return DimensionSet(
            width=width,
            height=height,
            diagonal=diagonal,
            aspect_ratio=aspect_ratio,
        )


def resolve_dimensions(dimension_input: DimensionInput) -> DimensionSet:
    """Module-level shortcut for ``DimensionResolver().resolve``."""
    return DimensionResolver().resolve(dimension_input)
