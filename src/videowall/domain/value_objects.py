"""Value objects for video wall geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class LengthUnit(str, Enum):
    """Length units accepted for input and display.

    Millimetres are the base unit; every other unit converts through them.
    """

    MILLIMETER = "mm"
    METER = "meters"
    FOOT = "feet"
    INCH = "inches"

    @property
    def factor(self) -> float:
        """Millimetres per one unit."""
        return UNIT_FACTORS[self]


# Millimetres per unit
UNIT_FACTORS: dict[LengthUnit, float] = {
    LengthUnit.MILLIMETER: 1.0,
    LengthUnit.METER: 1000.0,
    LengthUnit.FOOT: 304.8,
    LengthUnit.INCH: 25.4,
}


@dataclass(frozen=True)
class CabinetDimensions:
    """Immutable cabinet face dimensions in millimetres."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Cabinet dimensions must be positive")


class CabinetType(str, Enum):
    """Cabinet modules a wall can be assembled from."""

    WIDE = "16:9"
    SQUARE = "1:1"

    @property
    def dimensions(self) -> CabinetDimensions:
        """Face dimensions of a single cabinet."""
        return CABINET_DIMENSIONS[self]


CABINET_DIMENSIONS: dict[CabinetType, CabinetDimensions] = {
    CabinetType.WIDE: CabinetDimensions(width=600.0, height=337.5),
    CabinetType.SQUARE: CabinetDimensions(width=500.0, height=500.0),
}


def diagonal_of(width: float, height: float) -> float:
    """Diagonal of a width x height rectangle."""
    return math.sqrt(width * width + height * height)


def ratio_of(width: float, height: float) -> float:
    """Width over height.

    A zero height gives an infinite ratio (NaN when width is zero or NaN)
    rather than raising.
    """
    if height == 0:
        if width == 0 or math.isnan(width):
            return math.nan
        return math.copysign(math.inf, width)
    return width / height


def format_aspect_ratio(ratio: float) -> str:
    """Render a ratio as ``"X.XX:1"``."""
    return f"{ratio:.2f}:1"


@dataclass(frozen=True)
class DimensionSet:
    """Resolved physical dimensions of a wall.

    Lengths are in millimetres; aspect_ratio is width / height. Values may
    be NaN when they were derived from impossible geometry.
    """

    width: float
    height: float
    diagonal: float
    aspect_ratio: float

    @property
    def is_finite(self) -> bool:
        """True when every field is a finite number."""
        return all(
            math.isfinite(value)
            for value in (self.width, self.height, self.diagonal, self.aspect_ratio)
        )


@dataclass(frozen=True)
class WallConfiguration:
    """A columns x rows arrangement of one cabinet type.

    Only columns, rows and cabinet_type are stored; all physical values are
    derived from them.
    """

    columns: int
    rows: int
    cabinet_type: CabinetType = CabinetType.WIDE

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError("Columns and rows must be at least 1")

    @property
    def total_cabinets(self) -> int:
        return self.columns * self.rows

    @property
    def width(self) -> float:
        """Total width in millimetres."""
        return self.columns * self.cabinet_type.dimensions.width

    @property
    def height(self) -> float:
        """Total height in millimetres."""
        return self.rows * self.cabinet_type.dimensions.height

    @property
    def diagonal(self) -> float:
        """Total diagonal in millimetres."""
        return diagonal_of(self.width, self.height)

    @property
    def aspect_ratio_value(self) -> float:
        return self.width / self.height

    @property
    def aspect_ratio(self) -> str:
        """Aspect ratio formatted as ``"X.XX:1"``."""
        return format_aspect_ratio(self.aspect_ratio_value)


@dataclass(frozen=True)
class GridSearchResult:
    """Closest configurations below and above a target size.

    Either slot is None when no grid within the search ceiling satisfies it.
    """

    lower: WallConfiguration | None = None
    upper: WallConfiguration | None = None

    @property
    def is_complete(self) -> bool:
        """True when both a lower and an upper configuration were found."""
        return self.lower is not None and self.upper is not None
