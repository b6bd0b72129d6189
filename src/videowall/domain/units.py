"""Length unit conversion through the millimetre base unit."""

from __future__ import annotations

from .value_objects import LengthUnit


def to_millimeters(value: float, unit: LengthUnit) -> float:
    """Convert a value in ``unit`` to millimetres."""
    return value * unit.factor


def from_millimeters(value: float, unit: LengthUnit) -> float:
    """Convert a millimetre value to ``unit``."""
    return value / unit.factor


def convert_unit(value: float, from_unit: LengthUnit, to_unit: LengthUnit) -> float:
    """Convert a value between two length units.

    Args:
        value: Length expressed in ``from_unit``.
        from_unit: Unit the value is expressed in.
        to_unit: Unit to convert to.

    Returns:
        The length expressed in ``to_unit``. Returned unchanged when both
        units are the same.
    """
    if from_unit == to_unit:
        return value
    return from_millimeters(to_millimeters(value, from_unit), to_unit)
