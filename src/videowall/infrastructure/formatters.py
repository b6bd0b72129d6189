"""Output formatters and exporters for wall calculations."""

from __future__ import annotations

import json
import math
from typing import Any

from videowall.application.dtos import CalculationOutput
from videowall.domain import (
    DimensionSet,
    LengthUnit,
    WallConfiguration,
    from_millimeters,
)
from videowall.domain.value_objects import format_aspect_ratio

# Decimal places shown per display unit
UNIT_PRECISION: dict[LengthUnit, int] = {
    LengthUnit.MILLIMETER: 1,
    LengthUnit.METER: 3,
    LengthUnit.FOOT: 2,
    LengthUnit.INCH: 2,
}

NOT_AVAILABLE = "n/a"


def format_value(value: float, unit: LengthUnit) -> str:
    """Format a value already expressed in ``unit`` with that unit's precision."""
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{value:.{UNIT_PRECISION[unit]}f}"


def format_length(value_mm: float, unit: LengthUnit) -> str:
    """Convert a millimetre length to ``unit`` and format it with its suffix."""
    text = format_value(from_millimeters(value_mm, unit), unit)
    if text == NOT_AVAILABLE:
        return text
    return f"{text} {unit.value}"


def _json_number(value: float) -> float | None:
    return value if math.isfinite(value) else None


class ConfigurationFormatter:
    """Formats a single wall configuration as a text panel."""

    def format(
        self,
        config: WallConfiguration | None,
        unit: LengthUnit = LengthUnit.MILLIMETER,
        label: str = "Configuration",
    ) -> str:
        lines = [label, "-" * 40]
        if config is None:
            lines.append("No configuration found.")
            return "\n".join(lines)

        rows = [
            ("Columns", str(config.columns)),
            ("Rows", str(config.rows)),
            ("Total Cabinets", str(config.total_cabinets)),
            ("Aspect Ratio", config.aspect_ratio),
            ("Width", format_length(config.width, unit)),
            ("Height", format_length(config.height, unit)),
            ("Diagonal", format_length(config.diagonal, unit)),
        ]
        lines.extend(f"{name:<16} {value}" for name, value in rows)
        return "\n".join(lines)


class ResultFormatter:
    """Formats a full calculation: target dimensions plus both configurations."""

    def __init__(self, configuration_formatter: ConfigurationFormatter | None = None) -> None:
        self._configuration_formatter = configuration_formatter or ConfigurationFormatter()

    def format(self, output: CalculationOutput, unit: LengthUnit | None = None) -> str:
        """Format the output in ``unit`` (defaults to the input unit)."""
        if not output.is_valid:
            return "\n".join(["Errors:"] + [f"  - {e}" for e in output.errors])

        unit = unit or output.unit
        sections = [self._format_target(output.dimensions, output, unit)]
        if output.result is not None:
            sections.append(
                self._configuration_formatter.format(
                    output.result.lower, unit, "Closest Lower Configuration"
                )
            )
            sections.append(
                self._configuration_formatter.format(
                    output.result.upper, unit, "Closest Upper Configuration"
                )
            )
        if output.warnings:
            sections.append("\n".join(["Warnings:"] + [f"  - {w}" for w in output.warnings]))
        return "\n\n".join(sections)

    def _format_target(
        self,
        dimensions: DimensionSet | None,
        output: CalculationOutput,
        unit: LengthUnit,
    ) -> str:
        lines = [
            "TARGET WALL",
            "=" * 40,
            f"{'Cabinet':<16} {output.cabinet_type.value}",
        ]
        if dimensions is not None:
            ratio = (
                format_aspect_ratio(dimensions.aspect_ratio)
                if math.isfinite(dimensions.aspect_ratio)
                else NOT_AVAILABLE
            )
            lines.extend(
                [
                    f"{'Width':<16} {format_length(dimensions.width, unit)}",
                    f"{'Height':<16} {format_length(dimensions.height, unit)}",
                    f"{'Diagonal':<16} {format_length(dimensions.diagonal, unit)}",
                    f"{'Aspect Ratio':<16} {ratio}",
                ]
            )
        return "\n".join(lines)


class GridDiagramFormatter:
    """Draws a configuration as an ASCII block of cabinets."""

    def __init__(self, cell: str = "[]") -> None:
        self.cell = cell

    def format(self, config: WallConfiguration | None, label: str = "Grid") -> str:
        if config is None:
            return f"{label}\nNo configuration found."

        row = self.cell * config.columns
        lines = [label]
        lines.extend(row for _ in range(config.rows))
        lines.append(
            f"{config.rows} rows x {config.columns} columns "
            f"({config.total_cabinets} cabinets)"
        )
        return "\n".join(lines)


class JsonExporter:
    """Exports calculation results as JSON.

    Lengths are written in the display unit; values that could not be
    computed and absent configurations are written as null.
    """

    def export(self, output: CalculationOutput, unit: LengthUnit | None = None) -> str:
        """Export calculation output as a JSON string."""
        return json.dumps(self.to_dict(output, unit), indent=2)

    def to_dict(
        self, output: CalculationOutput, unit: LengthUnit | None = None
    ) -> dict[str, Any]:
        if not output.is_valid:
            return {"errors": output.errors}

        unit = unit or output.unit
        data: dict[str, Any] = {
            "unit": unit.value,
            "cabinet_type": output.cabinet_type.value,
            "mode": output.mode.value if output.mode else None,
            "target": self._format_dimensions(output.dimensions, unit),
            "lower": None,
            "upper": None,
            "warnings": output.warnings,
        }
        if output.result is not None:
            data["lower"] = self._format_configuration(output.result.lower, unit)
            data["upper"] = self._format_configuration(output.result.upper, unit)
        return data

    def _format_dimensions(
        self, dimensions: DimensionSet | None, unit: LengthUnit
    ) -> dict[str, float | None] | None:
        if dimensions is None:
            return None
        return {
            "width": _json_number(from_millimeters(dimensions.width, unit)),
            "height": _json_number(from_millimeters(dimensions.height, unit)),
            "diagonal": _json_number(from_millimeters(dimensions.diagonal, unit)),
            "aspect_ratio": _json_number(dimensions.aspect_ratio),
        }

    def _format_configuration(
        self, config: WallConfiguration | None, unit: LengthUnit
    ) -> dict[str, Any] | None:
        if config is None:
            return None
        return {
            "columns": config.columns,
            "rows": config.rows,
            "total_cabinets": config.total_cabinets,
            "width": from_millimeters(config.width, unit),
            "height": from_millimeters(config.height, unit),
            "diagonal": from_millimeters(config.diagonal, unit),
            "aspect_ratio": config.aspect_ratio,
        }
