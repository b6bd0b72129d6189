"""Unit tests for output formatters and the JSON exporter."""

import json
import math

import pytest

from videowall.application import CalculateWallCommand, CalculationOutput, CalculatorInput
from videowall.domain import CabinetType, LengthUnit, WallConfiguration
from videowall.infrastructure import (
    ConfigurationFormatter,
    GridDiagramFormatter,
    JsonExporter,
    ResultFormatter,
    format_length,
    format_value,
)


@pytest.fixture
def exact_output(calculate_command: CalculateWallCommand) -> CalculationOutput:
    return calculate_command.execute(CalculatorInput(width=6000, height=3375))


@pytest.fixture
def degenerate_output(calculate_command: CalculateWallCommand) -> CalculationOutput:
    return calculate_command.execute(CalculatorInput(height=1000, diagonal=500))


class TestFormatValue:
    """Tests for format_value and format_length."""

    @pytest.mark.parametrize(
        "unit,expected",
        [
            (LengthUnit.MILLIMETER, "1.2"),
            (LengthUnit.METER, "1.235"),
            (LengthUnit.FOOT, "1.23"),
            (LengthUnit.INCH, "1.23"),
        ],
    )
    def test_precision_per_unit(self, unit: LengthUnit, expected: str) -> None:
        assert format_value(1.23456, unit) == expected

    def test_nan_is_not_available(self) -> None:
        assert format_value(math.nan, LengthUnit.MILLIMETER) == "n/a"
        assert format_length(math.nan, LengthUnit.METER) == "n/a"

    def test_format_length_converts(self) -> None:
        assert format_length(6000.0, LengthUnit.METER) == "6.000 meters"
        assert format_length(3048.0, LengthUnit.FOOT) == "10.00 feet"
        assert format_length(600.0, LengthUnit.MILLIMETER) == "600.0 mm"


class TestConfigurationFormatter:
    """Tests for ConfigurationFormatter."""

    def test_configuration_panel(self) -> None:
        text = ConfigurationFormatter().format(
            WallConfiguration(10, 10), LengthUnit.MILLIMETER, "Lower"
        )
        assert text.startswith("Lower")
        assert "Total Cabinets" in text
        assert "100" in text
        assert "6000.0 mm" in text
        assert "3375.0 mm" in text
        assert "1.78:1" in text

    def test_absent_configuration(self) -> None:
        text = ConfigurationFormatter().format(None, label="Upper")
        assert "No configuration found." in text


class TestResultFormatter:
    """Tests for ResultFormatter."""

    def test_full_result(self, exact_output: CalculationOutput) -> None:
        text = ResultFormatter().format(exact_output)
        assert "TARGET WALL" in text
        assert "Closest Lower Configuration" in text
        assert "Closest Upper Configuration" in text
        assert "Warnings:" not in text

    def test_display_unit(self, exact_output: CalculationOutput) -> None:
        text = ResultFormatter().format(exact_output, LengthUnit.METER)
        assert "6.000 meters" in text

    def test_degenerate_result(self, degenerate_output: CalculationOutput) -> None:
        text = ResultFormatter().format(degenerate_output)
        assert "n/a" in text
        assert text.count("No configuration found.") == 2
        assert "Warnings:" in text

    def test_errors(self) -> None:
        output = CalculationOutput(errors=["Width must be positive"])
        text = ResultFormatter().format(output)
        assert text.startswith("Errors:")
        assert "Width must be positive" in text


class TestGridDiagramFormatter:
    """Tests for GridDiagramFormatter."""

    def test_draws_rows_and_columns(self) -> None:
        text = GridDiagramFormatter().format(WallConfiguration(3, 2), "Grid")
        assert text.splitlines() == [
            "Grid",
            "[][][]",
            "[][][]",
            "2 rows x 3 columns (6 cabinets)",
        ]

    def test_absent_configuration(self) -> None:
        assert "No configuration found." in GridDiagramFormatter().format(None)


class TestJsonExporter:
    """Tests for JsonExporter."""

    def test_export_structure(self, exact_output: CalculationOutput) -> None:
        data = json.loads(JsonExporter().export(exact_output))

        assert data["unit"] == "mm"
        assert data["cabinet_type"] == "16:9"
        assert data["mode"] == "width_height"
        assert data["target"]["width"] == pytest.approx(6000.0)
        assert data["lower"]["columns"] == 10
        assert data["upper"]["columns"] == 11
        assert data["lower"]["aspect_ratio"] == "1.78:1"
        assert data["warnings"] == []

    def test_display_unit(self, exact_output: CalculationOutput) -> None:
        data = JsonExporter().to_dict(exact_output, LengthUnit.METER)
        assert data["unit"] == "meters"
        assert data["target"]["width"] == pytest.approx(6.0)
        assert data["lower"]["height"] == pytest.approx(3.375)

    def test_nan_and_absent_as_null(self, degenerate_output: CalculationOutput) -> None:
        data = json.loads(JsonExporter().export(degenerate_output))
        assert data["target"]["width"] is None
        assert data["target"]["height"] == pytest.approx(1000.0)
        assert data["lower"] is None
        assert data["upper"] is None

    def test_errors(self) -> None:
        output = CalculationOutput(errors=["bad input"])
        assert JsonExporter().to_dict(output) == {"errors": ["bad input"]}

    def test_square_cabinet(self, calculate_command: CalculateWallCommand) -> None:
        output = calculate_command.execute(
            CalculatorInput(width=1000, height=1000, cabinet_type=CabinetType.SQUARE.value)
        )
        assert JsonExporter().to_dict(output)["cabinet_type"] == "1:1"
