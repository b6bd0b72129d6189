"""Unit tests for CalculatorInput validation and CalculateWallCommand."""

import math

import pytest

from videowall.application import (
    CalculateWallCommand,
    CalculatorInput,
    convert_inputs,
)
from videowall.domain import CabinetType, LengthUnit, SearchMode


class TestCalculatorInputValidation:
    """Tests for CalculatorInput.validate."""

    def test_valid_input(self) -> None:
        assert CalculatorInput(width=6000, height=3375).validate() == []

    def test_one_quantity(self) -> None:
        errors = CalculatorInput(width=6000).validate()
        assert len(errors) == 1
        assert "Exactly two" in errors[0]
        assert "got 1" in errors[0]

    def test_three_quantities(self) -> None:
        errors = CalculatorInput(width=6000, height=3375, diagonal=7000).validate()
        assert any("got 3" in e for e in errors)

    def test_non_positive_value(self) -> None:
        errors = CalculatorInput(width=-1, height=3375).validate()
        assert "Width must be positive" in errors

    def test_zero_aspect_ratio(self) -> None:
        errors = CalculatorInput(aspect_ratio=0, height=3375).validate()
        assert "Aspect ratio must be positive" in errors

    def test_nan_value(self) -> None:
        errors = CalculatorInput(width=math.nan, height=3375).validate()
        assert "Width must be a finite number" in errors

    def test_unknown_unit(self) -> None:
        errors = CalculatorInput(width=6000, height=3375, unit="yards").validate()
        assert any(e.startswith("Unit must be one of") for e in errors)

    def test_unknown_cabinet(self) -> None:
        errors = CalculatorInput(width=6000, height=3375, cabinet_type="4:3").validate()
        assert any(e.startswith("Cabinet type must be one of") for e in errors)

    def test_active_inputs(self) -> None:
        assert CalculatorInput(diagonal=1, aspect_ratio=2).active_inputs == [
            "aspect_ratio",
            "diagonal",
        ]


class TestCalculateWallCommand:
    """Tests for CalculateWallCommand.execute."""

    def test_exact_match(self, calculate_command: CalculateWallCommand) -> None:
        output = calculate_command.execute(CalculatorInput(width=6000, height=3375))

        assert output.is_valid
        assert output.has_results
        assert output.mode is SearchMode.WIDTH_HEIGHT
        assert output.dimensions.diagonal == pytest.approx(math.hypot(6000, 3375))
        assert output.result.lower.columns == 10
        assert output.result.lower.rows == 10
        assert output.result.lower.aspect_ratio == "1.78:1"
        assert output.result.upper.columns == 11
        assert output.result.upper.rows == 11
        assert output.warnings == []

    def test_width_and_diagonal_use_diagonal_mode(
        self, calculate_command: CalculateWallCommand
    ) -> None:
        output = calculate_command.execute(
            CalculatorInput(width=6000, diagonal=math.hypot(6000, 3375))
        )
        assert output.mode is SearchMode.WIDTH_DIAGONAL
        assert output.result.lower.columns == 10

    def test_inputs_in_feet(self, calculate_command: CalculateWallCommand) -> None:
        output = calculate_command.execute(
            CalculatorInput(width=6000 / 304.8, height=3375 / 304.8, unit="feet")
        )
        assert output.unit is LengthUnit.FOOT
        assert output.dimensions.width == pytest.approx(6000.0)
        assert output.result.lower.columns == 10

    def test_square_cabinet(self, calculate_command: CalculateWallCommand) -> None:
        output = calculate_command.execute(
            CalculatorInput(width=1000, height=1000, cabinet_type="1:1")
        )
        assert output.cabinet_type is CabinetType.SQUARE
        assert output.result.lower.columns == 2

    def test_invalid_input_reports_errors(
        self, calculate_command: CalculateWallCommand
    ) -> None:
        output = calculate_command.execute(CalculatorInput(width=6000))
        assert not output.is_valid
        assert output.dimensions is None
        assert output.result is None

    def test_degenerate_geometry(self, calculate_command: CalculateWallCommand) -> None:
        """Diagonal shorter than height yields no configurations."""
        output = calculate_command.execute(CalculatorInput(height=1000, diagonal=500))

        assert output.is_valid
        assert math.isnan(output.dimensions.width)
        assert output.result.lower is None
        assert output.result.upper is None
        assert not output.has_results
        assert output.warnings == [
            "Diagonal must be longer than the height; the wall shape is degenerate",
            "No configuration found; no wall matches these dimensions",
        ]

    def test_diagonal_shorter_than_width_keeps_upper(
        self, calculate_command: CalculateWallCommand
    ) -> None:
        """Width/diagonal search still brackets the finite width and diagonal."""
        output = calculate_command.execute(CalculatorInput(width=6000, diagonal=500))

        assert math.isnan(output.dimensions.height)
        assert output.result.lower is None
        assert output.result.upper is not None
        assert output.warnings == [
            "Diagonal must be longer than the width; the wall shape is degenerate",
            "No lower configuration found",
        ]
        assert not any("no wall matches" in w for w in output.warnings)

    def test_diagonal_equal_to_width_warns(
        self, calculate_command: CalculateWallCommand
    ) -> None:
        output = calculate_command.execute(CalculatorInput(width=1000, diagonal=1000))

        assert output.dimensions.height == 0.0
        assert output.dimensions.aspect_ratio == math.inf
        assert output.has_results
        assert output.warnings == [
            "Diagonal must be longer than the width; the wall shape is degenerate"
        ]

    def test_beyond_ceiling_warns(self, calculate_command: CalculateWallCommand) -> None:
        output = calculate_command.execute(CalculatorInput(width=40000, height=20000))
        assert output.result.upper is None
        assert output.warnings == [
            "No upper configuration found within a 50x50 grid"
        ]

    def test_below_one_cabinet_warns(self, calculate_command: CalculateWallCommand) -> None:
        output = calculate_command.execute(CalculatorInput(width=100, height=100))
        assert output.result.lower is None
        assert output.warnings == ["No lower configuration found"]


class TestConvertInputs:
    """Tests for convert_inputs."""

    def test_lengths_converted(self) -> None:
        converted = convert_inputs(
            CalculatorInput(width=1.0, height=0.5, unit="meters"), LengthUnit.MILLIMETER
        )
        assert converted.unit == "mm"
        assert converted.width == pytest.approx(1000.0)
        assert converted.height == pytest.approx(500.0)

    def test_aspect_ratio_kept(self) -> None:
        converted = convert_inputs(
            CalculatorInput(aspect_ratio=1.5, diagonal=120.0, unit="inches"),
            LengthUnit.FOOT,
        )
        assert converted.aspect_ratio == 1.5
        assert converted.diagonal == pytest.approx(10.0)
        assert converted.cabinet_type == "16:9"
