"""Unit tests for configuration merger and adapter.

These tests verify:
- CLI args override config values when provided
- CLI args are ignored when None
- Two or more CLI dimensions replace the configured inputs
- Adapter correctly converts config to the calculator input DTO
"""

import pytest

from videowall.application.config import (
    CalculatorConfiguration,
    ConfigError,
    InputsConfig,
    OutputConfig,
    config_to_input,
    merge_config_with_cli,
)
from videowall.domain import CabinetType, LengthUnit


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli function."""

    @pytest.fixture
    def base_config(self) -> CalculatorConfiguration:
        """Create a base configuration for testing."""
        return CalculatorConfiguration(
            schema_version="1.0",
            inputs=InputsConfig(width=6000.0, height=3375.0),
            output=OutputConfig(format="all"),
        )

    def test_no_overrides_returns_equivalent_config(
        self, base_config: CalculatorConfiguration
    ) -> None:
        """When no CLI args provided, merged config matches original."""
        merged = merge_config_with_cli(base_config)

        assert merged.schema_version == base_config.schema_version
        assert merged.inputs.width == base_config.inputs.width
        assert merged.inputs.height == base_config.inputs.height
        assert merged.unit is base_config.unit
        assert merged.cabinet_type is base_config.cabinet_type
        assert merged.output.format == base_config.output.format

    def test_override_single_dimension(self, base_config: CalculatorConfiguration) -> None:
        """A single CLI dimension replaces only that field."""
        merged = merge_config_with_cli(base_config, height=4000.0)

        assert merged.inputs.height == 4000.0
        assert merged.inputs.width == 6000.0

    def test_two_dimensions_replace_inputs(
        self, base_config: CalculatorConfiguration
    ) -> None:
        merged = merge_config_with_cli(base_config, aspect_ratio=2.0, diagonal=5000.0)

        assert merged.inputs.active_inputs == ["aspect_ratio", "diagonal"]
        assert merged.inputs.width is None
        assert merged.inputs.height is None

    def test_single_new_dimension_makes_three(
        self, base_config: CalculatorConfiguration
    ) -> None:
        """Adding a third quantity on top of the config is rejected."""
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(base_config, diagonal=7000.0)
        assert exc_info.value.error_type == "validation"

    def test_override_unit_and_cabinet(self, base_config: CalculatorConfiguration) -> None:
        merged = merge_config_with_cli(
            base_config, unit=LengthUnit.INCH, cabinet_type=CabinetType.SQUARE
        )

        assert merged.unit is LengthUnit.INCH
        assert merged.cabinet_type is CabinetType.SQUARE

    def test_override_output(self, base_config: CalculatorConfiguration) -> None:
        merged = merge_config_with_cli(
            base_config, output_format="json", display_unit=LengthUnit.METER
        )

        assert merged.output.format == "json"
        assert merged.display_unit is LengthUnit.METER

    def test_invalid_format_rejected(self, base_config: CalculatorConfiguration) -> None:
        with pytest.raises(ConfigError):
            merge_config_with_cli(base_config, output_format="pdf")

    def test_original_unchanged(self, base_config: CalculatorConfiguration) -> None:
        merge_config_with_cli(base_config, height=4000.0, unit=LengthUnit.FOOT)

        assert base_config.inputs.height == 3375.0
        assert base_config.unit is LengthUnit.MILLIMETER


class TestConfigToInput:
    """Tests for config_to_input adapter."""

    def test_converts_all_fields(self) -> None:
        config = CalculatorConfiguration(
            schema_version="1.0",
            unit=LengthUnit.FOOT,
            cabinet_type=CabinetType.SQUARE,
            inputs=InputsConfig(aspect_ratio=1.5, diagonal=20.0),
        )
        calculator_input = config_to_input(config)

        assert calculator_input.aspect_ratio == 1.5
        assert calculator_input.diagonal == 20.0
        assert calculator_input.width is None
        assert calculator_input.unit == "feet"
        assert calculator_input.cabinet_type == "1:1"
        assert calculator_input.validate() == []
