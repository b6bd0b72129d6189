"""Configuration schema and loading system for wall calculations.

This package provides JSON-based configuration loading and validation for
video wall calculations. It includes Pydantic models for schema validation,
a configuration loader with comprehensive error handling, CLI override
merging, and geometry advisory checks.

Example:
    >>> from pathlib import Path
    >>> from videowall.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("lobby-wall.json"))
    ...     print(f"Known: {config.inputs.active_inputs}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from videowall.application.config.adapter import config_to_input
from videowall.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    parse_config,
)
from videowall.application.config.merger import merge_config_with_cli
from videowall.application.config.schema import (
    SUPPORTED_VERSIONS,
    CalculatorConfiguration,
    InputsConfig,
    OutputConfig,
)
from videowall.application.config.validator import (
    ValidationResult,
    ValidationWarning,
    check_geometry,
    check_search_range,
    validate_config,
)

__all__ = [
    "CalculatorConfiguration",
    "ConfigError",
    "InputsConfig",
    "OutputConfig",
    "SUPPORTED_VERSIONS",
    "ValidationResult",
    "ValidationWarning",
    "check_geometry",
    "check_search_range",
    "config_to_input",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "parse_config",
    "validate_config",
]
