"""Load calculator configurations from JSON files or request bodies.

Every entry point funnels into ``parse_config``, which turns pydantic
failures into a ``ConfigError`` whose details point at the offending field
(``inputs.width``, ``output.format``, ...).
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from videowall.application.config.schema import CalculatorConfiguration


class ConfigError(Exception):
    """A configuration could not be read or did not validate.

    Attributes:
        message: Summary shown to the user
        error_type: One of file_not_found, file_read_error, json_parse,
            validation
        path: Configuration file, when the configuration came from one
        details: One dict per problem; ``path``/``message`` for validation,
            ``line``/``column``/``message`` for JSON syntax
    """

    def __init__(
        self,
        message: str,
        error_type: str,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []


def _field_path(loc: tuple[str | int, ...]) -> str:
    # The schema has no list fields, so locations are plain dotted names.
    return ".".join(str(part) for part in loc)


def _describe(detail: dict[str, Any]) -> str:
    text = f"{detail['path'] or '<root>'}: {detail['message']}"
    value = detail["value"]
    if isinstance(value, (int, float, str)):
        text += f" (got: {value!r})"
    return text


def parse_config(
    data: Any, source: Path | None = None
) -> CalculatorConfiguration:
    """Validate already-decoded JSON data as a calculator configuration.

    Args:
        data: Decoded JSON document
        source: File the data was read from, carried on the error

    Raises:
        ConfigError: With error_type "validation" and one detail per field
            problem.
    """
    try:
        return CalculatorConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = [
            {
                "path": _field_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
            }
            for err in e.errors()
        ]
        summary = "\n".join(
            ["Configuration validation failed:"] + [f"  - {_describe(d)}" for d in details]
        )
        raise ConfigError(summary, "validation", source, details) from e


def load_config(path: Path) -> CalculatorConfiguration:
    """Read and validate a JSON configuration file.

    Raises:
        ConfigError: If the file is missing or unreadable, is not JSON, or
            does not describe a valid calculation.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading config file {path}: {e}", "file_read_error", path
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    return parse_config(data, path)


def load_config_from_dict(data: dict[str, Any]) -> CalculatorConfiguration:
    """Validate a configuration received as a dict, such as an API body."""
    return parse_config(data)
