"""Infrastructure layer - output formatters and exporters."""

from .formatters import (
    UNIT_PRECISION,
    ConfigurationFormatter,
    GridDiagramFormatter,
    JsonExporter,
    ResultFormatter,
    format_length,
    format_value,
)

__all__ = [
    "ConfigurationFormatter",
    "GridDiagramFormatter",
    "JsonExporter",
    "ResultFormatter",
    "UNIT_PRECISION",
    "format_length",
    "format_value",
]
