"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from videowall.web.schemas.common import DimensionSetSchema, WallConfigurationSchema


class CalculationResponseSchema(BaseModel):
    """Response for a wall calculation.

    ``lower`` and ``upper`` are null when no grid within the search ceiling
    satisfies them.
    """

    unit: str = Field(..., description="Unit of every length in the response")
    cabinet_type: str = Field(..., description="Cabinet type")
    mode: str = Field(..., description="Dimension pair compared by the search")
    target: DimensionSetSchema = Field(..., description="Resolved target dimensions")
    lower: WallConfigurationSchema | None = Field(
        default=None, description="Closest configuration at or below the target"
    )
    upper: WallConfigurationSchema | None = Field(
        default=None, description="Closest configuration at or above the target"
    )
    warnings: list[str] = Field(default_factory=list, description="Warning messages")


class ConvertResponseSchema(BaseModel):
    """Response for a unit conversion."""

    value: float = Field(..., description="Converted length")
    unit: str = Field(..., description="Unit of the converted length")
    formatted: str = Field(..., description="Converted length with display precision")


class CabinetSchema(BaseModel):
    """A cabinet type and its face dimensions."""

    cabinet_type: str = Field(..., description="Cabinet type identifier")
    width: float = Field(..., description="Cabinet width in mm")
    height: float = Field(..., description="Cabinet height in mm")


class CabinetListSchema(BaseModel):
    """Response listing the available cabinet types."""

    cabinets: list[CabinetSchema] = Field(..., description="Available cabinets")
    max_grid_size: int = Field(..., description="Largest column and row count searched")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
