"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from videowall.domain import CabinetType, LengthUnit


class CalculateRequest(BaseModel):
    """Request for a wall calculation. Exactly two quantities must be set."""

    aspect_ratio: float | None = Field(default=None, description="Width divided by height")
    height: float | None = Field(default=None, description="Height in the request unit")
    width: float | None = Field(default=None, description="Width in the request unit")
    diagonal: float | None = Field(default=None, description="Diagonal in the request unit")
    unit: LengthUnit = Field(
        default=LengthUnit.MILLIMETER, description="Unit of the entered lengths"
    )
    cabinet_type: CabinetType = Field(
        default=CabinetType.WIDE, description="Cabinet the wall is built from"
    )
    display_unit: LengthUnit | None = Field(
        default=None, description="Unit for response lengths (default: request unit)"
    )


class CalculateFromConfigRequest(BaseModel):
    """Request for a calculation from a full configuration document."""

    config: dict[str, Any] = Field(..., description="Calculator configuration JSON")


class ConvertRequest(BaseModel):
    """Request for converting a length between units."""

    value: float = Field(..., description="Length to convert")
    from_unit: LengthUnit = Field(..., description="Unit the value is expressed in")
    to_unit: LengthUnit = Field(..., description="Unit to convert to")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Calculator configuration JSON")
