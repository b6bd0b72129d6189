"""Pydantic schemas for the REST API."""

from videowall.web.schemas.common import DimensionSetSchema, WallConfigurationSchema
from videowall.web.schemas.requests import (
    CalculateFromConfigRequest,
    CalculateRequest,
    ConfigValidateRequest,
    ConvertRequest,
)
from videowall.web.schemas.responses import (
    CabinetListSchema,
    CabinetSchema,
    CalculationResponseSchema,
    ConvertResponseSchema,
    ErrorResponseSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "DimensionSetSchema",
    "WallConfigurationSchema",
    # Requests
    "CalculateFromConfigRequest",
    "CalculateRequest",
    "ConfigValidateRequest",
    "ConvertRequest",
    # Responses
    "CabinetListSchema",
    "CabinetSchema",
    "CalculationResponseSchema",
    "ConvertResponseSchema",
    "ErrorResponseSchema",
    "ValidationResultSchema",
]
