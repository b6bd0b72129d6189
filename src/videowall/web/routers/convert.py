"""Unit conversion endpoint."""

from fastapi import APIRouter

from videowall.domain import convert_unit
from videowall.infrastructure import format_value
from videowall.web.schemas.requests import ConvertRequest
from videowall.web.schemas.responses import ConvertResponseSchema

router = APIRouter(prefix="/convert", tags=["convert"])


@router.post("", response_model=ConvertResponseSchema)
async def convert(request: ConvertRequest) -> ConvertResponseSchema:
    """Convert a length between units."""
    value = convert_unit(request.value, request.from_unit, request.to_unit)
    return ConvertResponseSchema(
        value=value,
        unit=request.to_unit.value,
        formatted=format_value(value, request.to_unit),
    )
