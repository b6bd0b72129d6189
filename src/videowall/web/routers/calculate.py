"""Wall calculation endpoints."""

from fastapi import APIRouter

from videowall.application import CalculationOutput, CalculatorInput
from videowall.application.config import config_to_input, load_config_from_dict
from videowall.domain import LengthUnit
from videowall.infrastructure import JsonExporter
from videowall.web.dependencies import CalculateCommandDep
from videowall.web.exceptions import CalculationError
from videowall.web.schemas.requests import CalculateFromConfigRequest, CalculateRequest
from videowall.web.schemas.responses import (
    CalculationResponseSchema,
    ErrorResponseSchema,
)

router = APIRouter(prefix="/calculate", tags=["calculate"])


def _output_to_schema(
    output: CalculationOutput, unit: LengthUnit | None
) -> CalculationResponseSchema:
    """Convert CalculationOutput to response schema."""
    if not output.is_valid:
        raise CalculationError(output.errors)
    return CalculationResponseSchema.model_validate(JsonExporter().to_dict(output, unit))


@router.post(
    "",
    response_model=CalculationResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def calculate(
    request: CalculateRequest,
    command: CalculateCommandDep,
) -> CalculationResponseSchema:
    """Resolve wall dimensions and find the closest cabinet grids.

    Raises:
        CalculationError: If not exactly two positive quantities were given.
    """
    calculator_input = CalculatorInput(
        aspect_ratio=request.aspect_ratio,
        height=request.height,
        width=request.width,
        diagonal=request.diagonal,
        unit=request.unit.value,
        cabinet_type=request.cabinet_type.value,
    )
    output = command.execute(calculator_input)
    return _output_to_schema(output, request.display_unit)


@router.post(
    "/config",
    response_model=CalculationResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def calculate_from_config(
    request: CalculateFromConfigRequest,
    command: CalculateCommandDep,
) -> CalculationResponseSchema:
    """Run a calculation described by a full configuration document.

    Raises:
        ConfigError: If the configuration does not validate.
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config_to_input(config))
    return _output_to_schema(output, config.display_unit)
