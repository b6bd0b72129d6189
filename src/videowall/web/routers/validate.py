"""Configuration validation endpoints."""

from fastapi import APIRouter

from videowall.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from videowall.web.schemas.requests import ConfigValidateRequest
from videowall.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a calculator configuration without calculating.

    Args:
        request: Request containing configuration to validate.

    Returns:
        Validation result. Schema problems are reported as errors,
        geometry advisories as warnings.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"message": d.get("message"), "path": d.get("path")} for d in e.details
            ],
        )

    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=True,
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
    )
