"""Cabinet catalog endpoint."""

from fastapi import APIRouter

from videowall.domain import CABINET_DIMENSIONS, MAX_GRID_SIZE
from videowall.web.schemas.responses import CabinetListSchema, CabinetSchema

router = APIRouter(prefix="/cabinets", tags=["cabinets"])


@router.get("", response_model=CabinetListSchema)
async def list_cabinets() -> CabinetListSchema:
    """List the cabinet types walls can be built from."""
    return CabinetListSchema(
        cabinets=[
            CabinetSchema(
                cabinet_type=cabinet_type.value,
                width=dims.width,
                height=dims.height,
            )
            for cabinet_type, dims in CABINET_DIMENSIONS.items()
        ],
        max_grid_size=MAX_GRID_SIZE,
    )
