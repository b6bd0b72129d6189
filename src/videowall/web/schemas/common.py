"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field


class DimensionSetSchema(BaseModel):
    """Resolved wall dimensions.

    Values that could not be computed (diagonal shorter than a side) are null.
    """

    width: float | None = Field(..., description="Width in the response unit")
    height: float | None = Field(..., description="Height in the response unit")
    diagonal: float | None = Field(..., description="Diagonal in the response unit")
    aspect_ratio: float | None = Field(..., description="Width divided by height")


class WallConfigurationSchema(BaseModel):
    """A columns x rows cabinet arrangement."""

    columns: int = Field(..., ge=1, description="Number of cabinet columns")
    rows: int = Field(..., ge=1, description="Number of cabinet rows")
    total_cabinets: int = Field(..., description="Columns times rows")
    width: float = Field(..., description="Width in the response unit")
    height: float = Field(..., description="Height in the response unit")
    diagonal: float = Field(..., description="Diagonal in the response unit")
    aspect_ratio: str = Field(..., description="Aspect ratio formatted as 'X.XX:1'")
