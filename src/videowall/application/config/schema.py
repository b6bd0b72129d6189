"""Pydantic models for video wall calculator configuration files.

A configuration file describes one calculation: the unit the values are
entered in, the cabinet type, exactly two known quantities, and how the
result should be shown.
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from videowall.domain.dimension_resolver import DIMENSION_FIELDS
from videowall.domain.value_objects import CabinetType, LengthUnit

# Version 1.0: Initial schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

OutputFormat = Literal["text", "json", "grid", "all"]


class InputsConfig(BaseModel):
    """The known quantities of the wall.

    Exactly two of the four fields must be set. Lengths are expressed in the
    configuration's ``unit``; aspect_ratio is width / height.

    Attributes:
        aspect_ratio: Width over height (e.g. 1.7778 for 16:9)
        height: Wall height
        width: Wall width
        diagonal: Wall diagonal
    """

    model_config = ConfigDict(extra="forbid")

    aspect_ratio: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    width: float | None = Field(default=None, gt=0)
    diagonal: float | None = Field(default=None, gt=0)

    @property
    def active_inputs(self) -> list[str]:
        return [name for name in DIMENSION_FIELDS if getattr(self, name) is not None]

    @model_validator(mode="after")
    def validate_exactly_two(self) -> "InputsConfig":
        """Require exactly two known quantities."""
        active = self.active_inputs
        if len(active) != 2:
            raise ValueError(
                "Exactly two of aspect_ratio, height, width and diagonal must be "
                f"set (got {len(active)})"
            )
        return self


class OutputConfig(BaseModel):
    """How results are displayed.

    Attributes:
        format: Output format: text panels, JSON, ASCII grid, or all of them
        unit: Display unit for lengths (defaults to the input unit)
    """

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = "text"
    unit: LengthUnit | None = None


class CalculatorConfiguration(BaseModel):
    """Root configuration model for a wall calculation.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        unit: Unit the input lengths are expressed in
        cabinet_type: Cabinet module the wall is built from
        inputs: The two known quantities
        output: Output configuration

    Example:
        >>> config = CalculatorConfiguration(
        ...     schema_version="1.0",
        ...     inputs=InputsConfig(width=6000, height=3375),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    unit: LengthUnit = LengthUnit.MILLIMETER
    cabinet_type: CabinetType = CabinetType.WIDE
    inputs: InputsConfig
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @property
    def display_unit(self) -> LengthUnit:
        return self.output.unit or self.unit
