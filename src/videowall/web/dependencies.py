"""FastAPI dependency injection for calculator services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from videowall.application import CalculateWallCommand


@lru_cache(maxsize=1)
def get_calculate_command() -> CalculateWallCommand:
    """Get cached CalculateWallCommand instance.

    The command holds no per-request state, so one instance is shared.
    """
    return CalculateWallCommand()


# Type aliases for cleaner endpoint signatures
CalculateCommandDep = Annotated[CalculateWallCommand, Depends(get_calculate_command)]
