"""API routers for the REST API."""

from videowall.web.routers.cabinets import router as cabinets_router
from videowall.web.routers.calculate import router as calculate_router
from videowall.web.routers.convert import router as convert_router
from videowall.web.routers.validate import router as validate_router

__all__ = [
    "cabinets_router",
    "calculate_router",
    "convert_router",
    "validate_router",
]
