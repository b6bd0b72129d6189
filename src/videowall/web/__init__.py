"""FastAPI REST API for video wall calculation.

Usage:
    uvicorn videowall.web:app --reload
"""

from videowall.web.app import app, create_app

__all__ = ["app", "create_app"]
