"""
API package - FastAPI application and dashboard routes.
"""

from .app import create_app
from .dashboard_api import create_dashboard_router

__all__ = [
    "create_app",
    "create_dashboard_router",
]
