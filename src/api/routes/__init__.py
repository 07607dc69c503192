"""API routes package.

This module contains all route handlers for the HTTP API.
"""

from src.api.routes.blocks import router as blocks_router
from src.api.routes.health import router as health_router
from src.api.routes.pages import router as pages_router

__all__ = [
    "blocks_router",
    "health_router",
    "pages_router",
]
