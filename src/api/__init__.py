"""HTTP API package for the carousel server.

This module provides the FastAPI application that serves the carousel page,
its static assets and the block catalog.
"""

from src.api.app import create_app
from src.api.dependencies import AppState, get_app_state, get_catalog_provider

__all__ = [
    "AppState",
    "create_app",
    "get_app_state",
    "get_catalog_provider",
]
