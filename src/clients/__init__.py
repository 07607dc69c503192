"""Clients that consume the carousel server."""

from src.clients.carousel_view import CarouselView, Renderer
from src.clients.catalog_client import blocks_url, fetch_blocks

__all__ = [
    "CarouselView",
    "Renderer",
    "blocks_url",
    "fetch_blocks",
]
