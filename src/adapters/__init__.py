"""Adapters for external systems.

This module contains implementations of the catalog protocol for the
supported block sources.
"""

from src.adapters.factory import create_catalog_provider
from src.adapters.json_catalog import JsonFileCatalogProvider
from src.adapters.static_catalog import REFERENCE_BLOCKS, StaticCatalogProvider

__all__ = [
    "REFERENCE_BLOCKS",
    "JsonFileCatalogProvider",
    "StaticCatalogProvider",
    "create_catalog_provider",
]
