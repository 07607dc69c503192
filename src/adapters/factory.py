"""Catalog factory for creating different catalog implementations.

Supported sources:
- "static": The built-in reference catalog
- "json": A JSON file on disk (requires path)

Example:
    # Built-in catalog
    catalog = create_catalog_provider()

    # From the CATALOG_PATH env var, falling back to the built-in one
    catalog = create_catalog_provider(path=os.getenv("CATALOG_PATH"))
"""

from __future__ import annotations

from pathlib import Path

from src.adapters.json_catalog import JsonFileCatalogProvider
from src.adapters.static_catalog import StaticCatalogProvider
from src.ports.catalog import CatalogProvider


def create_catalog_provider(
    backend: str | None = None,
    path: str | Path | None = None,
) -> CatalogProvider:
    """Create a catalog provider.

    Args:
        backend: "static" or "json". When None, "json" is used if a path is
            given and "static" otherwise.
        path: Catalog file for the "json" backend.

    Raises:
        ValueError: If the backend is not supported or required kwargs are missing.
    """
    if backend is None:
        backend = "json" if path else "static"

    if backend == "static":
        return StaticCatalogProvider()

    if backend == "json":
        if not path:
            raise ValueError("'path' is required for json backend")
        return JsonFileCatalogProvider(path)

    raise ValueError(
        f"Unsupported backend: {backend!r}. Supported backends: 'static', 'json'"
    )
