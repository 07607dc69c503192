"""Ports (interfaces) for the application.

This module contains Protocol definitions that define the boundaries between
the carousel core and the sources it reads blocks from.
"""

from src.ports.catalog import CatalogProvider

__all__ = ["CatalogProvider"]
