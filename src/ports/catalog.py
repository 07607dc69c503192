"""Catalog protocol for block data access.

The server publishes whatever a CatalogProvider returns on ``GET /blocks``.
Implementations may hold the blocks in code, read them from a file, or
load them from any other source; they are read-only.
"""

from typing import Protocol, runtime_checkable

from src.core.blocks import BlockRecord


@runtime_checkable
class CatalogProvider(Protocol):
    """Protocol for sources of carousel blocks."""

    @property
    def source(self) -> str:
        """Short description of where the blocks come from, for logs."""
        ...

    async def load(self) -> None:
        """Load and validate the blocks.

        Raises:
            CatalogError: If the blocks cannot be loaded or are invalid.
        """
        ...

    async def get_blocks(self) -> list[BlockRecord]:
        """Return all blocks in display order."""
        ...
