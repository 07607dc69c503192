"""Block catalog route.

The browser fetches this once on page load and builds the carousel from it.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_catalog_provider
from src.api.schemas import BlockSchema
from src.core.logging import get_logger
from src.ports.catalog import CatalogProvider

logger = get_logger(__name__)

router = APIRouter(tags=["blocks"])


@router.get("/blocks", response_model=list[BlockSchema])
async def list_blocks(
    catalog: CatalogProvider = Depends(get_catalog_provider),
) -> list[BlockSchema]:
    """Return every carousel block in display order."""
    blocks = await catalog.get_blocks()
    logger.debug("blocks_served", count=len(blocks))
    return [BlockSchema.from_record(block) for block in blocks]
