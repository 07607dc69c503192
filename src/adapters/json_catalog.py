"""Block catalog read from a JSON file.

The file holds the exact document served on ``GET /blocks``: a list of
``{"title": ..., "images": [...]}`` objects. It is read once by ``load()``
and validated up front so that a broken file stops the server at startup
instead of reaching the browser.
"""

import asyncio
import json
from pathlib import Path

from src.core.blocks import BlockRecord, parse_catalog
from src.core.errors import CatalogError, CatalogValidationError, ErrorCategory
from src.core.logging import get_logger

logger = get_logger(__name__)


class JsonFileCatalogProvider:
    """Catalog backed by a JSON file on disk.

    Example:
        catalog = JsonFileCatalogProvider("data/blocks.json")
        await catalog.load()
        blocks = await catalog.get_blocks()
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._blocks: list[BlockRecord] | None = None

    @property
    def source(self) -> str:
        return str(self._path)

    @property
    def is_loaded(self) -> bool:
        return self._blocks is not None

    async def load(self) -> None:
        """Read and validate the catalog file.

        Raises:
            CatalogError: If the file is missing or unreadable.
            CatalogValidationError: If the file is not a valid catalog.
        """
        try:
            text = await asyncio.to_thread(self._path.read_text, encoding="utf-8")
        except OSError as ex:
            logger.error("catalog_file_unreadable", path=str(self._path), error=str(ex))
            raise CatalogError.from_exception(ex, ErrorCategory.CONFIGURATION) from ex

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as ex:
            logger.error("catalog_file_invalid_json", path=str(self._path), error=str(ex))
            raise CatalogValidationError.from_exception(ex) from ex

        self._blocks = parse_catalog(payload)
        logger.info("catalog_file_loaded", path=str(self._path), blocks=len(self._blocks))

    async def get_blocks(self) -> list[BlockRecord]:
        if self._blocks is None:
            raise RuntimeError("Catalog not loaded")
        return list(self._blocks)
