"""FastAPI dependency injection for the block catalog.

Example:
    from fastapi import Depends
    from src.api.dependencies import get_catalog_provider
    from src.ports.catalog import CatalogProvider

    @router.get("/blocks")
    async def list_blocks(catalog: CatalogProvider = Depends(get_catalog_provider)):
        return await catalog.get_blocks()
"""

from collections.abc import AsyncGenerator

from fastapi import Request

from src.core.logging import get_logger
from src.ports.catalog import CatalogProvider

logger = get_logger(__name__)


class AppState:
    """Per-application container for the loaded catalog.

    ``create_app`` stores one on ``app.state.app_state``, so two apps in the
    same process never see each other's catalog. The catalog is loaded
    once by the lifespan and only read afterwards.
    """

    def __init__(self) -> None:
        self._catalog: CatalogProvider | None = None
        self._block_count = 0
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        """Check if the app state has been initialized."""
        return self._initialized

    @property
    def block_count(self) -> int:
        return self._block_count

    async def initialize(self, catalog: CatalogProvider) -> None:
        """Load the catalog and make it available to handlers.

        Args:
            catalog: The catalog to serve on ``GET /blocks``.

        Raises:
            CatalogError: If the catalog cannot be loaded.
        """
        if self._initialized:
            logger.warning("app_state_already_initialized")
            return

        await catalog.load()
        blocks = await catalog.get_blocks()

        self._catalog = catalog
        self._block_count = len(blocks)
        self._initialized = True
        logger.info(
            "catalog_initialized",
            source=catalog.source,
            blocks=self._block_count,
        )

    async def shutdown(self) -> None:
        """Release the catalog."""
        self._catalog = None
        self._block_count = 0
        self._initialized = False
        logger.info("app_state_shutdown")

    @property
    def catalog(self) -> CatalogProvider:
        """Get the catalog provider."""
        if self._catalog is None:
            raise RuntimeError("App state not initialized")
        return self._catalog


def get_app_state(request: Request) -> AppState:
    """FastAPI dependency for the state of the app serving ``request``."""
    app_state: AppState = request.app.state.app_state
    return app_state


async def get_catalog_provider(request: Request) -> AsyncGenerator[CatalogProvider, None]:
    """FastAPI dependency for the catalog provider."""
    yield get_app_state(request).catalog
