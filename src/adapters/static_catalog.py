"""Built-in block catalog.

Serves the fixed reference catalog used when no catalog file is
configured.
"""

from src.core.blocks import BlockRecord

REFERENCE_BLOCKS: tuple[BlockRecord, ...] = (
    BlockRecord(
        title="Bilbao",
        images=("/img/1.jpg", "/img/2.jpg", "/img/3.jpg", "/img/4.jpg"),
    ),
    BlockRecord(
        title="Barcelona",
        images=("/img/5.jpg", "/img/6.jpg", "/img/7.jpg", "/img/8.jpg"),
    ),
    BlockRecord(
        title="Donostia",
        images=("/img/9.jpg", "/img/10.jpg", "/img/11.jpg"),
    ),
)


class StaticCatalogProvider:
    """Catalog backed by an in-code sequence of blocks.

    Example:
        catalog = StaticCatalogProvider()
        await catalog.load()
        blocks = await catalog.get_blocks()  # Bilbao, Barcelona, Donostia
    """

    def __init__(
        self,
        blocks: tuple[BlockRecord, ...] | list[BlockRecord] | None = None,
    ) -> None:
        self._blocks = tuple(REFERENCE_BLOCKS if blocks is None else blocks)

    @property
    def source(self) -> str:
        return "static"

    async def load(self) -> None:
        # Records validate themselves on construction
        return None

    async def get_blocks(self) -> list[BlockRecord]:
        return list(self._blocks)
