"""Carousel view wiring the catalog, the controller and a renderer.

The view owns no drawing code. It fetches the catalog once, turns blocks
into display items, and tells a Renderer what to show: the items and their
widths once, then control flags and strip offsets after every move or
resize. Browsers, terminals and test doubles all plug in as renderers.

Example:
    view = CarouselView.for_server(renderer, "http://localhost:3000")
    await view.start()
    view.handle_click("next")
    view.handle_resize()
"""

from __future__ import annotations

import random
from collections.abc import Awaitable, Callable
from functools import partial
from typing import Protocol

from src.clients.catalog_client import fetch_blocks
from src.core.blocks import BlockRecord, DisplayItem, build_display_items
from src.core.carousel_logic import (
    BlockChange,
    CarouselController,
    ControlFlags,
    control_flags,
)
from src.core.errors import CatalogError
from src.core.layout import Reflow, item_width_percent, reflow, strip_width_percent
from src.core.logging import get_logger

logger = get_logger(__name__)

CatalogFetcher = Callable[[], Awaitable[list[BlockRecord]]]


class Renderer(Protocol):
    """Drawing surface for the carousel."""

    def render_items(
        self,
        items: list[DisplayItem],
        strip_width_pct: float,
        item_width_pct: float,
    ) -> None:
        """Lay out all items side by side in the strip."""
        ...

    def set_controls(self, flags: ControlFlags) -> None:
        """Enable or disable the prev/next controls."""
        ...

    def move_strip(self, position: Reflow) -> None:
        """Apply a strip offset with the given transition."""
        ...

    def container_width(self) -> float:
        """Current rendered width of the strip in pixels."""
        ...


class CarouselView:
    """Drives a Renderer from the carousel state machine."""

    def __init__(
        self,
        renderer: Renderer,
        fetch_catalog: CatalogFetcher,
        rng: random.Random | None = None,
    ) -> None:
        self._renderer = renderer
        self._fetch_catalog = fetch_catalog
        self._rng = rng
        self._controller: CarouselController[DisplayItem] = CarouselController(
            on_block_change=self._on_block_change
        )
        self._started = False

    @classmethod
    def for_server(
        cls,
        renderer: Renderer,
        base_url: str,
        rng: random.Random | None = None,
    ) -> CarouselView:
        """Create a view that reads its blocks from a carousel server."""
        return cls(renderer, partial(fetch_blocks, base_url), rng=rng)

    @property
    def controller(self) -> CarouselController[DisplayItem]:
        return self._controller

    @property
    def items(self) -> list[DisplayItem]:
        return self._controller.state.items

    @property
    def current_block(self) -> int:
        return self._controller.current_block

    async def start(self) -> bool:
        """Fetch the catalog and render it once.

        Returns:
            True if the carousel was rendered. On a fetch failure the error
            is logged and the carousel stays empty.
        """
        if self._started:
            logger.warning("carousel_already_started")
            return bool(self.items)
        self._started = True

        try:
            blocks = await self._fetch_catalog()
        except CatalogError as ex:
            logger.error(
                "carousel_catalog_unavailable",
                category=ex.category.name,
                error=str(ex),
            )
            return False

        items = build_display_items(blocks, self._rng)
        self._controller.load(items)
        if not items:
            logger.info("carousel_empty")
            return False

        self._renderer.render_items(
            items,
            strip_width_percent(len(items)),
            item_width_percent(len(items)),
        )
        self._renderer.set_controls(control_flags(0, len(items)))
        logger.info("carousel_rendered", items=len(items))
        return True

    def handle_click(self, control: str) -> BlockChange | None:
        """Handle activation of the control named ``control``."""
        return self._controller.navigate(control)

    def handle_resize(self) -> Reflow | None:
        """Reposition the strip for a new viewport size, without animation."""
        position = reflow(
            self._renderer.container_width(),
            len(self.items),
            self.current_block,
            animated=False,
        )
        if position is not None:
            self._renderer.move_strip(position)
        return position

    def _on_block_change(self, change: BlockChange) -> None:
        total = len(self.items)
        self._renderer.set_controls(control_flags(change.current_block, total))
        position = reflow(
            self._renderer.container_width(),
            total,
            change.current_block,
            animated=True,
        )
        if position is not None:
            self._renderer.move_strip(position)
        logger.debug(
            "carousel_block_changed",
            nav_event=change.event.value,
            current_block=change.current_block,
        )
