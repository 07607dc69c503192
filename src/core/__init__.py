"""Core business logic and protocols.

This module contains the platform-agnostic carousel logic: block records,
display items, the navigation state machine and strip layout arithmetic.
"""

from src.core.blocks import (
    IMAGE_SLOTS,
    BlockRecord,
    DisplayItem,
    build_display_items,
    create_display_item,
    parse_catalog,
)
from src.core.carousel_logic import (
    IMMEDIATE,
    SLIDE_TRANSITION,
    BlockChange,
    CarouselController,
    CarouselState,
    ControlFlags,
    NavEvent,
    Transition,
    control_flags,
)
from src.core.errors import (
    CatalogError,
    CatalogFetchError,
    CatalogValidationError,
    ErrorCategory,
    classify_error,
)
from src.core.layout import (
    Reflow,
    item_width,
    item_width_percent,
    reflow,
    strip_offset,
    strip_width_percent,
)
from src.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
)

__all__ = [
    # Blocks
    "IMAGE_SLOTS",
    "BlockRecord",
    "DisplayItem",
    "build_display_items",
    "create_display_item",
    "parse_catalog",
    # Carousel
    "IMMEDIATE",
    "SLIDE_TRANSITION",
    "BlockChange",
    "CarouselController",
    "CarouselState",
    "ControlFlags",
    "NavEvent",
    "Transition",
    "control_flags",
    # Error handling
    "CatalogError",
    "CatalogFetchError",
    "CatalogValidationError",
    "ErrorCategory",
    "classify_error",
    # Layout
    "Reflow",
    "item_width",
    "item_width_percent",
    "reflow",
    "strip_offset",
    "strip_width_percent",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
]
