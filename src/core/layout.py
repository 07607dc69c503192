"""Strip layout arithmetic for the carousel.

All items sit side by side in one strip that is ``N`` viewports wide. The
strip is shifted left by one item width per block before the cursor.
"""

from dataclasses import dataclass

from src.core.carousel_logic import IMMEDIATE, SLIDE_TRANSITION, Transition


def strip_width_percent(total_items: int) -> float:
    """Width of the strip relative to the carousel viewport."""
    return 100.0 * total_items


def item_width_percent(total_items: int) -> float:
    """Width of one item relative to the strip."""
    if total_items <= 0:
        raise ValueError("Cannot size items of an empty carousel")
    return 100.0 / total_items


def item_width(container_width: float, total_items: int) -> float:
    """Pixel width of one item given the strip's rendered width."""
    if total_items <= 0:
        raise ValueError("Cannot size items of an empty carousel")
    return container_width / total_items


def strip_offset(container_width: float, total_items: int, current_block: int) -> float:
    """Horizontal offset in pixels that brings ``current_block`` into view."""
    # "or 0.0" folds -0.0 on the first block into 0.0
    return -(item_width(container_width, total_items) * current_block) or 0.0


@dataclass(frozen=True)
class Reflow:
    """Result of recomputing the strip position."""

    offset_px: float
    transition: Transition

    @property
    def left(self) -> str:
        """The offset formatted as a CSS length."""
        return f"{self.offset_px:g}px"


def reflow(
    container_width: float,
    total_items: int,
    current_block: int,
    animated: bool = True,
) -> Reflow | None:
    """Recompute the strip position.

    Returns None when there is nothing rendered to move.
    """
    if total_items <= 0:
        return None
    return Reflow(
        offset_px=strip_offset(container_width, total_items, current_block),
        transition=SLIDE_TRANSITION if animated else IMMEDIATE,
    )
