"""Carousel business logic - platform agnostic.

The carousel keeps one cursor, ``current_block``, over a fixed list of
items. Navigation moves it by exactly one step and never past either end;
every successful move is reported to the registered listeners.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from src.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class NavEvent(Enum):
    """Notification emitted after the cursor moves."""

    PREV_BLOCK = "prevBlock"
    NEXT_BLOCK = "nextBlock"


@dataclass(frozen=True)
class BlockChange:
    """A successful cursor move and the cursor value it produced."""

    event: NavEvent
    current_block: int


BlockChangeListener = Callable[[BlockChange], None]


@dataclass
class CarouselState(Generic[T]):
    """State for a carousel/paginated view."""

    items: list[T]
    current_block: int = 0

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def current_item(self) -> T | None:
        if 0 <= self.current_block < len(self.items):
            return self.items[self.current_block]
        return None

    @property
    def has_next(self) -> bool:
        return self.current_block < len(self.items) - 1

    @property
    def has_prev(self) -> bool:
        return self.current_block > 0


class CarouselController(Generic[T]):
    """Controls carousel navigation and notifies listeners of moves.

    Example:
        controller = CarouselController(items, on_block_change=view.reposition)
        controller.navigate("next")  # -> BlockChange(NEXT_BLOCK, 1)
        controller.navigate("prev")  # -> BlockChange(PREV_BLOCK, 0)
        controller.navigate("prev")  # -> None, already at the first block
    """

    def __init__(
        self,
        items: list[T] | None = None,
        on_block_change: BlockChangeListener | None = None,
    ) -> None:
        self._state: CarouselState[T] = CarouselState(items=list(items or []))
        self._listeners: list[BlockChangeListener] = []
        if on_block_change is not None:
            self._listeners.append(on_block_change)

    @property
    def state(self) -> CarouselState[T]:
        return self._state

    @property
    def current_block(self) -> int:
        return self._state.current_block

    def load(self, items: list[T]) -> None:
        """Replace the items and rewind the cursor to the first block."""
        self._state = CarouselState(items=list(items))

    def add_listener(self, listener: BlockChangeListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: BlockChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def prev_block(self) -> BlockChange | None:
        """Move to the previous block, or do nothing at the first one."""
        if not self._state.has_prev:
            return None
        self._state.current_block -= 1
        return self._emit(NavEvent.PREV_BLOCK)

    def next_block(self) -> BlockChange | None:
        """Move to the next block, or do nothing at the last one."""
        if not self._state.has_next:
            return None
        self._state.current_block += 1
        return self._emit(NavEvent.NEXT_BLOCK)

    def navigate(self, control: str) -> BlockChange | None:
        """Dispatch an activation of the control named ``control``.

        Only ``"prev"`` and ``"next"`` move the cursor; activations of any
        other element are ignored.
        """
        if control == "prev":
            return self.prev_block()
        if control == "next":
            return self.next_block()
        logger.debug("carousel_control_ignored", control=control)
        return None

    def select_item(self) -> T | None:
        """Get the item currently in view."""
        return self._state.current_item

    def _emit(self, event: NavEvent) -> BlockChange:
        change = BlockChange(event=event, current_block=self._state.current_block)
        for listener in list(self._listeners):
            listener(change)
        return change


@dataclass
class ControlFlags:
    """Enabled state of the navigation controls."""

    prev_enabled: bool = False
    next_enabled: bool = False


def control_flags(current_block: int, total_items: int) -> ControlFlags:
    """Compute which navigation controls may be activated.

    ``prev`` is disabled only on the first block and ``next`` only on the
    last one; with no items both are disabled.
    """
    if total_items <= 0:
        return ControlFlags()
    return ControlFlags(
        prev_enabled=current_block > 0,
        next_enabled=current_block < total_items - 1,
    )


@dataclass(frozen=True)
class Transition:
    """CSS transition applied to the strip's ``left`` property."""

    duration_ms: int | None = None
    easing: str | None = None
    property_name: str = field(default="left")

    @property
    def animated(self) -> bool:
        return self.duration_ms is not None

    def css(self) -> str:
        if not self.animated:
            return "initial"
        return f"{self.property_name} {self.duration_ms}ms {self.easing}"


# Eased slide used when navigating between blocks
SLIDE_TRANSITION = Transition(
    duration_ms=800, easing="cubic-bezier(0.165, 0.84, 0.44, 1)"
)

# Resizes jump straight to the new offset
IMMEDIATE = Transition()
