"""Recording renderer for carousel view tests.

Implements the Renderer protocol from src/clients/carousel_view.py and keeps
every call so tests can assert on what would have been drawn.
"""

from dataclasses import dataclass, field

from src.core.blocks import DisplayItem
from src.core.carousel_logic import ControlFlags
from src.core.layout import Reflow


@dataclass
class RenderedStrip:
    """Arguments of a render_items() call."""

    items: list[DisplayItem]
    strip_width_pct: float
    item_width_pct: float


@dataclass
class RecordingRenderer:
    """Renderer that records calls instead of drawing.

    Attributes:
        width: Value returned by container_width(); change it to simulate
            a viewport resize.
        renders: One entry per render_items() call.
        controls: Every ControlFlags pushed, in order.
        moves: Every Reflow applied, in order.
    """

    width: float = 900.0
    renders: list[RenderedStrip] = field(default_factory=list)
    controls: list[ControlFlags] = field(default_factory=list)
    moves: list[Reflow] = field(default_factory=list)

    def render_items(
        self,
        items: list[DisplayItem],
        strip_width_pct: float,
        item_width_pct: float,
    ) -> None:
        self.renders.append(RenderedStrip(list(items), strip_width_pct, item_width_pct))

    def set_controls(self, flags: ControlFlags) -> None:
        self.controls.append(flags)

    def move_strip(self, position: Reflow) -> None:
        self.moves.append(position)

    def container_width(self) -> float:
        return self.width

    @property
    def last_controls(self) -> ControlFlags | None:
        return self.controls[-1] if self.controls else None

    @property
    def last_move(self) -> Reflow | None:
        return self.moves[-1] if self.moves else None
