"""Block records and the display items derived from them.

A BlockRecord is one catalog entry as served by ``GET /blocks``. A
DisplayItem is the slide the carousel renders for it: the title plus four
image slots, each picked at random from the record's images.
"""

import random
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from src.core.errors import CatalogValidationError

# Number of image slots on a rendered slide (img1..img4)
IMAGE_SLOTS = 4


@dataclass(frozen=True)
class BlockRecord:
    """One carousel block as published by the catalog.

    Attributes:
        title: Title shown on the slide.
        images: Candidate image URLs, in catalog order. Never empty.
    """

    title: str
    images: tuple[str, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.title, str):
            raise CatalogValidationError(
                f"Block title must be a string, got {type(self.title).__name__}"
            )
        if not self.images:
            raise CatalogValidationError(
                f"Block {self.title!r} has no images to choose from"
            )
        if not all(isinstance(url, str) and url for url in self.images):
            raise CatalogValidationError(
                f"Block {self.title!r} has an invalid image URL"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BlockRecord":
        """Build a record from a decoded JSON object.

        Raises:
            CatalogValidationError: If the object is not a valid block.
        """
        if not isinstance(data, Mapping):
            raise CatalogValidationError(
                f"Block must be an object, got {type(data).__name__}"
            )
        if "title" not in data or "images" not in data:
            raise CatalogValidationError("Block requires 'title' and 'images'")

        images = data["images"]
        if isinstance(images, str) or not isinstance(images, Sequence):
            raise CatalogValidationError(
                f"Block {data['title']!r} images must be a list"
            )
        return cls(title=data["title"], images=tuple(images))

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire format of ``GET /blocks``."""
        return {"title": self.title, "images": list(self.images)}


@dataclass(frozen=True)
class DisplayItem:
    """A rendered carousel slide."""

    title: str
    img1: str
    img2: str
    img3: str
    img4: str

    @property
    def images(self) -> tuple[str, str, str, str]:
        return (self.img1, self.img2, self.img3, self.img4)


def parse_catalog(payload: Any) -> list[BlockRecord]:
    """Validate a decoded ``/blocks`` payload into block records.

    Args:
        payload: The decoded JSON document.

    Returns:
        Block records in payload order.

    Raises:
        CatalogValidationError: If the payload is not a list of valid blocks.
    """
    if not isinstance(payload, list):
        raise CatalogValidationError(
            f"Catalog must be a list, got {type(payload).__name__}"
        )
    return [BlockRecord.from_dict(entry) for entry in payload]


def create_display_item(
    record: BlockRecord,
    rng: random.Random | None = None,
) -> DisplayItem:
    """Build a slide for a record, sampling image slots with replacement.

    Args:
        record: The source block.
        rng: Random source; the module-level generator when None.
    """
    choose = rng.choice if rng is not None else random.choice
    slots = [choose(record.images) for _ in range(IMAGE_SLOTS)]
    return DisplayItem(record.title, *slots)


def build_display_items(
    records: Iterable[BlockRecord],
    rng: random.Random | None = None,
) -> list[DisplayItem]:
    """Build one slide per record, preserving order."""
    return [create_display_item(record, rng) for record in records]
