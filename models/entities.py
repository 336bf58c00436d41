"""
Domain entities for the shopping list.

Items are immutable snapshots: an edit replaces the Item in the store with
a new instance that keeps the same id.

    Item ──> (1) ImageRef
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageRef:
    """
    Reference to an item image asset.

    The store treats these as opaque values. The view looks up `filename`
    under the configured assets directory and falls back to `emoji`.
    """
    key: str  # e.g. "perfume"
    filename: str  # e.g. "perfume.png"
    emoji: str  # Shown when the asset file is missing


@dataclass(frozen=True)
class Item:
    """A named, priced, imaged entry in the shopping list."""
    id: str
    name: str
    price: float
    image: ImageRef

    @property
    def name_key(self) -> str:
        """Case-insensitive key used for uniqueness and search."""
        return self.name.lower()
