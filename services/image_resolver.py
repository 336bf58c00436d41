"""
Keyword Image Resolver - picks an item image from its name.

Matching is plain substring containment on the lower-cased, trimmed name,
so "bag" also matches "baggage". The first table entry with any matching
keyword wins; no match gives the default image.
"""

from typing import Iterable, Optional

from models.entities import ImageRef
from models.keyword_table import KEYWORD_TABLE, DEFAULT_IMAGE


class KeywordImageResolver:
    """Resolves item names to images using an ordered keyword table."""

    def __init__(
        self,
        table: Iterable[tuple[Iterable[str], ImageRef]] = KEYWORD_TABLE,
        default: Optional[ImageRef] = None,
    ):
        self._table = tuple(
            (tuple(k.lower() for k in keywords), image)
            for keywords, image in table
        )
        if default is None:
            default = self._table[0][1] if self._table else DEFAULT_IMAGE
        self.default = default

    def resolve(self, name: Optional[str]) -> ImageRef:
        """Return the image for an item name. Never raises."""
        if not name:
            return self.default

        lower_name = name.lower().strip()
        for keywords, image in self._table:
            if any(k in lower_name for k in keywords):
                return image
        return self.default

    __call__ = resolve


_default_resolver = KeywordImageResolver()


def resolve(name: Optional[str]) -> ImageRef:
    """Resolve using the built-in keyword table."""
    return _default_resolver.resolve(name)
