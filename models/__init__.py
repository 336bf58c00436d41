"""
Models layer - domain entities, input schemas and static lookup tables.
"""

from models.entities import ImageRef, Item
from models.schemas import ItemDraft
from models.keyword_table import KEYWORD_TABLE, DEFAULT_IMAGE, DEFAULT_ITEMS

__all__ = [
    "ImageRef",
    "Item",
    "ItemDraft",
    "KEYWORD_TABLE",
    "DEFAULT_IMAGE",
    "DEFAULT_ITEMS",
]
