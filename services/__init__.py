"""
Services layer - pure business logic, no Streamlit dependencies.
"""

from services.errors import (
    ShoppingListError,
    ValidationError,
    DuplicateNameError,
    NotFoundError,
)
from services.image_resolver import KeywordImageResolver, resolve
from services.item_list_store import ItemListStore

__all__ = [
    "ShoppingListError",
    "ValidationError",
    "DuplicateNameError",
    "NotFoundError",
    "KeywordImageResolver",
    "resolve",
    "ItemListStore",
]
