"""
Errors raised by the item list store.

All of them are local to one operation and leave the store unchanged.
"""

from typing import Optional


class ShoppingListError(Exception):
    """Base class for shopping list errors."""


class ValidationError(ShoppingListError):
    """Blank name or a price that is not an acceptable number."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class DuplicateNameError(ShoppingListError):
    """Another item already has this name (case-insensitive)."""

    def __init__(self, name: str):
        super().__init__(f'An item named "{name}" already exists')
        self.name = name


class NotFoundError(ShoppingListError):
    """No item with the given id."""

    def __init__(self, item_id: str):
        super().__init__(f"Item {item_id} not found")
        self.item_id = item_id
