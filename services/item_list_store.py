"""
Item List Store - the live shopping list collection.

This service holds the ordered items and enforces:
- Non-blank names and numeric prices
- Case-insensitive unique names
- Newest-first ordering on add, in-place replacement on update

No Streamlit dependency: the controller keeps one store per session.
"""

import logging
import uuid
from typing import Callable, Iterable, Iterator, Optional

import pydantic

from models.entities import Item
from models.keyword_table import DEFAULT_ITEMS
from models.schemas import ItemDraft
from services.errors import DuplicateNameError, NotFoundError, ValidationError
from services.image_resolver import KeywordImageResolver

logger = logging.getLogger(__name__)


def new_item_id() -> str:
    """Default id source."""
    return str(uuid.uuid4())


class ItemListStore:
    """In-memory store for shopping list items."""

    def __init__(
        self,
        initial: Optional[Iterable[tuple[str, float]]] = DEFAULT_ITEMS,
        id_factory: Callable[[], str] = new_item_id,
        resolver: Optional[KeywordImageResolver] = None,
        allow_negative_prices: bool = False,
    ):
        """
        Initialize the store.

        Args:
            initial: (name, price) pairs to start with, in display order
            id_factory: Returns a fresh unique id on every call
            resolver: Image resolver (built-in keyword table if omitted)
            allow_negative_prices: Accept prices below zero
        """
        self._id_factory = id_factory
        self._resolver = resolver or KeywordImageResolver()
        self.allow_negative_prices = allow_negative_prices
        self._initial = tuple(initial or ())
        self._items: list[Item] = []
        self.reset()

    # ==========================================
    # Read Access
    # ==========================================

    @property
    def items(self) -> list[Item]:
        """Current items, newest first. Returns a copy."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def get(self, item_id: str) -> Optional[Item]:
        """Get an item by id."""
        index = self._index_of(item_id)
        return self._items[index] if index is not None else None

    def filter(self, query: str = "") -> list[Item]:
        """
        Items whose name contains the query (case-insensitive).

        An empty query returns every item in collection order.
        """
        q = (query or "").lower()
        return [item for item in self._items if q in item.name_key]

    def total(self) -> float:
        """Sum of prices over all items, not just a filtered view."""
        return sum(item.price for item in self._items)

    # ==========================================
    # Mutations
    # ==========================================

    def add(self, name: str, price) -> Item:
        """
        Add a new item at the front of the list.

        Raises:
            ValidationError: Blank name or unusable price
            DuplicateNameError: Another item has this name
        """
        draft = self._validate(name, price)
        self._check_unique(draft.name)

        item = self._build(self._id_factory(), draft)
        self._items.insert(0, item)
        logger.info(f"Added item {item.name!r} ({item.price}) as {item.id}")
        return item

    def update(self, item_id: str, name: str, price) -> Item:
        """
        Replace an item's name, price and image, keeping its id and position.

        Raises:
            ValidationError: Blank name or unusable price
            DuplicateNameError: A different item has this name
            NotFoundError: No item with this id
        """
        draft = self._validate(name, price)
        index = self._index_of(item_id)
        if index is None:
            raise NotFoundError(item_id)
        self._check_unique(draft.name, exclude_id=item_id)

        item = self._build(item_id, draft)
        self._items[index] = item
        logger.info(f"Updated item {item_id} to {item.name!r} ({item.price})")
        return item

    def delete(self, item_id: str) -> None:
        """Remove an item. Unknown ids are ignored."""
        index = self._index_of(item_id)
        if index is None:
            logger.debug(f"Delete ignored, no item {item_id}")
            return
        removed = self._items.pop(index)
        logger.info(f"Deleted item {removed.name!r} ({item_id})")

    def reset(self) -> None:
        """
        Restore the initial items with fresh ids.

        Raises ValidationError or DuplicateNameError for bad initial data,
        leaving the current items untouched.
        """
        items: list[Item] = []
        seen: set[str] = set()
        for name, price in self._initial:
            draft = self._validate(name, price)
            key = draft.name.lower()
            if key in seen:
                raise DuplicateNameError(draft.name)
            seen.add(key)
            items.append(self._build(self._id_factory(), draft))

        self._items = items
        logger.info(f"Reset store to {len(items)} initial items")

    # ==========================================
    # Helpers
    # ==========================================

    def _build(self, item_id: str, draft: ItemDraft) -> Item:
        return Item(
            id=item_id,
            name=draft.name,
            price=draft.price,
            image=self._resolver.resolve(draft.name),
        )

    def _validate(self, name, price) -> ItemDraft:
        try:
            return ItemDraft.model_validate(
                {"name": name, "price": price},
                context={"allow_negative": self.allow_negative_prices},
            )
        except pydantic.ValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0]) if error.get("loc") else None
            message = error["msg"].removeprefix("Value error, ")
            raise ValidationError(message, field=field) from e

    def _check_unique(self, name: str, exclude_id: Optional[str] = None) -> None:
        key = name.lower()
        for item in self._items:
            if item.id != exclude_id and item.name_key == key:
                raise DuplicateNameError(name)

    def _index_of(self, item_id: str) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None
