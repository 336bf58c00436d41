"""
Shopping Controller - manages the shopping list page state and interactions.

This controller handles:
- Keeping one ItemListStore per browser session
- The add/edit form (pending name and price, edit mode)
- The search query behind the filtered view
- Turning store errors into SubmitResult values for the view

Session state is injectable so the controller can run without a
Streamlit server (tests pass a plain dict).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, MutableMapping, Optional

import streamlit as st

from config.settings import Settings, get_settings
from models.entities import Item
from services.errors import DuplicateNameError, ShoppingListError
from services.item_list_store import ItemListStore, new_item_id

logger = logging.getLogger(__name__)


class PriceTier(str, Enum):
    """Display tier for an item price."""
    NORMAL = "normal"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class SubmitResult:
    """Result of submitting the add/edit form."""
    success: bool
    item: Optional[Item] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None  # Exception class name, e.g. "DuplicateNameError"
    was_edit: bool = False

    @property
    def is_duplicate(self) -> bool:
        """True when the name clashed with another item."""
        return self.error_kind == DuplicateNameError.__name__


class ShoppingController:
    """Controller for the shopping list page."""

    def __init__(
        self,
        state: Optional[MutableMapping[str, Any]] = None,
        settings: Optional[Settings] = None,
        id_factory: Callable[[], str] = new_item_id,
    ):
        self._state = st.session_state if state is None else state
        self.settings = settings or get_settings()
        self._id_factory = id_factory
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "shopping" not in self._state:
            self._state["shopping"] = {
                "store": ItemListStore(
                    id_factory=self._id_factory,
                    allow_negative_prices=self.settings.allow_negative_prices,
                ),
                "name": "",
                "price": "",
                "editing_id": None,
                "search": "",
                "form_version": 0,  # Bumped to reset the form widgets
            }

    @property
    def _shopping(self) -> dict:
        return self._state["shopping"]

    @property
    def store(self) -> ItemListStore:
        """The session's item store."""
        return self._shopping["store"]

    # ==========================================
    # Views of the List
    # ==========================================

    def get_items(self) -> list[Item]:
        """All items, newest first."""
        return self.store.items

    def get_filtered_items(self) -> list[Item]:
        """Items matching the current search query."""
        return self.store.filter(self._shopping["search"])

    def get_total(self) -> float:
        """Total price of all items, regardless of search."""
        return self.store.total()

    def get_search(self) -> str:
        """Get the current search query."""
        return self._shopping["search"]

    def set_search(self, query: Optional[str]):
        """Set the search query."""
        self._shopping["search"] = query or ""

    # ==========================================
    # Form State
    # ==========================================

    def get_form_values(self) -> tuple[str, str]:
        """Pending (name, price) shown in the form."""
        return self._shopping["name"], self._shopping["price"]

    def get_form_version(self) -> int:
        """Counter used in form widget keys."""
        return self._shopping["form_version"]

    def get_editing_id(self) -> Optional[str]:
        """Id of the item being edited, if any."""
        return self._shopping["editing_id"]

    def is_editing(self) -> bool:
        """Check if the form is in edit mode."""
        return self._shopping["editing_id"] is not None

    def start_edit(self, item_id: str) -> bool:
        """
        Load an item into the form for editing.

        Returns False if the item no longer exists.
        """
        item = self.store.get(item_id)
        if not item:
            logger.info(f"Cannot edit missing item {item_id}")
            return False

        self._shopping["editing_id"] = item.id
        self._set_form(item.name, _price_to_text(item.price))
        return True

    def cancel_edit(self):
        """Leave edit mode and clear the form."""
        self._shopping["editing_id"] = None
        self._set_form("", "")

    def _set_form(self, name: str, price: str):
        self._shopping["name"] = name
        self._shopping["price"] = price
        self._shopping["form_version"] += 1

    # ==========================================
    # Item Operations
    # ==========================================

    def submit(self, name: str, price: Any) -> SubmitResult:
        """
        Submit the form: save the edit in edit mode, otherwise add.

        On success the form is cleared and edit mode ends. On failure the
        typed values are kept so the user can correct them.
        """
        editing_id = self._shopping["editing_id"]
        try:
            if editing_id is not None:
                item = self.store.update(editing_id, name, price)
            else:
                item = self.store.add(name, price)
        except ShoppingListError as e:
            logger.info(f"Rejected {'edit' if editing_id else 'add'}: {e}")
            self._shopping["name"] = name if isinstance(name, str) else ""
            self._shopping["price"] = "" if price is None else str(price)
            return SubmitResult(
                success=False,
                error=str(e),
                error_kind=type(e).__name__,
                was_edit=editing_id is not None,
            )

        self.cancel_edit()
        return SubmitResult(success=True, item=item, was_edit=editing_id is not None)

    def delete_item(self, item_id: str):
        """Delete an item, leaving edit mode if it was being edited."""
        self.store.delete(item_id)
        if self._shopping["editing_id"] == item_id:
            self.cancel_edit()

    def reset_items(self):
        """Restore the default items."""
        self.store.reset()
        self.cancel_edit()

    # ==========================================
    # Display Helpers
    # ==========================================

    def price_tier(self, price: float) -> PriceTier:
        """Colour tier for a price."""
        if price > self.settings.price_high_threshold:
            return PriceTier.HIGH
        if price > self.settings.price_medium_threshold:
            return PriceTier.MEDIUM
        return PriceTier.NORMAL

    def format_price(self, price: float) -> str:
        """Format a price with the currency symbol, e.g. $35 or $12.50."""
        sign = "-" if price < 0 else ""
        return f"{sign}{self.settings.currency_symbol}{_price_to_text(abs(price), decimals=2)}"


def _price_to_text(price: Any, decimals: Optional[int] = None) -> str:
    """Whole numbers without decimals, others as given (or fixed decimals)."""
    if price is None:
        return ""
    value = float(price)
    if value.is_integer():
        return str(int(value))
    if decimals is not None:
        return f"{value:.{decimals}f}"
    return str(value)
