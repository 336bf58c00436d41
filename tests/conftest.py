"""Pytest fixtures for the shopping list tests."""

import itertools

import pytest

from config.settings import Settings
from controllers.shopping_controller import ShoppingController
from services.item_list_store import ItemListStore


@pytest.fixture
def id_factory():
    """Deterministic ids: item-1, item-2, ..."""
    counter = itertools.count(1)
    return lambda: f"item-{next(counter)}"


@pytest.fixture
def store(id_factory):
    """Store holding the default items."""
    return ItemListStore(id_factory=id_factory)


@pytest.fixture
def empty_store(id_factory):
    return ItemListStore(initial=(), id_factory=id_factory)


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def controller(settings, id_factory):
    """Controller backed by a plain dict instead of st.session_state."""
    return ShoppingController(state={}, settings=settings, id_factory=id_factory)


def find_item(store, name):
    """Item with the given name, or None."""
    return next((i for i in store.items if i.name == name), None)
