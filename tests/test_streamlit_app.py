"""Tests for the rendered Streamlit page."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from views.components.item_card import display_name, escape_markdown

APP_PATH = str(Path(__file__).resolve().parent.parent / "streamlit_app.py")


@pytest.fixture
def app():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    return at


def _total(at):
    return next(m.value for m in at.metric if m.label == "Total")


def _card_titles(at):
    return [h.value for h in at.subheader]


def _click(at, label):
    """Click the first button with this label and rerun."""
    next(b for b in at.button if b.label == label).click().run()


def _submit(at, name, price, label="➕ Add", version=0):
    """Fill the form rendered with this version counter and submit it."""
    if name is not None:
        at.text_input(key=f"item_name_{version}").input(name)
    if price is not None:
        at.text_input(key=f"item_price_{version}").input(price)
    _click(at, label)


class TestShoppingPage:
    """Tests for rendering and searching."""

    def test_renders_defaults(self, app):
        """The page shows the title, the default cards and the total."""
        assert not app.exception
        assert app.title[0].value == "Shopping List"
        assert _total(app) == "$255"
        assert _card_titles(app) == ["Perfume", "Shoes", "Bag", "Dress", "Lipstick"]

    def test_search_filters_cards(self, app):
        """Typing in the search box narrows the cards, not the total."""
        app.text_input(key="search_query").input("per").run()

        assert _card_titles(app) == ["Perfume"]
        assert _total(app) == "$255"

    def test_empty_state(self, app):
        """A search with no match shows the empty-state message."""
        app.text_input(key="search_query").input("zzz").run()

        assert _card_titles(app) == []
        assert any(md.value == "لا توجد عناصر مطابقة لبحثك." for md in app.markdown)


class TestItemActions:
    """Tests for add, edit and delete through the page."""

    def test_add_item(self, app):
        """Submitting the form adds a card first and updates the total."""
        _submit(app, "Sneakers", "80")

        assert not app.exception
        assert _total(app) == "$335"
        assert _card_titles(app)[0] == "Sneakers"

    def test_edit_item(self, app):
        """Edit prefills the form and Save updates the card in place."""
        _click(app, "✏️ Edit")

        assert app.text_input(key="item_name_1").value == "perfume"
        assert app.text_input(key="item_price_1").value == "35"

        _submit(app, "perfume spray", "40", label="💾 Save", version=1)

        assert not app.exception
        assert _card_titles(app) == ["Perfume Spray", "Shoes", "Bag", "Dress", "Lipstick"]
        assert _total(app) == "$260"
        assert not any(b.label == "💾 Save" for b in app.button)

    def test_delete_item(self, app):
        """Delete removes the card and its price from the total."""
        _click(app, "🗑️ Delete")

        assert _card_titles(app) == ["Shoes", "Bag", "Dress", "Lipstick"]
        assert _total(app) == "$220"

    def test_duplicate_name_shows_warning(self, app):
        """A duplicate name is reported as a warning, nothing is added."""
        _submit(app, "SHOES", "10")

        assert 'An item named "SHOES" already exists' in app.warning[0].value
        assert len(app.error) == 0
        assert _total(app) == "$255"

    @pytest.mark.parametrize("name,price,message", [
        (None, "5", "Name is required"),
        ("hat", "abc", "Price must be a number"),
    ])
    def test_invalid_input_shows_error(self, app, name, price, message):
        """Blank names and bad prices are reported as errors."""
        _submit(app, name, price)

        assert app.error[0].value == message
        assert _total(app) == "$255"

    def test_user_text_is_escaped(self, app):
        """Names with quotes and tags render as text, not markup."""
        name = "x' onmouseover='alert(1)<b>hi</b>"
        _submit(app, name, "5")

        assert not app.exception
        html_blocks = [md.value for md in app.markdown if md.value.startswith("<div")]
        assert html_blocks
        assert not any("onmouseover='" in block for block in html_blocks)
        assert not any("<b>" in block for block in html_blocks)
        assert any("&lt;b&gt;" in block for block in html_blocks)

        title = _card_titles(app)[0]
        assert title == escape_markdown(display_name(name))
        assert "<b>" not in title
