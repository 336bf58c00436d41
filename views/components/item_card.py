"""
Item card components.

Cards show the item image, name, tier-coloured price and Edit / Delete
buttons, laid out in a grid.
"""

import html
import re
from pathlib import Path
from typing import Callable

import streamlit as st

from models.entities import ImageRef, Item

# Characters with meaning in Streamlit markdown
_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!<>|~:$])")

TIER_COLORS = {
    "normal": "green",
    "medium": "orange",
    "high": "red",
}


def display_name(name: str) -> str:
    """Capitalize the first letter of each word, leaving the rest as typed."""
    return " ".join(word[:1].upper() + word[1:] for word in name.split(" "))


def escape_markdown(text: str) -> str:
    """Backslash-escape markdown syntax so user text renders literally."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def render_item_image(image: ImageRef, assets_dir: str, alt: str):
    """Show the image asset, or its emoji when the file is missing."""
    path = Path(assets_dir) / image.filename
    if path.is_file():
        st.image(str(path), caption=None, use_container_width=True)
    else:
        title = html.escape(alt, quote=True)
        st.markdown(
            f"<div style='font-size:4rem;text-align:center' title='{title}'>{image.emoji}</div>",
            unsafe_allow_html=True,
        )


def render_item_card(
    item: Item,
    price_label: str,
    tier: str,
    assets_dir: str,
    on_edit: Callable[[str], None],
    on_delete: Callable[[str], None],
):
    """
    Render a single item card.

    Args:
        item: Item to show
        price_label: Formatted price (e.g. "$35")
        tier: Price tier value ("normal", "medium" or "high")
        assets_dir: Directory holding the image files
        on_edit: Callback with the item id
        on_delete: Callback with the item id
    """
    with st.container(border=True):
        render_item_image(item.image, assets_dir, alt=item.name)

        st.subheader(escape_markdown(display_name(item.name)), anchor=False)
        color = TIER_COLORS.get(tier, "green")
        st.markdown(f":{color}[**{price_label}**]")

        col_edit, col_delete = st.columns(2)
        with col_edit:
            if st.button("✏️ Edit", key=f"edit_{item.id}", use_container_width=True):
                on_edit(item.id)
                st.rerun()
        with col_delete:
            if st.button("🗑️ Delete", key=f"delete_{item.id}", use_container_width=True):
                on_delete(item.id)
                st.rerun()


def render_item_grid(
    items: list[Item],
    cards_per_row: int,
    format_price: Callable[[float], str],
    price_tier: Callable[[float], str],
    assets_dir: str,
    on_edit: Callable[[str], None],
    on_delete: Callable[[str], None],
):
    """Render items as rows of cards."""
    for start in range(0, len(items), cards_per_row):
        row = items[start:start + cards_per_row]
        columns = st.columns(cards_per_row)
        for col, item in zip(columns, row):
            with col:
                render_item_card(
                    item=item,
                    price_label=format_price(item.price),
                    tier=price_tier(item.price).value,
                    assets_dir=assets_dir,
                    on_edit=on_edit,
                    on_delete=on_delete,
                )


def render_empty_state():
    """Shown when no item matches the search."""
    with st.container(border=True):
        st.markdown("لا توجد عناصر مطابقة لبحثك.")
        st.caption('Tip: اكتب كلمات مثل "عطر" أو "mascara" ليتم اختيار الصور تلقائياً.')
