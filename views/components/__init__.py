"""
Reusable UI components.
"""

from views.components.item_card import (
    render_item_card,
    render_item_grid,
    render_item_image,
    render_empty_state,
)
from views.components.item_form import render_item_form
from views.components.shopping_stats import render_search_and_total

# Sidebar components
from views.components.sidebar import render_shopping_list_sidebar

__all__ = [
    # Items
    "render_item_card",
    "render_item_grid",
    "render_item_image",
    "render_empty_state",
    "render_item_form",
    # Search & total
    "render_search_and_total",
    # Sidebar
    "render_shopping_list_sidebar",
]
