"""
Shopping View - UI for the single-page shopping list.

This view handles:
- The add / edit form
- Searching items while showing the total of the whole list
- The card grid with Edit and Delete actions
"""

import streamlit as st

from controllers.shopping_controller import ShoppingController
from views.components.item_card import render_empty_state, render_item_grid
from views.components.item_form import render_item_form
from views.components.shopping_stats import render_search_and_total
from views.components.sidebar import render_shopping_list_sidebar


class ShoppingView:
    """View for the shopping list page."""

    def __init__(self, controller: ShoppingController | None = None):
        self.controller = controller or ShoppingController()

    def render(self):
        """Main render method."""
        settings = self.controller.settings
        st.title(settings.app_title)

        self._render_form()
        self._render_search()

        filtered = self.controller.get_filtered_items()
        render_shopping_list_sidebar(
            item_count=len(self.controller.get_items()),
            shown_count=len(filtered),
            on_reset=self.controller.reset_items,
        )

        if not filtered:
            render_empty_state()
        else:
            render_item_grid(
                items=filtered,
                cards_per_row=settings.cards_per_row,
                format_price=self.controller.format_price,
                price_tier=self.controller.price_tier,
                assets_dir=settings.assets_dir,
                on_edit=self._start_edit,
                on_delete=self.controller.delete_item,
            )

        st.markdown("---")
        st.caption(settings.footer_text)

    def _render_form(self):
        """Render the add / edit form."""
        name, price = self.controller.get_form_values()
        render_item_form(
            name=name,
            price=price,
            form_version=self.controller.get_form_version(),
            is_editing=self.controller.is_editing(),
            on_submit=self.controller.submit,
            on_cancel=self.controller.cancel_edit,
        )

    def _render_search(self):
        """Render search box and total, then apply the query."""
        total_label = self.controller.format_price(self.controller.get_total())
        query = render_search_and_total(total_label)
        self.controller.set_search(query)

    def _start_edit(self, item_id: str):
        if not self.controller.start_edit(item_id):
            st.toast("That item no longer exists")
