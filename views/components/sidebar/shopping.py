"""
Shopping list sidebar component.
"""

import streamlit as st
from typing import Callable


def render_shopping_list_sidebar(
    item_count: int,
    shown_count: int,
    on_reset: Callable[[], None],
):
    """
    Render the shopping list sidebar.

    Args:
        item_count: Number of items in the list
        shown_count: Number of items matching the search
        on_reset: Callback to restore the default items
    """
    with st.sidebar:
        st.markdown("### Your List")
        st.markdown("---")

        col1, col2 = st.columns(2)
        with col1:
            st.metric("Items", item_count)
        with col2:
            st.metric("Shown", shown_count)

        st.markdown("---")

        if st.button("Reset to defaults", use_container_width=True):
            on_reset()
            st.rerun()
