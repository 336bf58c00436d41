"""
Shopping list search and total component.
"""

import streamlit as st


def render_search_and_total(total_label: str) -> str:
    """
    Render the search box with the list total beside it.

    Args:
        total_label: Formatted total of all items

    Returns:
        The search text as typed
    """
    col_search, col_total = st.columns([4, 1], vertical_alignment="bottom")
    with col_search:
        query = st.text_input(
            "Search",
            key="search_query",
            placeholder="ابحث... Search items (e.g. mascara, car, apple)",
            label_visibility="collapsed",
        )
    with col_total:
        st.metric("Total", total_label)
    return query
