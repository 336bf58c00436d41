"""
Add / edit form component.
"""

import streamlit as st
from typing import Any, Callable


def render_item_form(
    name: str,
    price: str,
    form_version: int,
    is_editing: bool,
    on_submit: Callable[[str, str], Any],
    on_cancel: Callable[[], None],
):
    """
    Render the item form.

    Args:
        name: Pending name to show in the name input
        price: Pending price to show in the price input
        form_version: Counter baked into widget keys; a new value resets the inputs
        is_editing: Whether the form saves an existing item
        on_submit: Callback with (name, price), returns a SubmitResult
        on_cancel: Callback to leave edit mode
    """
    with st.form(f"item_form_{form_version}", border=True):
        col_name, col_price, col_button = st.columns([5, 5, 2], vertical_alignment="bottom")

        with col_name:
            name_value = st.text_input(
                "Item name",
                value=name,
                key=f"item_name_{form_version}",
                placeholder="Item name / اسم العنصر",
                label_visibility="collapsed",
            )
        with col_price:
            price_value = st.text_input(
                "Price",
                value=price,
                key=f"item_price_{form_version}",
                placeholder="Price / السعر",
                label_visibility="collapsed",
            )
        with col_button:
            submitted = st.form_submit_button(
                "💾 Save" if is_editing else "➕ Add",
                type="primary",
                use_container_width=True,
            )

    if submitted:
        result = on_submit(name_value, price_value)
        if result.success:
            st.rerun()
        elif result.is_duplicate:
            st.warning(result.error)
        else:
            st.error(result.error)

    if is_editing:
        if st.button("Cancel edit", key=f"cancel_edit_{form_version}"):
            on_cancel()
            st.rerun()
