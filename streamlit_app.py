"""
Shopping List - single-page app

Add, edit, delete and search items. Each item gets an image picked from
keywords in its name, and the total price of the list is always shown.
"""

import streamlit as st

from config import configure_logging, get_settings

settings = get_settings()

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title=settings.app_title,
    page_icon=settings.page_icon,
    layout="wide"
)

configure_logging(settings.log_level)

from views.shopping_view import ShoppingView

view = ShoppingView()
view.render()
