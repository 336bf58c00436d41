"""
Sidebar components.
"""

from views.components.sidebar.shopping import render_shopping_list_sidebar

__all__ = [
    "render_shopping_list_sidebar",
]
