"""
UI Styling and Components Module.

This module provides global CSS styling and standard feedback components
for the Recipe Allergen Catalog Streamlit app.
"""

from .feedback import show_backend_offline, show_empty_state, show_error
from .styles import ingredient_pills, load_global_styles

__all__ = [
    "ingredient_pills",
    "load_global_styles",
    "show_backend_offline",
    "show_empty_state",
    "show_error",
]
