"""
Session state helpers for the Streamlit tabs.

This module owns the few values the frontend keeps in st.session_state:
- The id of the recipe open in the detail view
- The allergen toggle widgets, kept in sync with the backend

Recipe, favorites and allergen data itself always comes from the backend.
"""

from typing import Any, Dict, List, Optional

import streamlit as st

from . import api_client

SELECTED_RECIPE_KEY = "selected_recipe_id"


def on_allergen_change(value: str, key: str) -> None:
    """
    on_change callback for an allergen toggle.

    Sends the widget's new state to the backend. When the call fails the
    widget is flipped back so it keeps showing the backend's selection.

    Args:
        value: Raw allergen value (e.g. "eggs")
        key: Session state key of the toggle widget
    """
    enabled = bool(st.session_state[key])
    if api_client.toggle_allergen(value, enabled) is None:
        st.session_state[key] = not enabled


def open_recipe(recipe_id: str) -> None:
    """Fetch a recipe through the API and select it for the detail view."""
    if api_client.get_recipe(recipe_id) is not None:
        st.session_state[SELECTED_RECIPE_KEY] = recipe_id


def close_recipe() -> None:
    st.session_state.pop(SELECTED_RECIPE_KEY, None)


def selected_recipe(recipes: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Return the selected recipe from the currently visible list.

    A selection that is no longer visible (e.g. hidden by a new allergen) is cleared.
    """
    selected_id = st.session_state.get(SELECTED_RECIPE_KEY)
    recipe = next((r for r in recipes if r["id"] == selected_id), None)
    if recipe is None:
        close_recipe()
    return recipe
