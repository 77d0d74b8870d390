"""
Recipe Allergen Catalog - Streamlit Frontend Main Entry Point.

Sets up the page configuration and renders the three tabs of the app:
- Favorites: the user's favorite recipes
- Recipes: the catalog without recipes containing the user's allergens
- Profile: allergen toggles

All recipe state lives in the backend API; this app only reads it and calls
the mutating endpoints through utils.api_client.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import api.config
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from api.config import configure_logging

from typing import Any, Dict

import streamlit as st

from utils import api_client
from utils.recipe_view import favorites_table, format_ingredients, format_instructions, heart_icon
from utils.session import close_recipe, on_allergen_change, open_recipe, selected_recipe
from ui import ingredient_pills, load_global_styles, show_backend_offline, show_empty_state

configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Allergen Catalog",
    page_icon="🍝",
    layout="centered",
)

load_global_styles()


def render_recipe_details(recipe: Dict[str, Any], key_prefix: str, removable: bool = False) -> None:
    """
    Render ingredients, numbered instructions and one action button for a recipe.

    Args:
        recipe: Recipe dictionary from the backend
        key_prefix: Widget key prefix, unique per place the details are shown
        removable: Show "Remove from favorites" instead of the heart button
    """
    st.markdown("**Ingredients:**")
    st.markdown(format_ingredients(recipe["ingredients"]))
    st.markdown("**Cooking Instructions:**")
    st.markdown(format_instructions(recipe["instructions"]))

    if removable:
        if st.button("Remove from favorites", key=f"{key_prefix}_remove_{recipe['id']}"):
            if api_client.remove_favorite(recipe["id"]) is not None:
                st.rerun()
    elif st.button(f"{heart_icon(recipe)} Favorite", key=f"{key_prefix}_fav_{recipe['id']}"):
        if api_client.add_favorite(recipe["id"]) is not None:
            st.rerun()


def render_recipes_tab() -> None:
    """Allergen-filtered recipe list with heart buttons and a detail view."""
    st.header("Recipes")

    data = api_client.filter_recipes()
    if data is None:
        return

    recipes = data.get("results", [])
    if not recipes:
        close_recipe()
        show_empty_state(
            title="No recipes match your allergen settings",
            subtitle="Turn off some allergens on the Profile tab to see more recipes.",
        )
        return

    st.caption(f"{data.get('total', len(recipes))} recipe(s)")
    for recipe in recipes:
        heart_col, name_col, details_col = st.columns([1, 6, 2])
        with heart_col:
            if st.button(heart_icon(recipe), key=f"row_fav_{recipe['id']}"):
                if api_client.add_favorite(recipe["id"]) is not None:
                    st.rerun()
        with name_col:
            st.markdown(f"**{recipe['name']}**")
            st.markdown(ingredient_pills(recipe["ingredients"]), unsafe_allow_html=True)
        with details_col:
            st.button(
                "Details",
                key=f"row_details_{recipe['id']}",
                on_click=open_recipe,
                args=(recipe["id"],),
            )

    # Render from the current list so the heart reflects the latest favorites
    selected = selected_recipe(recipes)
    if selected is None:
        return

    st.divider()
    st.subheader(selected["name"])
    render_recipe_details(selected, key_prefix="recipes_detail")
    st.button("Close", key="recipes_detail_close", on_click=close_recipe)


def render_favorites_tab() -> None:
    """Favorites in insertion order with a remove button per recipe."""
    st.header("Favorites")

    data = api_client.list_favorites()
    if data is None:
        return

    favorites = data.get("items", [])
    if not favorites:
        show_empty_state(
            title="No favorites yet",
            subtitle="Tap the heart next to a recipe on the Recipes tab to add it here.",
        )
        return

    st.dataframe(favorites_table(favorites), hide_index=True)

    for recipe in favorites:
        with st.expander(f"{heart_icon(recipe)} {recipe['name']}", expanded=False):
            render_recipe_details(recipe, key_prefix="favorites", removable=True)


def render_profile_tab() -> None:
    """Allergen toggles."""
    st.header("Manage Allergens")

    data = api_client.get_allergens()
    if data is None:
        return

    st.caption("Recipes with an ingredient named exactly like a selected allergen are hidden.")
    for allergen in data.get("allergens", []):
        key = f"allergen_{allergen['value']}"
        st.toggle(
            allergen["label"],
            value=allergen["selected"],
            key=key,
            on_change=on_allergen_change,
            args=(allergen["value"], key),
        )


# Sidebar with backend status
with st.sidebar:
    st.markdown("### 🍝 **Recipe Allergen Catalog**")
    st.divider()

    health = api_client.get_health_status()
    if health is None:
        st.caption("🔴 Backend offline")
    else:
        stats = health.get("catalog", {})
        st.caption("🟢 Backend online")
        st.markdown(f"**Recipes:** {stats.get('recipes_visible', 0)} of {stats.get('recipes_total', 0)} shown")
        st.markdown(f"**Favorites:** {stats.get('favorites_total', 0)}")

if health is None:
    show_backend_offline()
else:
    favorites_tab, recipes_tab, profile_tab = st.tabs(["❤️ Favorites", "📋 Recipes", "👤 Profile"])
    with favorites_tab:
        render_favorites_tab()
    with recipes_tab:
        render_recipes_tab()
    with profile_tab:
        render_profile_tab()
