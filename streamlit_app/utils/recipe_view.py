"""
Recipe View Helpers.

Pure formatting helpers shared by the Favorites and Recipes tabs. They take the
recipe dictionaries returned by the backend (see api.schemas.RecipeOut) and
produce display strings or tables; none of them call Streamlit.
"""

from typing import Any, Dict, List

import pandas as pd

HEART_FILLED = "❤️"
HEART_EMPTY = "🤍"


def heart_icon(recipe: Dict[str, Any]) -> str:
    """Filled heart for favorites, empty heart otherwise."""
    return HEART_FILLED if recipe.get("is_favorite") else HEART_EMPTY


def format_ingredients(ingredients: List[str]) -> str:
    """
    Format ingredients as a markdown bullet list.

    Returns:
        One "- ingredient" list item per ingredient, in recipe order
    """
    return "\n".join(f"- {ingredient}" for ingredient in ingredients)


def format_instructions(instructions: List[str]) -> str:
    """
    Format cooking steps as a numbered markdown list starting at 1.

    Example:
        >>> format_instructions(["Boil water.", "Add pasta."])
        '1. Boil water.\\n2. Add pasta.'
    """
    return "\n".join(f"{i}. {step}" for i, step in enumerate(instructions, start=1))


def favorites_table(favorites: List[Dict[str, Any]]) -> pd.DataFrame:
    """
    Build the favorites overview table.

    Args:
        favorites: Recipe dictionaries in favorites order

    Returns:
        DataFrame with columns "Recipe", "Ingredients" and "Steps", one row per
        favorite in the same order. Empty favorites give an empty frame with
        the same columns.
    """
    rows = [
        {
            "Recipe": recipe.get("name", ""),
            "Ingredients": ", ".join(recipe.get("ingredients", [])),
            "Steps": len(recipe.get("instructions", [])),
        }
        for recipe in favorites
    ]
    return pd.DataFrame(rows, columns=["Recipe", "Ingredients", "Steps"])
