"""
Favorites router for managing the user's favorite recipes.

This router provides:
- GET /favorites - Favorites in the order they were added
- POST /favorites/add - Add a recipe (no-op if already a favorite)
- POST /favorites/remove - Remove a recipe (no-op if not a favorite)

Both mutations take the recipe id as a query parameter and return the updated
favorites, with `changed` telling whether the call did anything.
"""

import logging

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_catalog, recipe_not_found
from api.schemas import FavoritesView, RecipeOut
from catalog.errors import RecipeNotFoundError
from catalog.events import log_favorite_added, log_favorite_removed
from catalog.state import RecipeCatalogState

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/favorites", tags=["favorites"])


def _favorites_view(state: RecipeCatalogState, changed: bool = False) -> FavoritesView:
    items = [RecipeOut.from_recipe(r, is_favorite=True) for r in state.list_favorites()]
    return FavoritesView(items=items, total=len(items), changed=changed)


@router.get(
    "",
    response_model=FavoritesView,
    summary="List favorite recipes",
)
def list_favorites(state: RecipeCatalogState = Depends(get_catalog)) -> FavoritesView:
    """Return the favorites in insertion order."""
    return _favorites_view(state)


@router.post(
    "/add",
    response_model=FavoritesView,
    summary="Add a recipe to favorites",
    description="Append the recipe to the favorites. Adding a recipe that is already a favorite "
                "leaves the list unchanged.",
)
def add_favorite(
    recipe_id: str = Query(..., min_length=1, description="Recipe identifier"),
    state: RecipeCatalogState = Depends(get_catalog),
) -> FavoritesView:
    """
    Add a recipe to the favorites.

    Args:
        recipe_id: Id of a catalog recipe

    Returns:
        FavoritesView with the updated favorites

    Raises:
        HTTPException 404: If the recipe id is not in the catalog

    Example:
        ```bash
        POST /favorites/add?recipe_id=3f1c0b8e9a6d4f0e8b2a7c5d1e9f4a6b
        ```
    """
    try:
        added = state.add_to_favorites(recipe_id)
    except RecipeNotFoundError as e:
        raise recipe_not_found(e) from e

    view = _favorites_view(state, changed=added)
    if added:
        log_favorite_added(recipe_id, state.get_recipe(recipe_id).name, view.total)
    return view


@router.post(
    "/remove",
    response_model=FavoritesView,
    summary="Remove a recipe from favorites",
    description="Remove the recipe from the favorites. Removing a recipe that is not a favorite "
                "leaves the list unchanged.",
)
def remove_favorite(
    recipe_id: str = Query(..., min_length=1, description="Recipe identifier"),
    state: RecipeCatalogState = Depends(get_catalog),
) -> FavoritesView:
    """
    Remove a recipe from the favorites.

    Raises:
        HTTPException 404: If the recipe id is not in the catalog
    """
    try:
        removed = state.remove_from_favorites(recipe_id)
    except RecipeNotFoundError as e:
        raise recipe_not_found(e) from e

    view = _favorites_view(state, changed=removed)
    if removed:
        log_favorite_removed(recipe_id, view.total)
    return view
