"""
Recipes router for catalog browsing endpoints.

This router provides:
- GET /recipes - Full catalog, unfiltered
- GET /recipes/filtered - Catalog without recipes containing the user's allergens
- GET /recipes/{recipe_id} - A single recipe (detail view)
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_catalog, recipe_not_found
from api.schemas import RecipeListResponse, RecipeOut
from catalog.errors import RecipeNotFoundError
from catalog.events import log_recipe_viewed
from catalog.state import RecipeCatalogState

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["recipes"])


def _to_response(state: RecipeCatalogState, recipes) -> RecipeListResponse:
    favorite_ids = {r.id for r in state.list_favorites()}
    results = [RecipeOut.from_recipe(r, is_favorite=r.id in favorite_ids) for r in recipes]
    return RecipeListResponse(results=results, total=len(results))


@router.get(
    "",
    response_model=RecipeListResponse,
    summary="List all recipes",
    description="Return the full recipe catalog in catalog order, ignoring allergen settings.",
)
def list_recipes(state: RecipeCatalogState = Depends(get_catalog)) -> RecipeListResponse:
    """
    List the full catalog.

    Returns:
        RecipeListResponse with every catalog recipe and its favorite status
    """
    return _to_response(state, state.list_recipes())


@router.get(
    "/filtered",
    response_model=RecipeListResponse,
    summary="List recipes safe for the user's allergens",
    description="Return the catalog without recipes that have an ingredient exactly matching "
                "(case-insensitive) one of the user's selected allergens. Catalog order is kept.",
)
def filter_recipes(state: RecipeCatalogState = Depends(get_catalog)) -> RecipeListResponse:
    """
    List the allergen-filtered catalog.

    Returns:
        RecipeListResponse with the remaining recipes, possibly empty

    Example:
        ```bash
        POST /allergens/toggle  {"allergen": "eggs", "enabled": true}
        GET /recipes/filtered
        ```
    """
    response = _to_response(state, state.filter_recipes())
    logger.debug("Filtered catalog: %d recipe(s) visible", response.total)
    return response


@router.get(
    "/{recipe_id}",
    response_model=RecipeOut,
    summary="Get a recipe",
    description="Return one recipe with its ingredients, instructions and favorite status.",
)
def get_recipe(recipe_id: str, state: RecipeCatalogState = Depends(get_catalog)) -> RecipeOut:
    """
    Get a single recipe for the detail view.

    Raises:
        HTTPException 404: If the recipe id is not in the catalog
    """
    try:
        recipe = state.get_recipe(recipe_id)
    except RecipeNotFoundError as e:
        raise recipe_not_found(e) from e

    log_recipe_viewed(recipe.id, recipe.name)
    return RecipeOut.from_recipe(recipe, is_favorite=state.is_favorite(recipe))
