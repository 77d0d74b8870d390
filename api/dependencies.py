"""
Shared FastAPI dependencies.

The catalog state lives on app.state and is created once per app by
api.main.create_app(). Endpoints receive it through get_catalog() instead of
importing a global.
"""

from fastapi import HTTPException, Request, status

from catalog.errors import RecipeNotFoundError, UnknownAllergenError
from catalog.state import RecipeCatalogState


def get_catalog(request: Request) -> RecipeCatalogState:
    """
    Get the catalog state owned by the running app.

    Args:
        request: Incoming request (injected by FastAPI)

    Returns:
        The app's RecipeCatalogState
    """
    return request.app.state.catalog


def recipe_not_found(e: RecipeNotFoundError) -> HTTPException:
    """Build the 404 response for an unknown recipe id."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Recipe not found: {e.recipe_id}",
    )


def unknown_allergen(e: UnknownAllergenError) -> HTTPException:
    """Build the 400 response for an unknown allergen value."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Invalid allergen: '{e.value}'. Valid allergens: {', '.join(e.valid)}",
    )
