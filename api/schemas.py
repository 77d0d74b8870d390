"""
Pydantic schemas for FastAPI request and response models.

This module defines the Pydantic models used for API request validation and
response serialization. These schemas ensure type safety and automatic API
documentation generation.

The schemas include:
- RecipeOut: A catalog recipe with its derived favorite status
- RecipeListResponse: List of RecipeOut items (catalog, filtered catalog)
- FavoritesView: The user's favorites in insertion order
- AllergenOut / AllergensView: All allergens and the user's current selection
- ToggleAllergenInput: Body for toggling an allergen on or off

# NOTE: is_favorite is computed from the favorites list on every response.
    Recipes themselves carry no favorite flag.
"""

from typing import List

from pydantic import BaseModel, Field, ConfigDict

from catalog.models import Allergen, Recipe


class RecipeOut(BaseModel):
    """Recipe as returned by the API."""
    id: str = Field(..., description="Opaque recipe identifier")
    name: str = Field(..., description="Recipe name")
    ingredients: List[str] = Field(default_factory=list, description="Ingredient names in display order")
    instructions: List[str] = Field(default_factory=list, description="Cooking steps in order")
    is_favorite: bool = Field(False, description="Whether the recipe is currently a favorite")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "3f1c0b8e9a6d4f0e8b2a7c5d1e9f4a6b",
                "name": "Caesar Salad",
                "ingredients": ["Romaine Lettuce", "Croutons", "Cheese", "Caesar Dressing"],
                "instructions": ["Wash and chop romaine lettuce.", "Serve immediately."],
                "is_favorite": False,
            }
        }
    )

    @classmethod
    def from_recipe(cls, recipe: Recipe, is_favorite: bool = False) -> "RecipeOut":
        return cls(
            id=recipe.id,
            name=recipe.name,
            ingredients=list(recipe.ingredients),
            instructions=list(recipe.instructions),
            is_favorite=is_favorite,
        )


class RecipeListResponse(BaseModel):
    """
    Response model for recipe list endpoints.

    Used for both the full catalog and the allergen-filtered catalog.
    """
    results: List[RecipeOut] = Field(..., description="Recipes in catalog order")
    total: int = Field(..., ge=0, description="Number of recipes returned")


class FavoritesView(BaseModel):
    """Response model for the favorites list."""
    items: List[RecipeOut] = Field(..., description="Favorite recipes in the order they were added")
    total: int = Field(..., ge=0, description="Number of favorites")
    changed: bool = Field(
        False,
        description="Whether the request that produced this view changed the favorites",
    )


class AllergenOut(BaseModel):
    """An allergen with its display label and selection state."""
    value: str = Field(..., description="Raw allergen value (e.g. 'treeNuts')")
    label: str = Field(..., description="Display label (e.g. 'Treenuts')")
    selected: bool = Field(..., description="Whether the user currently avoids this allergen")


class AllergensView(BaseModel):
    """Response model for the allergen settings."""
    allergens: List[AllergenOut] = Field(..., description="All allergens in display order")
    user_allergens: List[str] = Field(..., description="Selected allergen values in selection order")


class ToggleAllergenInput(BaseModel):
    """Input model for toggling an allergen."""
    allergen: str = Field(..., min_length=1, description=f"Allergen value, one of: {', '.join(Allergen.values())}")
    enabled: bool = Field(..., description="True to avoid the allergen, False to stop avoiding it")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "allergen": "eggs",
                "enabled": True,
            }
        }
    )
