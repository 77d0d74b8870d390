"""
Exceptions raised by the recipe catalog.

Every state manager operation is total over valid input. Invalid input
(an id that is not in the catalog, a string that is not an allergen) is
reported to the caller with one of these exceptions rather than ignored.
"""


class CatalogError(Exception):
    """Base class for all catalog errors."""


class RecipeNotFoundError(CatalogError):
    """Raised when a recipe id does not exist in the catalog."""

    def __init__(self, recipe_id: str):
        self.recipe_id = recipe_id
        super().__init__(f"Recipe not found: {recipe_id}")


class UnknownAllergenError(CatalogError, ValueError):
    """Raised when a value is not one of the known allergen names."""

    def __init__(self, value: object, valid: list[str]):
        self.value = value
        self.valid = valid
        super().__init__(
            f"Unknown allergen: {value!r}. Valid allergens: {', '.join(valid)}"
        )
