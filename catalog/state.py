"""
Recipe catalog state manager.

This module holds the only behaviour in the app: a fixed recipe catalog, the
allergens the user avoids, and the user's favorite recipes. Presentation code
reads this state and calls its mutating operations; it keeps no recipe state
of its own.

The state manager:
- Keeps the catalog fixed for its whole lifetime
- Filters the catalog by the user's allergens (order-preserving)
- Keeps favorites in insertion order with no duplicate ids
- Keeps the user's allergens as an insertion-ordered set

All reads and writes go through one lock, so a single instance can be shared
by the FastAPI worker threads without breaking the no-duplicates invariant.

# NOTE: There is no module-level instance. Whoever owns the state (the API app,
    a test) constructs it explicitly and passes it along.
"""

import logging
import threading
from typing import Any, Dict, Iterable, List, Optional, Union

from .allergens import contains_allergen
from .errors import RecipeNotFoundError
from .models import Allergen, Recipe
from .seed import sample_recipes

logger = logging.getLogger(__name__)

RecipeRef = Union[Recipe, str]
AllergenRef = Union[Allergen, str]


class RecipeCatalogState:
    """
    In-memory recipe catalog with allergen filtering and favorites.

    Args:
        recipes: Catalog contents in display order. Defaults to the seeded sample recipes.

    Raises:
        ValueError: If two catalog recipes share an id
    """

    def __init__(self, recipes: Optional[Iterable[Recipe]] = None):
        catalog = list(sample_recipes() if recipes is None else recipes)
        by_id: Dict[str, Recipe] = {}
        for recipe in catalog:
            if recipe.id in by_id:
                raise ValueError(f"Duplicate recipe id in catalog: {recipe.id}")
            by_id[recipe.id] = recipe

        self._recipes: tuple = tuple(catalog)
        self._recipes_by_id = by_id
        # dict keys keep insertion order; values are unused
        self._user_allergens: Dict[Allergen, None] = {}
        self._favorites: List[Recipe] = []
        self._lock = threading.Lock()

        logger.info("Recipe catalog initialized with %d recipes", len(self._recipes))

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def list_recipes(self) -> List[Recipe]:
        """Return the full, unfiltered catalog in catalog order."""
        return list(self._recipes)

    def get_recipe(self, recipe_id: str) -> Recipe:
        """
        Look up a catalog recipe by id.

        Raises:
            RecipeNotFoundError: If the id is not in the catalog
        """
        recipe = self._recipes_by_id.get(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe

    def filter_recipes(self) -> List[Recipe]:
        """
        Return the catalog without recipes that contain an avoided allergen.

        A recipe is dropped when any of its ingredients, lowercased, exactly
        equals the raw value of an allergen the user has selected. The result
        keeps catalog order and is empty only if every recipe is dropped.
        """
        with self._lock:
            avoided = list(self._user_allergens)
        return [r for r in self._recipes if not contains_allergen(r.ingredients, avoided)]

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def _resolve(self, recipe: RecipeRef) -> Recipe:
        recipe_id = recipe.id if isinstance(recipe, Recipe) else recipe
        return self.get_recipe(recipe_id)

    def list_favorites(self) -> List[Recipe]:
        """Return favorite recipes in the order they were added."""
        with self._lock:
            return list(self._favorites)

    def is_favorite(self, recipe: RecipeRef) -> bool:
        """Check whether a recipe (or recipe id) is in the favorites."""
        recipe_id = recipe.id if isinstance(recipe, Recipe) else recipe
        with self._lock:
            return any(f.id == recipe_id for f in self._favorites)

    def add_to_favorites(self, recipe: RecipeRef) -> bool:
        """
        Append a recipe to the favorites unless it is already there.

        Args:
            recipe: Catalog Recipe or its id

        Returns:
            True if the recipe was added, False if it was already a favorite

        Raises:
            RecipeNotFoundError: If the recipe is not in the catalog
        """
        target = self._resolve(recipe)
        with self._lock:
            if any(f.id == target.id for f in self._favorites):
                logger.debug("'%s' is already a favorite", target.name)
                return False
            self._favorites.append(target)
        logger.info("Added favorite: '%s' (%s)", target.name, target.id)
        return True

    def remove_from_favorites(self, recipe: RecipeRef) -> bool:
        """
        Remove a recipe from the favorites.

        Removing a catalog recipe that is not a favorite is a no-op.

        Args:
            recipe: Catalog Recipe or its id

        Returns:
            True if an entry was removed, False if it was not a favorite

        Raises:
            RecipeNotFoundError: If the recipe is not in the catalog
        """
        target = self._resolve(recipe)
        with self._lock:
            original_length = len(self._favorites)
            self._favorites = [f for f in self._favorites if f.id != target.id]
            removed = len(self._favorites) < original_length

        if removed:
            logger.info("Removed favorite: '%s' (%s)", target.name, target.id)
        else:
            logger.debug("'%s' was not a favorite", target.name)
        return removed

    # ------------------------------------------------------------------
    # Allergens
    # ------------------------------------------------------------------

    @staticmethod
    def list_allergens() -> List[Allergen]:
        """Return every allergen in display order."""
        return list(Allergen)

    def user_allergens(self) -> List[Allergen]:
        """Return the user's allergens in the order they were selected."""
        with self._lock:
            return list(self._user_allergens)

    def has_allergen(self, allergen: AllergenRef) -> bool:
        """
        Check whether the user currently avoids an allergen.

        Raises:
            UnknownAllergenError: If allergen is not a known raw value
        """
        parsed = Allergen.parse(allergen)
        with self._lock:
            return parsed in self._user_allergens

    def toggle_allergen(self, allergen: AllergenRef, enabled: bool) -> bool:
        """
        Select or deselect an allergen.

        Both directions are idempotent: enabling an already selected allergen or
        disabling an unselected one leaves the state unchanged.

        Args:
            allergen: Allergen member or raw value (e.g. "treeNuts")
            enabled: True to avoid the allergen, False to stop avoiding it

        Returns:
            True if the selection changed, False if it was already in that state

        Raises:
            UnknownAllergenError: If allergen is not a known raw value
        """
        parsed = Allergen.parse(allergen)
        with self._lock:
            changed = (parsed in self._user_allergens) != enabled
            if enabled:
                self._user_allergens.setdefault(parsed, None)
            else:
                self._user_allergens.pop(parsed, None)
            selected = len(self._user_allergens)

        action = "enabled" if enabled else "disabled"
        if changed:
            logger.info("Allergen %s %s (%d selected)", parsed.value, action, selected)
        else:
            logger.debug("Allergen %s already %s", parsed.value, action)
        return changed

    # ------------------------------------------------------------------
    # Stats
    # ------------------------------------------------------------------

    def stats(self) -> Dict[str, Any]:
        """
        Summarize the current state.

        Returns:
            Dictionary with:
            - recipes_total: catalog size
            - recipes_visible: size of the filtered catalog
            - favorites_total: number of favorites
            - user_allergens: raw values of the selected allergens
        """
        visible = len(self.filter_recipes())
        with self._lock:
            return {
                "recipes_total": len(self._recipes),
                "recipes_visible": visible,
                "favorites_total": len(self._favorites),
                "user_allergens": [a.value for a in self._user_allergens],
            }
