"""
Tests for the recipe catalog state manager.

This module tests:
- Catalog listing and lookup
- Allergen filtering (order, exact matching, empty selection)
- Favorites add/remove idempotence and ordering
- Allergen toggling
- Error reporting for unknown recipe ids and allergens
"""

import threading

import pytest

from catalog.errors import RecipeNotFoundError, UnknownAllergenError
from catalog.models import Allergen, Recipe
from catalog.state import RecipeCatalogState


@pytest.fixture
def carbonara():
    return Recipe(
        name="Carbonara",
        ingredients=["Pasta", "Eggs", "Bacon", "Cheese"],
        instructions=["Cook pasta.", "Mix with eggs and cheese."],
    )


@pytest.fixture
def caesar_salad():
    return Recipe(
        name="Caesar Salad",
        ingredients=["Lettuce", "Croutons", "Cheese", "Dressing"],
        instructions=["Toss everything."],
    )


@pytest.fixture
def state(carbonara, caesar_salad):
    return RecipeCatalogState([carbonara, caesar_salad])


class TestCatalog:
    """Test cases for catalog listing and lookup."""

    def test_default_catalog_is_seeded(self):
        """Test that a state without explicit recipes gets the five sample recipes."""
        names = [r.name for r in RecipeCatalogState().list_recipes()]
        assert names == [
            "Spaghetti Carbonara",
            "Chicken Parmesan",
            "Caesar Salad",
            "Beef Stir Fry",
            "Chocolate Chip Cookies",
        ]

    def test_each_state_gets_its_own_seed_recipes(self):
        """Test that sample recipe ids differ between state instances."""
        first = {r.id for r in RecipeCatalogState().list_recipes()}
        second = {r.id for r in RecipeCatalogState().list_recipes()}
        assert first.isdisjoint(second)

    def test_list_recipes_returns_copy(self, state, carbonara):
        """Test that mutating the returned list does not change the catalog."""
        recipes = state.list_recipes()
        recipes.clear()
        assert state.list_recipes()[0] == carbonara

    def test_get_recipe(self, state, caesar_salad):
        assert state.get_recipe(caesar_salad.id) is caesar_salad

    def test_get_unknown_recipe(self, state):
        with pytest.raises(RecipeNotFoundError, match="nope"):
            state.get_recipe("nope")

    def test_duplicate_ids_rejected(self, carbonara):
        """Test that a catalog cannot contain the same id twice."""
        with pytest.raises(ValueError, match="Duplicate recipe id"):
            RecipeCatalogState([carbonara, carbonara])

    def test_empty_catalog(self):
        """Test that an explicitly empty catalog stays empty."""
        state = RecipeCatalogState([])
        assert state.list_recipes() == []
        assert state.filter_recipes() == []


class TestFilterRecipes:
    """Test cases for allergen filtering."""

    def test_eggs_filters_out_carbonara(self, state, caesar_salad):
        state.toggle_allergen(Allergen.EGGS, True)
        assert state.filter_recipes() == [caesar_salad]

    def test_no_allergens_returns_full_catalog_in_order(self, state, carbonara, caesar_salad):
        assert state.filter_recipes() == [carbonara, caesar_salad]

    def test_shared_allergen_filters_everything(self, state):
        state.toggle_allergen("cheese", True)
        assert state.filter_recipes() == []

    def test_tree_nuts_with_space_is_not_filtered(self):
        """Test the exact-match limitation: 'Tree Nuts' does not match treeNuts."""
        trail_mix = Recipe(name="Trail Mix", ingredients=["Raisins", "Tree Nuts"], instructions=[])
        state = RecipeCatalogState([trail_mix])
        state.toggle_allergen(Allergen.TREE_NUTS, True)
        assert state.filter_recipes() == [trail_mix]

    def test_filter_preserves_catalog_order(self):
        """Test that the result is an order-preserving subsequence for every allergen."""
        catalog = RecipeCatalogState().list_recipes()
        for allergen in Allergen:
            state = RecipeCatalogState(catalog)
            state.toggle_allergen(allergen, True)
            filtered = state.filter_recipes()
            positions = [catalog.index(r) for r in filtered]
            assert positions == sorted(positions)

    def test_sample_catalog_with_cheese(self):
        """Test that only the cheese-free sample recipes remain."""
        state = RecipeCatalogState()
        state.toggle_allergen(Allergen.CHEESE, True)
        assert [r.name for r in state.filter_recipes()] == ["Beef Stir Fry", "Chocolate Chip Cookies"]

    def test_sample_catalog_with_soy(self):
        """Test that 'Soy Sauce' is not an exact match for soy."""
        state = RecipeCatalogState()
        state.toggle_allergen(Allergen.SOY, True)
        assert len(state.filter_recipes()) == 5


class TestFavorites:
    """Test cases for favorites management."""

    def test_starts_empty(self, state):
        assert state.list_favorites() == []

    def test_add_twice_keeps_one_entry(self, state, carbonara):
        assert state.add_to_favorites(carbonara) is True
        assert state.add_to_favorites(carbonara) is False
        assert state.list_favorites() == [carbonara]

    def test_add_by_id(self, state, caesar_salad):
        state.add_to_favorites(caesar_salad.id)
        assert state.list_favorites() == [caesar_salad]

    def test_add_preserves_call_order(self, state, carbonara, caesar_salad):
        state.add_to_favorites(caesar_salad)
        state.add_to_favorites(carbonara)
        assert state.list_favorites() == [caesar_salad, carbonara]

    def test_remove(self, state, carbonara, caesar_salad):
        state.add_to_favorites(carbonara)
        state.add_to_favorites(caesar_salad)
        assert state.remove_from_favorites(carbonara.id) is True
        assert state.list_favorites() == [caesar_salad]

    def test_remove_absent_is_noop(self, state, carbonara, caesar_salad):
        state.add_to_favorites(carbonara)
        assert state.remove_from_favorites(caesar_salad) is False
        assert state.list_favorites() == [carbonara]

    def test_is_favorite(self, state, carbonara):
        assert not state.is_favorite(carbonara)
        state.add_to_favorites(carbonara)
        assert state.is_favorite(carbonara.id)

    def test_unknown_recipe_id_raises(self, state):
        with pytest.raises(RecipeNotFoundError):
            state.add_to_favorites("missing")
        with pytest.raises(RecipeNotFoundError):
            state.remove_from_favorites("missing")

    def test_recipe_outside_catalog_raises(self, state):
        """Test that a Recipe object not in the catalog is rejected."""
        stranger = Recipe(name="Stranger", ingredients=[], instructions=[])
        with pytest.raises(RecipeNotFoundError):
            state.add_to_favorites(stranger)

    def test_favorites_unaffected_by_allergens(self, state, carbonara):
        """Test that a favorite stays listed even when filtered out of the catalog."""
        state.add_to_favorites(carbonara)
        state.toggle_allergen(Allergen.EGGS, True)
        assert state.list_favorites() == [carbonara]

    def test_concurrent_adds_keep_no_duplicates(self, state, carbonara):
        """Test the no-duplicates invariant under concurrent adds."""
        threads = [threading.Thread(target=state.add_to_favorites, args=(carbonara,)) for _ in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert state.list_favorites() == [carbonara]


class TestToggleAllergen:
    """Test cases for allergen toggling."""

    def test_enable_and_disable_restores_prior_state(self, state):
        state.toggle_allergen(Allergen.MILK, True)
        before = state.user_allergens()
        state.toggle_allergen(Allergen.SOY, True)
        state.toggle_allergen(Allergen.SOY, False)
        assert state.user_allergens() == before

    def test_enable_twice_keeps_one_entry(self, state):
        state.toggle_allergen("eggs", True)
        state.toggle_allergen(Allergen.EGGS, True)
        assert state.user_allergens() == [Allergen.EGGS]

    def test_disable_absent_is_noop(self, state):
        state.toggle_allergen(Allergen.WHEAT, False)
        assert state.user_allergens() == []

    def test_reports_whether_selection_changed(self, state):
        """Test that only real selection changes return True."""
        assert state.toggle_allergen(Allergen.EGGS, True) is True
        assert state.toggle_allergen(Allergen.EGGS, True) is False
        assert state.toggle_allergen(Allergen.EGGS, False) is True
        assert state.toggle_allergen(Allergen.EGGS, False) is False

    def test_keeps_selection_order(self, state):
        state.toggle_allergen(Allergen.WHEAT, True)
        state.toggle_allergen(Allergen.CHEESE, True)
        assert state.user_allergens() == [Allergen.WHEAT, Allergen.CHEESE]

    def test_has_allergen(self, state):
        state.toggle_allergen(Allergen.PEANUTS, True)
        assert state.has_allergen("peanuts")
        assert not state.has_allergen(Allergen.SHELLFISH)

    def test_unknown_allergen_raises(self, state):
        with pytest.raises(UnknownAllergenError):
            state.toggle_allergen("gluten", True)
        assert state.user_allergens() == []

    def test_list_allergens(self):
        assert RecipeCatalogState.list_allergens() == list(Allergen)


def test_stats(state, carbonara):
    """Test the state summary."""
    state.add_to_favorites(carbonara)
    state.toggle_allergen(Allergen.EGGS, True)

    assert state.stats() == {
        "recipes_total": 2,
        "recipes_visible": 1,
        "favorites_total": 1,
        "user_allergens": ["eggs"],
    }
