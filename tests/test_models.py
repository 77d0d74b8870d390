"""
Tests for the Recipe and Allergen models.

This module tests:
- Allergen raw values, labels and parsing
- Recipe id generation and identity-based equality
"""

import pytest

from catalog.errors import UnknownAllergenError
from catalog.models import Allergen, Recipe


class TestAllergen:
    """Test cases for the Allergen enumeration."""

    def test_has_eight_values_in_declaration_order(self):
        """Test the closed set of allergens and its order."""
        assert Allergen.values() == [
            "cheese", "milk", "eggs", "peanuts", "treeNuts", "shellfish", "soy", "wheat",
        ]

    def test_label_capitalizes_first_letter_only(self):
        """Test display labels as shown on the allergen toggles."""
        assert Allergen.EGGS.label == "Eggs"
        assert Allergen.TREE_NUTS.label == "Treenuts"

    def test_parse_accepts_member_and_raw_value(self):
        """Test parsing from an Allergen member or its raw string."""
        assert Allergen.parse(Allergen.SOY) is Allergen.SOY
        assert Allergen.parse("treeNuts") is Allergen.TREE_NUTS

    def test_parse_rejects_unknown_value(self):
        """Test that unknown values raise UnknownAllergenError listing the valid ones."""
        with pytest.raises(UnknownAllergenError, match="Valid allergens: cheese"):
            Allergen.parse("gluten")

    def test_parse_is_case_sensitive(self):
        """Test that raw values must match exactly."""
        with pytest.raises(UnknownAllergenError):
            Allergen.parse("Eggs")

    def test_unknown_allergen_error_is_value_error(self):
        """Test that callers catching ValueError also catch unknown allergens."""
        with pytest.raises(ValueError):
            Allergen.parse("")


class TestRecipe:
    """Test cases for the Recipe model."""

    def test_generates_unique_ids(self):
        """Test that each recipe gets its own opaque id."""
        a = Recipe(name="Toast", ingredients=["Bread"], instructions=["Toast it."])
        b = Recipe(name="Toast", ingredients=["Bread"], instructions=["Toast it."])
        assert a.id and b.id
        assert a.id != b.id

    def test_equality_is_by_id(self):
        """Test that recipes with identical content but different ids are not equal."""
        a = Recipe(name="Toast", ingredients=["Bread"], instructions=[])
        b = Recipe(name="Toast", ingredients=["Bread"], instructions=[])
        same = Recipe(name="Other", ingredients=[], instructions=[], id=a.id)
        assert a != b
        assert a == same
        assert len({a, b, same}) == 2

    def test_sequences_are_stored_as_tuples(self):
        """Test that ingredient and instruction lists are frozen."""
        recipe = Recipe(name="Toast", ingredients=["Bread", "Butter"], instructions=["Toast it."])
        assert recipe.ingredients == ("Bread", "Butter")
        assert recipe.instructions == ("Toast it.",)

    def test_recipe_is_immutable(self):
        """Test that recipe fields cannot be reassigned."""
        recipe = Recipe(name="Toast", ingredients=[], instructions=[])
        with pytest.raises(AttributeError):
            recipe.name = "Bagel"
