"""
Allergen matching for recipe ingredients.

This module maps ingredient text to allergens with a fixed lookup table. The
matching rule is narrow:
- The ingredient is lowercased
- The lowercased text must equal a table key exactly
- No substring, plural or fuzzy matching is attempted

The table keys are the allergens' raw values. Because "treeNuts" contains an
upper-case letter, no lowercased ingredient can ever equal it, and
"Tree Nuts" does not match either. This is a known limitation of the
matching rule and is kept as-is.

Examples:
    "Eggs"      -> Allergen.EGGS
    "CHEESE"    -> Allergen.CHEESE
    "Soy Sauce" -> None (not an exact match)
    "Tree Nuts" -> None
"""

from typing import Dict, Iterable, Optional

from .models import Allergen

INGREDIENT_ALLERGENS: Dict[str, Allergen] = {
    "cheese": Allergen.CHEESE,
    "milk": Allergen.MILK,
    "eggs": Allergen.EGGS,
    "peanuts": Allergen.PEANUTS,
    "treeNuts": Allergen.TREE_NUTS,
    "shellfish": Allergen.SHELLFISH,
    "soy": Allergen.SOY,
    "wheat": Allergen.WHEAT,
}


def _validate_table() -> None:
    """
    Check that the lookup table covers every allergen exactly once, keyed by raw value.

    Raises:
        RuntimeError: If the table and the Allergen enumeration disagree
    """
    problems = [
        f"{key!r} -> {allergen.name}"
        for key, allergen in INGREDIENT_ALLERGENS.items()
        if key != allergen.value
    ]
    missing = [a.name for a in Allergen if a not in INGREDIENT_ALLERGENS.values()]
    if problems or missing:
        raise RuntimeError(
            "Ingredient allergen table is out of sync with Allergen: "
            f"mismatched keys={problems}, missing={missing}"
        )


_validate_table()


def allergen_for_ingredient(ingredient: str) -> Optional[Allergen]:
    """
    Look up the allergen an ingredient name stands for.

    Args:
        ingredient: Ingredient text as written in the recipe

    Returns:
        Matching Allergen, or None if the lowercased text is not a table key
    """
    return INGREDIENT_ALLERGENS.get(ingredient.lower())


def contains_allergen(ingredients: Iterable[str], avoided: Iterable[Allergen]) -> bool:
    """
    Check whether any ingredient matches one of the avoided allergens.

    Args:
        ingredients: Ingredient names of a recipe
        avoided: Allergens the user has flagged

    Returns:
        True if at least one ingredient maps to an avoided allergen
    """
    avoided_set = set(avoided)
    if not avoided_set:
        return False
    return any(allergen_for_ingredient(i) in avoided_set for i in ingredients)
