"""
Recipe and allergen models for the catalog.

This module defines the two value types the rest of the system works with:
- Allergen: the closed set of eight allergens a user can flag as avoided
- Recipe: an immutable catalog entry with a generated opaque id

# NOTE: Recipes are compared by id only. Two recipes with the same name and
    ingredients are still different recipes if they were constructed separately.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Union

from .errors import UnknownAllergenError


class Allergen(str, Enum):
    """
    Allergens a user can avoid.

    The raw values are the exact strings ingredient names are compared against
    (after lowercasing the ingredient). Declaration order is display order.
    """
    CHEESE = "cheese"
    MILK = "milk"
    EGGS = "eggs"
    PEANUTS = "peanuts"
    TREE_NUTS = "treeNuts"
    SHELLFISH = "shellfish"
    SOY = "soy"
    WHEAT = "wheat"

    @property
    def label(self) -> str:
        """Display label: first letter upper-cased, rest lower-cased ("Treenuts")."""
        return self.value.capitalize()

    @classmethod
    def values(cls) -> List[str]:
        """Raw values of all allergens in declaration order."""
        return [a.value for a in cls]

    @classmethod
    def parse(cls, value: Union["Allergen", str]) -> "Allergen":
        """
        Resolve an Allergen from an instance or its exact raw value.

        Args:
            value: Allergen member or raw string value (e.g. "treeNuts")

        Returns:
            Matching Allergen member

        Raises:
            UnknownAllergenError: If value is not a known raw value
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise UnknownAllergenError(value, cls.values()) from e


def _new_recipe_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True, eq=False)
class Recipe:
    """
    Recipe data model.

    Attributes:
        name: Recipe name
        ingredients: Ingredient names in display order
        instructions: Cooking steps in order
        id: Opaque identifier generated at construction
    """
    name: str
    ingredients: Tuple[str, ...]
    instructions: Tuple[str, ...]
    id: str = field(default_factory=_new_recipe_id)

    def __post_init__(self):
        """Store ingredient and instruction sequences as tuples."""
        object.__setattr__(self, "ingredients", tuple(self.ingredients))
        object.__setattr__(self, "instructions", tuple(self.instructions))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
