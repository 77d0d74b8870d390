"""
Seed recipes for the catalog.

The catalog ships with a fixed set of five recipes. They are built fresh by
sample_recipes() so every state manager gets its own Recipe objects (and ids).
"""

from typing import List

from .models import Recipe

_SAMPLE_DATA = [
    (
        "Spaghetti Carbonara",
        ["Pasta", "Eggs", "Bacon", "Cheese"],
        [
            "Cook pasta according to package instructions.",
            "In a separate pan, fry bacon until crispy.",
            "In a bowl, whisk together eggs and grated Parmesan cheese.",
            "Toss cooked pasta with bacon and egg mixture until coated.",
            "Serve hot with additional grated Parmesan cheese.",
        ],
    ),
    (
        "Chicken Parmesan",
        ["Chicken Breast", "Tomato Sauce", "Cheese", "Breadcrumbs"],
        [
            "Preheat oven to 375°F (190°C).",
            "Bread chicken breasts with breadcrumbs.",
            "Bake chicken in preheated oven for 20 minutes.",
            "Top chicken with tomato sauce and mozzarella cheese.",
            "Bake for an additional 10 minutes or until cheese is melted and bubbly.",
        ],
    ),
    (
        "Caesar Salad",
        ["Romaine Lettuce", "Croutons", "Cheese", "Caesar Dressing"],
        [
            "Wash and chop romaine lettuce.",
            "Toss lettuce with Caesar dressing.",
            "Top with croutons and shaved Parmesan cheese.",
            "Serve immediately.",
        ],
    ),
    (
        "Beef Stir Fry",
        ["Beef", "Bell Peppers", "Broccoli", "Soy Sauce"],
        [
            "Slice beef thinly against the grain.",
            "Heat a pan over medium-high heat and add beef slices.",
            "Stir-fry until beef is browned.",
            "Add bell peppers and broccoli to the pan.",
            "Continue to stir-fry until vegetables are tender.",
            "Add soy sauce and stir to combine.",
            "Serve hot.",
        ],
    ),
    (
        "Chocolate Chip Cookies",
        ["Flour", "Butter", "Sugar", "Chocolate Chips"],
        [
            "Preheat oven to 350°F (175°C).",
            "In a bowl, cream together butter and sugar until light and fluffy.",
            "Mix in flour until well combined.",
            "Fold in chocolate chips.",
            "Drop spoonfuls of dough onto a baking sheet.",
            "Bake for 8-10 minutes or until edges are golden brown.",
        ],
    ),
]


def sample_recipes() -> List[Recipe]:
    """
    Build the default catalog.

    Returns:
        Five Recipe objects in catalog order, each with a freshly generated id
    """
    return [
        Recipe(name=name, ingredients=tuple(ingredients), instructions=tuple(instructions))
        for name, ingredients, instructions in _SAMPLE_DATA
    ]
