"""Recipe availability helpers."""
from __future__ import annotations
from typing import Iterable, List, Set

from dinner.domain.Ingredient import Ingredient
from dinner.domain.Recipe import Recipe

__all__ = ["pantry_names", "available_recipes", "missing_ingredients"]


def pantry_names(ingredients: Iterable[Ingredient]) -> Set[str]:
    """Lowercased names of the pantry items."""
    return {ing.key for ing in ingredients}


def available_recipes(recipes: Iterable[Recipe], ingredients: Iterable[Ingredient]) -> List[Recipe]:
    """Recipes whose ingredient names are all in the pantry, case-insensitively.

    A recipe without ingredients is always available. Order follows `recipes`.
    """
    have = pantry_names(ingredients)
    return [r for r in recipes if r.can_be_cooked_with(have)]


def missing_ingredients(recipe: Recipe, ingredients: Iterable[Ingredient]) -> List[str]:
    """Ingredient names of `recipe` that the pantry lacks, in recipe order, without repeats."""
    have = pantry_names(ingredients)
    missing: List[str] = []
    seen: Set[str] = set()
    for name in recipe.ingredient_names:
        key = name.lower()
        if key not in have and key not in seen:
            seen.add(key)
            missing.append(name)
    return missing
