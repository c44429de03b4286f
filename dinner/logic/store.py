"""Data store: sole owner of the recipe catalog and the pantry.

Every mutation updates the in-memory collection, persists the whole
collection to its slot before returning, then notifies subscribers. The
outcome is reported as a StoreResult; nothing is raised to the caller.
"""
from __future__ import annotations
import copy
import logging
from typing import Callable, List, Optional, Tuple

from dinner.domain.Ingredient import Ingredient
from dinner.domain.Recipe import Recipe
from dinner.domain.StoreResult import StoreResult
from dinner.events.Event_Bus import ALL_EVENTS, EventBus, Listener
from dinner.events.event_helpers import publish_pantry_changed, publish_recipes_changed
from dinner.infra.Pantry_Repository import reading_from_ingredients, saving_ingredients
from dinner.infra.Recipe_Repository import reading_from_recipes, saving_recipes
from dinner.infra.Storage import KeyValueStorage
from dinner.logic.matching import available_recipes, missing_ingredients

logger = logging.getLogger(__name__)


class RecipeDataStore:
    def __init__(self, storage: KeyValueStorage, event_bus: Optional[EventBus] = None):
        self._storage = storage
        self._event_bus = event_bus or EventBus()
        self._recipes: List[Recipe] = reading_from_recipes(storage)
        self._ingredients: List[Ingredient] = reading_from_ingredients(storage)
        logger.debug("Loaded %d recipes and %d pantry ingredients",
                     len(self._recipes), len(self._ingredients))

    # --- Observable state -------------------------------------------------
    # Callers only ever hold copies of the stored entities
    @property
    def recipes(self) -> Tuple[Recipe, ...]:
        return tuple(copy.deepcopy(self._recipes))

    @property
    def available_ingredients(self) -> Tuple[Ingredient, ...]:
        return tuple(copy.deepcopy(self._ingredients))

    def subscribe(self, callback: Listener, event_name: Optional[str] = None):
        """Register callback for one event, or for every store event when event_name is None."""
        for name in ([event_name] if event_name else ALL_EVENTS):
            self._event_bus.subscribe(name, callback)
        return self

    def unsubscribe(self, callback: Listener, event_name: Optional[str] = None):
        for name in ([event_name] if event_name else ALL_EVENTS):
            self._event_bus.unsubscribe(name, callback)
        return self

    # --- Recipe management ------------------------------------------------
    def add_recipe(self, recipe: Recipe) -> StoreResult:
        self._recipes.append(copy.deepcopy(recipe))
        logger.debug("Added recipe %r (%s)", recipe.name, recipe.id)
        return self._commit_recipes()

    def update_recipe(self, recipe: Recipe) -> StoreResult:
        index = self._recipe_index(recipe.id)
        if index is None:
            logger.info("Update ignored, no recipe with id %s", recipe.id)
            return StoreResult.NOT_FOUND
        self._recipes[index] = copy.deepcopy(recipe)
        logger.debug("Replaced recipe %r at position %d", recipe.name, index)
        return self._commit_recipes()

    def delete_recipe(self, index: int) -> StoreResult:
        if not 0 <= index < len(self._recipes):
            logger.info("Delete ignored, recipe index %d out of range", index)
            return StoreResult.NOT_FOUND
        removed = self._recipes.pop(index)
        logger.debug("Deleted recipe %r", removed.name)
        return self._commit_recipes()

    def delete_recipe_by_id(self, recipe_id: str) -> StoreResult:
        index = self._recipe_index(recipe_id)
        if index is None:
            logger.info("Delete ignored, no recipe with id %s", recipe_id)
            return StoreResult.NOT_FOUND
        return self.delete_recipe(index)

    # --- Ingredient management --------------------------------------------
    def add_ingredient(self, ingredient: Ingredient) -> StoreResult:
        if any(existing.key == ingredient.key for existing in self._ingredients):
            logger.info("Ingredient %r already in pantry, not added", ingredient.name)
            return StoreResult.DUPLICATE
        self._ingredients.append(copy.deepcopy(ingredient))
        logger.debug("Added ingredient %r", ingredient.name)
        return self._commit_ingredients()

    def delete_ingredient(self, index: int) -> StoreResult:
        if not 0 <= index < len(self._ingredients):
            logger.info("Delete ignored, ingredient index %d out of range", index)
            return StoreResult.NOT_FOUND
        removed = self._ingredients.pop(index)
        logger.debug("Deleted ingredient %r", removed.name)
        return self._commit_ingredients()

    def delete_ingredient_by_id(self, ingredient_id: str) -> StoreResult:
        for index, ing in enumerate(self._ingredients):
            if ing.id == ingredient_id:
                return self.delete_ingredient(index)
        logger.info("Delete ignored, no ingredient with id %s", ingredient_id)
        return StoreResult.NOT_FOUND

    # --- Recipe matching --------------------------------------------------
    def get_available_recipes(self) -> List[Recipe]:
        return copy.deepcopy(available_recipes(self._recipes, self._ingredients))

    def get_missing_ingredients(self, recipe: Recipe) -> List[str]:
        return missing_ingredients(recipe, self._ingredients)

    # --- Persistence ------------------------------------------------------
    def _recipe_index(self, recipe_id: str) -> Optional[int]:
        for index, recipe in enumerate(self._recipes):
            if recipe.id == recipe_id:
                return index
        return None

    def _commit(self, save: Callable, items: List, publish: Callable) -> StoreResult:
        saved = save(self._storage, items)
        publish(self._event_bus, copy.deepcopy(items))
        return StoreResult.SUCCESS if saved else StoreResult.IO_ERROR

    def _commit_recipes(self) -> StoreResult:
        return self._commit(saving_recipes, self._recipes, publish_recipes_changed)

    def _commit_ingredients(self) -> StoreResult:
        return self._commit(saving_ingredients, self._ingredients, publish_pantry_changed)


__all__ = ['RecipeDataStore']
