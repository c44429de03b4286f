import unittest
from dinner.domain.Ingredient import Ingredient
from dinner.domain.Recipe import Recipe
from dinner.domain.RecipeIngredient import RecipeIngredient
from dinner.domain.StoreResult import StoreResult
from dinner.events.Event_Bus import EventBus, PANTRY_CHANGED, RECIPES_CHANGED
from dinner.infra.Storage import MemoryStorage
from dinner.infra.codec import decode_recipes
from dinner.logic.store import RecipeDataStore
from dinner.utilities.constants import RECIPES_KEY


def make_recipe(name, *ingredient_names):
    return Recipe(name, [RecipeIngredient(n) for n in ingredient_names])


class TestRecipeDataStore(unittest.TestCase):

    def setUp(self):
        self.storage = MemoryStorage()
        self.store = RecipeDataStore(self.storage, EventBus())

    def test_starts_empty(self):
        self.assertEqual(self.store.recipes, ())
        self.assertEqual(self.store.available_ingredients, ())

    def test_available_recipes_scenario(self):
        self.store.add_ingredient(Ingredient("egg"))
        self.store.add_ingredient(Ingredient("flour"))
        self.store.add_recipe(make_recipe("Pancakes", "egg", "flour", "milk"))
        self.store.add_recipe(make_recipe("Omelette", "egg"))
        self.assertEqual([r.name for r in self.store.get_available_recipes()], ["Omelette"])

    def test_matching_is_case_insensitive_and_empty_recipe_is_available(self):
        self.store.add_ingredient(Ingredient("Egg"))
        self.store.add_recipe(make_recipe("Boiled egg", "EGG"))
        self.store.add_recipe(make_recipe("Ice"))
        self.store.add_recipe(make_recipe("Cake", "egg", "Sugar"))
        self.assertEqual([r.name for r in self.store.get_available_recipes()], ["Boiled egg", "Ice"])

    def test_duplicate_ingredient_keeps_first(self):
        first = Ingredient("Egg")
        self.assertIs(self.store.add_ingredient(first), StoreResult.SUCCESS)
        self.assertIs(self.store.add_ingredient(Ingredient("egg")), StoreResult.DUPLICATE)
        self.assertEqual(self.store.available_ingredients, (first,))

    def test_add_recipe_allows_duplicate_names(self):
        self.store.add_recipe(make_recipe("Soup"))
        self.store.add_recipe(make_recipe("Soup"))
        self.assertEqual(len(self.store.recipes), 2)

    def test_update_replaces_whole_recipe(self):
        recipe = make_recipe("Soup", "water")
        self.store.add_recipe(recipe)
        edited = Recipe("Tomato soup", [RecipeIngredient("tomato", "3")], "Simmer", id=recipe.id)
        self.assertIs(self.store.update_recipe(edited), StoreResult.SUCCESS)
        self.assertEqual(self.store.recipes, (edited,))

    def test_update_miss_leaves_collection_unchanged(self):
        self.store.add_recipe(make_recipe("Soup"))
        before = self.store.recipes
        self.assertIs(self.store.update_recipe(make_recipe("Ghost")), StoreResult.NOT_FOUND)
        self.assertEqual(self.store.recipes, before)

    def test_delete_recipe_by_index_keeps_relative_order(self):
        for name in ("A", "B", "C", "D"):
            self.store.add_recipe(make_recipe(name))
        self.assertIs(self.store.delete_recipe(1), StoreResult.SUCCESS)
        self.assertEqual([r.name for r in self.store.recipes], ["A", "C", "D"])

    def test_delete_out_of_range_is_not_found(self):
        self.store.add_recipe(make_recipe("A"))
        self.assertIs(self.store.delete_recipe(5), StoreResult.NOT_FOUND)
        self.assertIs(self.store.delete_recipe(-1), StoreResult.NOT_FOUND)
        self.assertIs(self.store.delete_ingredient(0), StoreResult.NOT_FOUND)
        self.assertEqual(len(self.store.recipes), 1)

    def test_delete_by_id(self):
        a, b = make_recipe("A"), make_recipe("B")
        self.store.add_recipe(a)
        self.store.add_recipe(b)
        self.assertIs(self.store.delete_recipe_by_id(a.id), StoreResult.SUCCESS)
        self.assertIs(self.store.delete_recipe_by_id(a.id), StoreResult.NOT_FOUND)
        self.assertEqual(self.store.recipes, (b,))

        egg = Ingredient("Egg")
        self.store.add_ingredient(egg)
        self.assertIs(self.store.delete_ingredient_by_id(egg.id), StoreResult.SUCCESS)
        self.assertEqual(self.store.available_ingredients, ())

    def test_deleting_pantry_item_does_not_touch_recipes(self):
        self.store.add_ingredient(Ingredient("Egg"))
        self.store.add_recipe(make_recipe("Omelette", "Egg"))
        self.store.delete_ingredient(0)
        self.assertEqual(self.store.recipes[0].ingredient_names, ["Egg"])
        self.assertEqual(self.store.get_available_recipes(), [])

    def test_missing_ingredients(self):
        self.store.add_ingredient(Ingredient("egg"))
        recipe = make_recipe("Pancakes", "Egg", "Flour", "flour", "Milk")
        self.assertEqual(self.store.get_missing_ingredients(recipe), ["Flour", "Milk"])

    def test_subscribers_are_notified(self):
        events = []
        self.store.subscribe(lambda name, payload: events.append((name, payload)))
        self.store.add_ingredient(Ingredient("Egg"))
        self.store.add_ingredient(Ingredient("EGG"))
        self.store.add_recipe(make_recipe("Omelette", "Egg"))
        self.assertEqual([name for name, _ in events], [PANTRY_CHANGED, RECIPES_CHANGED])
        self.assertEqual(len(events[0][1]["ingredients"]), 1)
        self.assertEqual(events[1][1]["recipes"][0].name, "Omelette")

    def test_unsubscribe_single_event(self):
        events = []
        listener = lambda name, payload: events.append(name)
        self.store.subscribe(listener).unsubscribe(listener, PANTRY_CHANGED)
        self.store.add_ingredient(Ingredient("Egg"))
        self.store.add_recipe(make_recipe("Omelette"))
        self.assertEqual(events, [RECIPES_CHANGED])

    def test_returned_recipes_are_copies(self):
        self.store.add_recipe(make_recipe("Omelette", "egg"))
        self.store.recipes[0].recipe_ingredients.append(RecipeIngredient("truffle"))
        self.store.get_available_recipes()
        self.assertEqual(self.store.recipes[0].ingredient_names, ["egg"])
        stored = decode_recipes(self.storage.get(RECIPES_KEY))
        self.assertEqual(stored, list(self.store.recipes))

    def test_caller_edits_after_add_do_not_leak_in(self):
        recipe = make_recipe("Omelette", "egg")
        egg = Ingredient("Egg")
        self.store.add_recipe(recipe)
        self.store.add_ingredient(egg)
        recipe.recipe_ingredients.append(RecipeIngredient("truffle"))
        recipe.name = "Truffle omelette"
        egg.name = "Caviar"
        self.assertEqual(self.store.recipes[0].name, "Omelette")
        self.assertEqual(self.store.recipes[0].ingredient_names, ["egg"])
        self.assertEqual([i.name for i in self.store.available_ingredients], ["Egg"])

    def test_available_recipes_are_copies(self):
        self.store.add_recipe(make_recipe("Ice"))
        self.store.get_available_recipes()[0].name = "Changed"
        self.assertEqual(self.store.recipes[0].name, "Ice")

    def test_collections_are_read_only_snapshots(self):
        self.store.add_recipe(make_recipe("A"))
        snapshot = self.store.recipes
        self.store.add_recipe(make_recipe("B"))
        self.assertEqual(len(snapshot), 1)
        self.assertIsInstance(snapshot, tuple)


if __name__ == '__main__':
    unittest.main()
