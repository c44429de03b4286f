import pytest
from pydantic import ValidationError
from dinner.domain.CookingUnit import CookingUnit
from dinner.domain.Ingredient import IngredientCategory
from dinner.domain.RecipeIngredient import RecipeIngredient
from dinner.utilities.validators import IngredientInput, RecipeInput, new_ingredient, new_recipe


def test_ingredient_name_is_trimmed():
    ingredient = new_ingredient("  Egg \t", category="dairy")
    assert ingredient.name == "Egg"
    assert ingredient.category is IngredientCategory.DAIRY


@pytest.mark.parametrize("name", ["", "   ", "\n\t"])
def test_blank_names_are_rejected(name):
    with pytest.raises(ValidationError):
        IngredientInput(name=name)
    with pytest.raises(ValidationError):
        RecipeInput(name=name)


def test_new_recipe_builds_lines_and_keeps_id():
    recipe = new_recipe(
        " Pancakes ",
        [{"name": " Flour ", "quantity": " 2 ", "unit": "cup"}, RecipeIngredient("Egg", "1")],
        instructions="Mix\nFry",
        id="fixed-id",
    )
    assert recipe.id == "fixed-id"
    assert recipe.name == "Pancakes"
    assert recipe.recipe_ingredients == [
        RecipeIngredient("Flour", "2", CookingUnit.CUP),
        RecipeIngredient("Egg", "1", CookingUnit.NONE),
    ]
    assert recipe.image_data is None


def test_new_recipe_rejects_blank_ingredient_line():
    with pytest.raises(ValidationError):
        new_recipe("Soup", [{"name": "  "}])
