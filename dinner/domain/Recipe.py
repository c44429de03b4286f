"""Recipe domain entity: name, ingredient lines, instructions, optional image."""
import base64
from typing import Iterable, List, Optional
from uuid import uuid4

from dinner.domain.Ingredient import Ingredient
from dinner.domain.RecipeIngredient import RecipeIngredient


class Recipe:
    def __init__(self, name: str = "", recipe_ingredients: Optional[List[RecipeIngredient]] = None,
                 instructions: str = "", image_data: Optional[bytes] = None, id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.name = name
        self.recipe_ingredients = list(recipe_ingredients) if recipe_ingredients else []
        self.instructions = instructions or ""
        self.image_data = image_data

    @property
    def ingredient_names(self) -> List[str]:
        return [ri.name for ri in self.recipe_ingredients]

    @property
    def ingredients(self) -> List[Ingredient]:
        """Throwaway Ingredient objects built from the line names (fresh ids each call)."""
        return [Ingredient(name=ri.name) for ri in self.recipe_ingredients]

    @property
    def steps(self) -> List[str]:
        """Instructions split into display steps: one per non-blank line, trimmed."""
        return [line.strip() for line in self.instructions.split("\n") if line.strip()]

    def required_names(self) -> set:
        return {name.lower() for name in self.ingredient_names}

    def can_be_cooked_with(self, pantry_names: Iterable[str]) -> bool:
        """True when every ingredient name (case-insensitive) is in pantry_names."""
        available = {n.lower() for n in pantry_names}
        return self.required_names() <= available

    def __eq__(self, other) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return (self.id == other.id and self.name == other.name
                and self.recipe_ingredients == other.recipe_ingredients
                and self.instructions == other.instructions
                and self.image_data == other.image_data)

    __hash__ = None

    def __str__(self) -> str:
        names = ", ".join(self.ingredient_names) or "no ingredients"
        image = " - has image" if self.image_data else ""
        return f"{self.name} - Ingredients: {names}{image}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        image = d.get("image_data")
        if isinstance(image, str):
            image = base64.b64decode(image, validate=True)
        return Recipe(
            name=d.get("name") or "",
            recipe_ingredients=[RecipeIngredient.from_dict(ri) for ri in d.get("recipe_ingredients") or []],
            instructions=d.get("instructions") or "",
            image_data=image,
            id=d.get("id") or None,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "recipe_ingredients": [ri.to_dict() for ri in self.recipe_ingredients],
            "instructions": self.instructions,
            "image_data": base64.b64encode(self.image_data).decode("ascii") if self.image_data is not None else None,
        }
