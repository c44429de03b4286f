"""Ingredient domain entity: a named pantry item with an optional category."""
from enum import Enum
from typing import Optional
from uuid import uuid4


class IngredientCategory(str, Enum):
    PRODUCE = "produce"
    DAIRY = "dairy"
    MEAT = "meat"
    SEAFOOD = "seafood"
    GRAINS = "grains"
    BAKING = "baking"
    SPICE = "spice"
    CONDIMENT = "condiment"
    FROZEN = "frozen"
    CANNED = "canned"
    OTHER = "other"

    @staticmethod
    def from_raw(value) -> Optional["IngredientCategory"]:
        if value is None or value == "":
            return None
        if isinstance(value, IngredientCategory):
            return value
        try:
            return IngredientCategory(str(value).strip().lower())
        except ValueError:
            return IngredientCategory.OTHER


class Ingredient:
    def __init__(self, name: str = "", category: Optional[IngredientCategory] = None,
                 id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.name = name
        self.category = category

    @property
    def key(self) -> str:
        '''Case-insensitive matching key for this ingredient's name.'''
        return self.name.lower()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.id, self.name, self.category) == (other.id, other.name, other.category)

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        if self.category:
            return f"{self.name} ({self.category.value})"
        return self.name

    def __repr__(self) -> str:
        return f"Ingredient(name={self.name!r}, category={self.category!r}, id={self.id!r})"

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            name=d.get("name") or "",
            category=IngredientCategory.from_raw(d.get("category")),
            id=d.get("id") or None,
        )

    def to_dict(self):
        '''Converts the Ingredient object to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value if self.category else None,
        }
