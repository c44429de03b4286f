"""Closed set of measurement units a recipe ingredient can be expressed in."""
from enum import Enum


class CookingUnit(str, Enum):
    NONE = ""
    TEASPOON = "tsp"
    TABLESPOON = "tbsp"
    CUP = "cup"
    MILLILITER = "ml"
    LITER = "l"
    GRAM = "g"
    KILOGRAM = "kg"
    OUNCE = "oz"
    POUND = "lb"
    PINCH = "pinch"
    DASH = "dash"
    TO_TASTE = "to taste"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @staticmethod
    def from_raw(value) -> "CookingUnit":
        '''Maps a persisted raw value to a unit. Unknown values fall back to NONE.'''
        if isinstance(value, CookingUnit):
            return value
        try:
            return CookingUnit(value if value is not None else "")
        except ValueError:
            return CookingUnit.NONE

    def __str__(self) -> str:
        return self.value


_DISPLAY_NAMES = {
    CookingUnit.NONE: "No unit",
    CookingUnit.TEASPOON: "Teaspoon (tsp)",
    CookingUnit.TABLESPOON: "Tablespoon (tbsp)",
    CookingUnit.CUP: "Cup",
    CookingUnit.MILLILITER: "Milliliter (ml)",
    CookingUnit.LITER: "Liter (l)",
    CookingUnit.GRAM: "Gram (g)",
    CookingUnit.KILOGRAM: "Kilogram (kg)",
    CookingUnit.OUNCE: "Ounce (oz)",
    CookingUnit.POUND: "Pound (lb)",
    CookingUnit.PINCH: "Pinch",
    CookingUnit.DASH: "Dash",
    CookingUnit.TO_TASTE: "To taste",
}
