from typing import Final

# Persisted slot names
RECIPES_KEY: Final[str] = "recipes"
INGREDIENTS_KEY: Final[str] = "availableIngredients"

SCHEMA_VERSION: Final[int] = 1
ENCODING: Final[str] = "utf-8"

MAX_NAME_LENGTH: Final[int] = 200
