"""
Validation schemas using Pydantic.

Input schemas guard the editing boundary (names are trimmed and must not be
blank). Record schemas describe what a persisted slot may contain and are
used by the codec when decoding.
"""
import base64
import binascii
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dinner.domain.CookingUnit import CookingUnit
from dinner.domain.Ingredient import Ingredient, IngredientCategory
from dinner.domain.Recipe import Recipe
from dinner.domain.RecipeIngredient import RecipeIngredient
from dinner.utilities.constants import MAX_NAME_LENGTH


def _strip_required(v):
    if isinstance(v, str):
        v = v.strip()
    if not v:
        raise ValueError('Name cannot be empty')
    return v


class IngredientInput(BaseModel):
    """Schema for pantry ingredient input."""
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    category: Optional[IngredientCategory] = None

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        return _strip_required(v)


class RecipeIngredientInput(BaseModel):
    """Schema for a single ingredient line of a recipe form."""
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    quantity: str = ""
    unit: CookingUnit = CookingUnit.NONE

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        return _strip_required(v)

    @field_validator('quantity', mode='before')
    @classmethod
    def strip_quantity(cls, v):
        return v.strip() if isinstance(v, str) else ("" if v is None else str(v))


class RecipeInput(BaseModel):
    """Schema for recipe input validation."""
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    recipe_ingredients: List[RecipeIngredientInput] = Field(default_factory=list)
    instructions: str = ""
    image_data: Optional[bytes] = None

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        return _strip_required(v)


# --- Persisted records ------------------------------------------------------

class IngredientRecord(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: str = Field(..., min_length=1)
    name: str
    category: Optional[str] = None


class RecipeIngredientRecord(BaseModel):
    model_config = ConfigDict(extra='ignore')

    name: str
    quantity: str = ""
    unit: str = ""

    @field_validator('quantity', 'unit', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v


class RecipeRecord(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: str = Field(..., min_length=1)
    name: str
    recipe_ingredients: List[RecipeIngredientRecord]
    instructions: str = ""
    image_data: Optional[str] = None

    @field_validator('instructions', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    @field_validator('image_data')
    @classmethod
    def validate_base64(cls, v):
        """Image payloads are stored as base64 text."""
        if v is None:
            return v
        try:
            base64.b64decode(v, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f'image_data is not valid base64: {e}')
        return v


# --- Entity builders for the presentation layer -------------------------------

def new_ingredient(name: str, category=None) -> Ingredient:
    """Validate user text and build a pantry Ingredient with a fresh id."""
    data = IngredientInput(name=name, category=category)
    return Ingredient(name=data.name, category=data.category)


def new_recipe(name: str, recipe_ingredients=None, instructions: str = "",
               image_data: Optional[bytes] = None, id: Optional[str] = None) -> Recipe:
    """Validate recipe form values and build a Recipe.

    Pass the existing id when building the replacement for an edited recipe.
    recipe_ingredients may hold RecipeIngredient objects or plain dicts.
    """
    lines = []
    for ri in recipe_ingredients or []:
        lines.append(ri.to_dict() if isinstance(ri, RecipeIngredient) else ri)
    data = RecipeInput(name=name, recipe_ingredients=lines,
                       instructions=instructions or "", image_data=image_data)
    return Recipe(
        name=data.name,
        recipe_ingredients=[RecipeIngredient(ri.name, ri.quantity, ri.unit) for ri in data.recipe_ingredients],
        instructions=data.instructions,
        image_data=data.image_data,
        id=id,
    )
