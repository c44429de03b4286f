"""Persistence codec: entity collections <-> JSON bytes.

Blob layout (UTF-8 JSON):
    {"version": 1, "items": [ <entity dict>, ... ]}

A bare JSON list is accepted on decode as a legacy, unversioned blob. Each
item is validated against its record schema before being turned into an
entity; optional fields (category, image_data, quantity, unit, instructions)
may be missing or null. A recipe must carry a recipe_ingredients list.
"""
from __future__ import annotations
import json
from typing import Any, List, Sequence, Type

from pydantic import BaseModel, ValidationError

from dinner.domain.Ingredient import Ingredient
from dinner.domain.Recipe import Recipe
from dinner.infra.exceptions import CodecError
from dinner.utilities.constants import ENCODING, SCHEMA_VERSION
from dinner.utilities.validators import IngredientRecord, RecipeRecord

__all__ = ['encode_recipes', 'decode_recipes', 'encode_ingredients', 'decode_ingredients']


def _encode(items: Sequence[Any]) -> bytes:
    try:
        payload = {"version": SCHEMA_VERSION, "items": [item.to_dict() for item in items]}
        return json.dumps(payload, ensure_ascii=False).encode(ENCODING)
    except (TypeError, ValueError, AttributeError) as e:
        raise CodecError(f"cannot encode collection: {e}") from e


def _decode_items(blob: bytes, record: Type[BaseModel]) -> List[dict]:
    try:
        data = json.loads(blob.decode(ENCODING) if isinstance(blob, (bytes, bytearray)) else blob)
    except (UnicodeDecodeError, json.JSONDecodeError, TypeError) as e:
        raise CodecError(f"blob is not valid JSON: {e}") from e

    if isinstance(data, list):
        items = data
    elif isinstance(data, dict) and isinstance(data.get("items"), list):
        version = data.get("version", 0)
        if not isinstance(version, int) or version > SCHEMA_VERSION:
            raise CodecError(f"unsupported schema version: {version!r}")
        items = data["items"]
    else:
        raise CodecError("blob holds neither a list nor a versioned envelope")

    try:
        return [record.model_validate(item).model_dump() for item in items]
    except ValidationError as e:
        raise CodecError(f"invalid {record.__name__}: {e}") from e


def encode_recipes(recipes: Sequence[Recipe]) -> bytes:
    return _encode(recipes)


def decode_recipes(blob: bytes) -> List[Recipe]:
    return [Recipe.from_dict(d) for d in _decode_items(blob, RecipeRecord)]


def encode_ingredients(ingredients: Sequence[Ingredient]) -> bytes:
    return _encode(ingredients)


def decode_ingredients(blob: bytes) -> List[Ingredient]:
    return [Ingredient.from_dict(d) for d in _decode_items(blob, IngredientRecord)]
