"""Pantry repository helpers (slot persistence)."""
import logging
from typing import List, Sequence

from dinner.domain.Ingredient import Ingredient
from dinner.infra.Storage import KeyValueStorage
from dinner.infra.codec import decode_ingredients, encode_ingredients
from dinner.infra.exceptions import CodecError, StorageError
from dinner.utilities.constants import INGREDIENTS_KEY

logger = logging.getLogger(__name__)


def reading_from_ingredients(storage: KeyValueStorage) -> List[Ingredient]:
    """Load pantry ingredients (graceful error handling)."""
    try:
        blob = storage.get(INGREDIENTS_KEY)
    except StorageError as e:
        logger.error(f"Error reading ingredients: {e}")
        return []
    if blob is None:
        logger.warning(f"Pantry slot '{INGREDIENTS_KEY}' is empty. Returning empty list.")
        return []
    try:
        return decode_ingredients(blob)
    except CodecError as e:
        logger.error(f"Invalid pantry data: {e}")
        return []


def saving_ingredients(storage: KeyValueStorage, ingredients: Sequence[Ingredient]) -> bool:
    try:
        storage.set(INGREDIENTS_KEY, encode_ingredients(ingredients))
        return True
    except CodecError as e:
        logger.error(f"Skipping pantry write, encoding failed: {e}")
    except StorageError as e:
        logger.error(f"Error saving ingredients: {e}")
    return False
