import logging
from typing import List, Sequence

from dinner.domain.Recipe import Recipe
from dinner.infra.Storage import KeyValueStorage
from dinner.infra.codec import decode_recipes, encode_recipes
from dinner.infra.exceptions import CodecError, StorageError
from dinner.utilities.constants import RECIPES_KEY

logger = logging.getLogger(__name__)


def reading_from_recipes(storage: KeyValueStorage) -> List[Recipe]:
    """Read recipes from their slot; missing or unreadable data yields an empty list."""
    try:
        blob = storage.get(RECIPES_KEY)
    except StorageError as e:
        logger.error(f"Error reading recipes: {e}")
        return []
    if blob is None:
        logger.warning(f"Recipes slot '{RECIPES_KEY}' is empty. Returning empty list.")
        return []
    try:
        return decode_recipes(blob)
    except CodecError as e:
        logger.error(f"Invalid recipes data: {e}")
        return []


def saving_recipes(storage: KeyValueStorage, recipes: Sequence[Recipe]) -> bool:
    """Write the full recipe collection. On failure the previous blob is left in place."""
    try:
        storage.set(RECIPES_KEY, encode_recipes(recipes))
        return True
    except CodecError as e:
        logger.error(f"Skipping recipes write, encoding failed: {e}")
    except StorageError as e:
        logger.error(f"Error saving recipes: {e}")
    return False
