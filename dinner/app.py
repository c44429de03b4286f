"""Composition root: configure logging and build the data store once."""
import logging
from pathlib import Path
from typing import Optional

from dinner.events.Event_Bus import EventBus
from dinner.infra.Storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from dinner.infra.paths import DATA_DIR
from dinner.logic.store import RecipeDataStore
from dinner.utilities.config import LOG_FORMAT, LOG_LEVEL, STORAGE_BACKEND

logger = logging.getLogger("dinner_app")


def configure_logging(level: Optional[str] = None):
    logging.basicConfig(level=(level or LOG_LEVEL), format=LOG_FORMAT)


def create_storage(backend: Optional[str] = None, data_dir: Optional[Path] = None) -> KeyValueStorage:
    backend = (backend or STORAGE_BACKEND).lower()
    if backend == "memory":
        return MemoryStorage()
    if backend == "file":
        return JsonFileStorage(data_dir or DATA_DIR)
    raise ValueError(f"Unknown storage backend: {backend!r} (expected 'file' or 'memory')")


def create_store(storage: Optional[KeyValueStorage] = None,
                 event_bus: Optional[EventBus] = None) -> RecipeDataStore:
    """Build the store that the presentation layer receives."""
    storage = storage if storage is not None else create_storage()
    store = RecipeDataStore(storage, event_bus or EventBus())
    logger.info("Data store ready: %d recipes, %d pantry ingredients",
                len(store.recipes), len(store.available_ingredients))
    return store


__all__ = ['configure_logging', 'create_storage', 'create_store']
