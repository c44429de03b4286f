"""Key-value slot storage.

A slot is a named location holding one serialized collection. Two backends:
  * MemoryStorage: dict-backed, used by tests and the 'memory' backend.
  * JsonFileStorage: one '<key>.json' file per slot inside a data directory,
    replaced atomically (temp file + move) on every write.
"""
from __future__ import annotations
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Dict, Optional

from dinner.infra.exceptions import StorageError
from dinner.infra.paths import slot_path

logger = logging.getLogger(__name__)


class KeyValueStorage:
    def get(self, key: str) -> Optional[bytes]:
        """Return the blob stored under key, or None when the slot is empty."""
        raise NotImplementedError

    def set(self, key: str, data: bytes) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryStorage(KeyValueStorage):
    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._slots: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self._slots.get(key)

    def set(self, key: str, data: bytes) -> None:
        self._slots[key] = bytes(data)

    def delete(self, key: str) -> None:
        self._slots.pop(key, None)

    def keys(self):
        return list(self._slots)


class JsonFileStorage(KeyValueStorage):
    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return slot_path(self.data_dir, key)

    def get(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_bytes()
        except OSError as e:
            raise StorageError(key, f"cannot read {path}: {e}") from e

    def set(self, key: str, data: bytes) -> None:
        path = self._path(key)
        tmp_path = None
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.data_dir), prefix=f".{key}_", suffix=".json")
            with os.fdopen(fd, "wb") as tmp:
                tmp.write(data)
            shutil.move(tmp_path, path)
            logger.debug("Wrote %d bytes to %s", len(data), path)
        except OSError as e:
            raise StorageError(key, f"cannot write {path}: {e}") from e
        finally:
            if tmp_path and os.path.exists(tmp_path):
                try:
                    os.remove(tmp_path)
                except OSError:
                    logger.warning("Could not remove temp file %s", tmp_path)

    def delete(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise StorageError(key, f"cannot delete {path}: {e}") from e


__all__ = ['KeyValueStorage', 'MemoryStorage', 'JsonFileStorage']
