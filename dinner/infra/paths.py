from pathlib import Path
from dinner.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = _CONFIGURED_DATA_DIR.resolve()


def slot_path(data_dir: Path, key: str) -> Path:
    """File backing the persisted slot named key."""
    return Path(data_dir) / f"{key}.json"


__all__ = ['DATA_DIR', 'slot_path']
