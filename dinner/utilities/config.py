"""Configuration management for the Dinner Tracker."""
import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
BASE_DIR: Final[Path] = Path(__file__).parent.parent
_env_path = BASE_DIR / '.env'
if _env_path.exists():
    load_dotenv(_env_path)

# Storage
DATA_DIR: Final[Path] = Path(os.getenv('DINNER_DATA_DIR', str(BASE_DIR / 'data'))).expanduser()
STORAGE_BACKEND: Final[str] = os.getenv('DINNER_STORAGE', 'file').strip().lower()

# Logging
LOG_LEVEL: Final[str] = os.getenv('DINNER_LOG_LEVEL', 'INFO').upper()
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
