"""Configuration management for PantryPal."""
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '127.0.0.1')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# Storage
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('PANTRYPAL_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
STORAGE_KEY: Final[str] = os.getenv('PANTRYPAL_STORAGE_KEY', 'pantryPalItems')
_recipes_file = os.getenv('PANTRYPAL_RECIPES_FILE')
RECIPES_FILE: Final[Optional[Path]] = Path(_recipes_file).resolve() if _recipes_file else None

# Pantry Alerts Configuration
EXPIRING_SOON_DAYS: Final[int] = int(os.getenv('EXPIRING_SOON_DAYS', '3'))
RECEIPT_DEFAULT_EXPIRY_DAYS: Final[int] = int(os.getenv('RECEIPT_DEFAULT_EXPIRY_DAYS', '7'))
NOTICE_TTL_SECONDS: Final[float] = float(os.getenv('NOTICE_TTL_SECONDS', '3'))
