"""Configuration management for the Pepper's Pantry shopping-list service."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data')))
DATABASE_PATH: Final[Path] = Path(os.getenv('DATABASE_PATH', str(DATA_DIR / 'pepper.db')))

# Auth (tokens are issued elsewhere, we only verify them)
# PyJWT warns about HS256 keys shorter than 32 bytes
JWT_SECRET: Final[str] = os.getenv('JWT_SECRET', 'change-me-in-production-peppers-pantry-hs256-key')
JWT_ALGORITHM: Final[str] = os.getenv('JWT_ALGORITHM', 'HS256')
JWT_EXPIRES_DAYS: Final[int] = int(os.getenv('JWT_EXPIRES_DAYS', '7'))

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Ingredient fetching during consolidation
FETCH_MAX_WORKERS: Final[int] = int(os.getenv('FETCH_MAX_WORKERS', '4'))
FETCH_TIMEOUT_SECONDS: Final[float] = float(os.getenv('FETCH_TIMEOUT_SECONDS', '5.0'))
