"""Configuration management for the Fridge Tracker application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# API Configuration
SPOONACULAR_API_KEY: Final[str] = os.getenv('SPOONACULAR_API_KEY', '')
SPOONACULAR_BASE_URL: Final[str] = os.getenv('SPOONACULAR_BASE_URL', 'https://api.spoonacular.com/recipes')
RECIPE_REQUEST_TIMEOUT: Final[float] = float(os.getenv('RECIPE_REQUEST_TIMEOUT', '10'))
RECIPE_INGREDIENT_LIMIT: Final[int] = int(os.getenv('RECIPE_INGREDIENT_LIMIT', '5'))

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Fridge Alerts Configuration
EXPIRY_NOTIFICATION_DAYS: Final[int] = int(os.getenv('EXPIRY_NOTIFICATION_DAYS', '3'))
LOAD_DEMO_DATA: Final[bool] = os.getenv('LOAD_DEMO_DATA', 'True').lower() == 'true'

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = BASE_DIR / 'data'
DEMO_ITEMS_FILE: Final[Path] = DATA_DIR / 'demo_items.json'
DEMO_RECIPES_FILE: Final[Path] = DATA_DIR / 'demo_recipes.json'
