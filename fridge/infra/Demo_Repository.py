"""Demo data loaders (read-only JSON shipped with the package)."""
import json
import logging
from datetime import date, timedelta
from pathlib import Path
from typing import List, Optional

from fridge.domain.FridgeItem import FridgeItem
from fridge.domain.Recipe import Recipe
from fridge.utilities.config import DEMO_ITEMS_FILE, DEMO_RECIPES_FILE
from fridge.utilities.constants import DEFAULT_SHELF_LIFE_DAYS

logger = logging.getLogger(__name__)


def _read_json_list(path: Path) -> list:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Demo data file not found: {path}. Returning empty list.")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in demo data file {path}: {e}")
        return []
    if not isinstance(data, list):
        logger.error(f"Demo data file {path} does not contain a list")
        return []
    return data


def load_demo_items(today: Optional[date] = None, path: Path = DEMO_ITEMS_FILE) -> List[FridgeItem]:
    """Demo fridge items; expiration dates are relative to today."""
    today = today or date.today()
    items = []
    for entry in _read_json_list(path):
        try:
            days = int(entry.get("days_from_today", DEFAULT_SHELF_LIFE_DAYS))
            items.append(FridgeItem.from_dict({
                "name": entry["name"],
                "category": entry["category"],
                "quantity": entry.get("quantity", 1),
                "expiration_date": today + timedelta(days=days),
            }))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed demo item {entry!r}: {e}")
    return items


def load_demo_recipes(path: Path = DEMO_RECIPES_FILE) -> List[Recipe]:
    """Fallback recipes shown when the recipe API is unavailable."""
    recipes = []
    for entry in _read_json_list(path):
        try:
            recipes.append(Recipe.from_dict(entry))
        except (TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed demo recipe {entry!r}: {e}")
    return recipes
