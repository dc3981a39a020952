"""Ingredient-string helpers.

Spoonacular returns ingredients as free text ("2 cups flour, sifted"). These
helpers pull out a display name, a quantity and a unit without touching the
original strings kept on the Recipe.
"""
from __future__ import annotations
import math
import re
from typing import Optional, Tuple

from fridge.utilities.constants import MEASUREMENT_UNITS, WORD_QUANTITIES

__all__ = [
    "clean_ingredient_for_display", "extract_ingredient_info", "extract_quantity",
    "parse_for_shopping_list", "difficulty_label",
]

_QTY = r"(?:\d+\s+\d+/\d+|\d+/\d+|\d+(?:\.\d+)?)"
_UNIT = "|".join(sorted(MEASUREMENT_UNITS, key=len, reverse=True))
_MEASURE_RE = re.compile(rf"{_QTY}\s*(?:{_UNIT})\b\.?(?:\s+of\b)?", re.IGNORECASE)
_LEADING_RE = re.compile(rf"^(?:(?:a|an|one|two|three|four|five)\s+|{_QTY})", re.IGNORECASE)

_UNIT_ALIASES = {
    "tablespoon": "tbsp", "tablespoons": "tbsp",
    "teaspoon": "tsp", "teaspoons": "tsp",
    "ounce": "oz", "ounces": "oz",
    "pound": "lb", "pounds": "lb", "lbs": "lb",
    "gram": "g", "grams": "g",
    "slices": "slice", "pieces": "piece",
}
_RECOGNIZED_UNITS = set(MEASUREMENT_UNITS) | {"slice", "slices", "piece", "pieces"}
_SHOPPING_SKIP = set(MEASUREMENT_UNITS) | {"pinch", "dash", "handful", "slice", "slices", "of"}
_PREPARATION_WORDS = ("chopped", "diced", "minced", "sliced", "beaten", "grated")


def clean_ingredient_for_display(ingredient: str) -> str:
    """Drop quantities, units and anything after the first comma."""
    main = ingredient.split(",", 1)[0]
    main = _MEASURE_RE.sub("", main)
    main = _LEADING_RE.sub("", main.strip())
    return " ".join(main.split())


def _parse_number(token: str) -> Optional[float]:
    try:
        return float(token)
    except ValueError:
        pass
    numerator, sep, denominator = token.partition("/")
    if sep:
        try:
            den = float(denominator)
            if den > 0:
                return float(numerator) / den
        except ValueError:
            return None
    return None


def extract_quantity(token: str) -> Optional[int]:
    """Whole-unit quantity from "3", "2.5", "1/2" or a number word; rounds up."""
    value = _parse_number(token)
    if value is not None:
        return int(math.ceil(value))
    word = WORD_QUANTITIES.get(token.lower())
    if word is not None and word <= 5:
        return word
    return None


def extract_ingredient_info(ingredient: str) -> Tuple[str, float, str]:
    """Return (display name, quantity, normalized unit) for a raw ingredient string."""
    name = clean_ingredient_for_display(ingredient)
    tokens = ingredient.split()
    quantity = 1.0
    unit = ""
    if tokens:
        value = _parse_number(tokens[0])
        if value is not None:
            quantity = value
        else:
            quantity = float(WORD_QUANTITIES.get(tokens[0].lower(), 1))
    if len(tokens) > 1:
        candidate = tokens[1].lower().rstrip(".,")
        if candidate in _RECOGNIZED_UNITS:
            unit = _UNIT_ALIASES.get(candidate, candidate)
    return name, quantity, unit


def parse_for_shopping_list(ingredient: str) -> Tuple[str, int]:
    """Return (base name, quantity) for adding a recipe ingredient to the shopping list."""
    quantity = 1
    name = ingredient
    tokens = ingredient.split(",", 1)[0].split()
    if tokens:
        extracted = extract_quantity(tokens[0])
        if extracted is not None:
            quantity = extracted
            name_parts = []
            for token in tokens[1:]:
                lower = token.lower()
                if lower in _SHOPPING_SKIP:
                    continue
                if any(word in lower for word in _PREPARATION_WORDS):
                    break
                name_parts.append(token)
            if name_parts:
                name = " ".join(name_parts)
    return name.split(",", 1)[0].strip(), quantity


def difficulty_label(minutes: int) -> str:
    if minutes <= 15:
        return "Quick & Easy"
    if minutes <= 30:
        return "Easy"
    if minutes <= 60:
        return "Moderate"
    return "Advanced"
