"""Barcode -> product guess.

Lookup order: exact demo barcodes, then a three-digit prefix table, then a
pluggable fallback for unknown prefixes. There is no real product database
behind this; the fallback strategy is where one would be plugged in.
"""
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Dict, Optional, Tuple

from fridge.domain.FridgeItem import FridgeCategory
from fridge.utilities.constants import MAX_RANDOM_SHELF_LIFE, MIN_RANDOM_SHELF_LIFE

logger = logging.getLogger(__name__)

__all__ = [
    "ProductGuess", "BarcodeCatalog", "RandomFallback", "NoFallback",
    "DEMO_PRODUCTS", "PREFIX_TABLE", "MIN_BARCODE_LENGTH",
]

MIN_BARCODE_LENGTH = 3


@dataclass(frozen=True)
class ProductGuess:
    """Immutable guess, so table entries can be handed out as-is."""
    name: str
    category: FridgeCategory
    shelf_life_days: int

    def __post_init__(self):
        object.__setattr__(self, 'category', FridgeCategory(self.category))

    def expiration_date(self, today: Optional[date] = None) -> date:
        return (today or date.today()) + timedelta(days=self.shelf_life_days)

    def __repr__(self) -> str:
        return f"ProductGuess({self.name!r}, {self.category.value}, {self.shelf_life_days}d)"

    def to_dict(self, today: Optional[date] = None):
        return {
            "name": self.name,
            "category": self.category.value,
            "shelf_life_days": self.shelf_life_days,
            "expiration_date": self.expiration_date(today).isoformat(),
        }


DEMO_PRODUCTS: Dict[str, ProductGuess] = {
    "0123456789012": ProductGuess("Organic Milk", FridgeCategory.DAIRY, 14),
    "1234567890123": ProductGuess("Chicken Breast", FridgeCategory.MEAT, 5),
    "2345678901234": ProductGuess("Spinach", FridgeCategory.VEGETABLES, 7),
    "3456789012345": ProductGuess("Apples", FridgeCategory.FRUITS, 21),
    "4567890123456": ProductGuess("Cheddar Cheese", FridgeCategory.DAIRY, 30),
    "5678901234567": ProductGuess("Ground Beef", FridgeCategory.MEAT, 3),
    "6789012345678": ProductGuess("Carrots", FridgeCategory.VEGETABLES, 14),
    "7890123456789": ProductGuess("Bananas", FridgeCategory.FRUITS, 7),
    "8901234567890": ProductGuess("Yogurt", FridgeCategory.DAIRY, 21),
    "9012345678901": ProductGuess("Salmon Fillet", FridgeCategory.MEAT, 2),
}

_PREFIX_GROUPS: Tuple[Tuple[Tuple[str, ...], str, FridgeCategory, int], ...] = (
    (("200", "201", "202"), "Fresh Produce", FridgeCategory.VEGETABLES, 7),
    (("210", "211", "212"), "Fresh Fruit", FridgeCategory.FRUITS, 10),
    (("220", "221", "222"), "Dairy Product", FridgeCategory.DAIRY, 14),
    (("230", "231", "232"), "Meat Product", FridgeCategory.MEAT, 5),
)

PREFIX_TABLE: Dict[str, ProductGuess] = {
    prefix: ProductGuess(name, category, days)
    for prefixes, name, category, days in _PREFIX_GROUPS
    for prefix in prefixes
}

FallbackStrategy = Callable[[str], Optional[ProductGuess]]


class RandomFallback:
    """Placeholder guess: random category, shelf life uniform in [3, 21] days."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def __call__(self, barcode: str) -> Optional[ProductGuess]:
        category = self._rng.choice(list(FridgeCategory))
        days = self._rng.randint(MIN_RANDOM_SHELF_LIFE, MAX_RANDOM_SHELF_LIFE)
        return ProductGuess("Food Item", category, days)


class NoFallback:
    def __call__(self, barcode: str) -> Optional[ProductGuess]:
        return None


class BarcodeCatalog:
    def __init__(self, fallback: Optional[FallbackStrategy] = None,
                 products: Optional[Dict[str, ProductGuess]] = None,
                 prefixes: Optional[Dict[str, ProductGuess]] = None):
        self.fallback = fallback or NoFallback()
        self.products = DEMO_PRODUCTS if products is None else products
        self.prefixes = PREFIX_TABLE if prefixes is None else prefixes

    def lookup(self, barcode: str) -> Optional[ProductGuess]:
        """Best-effort guess for a scanned barcode; None when nothing applies."""
        barcode = (barcode or "").strip()
        exact = self.products.get(barcode)
        if exact is not None:
            return exact
        if len(barcode) < MIN_BARCODE_LENGTH:
            return None
        guess = self.prefixes.get(barcode[:MIN_BARCODE_LENGTH])
        if guess is not None:
            return guess
        guess = self.fallback(barcode)
        logger.debug("Barcode %s: no table match, fallback gave %r", barcode, guess)
        return guess
