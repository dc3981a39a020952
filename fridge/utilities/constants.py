from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Expiry buckets (days left, inclusive upper bound)
CRITICAL_DAYS: Final[int] = 1
WARNING_DAYS: Final[int] = 3

DEFAULT_SHELF_LIFE_DAYS: Final[int] = 7
MIN_RANDOM_SHELF_LIFE: Final[int] = 3
MAX_RANDOM_SHELF_LIFE: Final[int] = 21

DEFAULT_COOKING_MINUTES: Final[int] = 30
MAX_RECIPES_PER_FETCH: Final[int] = 10

DEFAULT_RECIPE_FOLDERS: Final[tuple] = ("Quick Meals", "Healthy", "Vegetarian", "Desserts")

MEASUREMENT_UNITS: Final[tuple] = (
    "cup", "cups", "tablespoon", "tablespoons", "tbsp", "teaspoon", "teaspoons", "tsp",
    "ounce", "ounces", "oz", "pound", "pounds", "lb", "lbs", "gram", "grams", "g",
    "kilogram", "kg", "ml", "milliliter", "liter", "l",
)

WORD_QUANTITIES: Final[dict[str, int]] = {
    "a": 1, "an": 1, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8,
}
