"""Recipe filtering and ordering against the user's profile and fridge contents.

Spoonacular's findByIngredients results carry no diet or cuisine metadata, so
these checks are keyword matches over the recipe name and ingredient strings.
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Sequence

from fridge.domain.Recipe import Recipe
from fridge.domain.UserProfile import (
    Allergy, Cuisine, DietaryPreference, RecipeDifficulty, UserProfile
)

__all__ = [
    "filter_recipes", "matches_diet", "matches_cuisine", "matches_difficulty",
    "recipe_contains_allergens", "sort_by_availability", "find_recipes_with_ingredient",
]

_MEAT = ("meat", "beef", "chicken", "pork", "lamb")
_DAIRY = ("milk", "cheese", "butter", "cream", "yogurt")

DIET_EXCLUDED_TERMS: Dict[DietaryPreference, tuple] = {
    DietaryPreference.VEGETARIAN: _MEAT + ("fish",),
    DietaryPreference.VEGAN: _MEAT + ("fish",) + _DAIRY + ("egg",),
    DietaryPreference.PESCATARIAN: _MEAT,
    DietaryPreference.GLUTEN_FREE: ("wheat", "flour", "bread", "pasta", "cereal", "rye", "barley"),
    DietaryPreference.DAIRY_FREE: _DAIRY,
    DietaryPreference.KETO: ("sugar", "flour", "bread", "pasta", "rice", "potato"),
    DietaryPreference.PALEO: ("dairy", "grain", "sugar", "legume", "bean", "peanut"),
}

# (name keywords, ingredient keywords)
CUISINE_KEYWORDS: Dict[Cuisine, tuple] = {
    Cuisine.AMERICAN: (("burger", "hotdog", "bbq", "mac and cheese"), ()),
    Cuisine.ITALIAN: (("pasta", "pizza", "risotto"), ("basil", "parmesan")),
    Cuisine.MEXICAN: (("taco", "burrito", "quesadilla"), ("cilantro", "avocado")),
    Cuisine.CHINESE: (("stir fry", "dumpling", "fried rice"), ("soy sauce", "ginger")),
    Cuisine.JAPANESE: (("sushi", "teriyaki", "miso"), ("wasabi", "seaweed")),
    Cuisine.INDIAN: (("curry", "masala", "tandoori"), ("cumin", "turmeric")),
    Cuisine.THAI: (("pad thai", "curry"), ("lemongrass", "coconut milk")),
    Cuisine.MEDITERRANEAN: (("hummus", "falafel"), ("olive oil", "feta")),
    Cuisine.FRENCH: (("baguette", "croissant", "ratatouille"), ("butter", "wine")),
    Cuisine.GREEK: (("gyro", "souvlaki"), ("feta", "olive oil", "yogurt")),
}

# Extra ingredient words that count as a hit for a named allergen.
ALLERGEN_SYNONYMS: Dict[str, tuple] = {
    "milk": ("dairy", "butter", "cheese", "cream", "yogurt"),
    "eggs": ("egg",),
    "peanuts": ("nut", "peanut"),
    "wheat": ("flour", "bread", "pasta"),
    "soy": ("soya", "tofu", "soybean"),
    "fish": ("seafood", "salmon", "tuna", "cod"),
    "shellfish": ("crab", "shrimp", "lobster", "prawn"),
}


def _used_text(recipe: Recipe) -> str:
    return " ".join(recipe.used_ingredients).lower()


def matches_diet(recipe: Recipe, preference: DietaryPreference) -> bool:
    terms = DIET_EXCLUDED_TERMS.get(DietaryPreference(preference), ())
    text = _used_text(recipe)
    return not any(term in text for term in terms)


def matches_cuisine(recipe: Recipe, cuisines: Sequence[Cuisine]) -> bool:
    if not cuisines:
        return True
    name = recipe.name.lower()
    text = _used_text(recipe)
    for cuisine in cuisines:
        name_words, ingredient_words = CUISINE_KEYWORDS[Cuisine(cuisine)]
        if any(w in name for w in name_words) or any(w in text for w in ingredient_words):
            return True
    return False


def matches_difficulty(recipe: Recipe, difficulty: RecipeDifficulty) -> bool:
    minutes = recipe.cooking_time
    difficulty = RecipeDifficulty(difficulty)
    if difficulty == RecipeDifficulty.EASY:
        return minutes <= 30
    if difficulty == RecipeDifficulty.MODERATE:
        return 30 < minutes <= 60
    if difficulty == RecipeDifficulty.CHALLENGING:
        return minutes > 60
    return True


def recipe_contains_allergens(recipe: Recipe, allergies: Iterable[Allergy]) -> bool:
    """True if any ingredient mentions an allergen or one of its known variants."""
    ingredients = [i.lower() for i in recipe.all_ingredients()]
    for allergy in allergies:
        allergen = allergy.name.lower().strip()
        if not allergen:
            continue
        words = (allergen,) + ALLERGEN_SYNONYMS.get(allergen, ())
        if any(w in ingredient for ingredient in ingredients for w in words):
            return True
    return False


def filter_recipes(recipes: List[Recipe], profile: UserProfile) -> List[Recipe]:
    """Apply allergy, diet, cuisine, difficulty and cooking-time preferences in turn."""
    personalization = profile.preferences.recipe_personalization
    result = list(recipes)

    if personalization.exclude_allergies and profile.allergies:
        result = [r for r in result if not recipe_contains_allergens(r, profile.allergies)]

    if personalization.dietary_preference != DietaryPreference.NONE:
        result = [r for r in result if matches_diet(r, personalization.dietary_preference)]

    if personalization.cuisine_preferences:
        result = [r for r in result if matches_cuisine(r, personalization.cuisine_preferences)]

    if personalization.difficulty_preference != RecipeDifficulty.ANY:
        result = [r for r in result if matches_difficulty(r, personalization.difficulty_preference)]

    if personalization.max_cooking_time is not None:
        result = [r for r in result if r.cooking_time <= personalization.max_cooking_time]

    return result


def _available_count(recipe: Recipe, names: List[str]) -> int:
    return sum(1 for ingredient in recipe.used_ingredients
               if any(ingredient.lower() in name for name in names))


def sort_by_availability(recipes: List[Recipe], ingredient_names: Iterable[str]) -> List[Recipe]:
    """Recipes using the most fridge ingredients first (stable for ties)."""
    names = [n.lower() for n in ingredient_names]
    return sorted(recipes, key=lambda r: _available_count(r, names), reverse=True)


def find_recipes_with_ingredient(recipes: Iterable[Recipe], ingredient_name: str) -> List[Recipe]:
    wanted = ingredient_name.strip().lower()
    if not wanted:
        return []
    return [r for r in recipes
            if any(wanted in i.lower() for i in r.all_ingredients() + r.all_ingredients_display())]
