"""UserProfile domain entity: personal info, allergies, preferences, favourite and folder bookkeeping."""
from datetime import date
from enum import Enum
from typing import List, Optional

from fridge.domain.Recipe import Recipe
from fridge.utilities.constants import DEFAULT_RECIPE_FOLDERS


class AllergySeverity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class DietaryPreference(str, Enum):
    NONE = "none"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    PESCATARIAN = "pescatarian"
    GLUTEN_FREE = "gluten_free"
    DAIRY_FREE = "dairy_free"
    KETO = "keto"
    PALEO = "paleo"


class Cuisine(str, Enum):
    AMERICAN = "american"
    ITALIAN = "italian"
    MEXICAN = "mexican"
    CHINESE = "chinese"
    JAPANESE = "japanese"
    INDIAN = "indian"
    THAI = "thai"
    MEDITERRANEAN = "mediterranean"
    FRENCH = "french"
    GREEK = "greek"


class RecipeDifficulty(str, Enum):
    ANY = "any"
    EASY = "easy"
    MODERATE = "moderate"
    CHALLENGING = "challenging"


class AppAppearance(str, Enum):
    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"


class MeasurementSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class Allergy:
    def __init__(self, name: str, severity: AllergySeverity = AllergySeverity.MODERATE):
        self.name = name
        self.severity = AllergySeverity(severity)

    def to_dict(self):
        return {"name": self.name, "severity": self.severity.value}


class RecipePersonalization:
    def __init__(self, dietary_preference: DietaryPreference = DietaryPreference.NONE,
                 cuisine_preferences: Optional[List[Cuisine]] = None,
                 difficulty_preference: RecipeDifficulty = RecipeDifficulty.ANY,
                 max_cooking_time: Optional[int] = None, exclude_allergies: bool = True):
        self.dietary_preference = DietaryPreference(dietary_preference)
        self.cuisine_preferences = [Cuisine(c) for c in (cuisine_preferences or [])]
        self.difficulty_preference = RecipeDifficulty(difficulty_preference)
        self.max_cooking_time = max_cooking_time
        self.exclude_allergies = exclude_allergies

    def to_dict(self):
        return {
            "dietary_preference": self.dietary_preference.value,
            "cuisine_preferences": [c.value for c in self.cuisine_preferences],
            "difficulty_preference": self.difficulty_preference.value,
            "max_cooking_time": self.max_cooking_time,
            "exclude_allergies": self.exclude_allergies,
        }


class Preferences:
    def __init__(self, expiry_notification_days: int = 3):
        self.appearance = AppAppearance.SYSTEM
        self.accent_color = "blue"
        self.measurement_system = MeasurementSystem.METRIC
        self.notifications_enabled = True
        self.expiry_notification_days = expiry_notification_days
        self.hide_expired_items = False
        self.auto_sort_by_expiry = True
        self.show_allergy_warnings = True
        self.recipe_personalization = RecipePersonalization()

    def to_dict(self):
        return {
            "appearance": self.appearance.value,
            "accent_color": self.accent_color,
            "measurement_system": self.measurement_system.value,
            "notifications_enabled": self.notifications_enabled,
            "expiry_notification_days": self.expiry_notification_days,
            "hide_expired_items": self.hide_expired_items,
            "auto_sort_by_expiry": self.auto_sort_by_expiry,
            "show_allergy_warnings": self.show_allergy_warnings,
            "recipe_personalization": self.recipe_personalization.to_dict(),
        }


class RecipeFolder:
    def __init__(self, name: str, recipes: Optional[List[Recipe]] = None):
        self.name = name
        self.recipes = recipes[:] if recipes else []

    def add(self, recipe: Recipe) -> bool:
        if any(r.id == recipe.id for r in self.recipes):
            return False
        self.recipes.append(recipe)
        return True

    def remove(self, recipe_id: str):
        self.recipes = [r for r in self.recipes if r.id != recipe_id]

    def to_dict(self):
        return {"name": self.name, "recipes": [r.to_dict() for r in self.recipes]}


class UserProfile:
    def __init__(self, name: str = "", email: str = "", birth_date: Optional[date] = None,
                 expiry_notification_days: int = 3):
        self.name = name
        self.email = email
        self.birth_date = birth_date
        self.profile_image_name = ""
        self.allergies: List[Allergy] = []
        self.favorites: List[Recipe] = []
        self.liked_recipes: List[Recipe] = []
        self.completed_recipes: List[Recipe] = []
        self.preferences = Preferences(expiry_notification_days)
        self.folders: List[RecipeFolder] = [RecipeFolder(n) for n in DEFAULT_RECIPE_FOLDERS]

    def update(self, name: str, email: str, birth_date: Optional[date]):
        self.name = name
        self.email = email
        self.birth_date = birth_date

    # --- Allergies -------------------------------------------------------
    def add_allergy(self, name: str, severity: AllergySeverity = AllergySeverity.MODERATE) -> Allergy:
        allergy = Allergy(name, severity)
        self.allergies.append(allergy)
        return allergy

    def remove_allergy(self, index: int):
        '''Raises IndexError when there is no allergy at that position (negative indexes included).'''
        if not 0 <= index < len(self.allergies):
            raise IndexError(f"No allergy at position {index}")
        del self.allergies[index]

    # --- Favourites / liked are kept in sync ------------------------------------
    def is_favorite(self, recipe: Recipe) -> bool:
        return any(r.id == recipe.id for r in self.favorites)

    def toggle_favorite(self, recipe: Recipe) -> bool:
        '''Returns the new favourite state.'''
        if self.is_favorite(recipe):
            self.favorites = [r for r in self.favorites if r.id != recipe.id]
            self.liked_recipes = [r for r in self.liked_recipes if r.id != recipe.id]
            return False
        self.favorites.append(recipe)
        if not any(r.id == recipe.id for r in self.liked_recipes):
            self.liked_recipes.append(recipe)
        return True

    def toggle_liked(self, recipe: Recipe) -> bool:
        if any(r.id == recipe.id for r in self.liked_recipes):
            self.liked_recipes = [r for r in self.liked_recipes if r.id != recipe.id]
            self.favorites = [r for r in self.favorites if r.id != recipe.id]
            return False
        self.liked_recipes.append(recipe)
        if not self.is_favorite(recipe):
            self.favorites.append(recipe)
        return True

    def mark_recipe_completed(self, recipe: Recipe):
        if not any(r.id == recipe.id for r in self.completed_recipes):
            self.completed_recipes.append(recipe)

    def remind_about_favorites(self) -> List[Recipe]:
        '''Favourites that were never cooked.'''
        done = {r.id for r in self.completed_recipes}
        return [r for r in self.favorites if r.id not in done]

    # --- Folders -------------------------------------------------------------
    def create_folder(self, name: str) -> RecipeFolder:
        folder = RecipeFolder(name)
        self.folders.append(folder)
        return folder

    def delete_folder(self, index: int):
        del self.folders[index]

    def add_recipe_to_folder(self, recipe: Recipe, folder_index: int) -> bool:
        if not 0 <= folder_index < len(self.folders):
            return False
        return self.folders[folder_index].add(recipe)

    def remove_recipe_from_folder(self, recipe_id: str, folder_index: int):
        if 0 <= folder_index < len(self.folders):
            self.folders[folder_index].remove(recipe_id)

    def to_dict(self):
        return {
            "name": self.name,
            "email": self.email,
            "birth_date": self.birth_date.isoformat() if self.birth_date else None,
            "profile_image_name": self.profile_image_name,
            "allergies": [a.to_dict() for a in self.allergies],
            "favorites": [r.id for r in self.favorites],
            "liked_recipes": [r.id for r in self.liked_recipes],
            "completed_recipes": [r.id for r in self.completed_recipes],
            "preferences": self.preferences.to_dict(),
            "folders": [{"name": f.name, "recipe_count": len(f.recipes)} for f in self.folders],
        }
