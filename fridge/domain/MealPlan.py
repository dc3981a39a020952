"""MealPlan domain: dated recipe entries kept sorted by date."""
from datetime import date
from typing import List, Optional
from uuid import uuid4

from fridge.domain.Recipe import Recipe
from fridge.domain.UserProfile import UserProfile


class MealPlanEntry:
    def __init__(self, recipe: Recipe, on: date, is_prepared: bool = False, id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.recipe = recipe
        self.date = on
        self.is_prepared = is_prepared

    def __str__(self) -> str:
        return f"{self.date.isoformat()}: {self.recipe.name}" + (" (prepared)" if self.is_prepared else "")

    __repr__ = __str__

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "recipe": self.recipe.to_dict(),
            "is_prepared": self.is_prepared,
        }


class MealPlan:
    def __init__(self, profile: Optional[UserProfile] = None):
        self.entries: List[MealPlanEntry] = []
        self._profile = profile

    def add(self, recipe: Recipe, on: date) -> MealPlanEntry:
        entry = MealPlanEntry(recipe, on)
        self.entries.append(entry)
        # stable sort keeps insertion order for the same day
        self.entries.sort(key=lambda e: e.date)
        return entry

    def get(self, entry_id: str) -> Optional[MealPlanEntry]:
        return next((e for e in self.entries if e.id == entry_id), None)

    def remove(self, entry_id: str) -> bool:
        before = len(self.entries)
        self.entries = [e for e in self.entries if e.id != entry_id]
        return len(self.entries) != before

    def mark_completed(self, entry_id: str) -> Optional[MealPlanEntry]:
        '''Marks the meal prepared and records its recipe as completed on the profile.'''
        entry = self.get(entry_id)
        if entry is None:
            return None
        entry.is_prepared = True
        if self._profile is not None:
            self._profile.mark_recipe_completed(entry.recipe)
        return entry

    def upcoming(self, today: Optional[date] = None) -> List[MealPlanEntry]:
        today = today or date.today()
        return [e for e in self.entries if not e.is_prepared and e.date >= today]

    def completed(self) -> List[MealPlanEntry]:
        return sorted((e for e in self.entries if e.is_prepared), key=lambda e: e.date, reverse=True)

    def for_date(self, on: date) -> List[MealPlanEntry]:
        return [e for e in self.entries if e.date == on]

    def to_dict(self):
        return [e.to_dict() for e in self.entries]
