"""Recipe domain entity: a suggestion built from a Spoonacular result plus its details."""
from typing import List, Optional
from uuid import uuid4

from fridge.utilities.constants import DEFAULT_COOKING_MINUTES


class RecipeIngredient:
    def __init__(self, name: str, quantity: float = 1.0, unit: str = ""):
        self.name = name
        self.quantity = quantity
        self.unit = unit

    def __str__(self) -> str:
        return f"{self.quantity:g} {self.unit} {self.name}".replace("  ", " ").strip()

    __repr__ = __str__

    def to_dict(self):
        return {"name": self.name, "quantity": self.quantity, "unit": self.unit}

    @staticmethod
    def from_dict(data):
        return RecipeIngredient(data.get("name", ""), float(data.get("quantity", 1.0)), data.get("unit", ""))


class Recipe:
    def __init__(self, name: str = "", image_url: str = "",
                 used_ingredients: Optional[List[str]] = None,
                 missed_ingredients: Optional[List[str]] = None,
                 used_ingredients_display: Optional[List[str]] = None,
                 missed_ingredients_display: Optional[List[str]] = None,
                 ingredients: Optional[List[RecipeIngredient]] = None,
                 cooking_time: int = DEFAULT_COOKING_MINUTES, difficulty: str = "",
                 instructions: Optional[List[str]] = None,
                 spoonacular_id: Optional[int] = None, id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.name = name
        self.image_url = image_url
        self.used_ingredients = used_ingredients[:] if used_ingredients else []
        self.missed_ingredients = missed_ingredients[:] if missed_ingredients else []
        # Display lists default to the raw strings
        self.used_ingredients_display = (used_ingredients_display[:] if used_ingredients_display
                                         else self.used_ingredients[:])
        self.missed_ingredients_display = (missed_ingredients_display[:] if missed_ingredients_display
                                           else self.missed_ingredients[:])
        self.ingredients = ingredients[:] if ingredients else []
        self.cooking_time = cooking_time
        self.difficulty = difficulty
        self.instructions = instructions[:] if instructions else []
        self.spoonacular_id = spoonacular_id

    def all_ingredients(self) -> List[str]:
        return self.used_ingredients + self.missed_ingredients

    def all_ingredients_display(self) -> List[str]:
        return self.used_ingredients_display + self.missed_ingredients_display

    def __eq__(self, other) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"{self.name} - {self.cooking_time} min - {self.difficulty}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        d['ingredients'] = [RecipeIngredient.from_dict(i) for i in d.get('ingredients', [])]
        allowed = {"name", "image_url", "used_ingredients", "missed_ingredients",
                   "used_ingredients_display", "missed_ingredients_display", "ingredients",
                   "cooking_time", "difficulty", "instructions", "spoonacular_id", "id"}
        return Recipe(**{k: v for k, v in d.items() if k in allowed})

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "image_url": self.image_url,
            "used_ingredients": self.used_ingredients,
            "missed_ingredients": self.missed_ingredients,
            "used_ingredients_display": self.used_ingredients_display,
            "missed_ingredients_display": self.missed_ingredients_display,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "cooking_time": self.cooking_time,
            "difficulty": self.difficulty,
            "instructions": self.instructions,
            "spoonacular_id": self.spoonacular_id,
        }
