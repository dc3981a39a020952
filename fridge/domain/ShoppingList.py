"""ShoppingList aggregate: items to purchase, each with a completion flag."""
from typing import List, Optional
from uuid import uuid4

from fridge.domain.Recipe import Recipe
from fridge.logic.recipes.ingredients import parse_for_shopping_list


class ShoppingItem:
    def __init__(self, name: str, quantity: int = 1, note: str = "",
                 is_completed: bool = False, id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.name = name
        self.quantity = quantity
        self.note = note
        self.is_completed = is_completed

    def __str__(self) -> str:
        mark = "x" if self.is_completed else " "
        return f"[{mark}] {self.name} x{self.quantity}" + (f" ({self.note})" if self.note else "")

    __repr__ = __str__

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "note": self.note,
            "is_completed": self.is_completed,
        }


class ShoppingList:
    def __init__(self):
        self.items: List[ShoppingItem] = []

    def add(self, name: str, quantity: int = 1, note: str = "") -> ShoppingItem:
        '''
        Adds an item to the shopping list.
        '''
        item = ShoppingItem(name=name, quantity=quantity, note=note)
        self.items.append(item)
        return item

    def contains(self, name: str) -> bool:
        wanted = name.lower()
        return any(i.name.lower() == wanted for i in self.items)

    def add_missing_from_recipe(self, recipe: Recipe) -> List[ShoppingItem]:
        '''
        Adds the recipe's missing ingredients, skipping names already on the list.
        '''
        added = []
        for ingredient in recipe.missed_ingredients:
            name, quantity = parse_for_shopping_list(ingredient)
            if not self.contains(name):
                added.append(self.add(name, quantity))
        return added

    def get(self, item_id: str) -> Optional[ShoppingItem]:
        return next((i for i in self.items if i.id == item_id), None)

    def toggle(self, item_id: str) -> Optional[ShoppingItem]:
        item = self.get(item_id)
        if item is not None:
            item.is_completed = not item.is_completed
        return item

    def remove(self, item_id: str) -> bool:
        before = len(self.items)
        self.items = [i for i in self.items if i.id != item_id]
        return len(self.items) != before

    def clear_completed(self) -> int:
        before = len(self.items)
        self.items = [i for i in self.items if not i.is_completed]
        return before - len(self.items)

    def get_items(self) -> List[ShoppingItem]:
        return self.items

    def __str__(self) -> str:
        return "Shopping List:\n\t" + ",\n\t".join(str(i) for i in self.items)

    def to_dict(self):
        return [i.to_dict() for i in self.items]
