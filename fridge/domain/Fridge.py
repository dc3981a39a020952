"""Fridge aggregate: in-memory inventory of FridgeItem objects with sorted/filtered views."""
import logging
from collections import Counter
from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from fridge.domain.FridgeItem import FridgeCategory, FridgeItem
from fridge.events.Event_Bus import (
    EventBus, FRIDGE_EXPIRED_REMOVED, FRIDGE_ITEM_ADDED, FRIDGE_ITEM_REMOVED, FRIDGE_NEAR_EXPIRY
)
from fridge.utilities.constants import WARNING_DAYS

logger = logging.getLogger(__name__)


class SortOption(str, Enum):
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    EXPIRY_ASC = "expiry_asc"
    EXPIRY_DESC = "expiry_desc"
    CATEGORY_ASC = "category_asc"
    CATEGORY_DESC = "category_desc"
    AVAILABILITY_DESC = "availability_desc"


_SORT_KEYS = {
    SortOption.NAME_ASC: (lambda i: i.name.lower(), False),
    SortOption.NAME_DESC: (lambda i: i.name.lower(), True),
    SortOption.EXPIRY_ASC: (lambda i: i.expiration_date, False),
    SortOption.EXPIRY_DESC: (lambda i: i.expiration_date, True),
    SortOption.CATEGORY_ASC: (lambda i: i.category.value, False),
    SortOption.CATEGORY_DESC: (lambda i: i.category.value, True),
    SortOption.AVAILABILITY_DESC: (lambda i: i.quantity, True),
}


class Fridge:
    def __init__(self, event_bus: Optional[EventBus] = None, notification_days: int = WARNING_DAYS):
        self.items: List[FridgeItem] = []
        self._wasted: List[FridgeItem] = []
        self._event_bus = event_bus or EventBus()
        self.notification_days = notification_days

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus: EventBus):
        self._event_bus = bus
        return self

    def _evaluate_item(self, item: FridgeItem, today: Optional[date] = None):
        days_left = item.days_until_expiry(today)
        if 0 <= days_left <= self.notification_days:
            self._event_bus.publish(FRIDGE_NEAR_EXPIRY, {
                "item": item,
                "days_left": days_left,
                "threshold": self.notification_days,
            })

    def scan_and_notify(self, today: Optional[date] = None):
        for item in self.items:
            self._evaluate_item(item, today)
        return self

    # --- CRUD ---------------------------------------------------------------
    def add(self, item: FridgeItem):
        '''
        Appends an item. Identity uniqueness is the caller's responsibility.
        '''
        self.items.append(item)
        self._event_bus.publish(FRIDGE_ITEM_ADDED, {"item": item})
        self._evaluate_item(item)

    def get(self, item_id: str) -> Optional[FridgeItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def remove(self, item_id: str) -> Optional[FridgeItem]:
        '''
        Removes the item with this id; no-op when absent. Returns the removed item.
        '''
        item = self.get(item_id)
        if item is None:
            return None
        self.items = [i for i in self.items if i.id != item_id]
        self._event_bus.publish(FRIDGE_ITEM_REMOVED, {"item": item})
        return item

    def update(self, item: FridgeItem) -> bool:
        '''
        Replaces the item with matching id in place; no-op when absent.
        '''
        for index, current in enumerate(self.items):
            if current.id == item.id:
                self.items[index] = item
                self._evaluate_item(item)
                return True
        return False

    def get_items(self) -> List[FridgeItem]:
        return self.items

    def items_in(self, category: FridgeCategory, sort_option: Optional[SortOption] = None) -> List[FridgeItem]:
        category = FridgeCategory(category)
        items = [i for i in self.items if i.category == category]
        return self._sort(items, sort_option) if sort_option else items

    def sorted_items(self, sort_option: SortOption = SortOption.EXPIRY_ASC) -> List[FridgeItem]:
        return self._sort(self.items, sort_option)

    @staticmethod
    def _sort(items: List[FridgeItem], sort_option: SortOption) -> List[FridgeItem]:
        key, reverse = _SORT_KEYS[SortOption(sort_option)]
        return sorted(items, key=key, reverse=reverse)

    # --- Expiry --------------------------------------------------------------
    def expired_items(self, today: Optional[date] = None) -> List[FridgeItem]:
        return [i for i in self.items if i.is_expired(today)]

    def remove_expired(self, today: Optional[date] = None) -> List[FridgeItem]:
        '''
        Drops every item whose days-until-expiry is negative. Returns the removed items.
        '''
        expired = self.expired_items(today)
        if expired:
            self.items = [i for i in self.items if not i.is_expired(today)]
            self._event_bus.publish(FRIDGE_EXPIRED_REMOVED, {"items": expired, "wasted": False})
            logger.info("Removed %d expired items", len(expired))
        return expired

    def count_expiring(self, category: FridgeCategory, today: Optional[date] = None) -> int:
        return sum(1 for i in self.items_in(category) if i.days_until_expiry(today) <= WARNING_DAYS)

    def next_expiry(self) -> Optional[FridgeItem]:
        if not self.items:
            return None
        return min(self.items, key=lambda i: i.expiration_date)

    def items_needing_attention(self, window: Optional[int] = None, today: Optional[date] = None) -> List[FridgeItem]:
        '''Items not yet expired that expire within the notification window, soonest first.'''
        window = self.notification_days if window is None else window
        attention = [i for i in self.items if 0 <= i.days_until_expiry(today) <= window]
        return sorted(attention, key=lambda i: i.expiration_date)

    def valid_ingredient_names(self, today: Optional[date] = None) -> List[str]:
        return [i.name.lower() for i in self.items if not i.is_expired(today)]

    # --- Waste tracking ---------------------------------------------------------
    def mark_item_as_wasted(self, item_id: str) -> Optional[FridgeItem]:
        item = self.remove(item_id)
        if item is not None:
            self._wasted.append(item)
        return item

    def mark_expired_as_wasted(self, today: Optional[date] = None) -> List[FridgeItem]:
        expired = self.expired_items(today)
        if expired:
            self.items = [i for i in self.items if not i.is_expired(today)]
            self._wasted.extend(expired)
            self._event_bus.publish(FRIDGE_EXPIRED_REMOVED, {"items": expired, "wasted": True})
        return expired

    def waste_statistics(self) -> Dict[FridgeCategory, int]:
        return dict(Counter(i.category for i in self._wasted))

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
