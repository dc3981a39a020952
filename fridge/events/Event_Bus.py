"""Simple Event Bus / Observer implementation for fridge alerts.

Event names:
  fridge.item_added      -> payload {"item": FridgeItem}
  fridge.item_removed    -> payload {"item": FridgeItem}
  fridge.near_expiry     -> payload {"item": FridgeItem, "days_left": int, "threshold": int}
  fridge.expired_removed -> payload {"items": [FridgeItem, ...], "wasted": bool}

Subscribers are callables taking (event_name, payload). The bus is an ordinary
object: construct one per application and hand it to whoever publishes.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
FRIDGE_ITEM_ADDED = "fridge.item_added"
FRIDGE_ITEM_REMOVED = "fridge.item_removed"
FRIDGE_NEAR_EXPIRY = "fridge.near_expiry"
FRIDGE_EXPIRED_REMOVED = "fridge.expired_removed"

Subscriber = Callable[[str, Any], None]


class EventBus:
    def __init__(self):
        self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)

    def subscribe(self, event_name: str, callback: Subscriber):
        if callback not in self._subscribers[event_name]:
            self._subscribers[event_name].append(callback)

    def unsubscribe(self, event_name: str, callback: Subscriber):
        try:
            self._subscribers[event_name].remove(callback)
        except (ValueError, KeyError):
            pass

    def publish(self, event_name: str, payload: Any = None):
        for cb in list(self._subscribers.get(event_name, [])):
            try:
                cb(event_name, payload)
            except Exception:
                logger.exception("Error delivering %s to %r", event_name, cb)


__all__ = [
    'EventBus', 'Subscriber',
    'FRIDGE_ITEM_ADDED', 'FRIDGE_ITEM_REMOVED', 'FRIDGE_NEAR_EXPIRY', 'FRIDGE_EXPIRED_REMOVED',
]
