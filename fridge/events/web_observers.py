"""Web-facing observer for fridge events.

EventLog subscribes to an EventBus and keeps a bounded in-memory buffer of
recent events that the HTTP layer exposes for polling.

  * Each event gets an auto-increment integer id (cursor) so clients can
    request only newer events (since=<last_id_seen>).
  * A Lock guards the buffer; FastAPI runs sync endpoints in a threadpool.
  * max_events caps memory use.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import (
    EventBus, FRIDGE_ITEM_ADDED, FRIDGE_ITEM_REMOVED, FRIDGE_NEAR_EXPIRY, FRIDGE_EXPIRED_REMOVED
)

MAX_EVENTS = 300
WATCHED_EVENTS = (FRIDGE_ITEM_ADDED, FRIDGE_ITEM_REMOVED, FRIDGE_NEAR_EXPIRY, FRIDGE_EXPIRED_REMOVED)


class EventLog:
    def __init__(self, max_events: int = MAX_EVENTS):
        self.max_events = max_events
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self._bus: Optional[EventBus] = None

    def attach(self, bus: EventBus) -> "EventLog":
        """Idempotent: subscribe to the watched events of one bus."""
        if self._bus is bus:
            return self
        for name in WATCHED_EVENTS:
            bus.subscribe(name, self.record)
        self._bus = bus
        return self

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        evt: Dict[str, Any] = {
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat(),
        }
        # Normalize payload fields we care about for UI
        if isinstance(payload, dict):
            item = payload.get('item')
            if item is not None and hasattr(item, 'name'):
                evt['item_id'] = item.id
                evt['name'] = item.name
                evt['category'] = item.category.value
                evt['quantity'] = item.quantity
            items = payload.get('items')
            if items is not None:
                evt['names'] = [i.name for i in items]
                evt['count'] = len(items)
            for k in ('days_left', 'threshold', 'wasted'):
                if k in payload:
                    evt[k] = payload[k]
        with self._lock:
            evt['id'] = self._next_id
            self._next_id += 1
            self._events.append(evt)
            if len(self._events) > self.max_events:
                del self._events[: len(self._events) - self.max_events]

    def get_events(self, since: int | None = None) -> Dict[str, Any]:
        """Return events newer than 'since' (exclusive).

        If since is None, returns the whole buffer. next_cursor is the largest
        id seen so the client can poll with since=next_cursor.
        """
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['EventLog', 'MAX_EVENTS', 'WATCHED_EVENTS']
