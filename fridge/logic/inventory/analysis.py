"""Fridge analysis helpers: snapshot dictionaries for the summary and alert views."""
from __future__ import annotations
from datetime import date as _date
from typing import List, Dict, Any, Iterable, Optional

from fridge.domain.Fridge import Fridge
from fridge.domain.FridgeItem import ExpiryStatus, FridgeCategory, FridgeItem

__all__ = ["compute_expiring_soon", "compute_status_counts", "compute_fridge_summary"]


def compute_expiring_soon(fridge: Fridge, *, window: int | None = None,
                          today: Optional[_date] = None) -> List[Dict[str, Any]]:
    """Snapshot of the items needing attention (not expired, expiring in <= window days), soonest first."""
    today = today or _date.today()
    result: List[Dict[str, Any]] = []
    for item in fridge.items_needing_attention(window, today):
        result.append({
            'id': item.id,
            'name': item.name,
            'quantity': item.quantity,
            'category': item.category.value,
            'exp': item.expiration_date.isoformat(),
            'days_left': item.days_until_expiry(today),
            'status': item.expiry_status(today).value,
        })
    result.sort(key=lambda x: (x['days_left'], x['name'].lower()))
    return result


def compute_status_counts(items: Iterable[FridgeItem], today: Optional[_date] = None) -> Dict[str, int]:
    counts = {status.value: 0 for status in ExpiryStatus}
    for item in items:
        counts[item.expiry_status(today).value] += 1
    return counts


def compute_fridge_summary(fridge: Fridge, today: Optional[_date] = None) -> Dict[str, Any]:
    """Per-category totals and expiring counts, plus the overall status breakdown."""
    today = today or _date.today()
    categories = {}
    for category in FridgeCategory:
        categories[category.value] = {
            'count': len(fridge.items_in(category)),
            'expiring': fridge.count_expiring(category, today),
        }
    next_item = fridge.next_expiry()
    return {
        'total': len(fridge),
        'categories': categories,
        'statuses': compute_status_counts(fridge.get_items(), today),
        'next_expiry': next_item.to_dict(today) if next_item else None,
    }
