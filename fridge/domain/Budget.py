"""Budget aggregate: grocery expenses against an optional monthly target."""
import calendar
from collections import defaultdict
from datetime import date
from enum import Enum
from typing import Dict, List, Optional
from uuid import uuid4

from fridge.domain.FridgeItem import FridgeCategory


class BudgetLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    OVER = "over"


class BudgetEntry:
    def __init__(self, amount: float, category: FridgeCategory, note: str = "",
                 on: Optional[date] = None, id: Optional[str] = None):
        if amount < 0:
            raise ValueError(f"Amount cannot be negative: {amount}")
        self.id = id or str(uuid4())
        self.amount = float(amount)
        self.category = FridgeCategory(category)
        self.note = note
        self.date = on or date.today()

    def to_dict(self):
        return {
            "id": self.id,
            "amount": round(self.amount, 2),
            "category": self.category.value,
            "note": self.note,
            "date": self.date.isoformat(),
        }


class Budget:
    def __init__(self, monthly_budget: float = 0.0):
        self.entries: List[BudgetEntry] = []
        self.monthly_budget = monthly_budget

    def add_entry(self, amount: float, category: FridgeCategory, note: str = "",
                  on: Optional[date] = None) -> BudgetEntry:
        entry = BudgetEntry(amount, category, note, on)
        self.entries.append(entry)
        return entry

    def remove_entry(self, entry_id: str) -> bool:
        before = len(self.entries)
        self.entries = [e for e in self.entries if e.id != entry_id]
        return len(self.entries) != before

    def set_monthly_budget(self, amount: float):
        if amount < 0:
            raise ValueError(f"Monthly budget cannot be negative: {amount}")
        self.monthly_budget = float(amount)

    def current_month_spending(self, today: Optional[date] = None) -> float:
        today = today or date.today()
        return sum(e.amount for e in self.entries
                   if e.date.year == today.year and e.date.month == today.month)

    def spending_by_category(self) -> Dict[FridgeCategory, float]:
        result: Dict[FridgeCategory, float] = defaultdict(float)
        for entry in self.entries:
            result[entry.category] += entry.amount
        return dict(result)

    def remaining(self, today: Optional[date] = None) -> Optional[float]:
        '''Budget left this month, clamped at zero; None when no budget is set.'''
        if self.monthly_budget <= 0:
            return None
        return max(0.0, self.monthly_budget - self.current_month_spending(today))

    def usage_ratio(self, today: Optional[date] = None) -> float:
        return self.current_month_spending(today) / max(1.0, self.monthly_budget)

    def usage_level(self, today: Optional[date] = None) -> BudgetLevel:
        ratio = self.usage_ratio(today)
        if ratio < 0.5:
            return BudgetLevel.LOW
        if ratio < 0.75:
            return BudgetLevel.MODERATE
        if ratio < 1.0:
            return BudgetLevel.HIGH
        return BudgetLevel.OVER

    def average_daily_spending(self, today: Optional[date] = None) -> float:
        today = today or date.today()
        return self.current_month_spending(today) / today.day

    @staticmethod
    def days_left_in_month(today: Optional[date] = None) -> int:
        '''Days remaining in the month, today included.'''
        today = today or date.today()
        days_in_month = calendar.monthrange(today.year, today.month)[1]
        return days_in_month - today.day + 1

    def summary(self, today: Optional[date] = None):
        today = today or date.today()
        spending = self.current_month_spending(today)
        by_category = self.spending_by_category()
        return {
            "monthly_budget": round(self.monthly_budget, 2),
            "current_month_spending": round(spending, 2),
            "remaining": None if self.remaining(today) is None else round(self.remaining(today), 2),
            "usage_level": self.usage_level(today).value,
            "average_daily_spending": round(self.average_daily_spending(today), 2),
            "days_left_in_month": self.days_left_in_month(today),
            "spending_by_category": {c.value: round(v, 2) for c, v in by_category.items()},
            "entries": [e.to_dict() for e in sorted(self.entries, key=lambda e: e.date, reverse=True)],
        }
