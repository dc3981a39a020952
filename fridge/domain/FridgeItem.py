"""FridgeItem domain entity: name, category, expiration date, quantity; expiry fields derived on read."""
from datetime import date, datetime
from enum import Enum
from typing import Optional
from uuid import uuid4

from fridge.utilities.constants import CRITICAL_DAYS, DATE_FORMAT, WARNING_DAYS


class FridgeCategory(str, Enum):
    VEGETABLES = "vegetables"
    FRUITS = "fruits"
    DAIRY = "dairy"
    MEAT = "meat"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class ExpiryStatus(str, Enum):
    EXPIRED = "expired"
    CRITICAL = "critical"
    WARNING = "warning"
    GOOD = "good"


def classify_days_left(days_left: int) -> ExpiryStatus:
    '''Maps whole days until expiry to its bucket.'''
    if days_left < 0:
        return ExpiryStatus.EXPIRED
    if days_left <= CRITICAL_DAYS:
        return ExpiryStatus.CRITICAL
    if days_left <= WARNING_DAYS:
        return ExpiryStatus.WARNING
    return ExpiryStatus.GOOD


class FridgeItem:
    def __init__(self, name: str, category: FridgeCategory, expiration_date: date,
                 quantity: int = 1, id: Optional[str] = None):
        if quantity < 1:
            raise ValueError(f"Quantity must be positive: {quantity}")
        self.id = id or str(uuid4())
        self.name = name
        self.category = FridgeCategory(category)
        # day granularity only
        if isinstance(expiration_date, datetime):
            expiration_date = expiration_date.date()
        self.expiration_date = expiration_date
        self.quantity = quantity

    def days_until_expiry(self, today: Optional[date] = None) -> int:
        '''Whole days from today to the expiration date (negative once expired).'''
        today = today or date.today()
        return (self.expiration_date - today).days

    def expiry_status(self, today: Optional[date] = None) -> ExpiryStatus:
        return classify_days_left(self.days_until_expiry(today))

    def is_expired(self, today: Optional[date] = None) -> bool:
        return self.days_until_expiry(today) < 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, FridgeItem):
            return NotImplemented
        return (self.id, self.name, self.category, self.expiration_date, self.quantity) == \
            (other.id, other.name, other.category, other.expiration_date, other.quantity)

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (f"{self.name} ({self.category.display_name}) x{self.quantity} - "
                f"Exp: {self.expiration_date.strftime(DATE_FORMAT)}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a FridgeItem from a dictionary. Ignores unknown keys.'''
        d = dict(data)
        exp = d.get("expiration_date")
        if isinstance(exp, str):
            exp = datetime.strptime(exp, DATE_FORMAT).date()
        return FridgeItem(
            name=d.get("name", ""),
            category=FridgeCategory(d.get("category", FridgeCategory.VEGETABLES)),
            expiration_date=exp,
            quantity=int(d.get("quantity", 1)),
            id=d.get("id"),
        )

    def to_dict(self, today: Optional[date] = None):
        '''Serializes the item, including the derived expiry fields for the given day.'''
        days_left = self.days_until_expiry(today)
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "expiration_date": self.expiration_date.strftime(DATE_FORMAT),
            "quantity": self.quantity,
            "days_until_expiry": days_left,
            "status": classify_days_left(days_left).value,
        }
