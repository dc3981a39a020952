"""
Input validation schemas using Pydantic for the HTTP layer.
"""
from datetime import date as _date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from fridge.domain.FridgeItem import FridgeCategory
from fridge.domain.UserProfile import (
    AllergySeverity, AppAppearance, Cuisine, DietaryPreference, MeasurementSystem, RecipeDifficulty
)


def _strip(v):
    if isinstance(v, str):
        return v.strip()
    return v


class FridgeItemInput(BaseModel):
    """Schema for adding or replacing a fridge item."""
    name: str = Field(..., min_length=1, max_length=100)
    category: FridgeCategory
    expiration_date: _date
    quantity: int = Field(1, ge=1, le=100000)
    id: Optional[str] = Field(None, min_length=1, max_length=64)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        v = _strip(v)
        if not v:
            raise ValueError('Item name cannot be empty')
        return v


class ScanTextInput(BaseModel):
    """Recognized text from an OCR pass, one entry per line."""
    lines: List[str] = Field(default_factory=list)


class ShoppingItemInput(BaseModel):
    """Schema for shopping list item validation."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(1, ge=1)
    note: str = Field("", max_length=200)

    @field_validator('name', 'note')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)


class BudgetEntryInput(BaseModel):
    amount: float = Field(..., ge=0)
    category: FridgeCategory
    note: str = Field("", max_length=200)
    date: Optional[_date] = None


class MonthlyBudgetInput(BaseModel):
    amount: float = Field(..., ge=0)


class MealPlanInput(BaseModel):
    recipe_id: str = Field(..., min_length=1)
    date: _date


class ProfileInput(BaseModel):
    name: str = Field("", max_length=100)
    email: str = Field("", max_length=200)
    birth_date: Optional[_date] = None

    @field_validator('name', 'email')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)


class PreferencesInput(BaseModel):
    """Partial update: only fields that are set are applied."""
    appearance: Optional[AppAppearance] = None
    accent_color: Optional[str] = Field(None, min_length=1, max_length=30)
    measurement_system: Optional[MeasurementSystem] = None
    notifications_enabled: Optional[bool] = None
    expiry_notification_days: Optional[int] = Field(None, ge=0, le=30)
    hide_expired_items: Optional[bool] = None
    auto_sort_by_expiry: Optional[bool] = None
    show_allergy_warnings: Optional[bool] = None
    dietary_preference: Optional[DietaryPreference] = None
    cuisine_preferences: Optional[List[Cuisine]] = None
    difficulty_preference: Optional[RecipeDifficulty] = None
    max_cooking_time: Optional[int] = Field(None, ge=1, le=1440)
    clear_max_cooking_time: bool = False
    exclude_allergies: Optional[bool] = None


class AllergyInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    severity: AllergySeverity = AllergySeverity.MODERATE

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)


class FolderInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class VoiceInput(BaseModel):
    transcript: str = Field(..., max_length=2000)
