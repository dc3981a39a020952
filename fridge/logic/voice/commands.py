"""Voice command detection over an already-transcribed utterance."""
from __future__ import annotations
from enum import Enum
from typing import Optional

from fridge.domain.Recipe import Recipe

__all__ = ["VoiceCommand", "detect_command", "help_text", "recipe_speech_text"]


class VoiceCommand(str, Enum):
    ADD_ITEM = "add item"
    SCAN_BARCODE = "scan barcode"
    TAKE_PICTURE = "take picture"
    READ_RECIPE = "read recipe"
    LIST_ITEMS = "list items"
    EXPIRING_SOON = "show expiring soon"
    GO_HOME = "go home"
    GO_TO_FRIDGE = "go to fridge"
    GO_TO_RECIPES = "go to recipes"
    GO_TO_SHOPPING_LIST = "go to shopping list"
    HIGH_CONTRAST = "high contrast mode"
    NORMAL_CONTRAST = "normal contrast mode"


def detect_command(transcript: str) -> Optional[VoiceCommand]:
    """First command (in declaration order) whose phrase occurs in the transcript."""
    text = (transcript or "").lower()
    for command in VoiceCommand:
        if command.value in text:
            return command
    return None


def help_text() -> str:
    return "\n".join(f"• {c.value.title()}" for c in VoiceCommand)


def recipe_speech_text(recipe: Recipe) -> str:
    """Read-aloud text: name, ingredients, then numbered steps."""
    text = f"Recipe for {recipe.name}. Ingredients: "
    text += ", ".join(recipe.all_ingredients_display())
    text += ". Instructions: "
    text += ". ".join(f"Step {n}: {step}" for n, step in enumerate(recipe.instructions, start=1))
    return text
