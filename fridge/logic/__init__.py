"""Core business logic layer.

Subpackages:
- scanning: OCR date tokens, barcode product guesses
- recipes: ingredient-string parsing and profile-based recipe filtering
- inventory: expiry snapshots for the alert/summary views
- voice: command detection over transcribed speech
"""
__all__ = ["scanning", "recipes", "inventory", "voice"]
