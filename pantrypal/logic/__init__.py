"""Core business logic layer.

Subpackages:
- pantry: expiry classification, statistics and search over pantry items
- recipes: recipe suggestions from what is on hand
- receipt: turning pasted receipt text into pantry items
"""
__all__ = ["pantry", "recipes", "receipt"]
