"""Core business logic layer.

Modules:
- matching: recipe availability against the pantry
- store: the data store owning recipes and pantry ingredients
"""
__all__ = ["matching", "store"]
