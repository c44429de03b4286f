"""Event helper utilities.

Helpers for publishing data store events on an explicit bus.

Quick import:
    from dinner.events.event_helpers import (
        publish_recipes_changed, publish_pantry_changed,
        RECIPES_CHANGED, PANTRY_CHANGED
    )
"""
from __future__ import annotations
from typing import Iterable

from .Event_Bus import EventBus, RECIPES_CHANGED, PANTRY_CHANGED

__all__ = [
    'publish_recipes_changed', 'publish_pantry_changed',
    'RECIPES_CHANGED', 'PANTRY_CHANGED'
]


def publish_recipes_changed(bus: EventBus, recipes: Iterable):
    """Publish a recipes.changed event with a snapshot of the catalog."""
    bus.publish(RECIPES_CHANGED, {'recipes': tuple(recipes)})


def publish_pantry_changed(bus: EventBus, ingredients: Iterable):
    """Publish a pantry.changed event with a snapshot of the pantry."""
    bus.publish(PANTRY_CHANGED, {'ingredients': tuple(ingredients)})
