"""Simple Event Bus / Observer implementation for data store changes.

Event names:
  recipes.changed -> payload {"recipes": tuple[Recipe, ...]}
  pantry.changed  -> payload {"ingredients": tuple[Ingredient, ...]}

Subscribers are callables taking (event_name, payload). A bus is created by
the composition root and handed to the store; there is no module-level
instance.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
RECIPES_CHANGED = "recipes.changed"
PANTRY_CHANGED = "pantry.changed"
ALL_EVENTS = (RECIPES_CHANGED, PANTRY_CHANGED)

Listener = Callable[[str, Any], None]


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Listener]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Listener):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Listener):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def subscriber_count(self, event_name: str) -> int:
		return len(self._subscribers.get(event_name, []))

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("[EventBus] Error delivering %s to %r", event_name, cb)


__all__ = ['EventBus', 'Listener', 'RECIPES_CHANGED', 'PANTRY_CHANGED', 'ALL_EVENTS']
