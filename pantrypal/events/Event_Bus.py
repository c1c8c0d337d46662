"""Simple Event Bus / Observer implementation for pantry changes.

Event names:
  pantry.item_added -> payload {"item": PantryItem}
  pantry.item_updated -> payload {"item": PantryItem}
  pantry.item_removed -> payload {"item": PantryItem, "reason": "deleted" | "used"}
  pantry.items_added -> payload {"count": int, "items": [PantryItem, ...], "source": str}
  pantry.persist_failed -> payload {"error": PersistenceError}
  pantry.notice -> payload {"message": str, "kind": "success" | "error"}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PANTRY_ITEM_ADDED = "pantry.item_added"
PANTRY_ITEM_UPDATED = "pantry.item_updated"
PANTRY_ITEM_REMOVED = "pantry.item_removed"
PANTRY_ITEMS_ADDED = "pantry.items_added"
PANTRY_PERSIST_FAILED = "pantry.persist_failed"
PANTRY_NOTICE = "pantry.notice"


Subscriber = Callable[[str, Any], None]


class EventBus:
	"""Synchronous in-process dispatch; one failing subscriber never blocks the rest."""

	def __init__(self):
		self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Subscriber) -> None:
		listeners = self._subscribers[event_name]
		if callback not in listeners:
			listeners.append(callback)

	def unsubscribe(self, event_name: str, callback: Subscriber) -> None:
		listeners = self._subscribers.get(event_name)
		if listeners and callback in listeners:
			listeners.remove(callback)

	def publish(self, event_name: str, payload: Any = None) -> int:
		"""Deliver payload to every subscriber of event_name; returns how many took it."""
		delivered = 0
		for listener in tuple(self._subscribers.get(event_name, ())):
			try:
				listener(event_name, payload)
			except Exception:
				logger.exception("Subscriber %r failed on %s", listener, event_name)
				continue
			delivered += 1
		return delivered


__all__ = [
	'EventBus', 'Subscriber',
	'PANTRY_ITEM_ADDED', 'PANTRY_ITEM_UPDATED', 'PANTRY_ITEM_REMOVED',
	'PANTRY_ITEMS_ADDED', 'PANTRY_PERSIST_FAILED', 'PANTRY_NOTICE',
]
