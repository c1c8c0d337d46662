"""Pantry aggregate: the ordered item collection, its mutations and derived views.

The pantry loads its items once from a PantryRepository and writes the whole
collection back after every mutation. Changes are announced on an EventBus so
the View layer can show notices without the pantry knowing about presentation.
"""
import logging
from datetime import date
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Any
from uuid import uuid4

from pantrypal.domain.PantryItem import PantryItem
from pantrypal.events.Event_Bus import (
    EventBus, PANTRY_ITEM_ADDED, PANTRY_ITEMS_ADDED, PANTRY_ITEM_UPDATED, PANTRY_ITEM_REMOVED, PANTRY_PERSIST_FAILED,
)
from pantrypal.infra.Pantry_Repository import PantryRepository
from pantrypal.logic.pantry.analysis import PantryStats, compute_stats, compute_expiring_soon
from pantrypal.logic.pantry.search import ItemQuery
from pantrypal.utilities.constants import MSG_ITEM_NOT_FOUND
from pantrypal.utilities.exceptions import NotFoundError, PersistenceError
from pantrypal.utilities.validators import validate_item_fields

logger = logging.getLogger(__name__)


class Pantry:
    def __init__(self, repository: PantryRepository, event_bus: Optional[EventBus] = None,
                 today: Callable[[], date] = date.today):
        self.repository = repository
        self.event_bus = event_bus or EventBus()
        self._today = today
        self.items: List[PantryItem] = repository.load()

    def today(self) -> date:
        return self._today()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[PantryItem]:
        return iter(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Items:\n\t{items_str}"

    # --- Persistence -------------------------------------------------------
    def persist(self) -> bool:
        '''
        Writes the whole collection. A failed write is logged and announced;
        the in-memory collection stays as it is.
        '''
        try:
            self.repository.save(self.items)
            return True
        except PersistenceError as e:
            logger.error(f"Failed to persist pantry ({len(self.items)} items): {e}")
            self.event_bus.publish(PANTRY_PERSIST_FAILED, {'error': e})
            return False

    # --- Mutations ---------------------------------------------------------
    def _new_id(self, taken: Iterable[str] = ()) -> str:
        existing = {item.id for item in self.items}
        existing.update(taken)
        while True:
            candidate = uuid4().hex
            if candidate not in existing:
                return candidate

    def _build(self, name, quantity, expiry, category, taken: Iterable[str] = ()) -> PantryItem:
        fields = validate_item_fields(name, quantity, expiry, category)
        return PantryItem(
            id=self._new_id(taken),
            name=fields.name,
            quantity=fields.quantity,
            expiry=fields.expiry,
            category=fields.category,
            date_added=self.today(),
        )

    def add(self, name: str, quantity: str, expiry, category: Optional[str] = None) -> PantryItem:
        '''
        Adds a new item. Raises ValidationError if name, quantity or expiry is blank.
        '''
        item = self._build(name, quantity, expiry, category)
        self.items.append(item)
        logger.info(f"Added pantry item {item.id} ({item.name})")
        self.event_bus.publish(PANTRY_ITEM_ADDED, {'item': item})
        self.persist()
        return item

    def add_batch(self, entries: Iterable[Dict[str, Any]], source: str = 'batch') -> List[PantryItem]:
        '''
        Adds several items with a single write. Every entry is validated before
        any of them enters the collection.
        '''
        created: List[PantryItem] = []
        for entry in entries:
            item = self._build(entry.get('name'), entry.get('quantity'), entry.get('expiry'),
                               entry.get('category'), taken=[c.id for c in created])
            created.append(item)
        if not created:
            return created
        self.items.extend(created)
        logger.info(f"Added {len(created)} pantry items in one batch ({source})")
        self.event_bus.publish(PANTRY_ITEMS_ADDED, {'count': len(created), 'items': created, 'source': source})
        self.persist()
        return created

    def _index_of(self, item_id: str) -> int:
        for index, item in enumerate(self.items):
            if item.id == item_id:
                return index
        raise NotFoundError(MSG_ITEM_NOT_FOUND, details={'id': item_id})

    def get(self, item_id: str) -> PantryItem:
        return self.items[self._index_of(item_id)]

    def update(self, item_id: str, name: str, quantity: str, expiry, category: Optional[str] = None) -> PantryItem:
        '''
        Replaces every mutable field of an item in place; id and dateAdded are kept.
        '''
        item = self.get(item_id)
        fields = validate_item_fields(name, quantity, expiry, category)
        item.name = fields.name
        item.quantity = fields.quantity
        item.expiry = fields.expiry
        item.category = fields.category
        logger.info(f"Updated pantry item {item.id}")
        self.event_bus.publish(PANTRY_ITEM_UPDATED, {'item': item})
        self.persist()
        return item

    def _remove(self, item_id: str, reason: str) -> PantryItem:
        item = self.items.pop(self._index_of(item_id))
        logger.info(f"Removed pantry item {item_id} ({reason})")
        self.event_bus.publish(PANTRY_ITEM_REMOVED, {'item': item, 'reason': reason})
        self.persist()
        return item

    def delete(self, item_id: str) -> None:
        self._remove(item_id, 'deleted')

    def mark_used(self, item_id: str) -> PantryItem:
        '''Removes a consumed item; same effect as delete.'''
        return self._remove(item_id, 'used')

    # --- Queries -----------------------------------------------------------
    def list(self, search_term: Optional[str] = None) -> ItemQuery:
        '''
        Items whose name or category contains search_term (case-insensitive),
        in insertion order.
        '''
        return ItemQuery(self.items, search_term)

    def stats(self, reference_date: Optional[date] = None) -> PantryStats:
        return compute_stats(self.items, reference_date or self.today())

    def expiring(self, reference_date: Optional[date] = None) -> List[Dict[str, Any]]:
        return compute_expiring_soon(self.items, reference_date or self.today())
