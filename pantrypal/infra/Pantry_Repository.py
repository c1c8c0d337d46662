"""Pantry repository: the whole item collection as one JSON blob under a fixed key."""

import json
import logging
from typing import Iterable, List

from pantrypal.domain.PantryItem import PantryItem
from pantrypal.infra.Key_Value_Store import KeyValueStore
from pantrypal.utilities.config import STORAGE_KEY

logger = logging.getLogger(__name__)


class PantryRepository:
    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY):
        self.store = store
        self.key = key

    def load(self) -> List[PantryItem]:
        """Read the stored collection; missing or unreadable data yields an empty list."""
        raw = self.store.get(self.key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a list, got {type(data).__name__}")
            loaded = [PantryItem.from_dict(entry) for entry in data]
        except (ValueError, KeyError, TypeError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError; deeply nested blobs hit RecursionError
            logger.warning(f"Stored pantry under '{self.key}' is unreadable, starting empty: {e}")
            return []
        items: List[PantryItem] = []
        seen = set()
        for item in loaded:
            if item.id in seen:
                logger.warning(f"Dropping duplicate pantry item id {item.id!r}")
                continue
            seen.add(item.id)
            items.append(item)
        logger.info(f"Loaded {len(items)} pantry items from '{self.key}'")
        return items

    def save(self, items: Iterable[PantryItem]) -> None:
        """Write the full collection. Raises PersistenceError if the store rejects it."""
        payload = json.dumps([item.to_dict() for item in items], ensure_ascii=False)
        self.store.set(self.key, payload)
        logger.debug(f"Saved pantry under '{self.key}' ({len(payload)} chars)")
