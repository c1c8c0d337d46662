"""Search view over the pantry collection."""
from __future__ import annotations
from typing import Iterator, Optional, Sequence

from pantrypal.domain.PantryItem import PantryItem
from pantrypal.logic.pantry.analysis import matches_search

__all__ = ["ItemQuery"]


class ItemQuery:
    """Lazy filtered view of a pantry collection.

    Every iteration walks the underlying sequence from the start, so the view
    can be iterated any number of times and always reflects current state.
    """

    def __init__(self, items: Sequence[PantryItem], term: Optional[str] = None):
        self._items = items
        self.term = (term or "").strip()

    def __iter__(self) -> Iterator[PantryItem]:
        for item in self._items:
            if matches_search(item, self.term):
                yield item

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def __repr__(self) -> str:
        return f"ItemQuery(term={self.term!r})"
