"""Transient user-facing notices built from pantry events.

NoticeBoard subscribes to an EventBus and turns pantry events into short
messages for the View layer. Notices mirror a toast: only the most recent
one is live, and it is dismissed after ``ttl`` seconds.

Each notice carries an auto-increment integer id (cursor) so a polling
client can ask only for notices newer than the last one it has shown.
"""
from __future__ import annotations
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from .Event_Bus import (
    EventBus, PANTRY_ITEM_ADDED, PANTRY_ITEM_UPDATED, PANTRY_ITEM_REMOVED,
    PANTRY_ITEMS_ADDED, PANTRY_PERSIST_FAILED, PANTRY_NOTICE,
)
from pantrypal.utilities.config import NOTICE_TTL_SECONDS
from pantrypal.utilities.constants import (
    NOTICE_SUCCESS, NOTICE_ERROR, MSG_SAVE_FAILED, MSG_ITEM_UPDATED,
    MSG_ITEM_DELETED, MSG_ITEM_USED,
)


def publish_notice(bus: EventBus, message: str, kind: str = NOTICE_SUCCESS) -> None:
    """Publish a free-form notice (used by the API layer for rejected requests)."""
    bus.publish(PANTRY_NOTICE, {'message': message, 'kind': kind})


def _describe(event_name: str, payload: Any) -> Optional[Dict[str, str]]:
    payload = payload or {}
    if event_name == PANTRY_ITEM_ADDED:
        return {'message': f"{payload['item'].name} added to pantry!", 'kind': NOTICE_SUCCESS}
    if event_name == PANTRY_ITEM_UPDATED:
        return {'message': MSG_ITEM_UPDATED, 'kind': NOTICE_SUCCESS}
    if event_name == PANTRY_ITEM_REMOVED:
        message = MSG_ITEM_USED if payload.get('reason') == 'used' else MSG_ITEM_DELETED
        return {'message': message, 'kind': NOTICE_SUCCESS}
    if event_name == PANTRY_ITEMS_ADDED:
        where = "from receipt" if payload.get('source') == 'receipt' else "to pantry"
        return {'message': f"{payload['count']} items added {where}!", 'kind': NOTICE_SUCCESS}
    if event_name == PANTRY_PERSIST_FAILED:
        return {'message': MSG_SAVE_FAILED, 'kind': NOTICE_ERROR}
    if event_name == PANTRY_NOTICE:
        return {'message': payload.get('message', ''), 'kind': payload.get('kind', NOTICE_SUCCESS)}
    return None


class NoticeBoard:
    EVENTS = (
        PANTRY_ITEM_ADDED, PANTRY_ITEM_UPDATED, PANTRY_ITEM_REMOVED,
        PANTRY_ITEMS_ADDED, PANTRY_PERSIST_FAILED, PANTRY_NOTICE,
    )

    def __init__(self, ttl: float = NOTICE_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._notices: List[Dict[str, Any]] = []
        self._next_id = 1

    def attach(self, bus: EventBus) -> "NoticeBoard":
        for event_name in self.EVENTS:
            bus.subscribe(event_name, self._record)
        return self

    def detach(self, bus: EventBus) -> None:
        for event_name in self.EVENTS:
            bus.unsubscribe(event_name, self._record)

    def _record(self, event_name: str, payload: Any):  # signature expected by EventBus
        described = _describe(event_name, payload)
        if not described:
            return
        notice = {
            'id': self._next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat(),
            '_at': self._clock(),
            **described,
        }
        self._next_id += 1
        # A new notice replaces whatever was showing
        self._notices = [notice]

    def get_notices(self, since: int | None = None) -> Dict[str, Any]:
        """Return live notices newer than 'since' (exclusive) plus the cursor to poll with next."""
        now = self._clock()
        live = [n for n in self._notices if now - n['_at'] < self.ttl]
        if since is not None:
            live = [n for n in live if n['id'] > since]
        data = [{k: v for k, v in n.items() if k != '_at'} for n in live]
        next_cursor = self._next_id - 1 if self._next_id > 1 else (since or 0)
        return {'notices': data, 'next_cursor': next_cursor}

    def latest(self) -> Optional[Dict[str, Any]]:
        notices = self.get_notices()['notices']
        return notices[-1] if notices else None


__all__ = ['NoticeBoard', 'publish_notice']
