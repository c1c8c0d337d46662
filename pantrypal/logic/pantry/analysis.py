"""Pantry analysis helpers.

Expiry classification, display labels and statistics derived from the
current item collection. All day counts are calendar-date differences.
"""
from __future__ import annotations
from datetime import date as _date
from enum import Enum
from typing import Iterable, List, Dict, Any, NamedTuple, Optional
from pantrypal.domain.PantryItem import PantryItem
from pantrypal.utilities.config import EXPIRING_SOON_DAYS

__all__ = [
    "ExpiryStatus", "PantryStats", "days_until_expiry", "classify_expiry",
    "format_expiry_label", "format_display_date", "format_category",
    "matches_search", "compute_stats", "compute_expiring_soon",
]


class ExpiryStatus(str, Enum):
    EXPIRED = "expired"
    EXPIRING_SOON = "expiring-soon"
    FRESH = "fresh"


class PantryStats(NamedTuple):
    total: int
    expiring_soon: int
    expired: int


def days_until_expiry(expiry: _date, reference_date: Optional[_date] = None) -> int:
    reference = reference_date or _date.today()
    return (expiry - reference).days


def classify_expiry(item: PantryItem, reference_date: Optional[_date] = None) -> ExpiryStatus:
    days_left = days_until_expiry(item.expiry, reference_date)
    if days_left < 0:
        return ExpiryStatus.EXPIRED
    if days_left <= EXPIRING_SOON_DAYS:
        return ExpiryStatus.EXPIRING_SOON
    return ExpiryStatus.FRESH


def format_display_date(d: _date) -> str:
    """Short US-style date, e.g. 1/20/2024."""
    return f"{d.month}/{d.day}/{d.year}"


def format_expiry_label(item: PantryItem, reference_date: Optional[_date] = None) -> str:
    days_left = days_until_expiry(item.expiry, reference_date)
    if days_left < 0:
        return f"Expired {abs(days_left)} days ago"
    if days_left == 0:
        return "Expires today"
    if days_left == 1:
        return "Expires tomorrow"
    if days_left <= EXPIRING_SOON_DAYS:
        return f"Expires in {days_left} days"
    return f"Expires {format_display_date(item.expiry)}"


def format_category(category: str) -> str:
    return category[:1].upper() + category[1:]


def matches_search(item: PantryItem, term: Optional[str]) -> bool:
    """Case-insensitive substring match on name or category; a blank term matches everything."""
    needle = (term or "").strip().lower()
    if not needle:
        return True
    return needle in item.name.lower() or needle in item.category.lower()


def compute_stats(items: Iterable[PantryItem], reference_date: Optional[_date] = None) -> PantryStats:
    reference = reference_date or _date.today()
    total = expiring_soon = expired = 0
    for item in items:
        total += 1
        status = classify_expiry(item, reference)
        if status is ExpiryStatus.EXPIRED:
            expired += 1
        elif status is ExpiryStatus.EXPIRING_SOON:
            expiring_soon += 1
    return PantryStats(total=total, expiring_soon=expiring_soon, expired=expired)


def compute_expiring_soon(items: Iterable[PantryItem], reference_date: Optional[_date] = None) -> List[Dict[str, Any]]:
    """Return items that are expired or expiring soon, most urgent first."""
    reference = reference_date or _date.today()
    result: List[Dict[str, Any]] = []
    for item in items:
        status = classify_expiry(item, reference)
        if status is ExpiryStatus.FRESH:
            continue
        result.append({
            'id': item.id,
            'name': item.name,
            'quantity': item.quantity,
            'category': item.category,
            'exp': item.expiry.isoformat(),
            'days_left': days_until_expiry(item.expiry, reference),
            'status': status.value,
        })
    result.sort(key=lambda x: (x['days_left'], x['name']))
    return result
