"""Pasted receipt text -> new pantry items.

Each non-blank line of the receipt becomes one item named after the trimmed
line, with a default quantity, the default category and an expiry one week
(RECEIPT_DEFAULT_EXPIRY_DAYS) after the reference date.
"""
from __future__ import annotations
import logging
from datetime import date, timedelta
from typing import List, Optional, TYPE_CHECKING

from pantrypal.utilities.config import RECEIPT_DEFAULT_EXPIRY_DAYS
from pantrypal.utilities.constants import DEFAULT_CATEGORY, RECEIPT_DEFAULT_QUANTITY

if TYPE_CHECKING:
    from pantrypal.domain.Pantry import Pantry

__all__ = ["parse_receipt", "default_expiry", "import_receipt"]

logger = logging.getLogger(__name__)


def parse_receipt(raw_text: Optional[str]) -> List[str]:
    """Split receipt text into item names, dropping blank lines."""
    if not raw_text:
        return []
    names = []
    for line in raw_text.splitlines():
        name = line.strip()
        if name:
            names.append(name)
    return names


def default_expiry(reference_date: Optional[date] = None) -> date:
    return (reference_date or date.today()) + timedelta(days=RECEIPT_DEFAULT_EXPIRY_DAYS)


def import_receipt(pantry: "Pantry", raw_text: Optional[str], reference_date: Optional[date] = None) -> int:
    """Add one item per receipt line. Returns how many items were added.

    Blank input adds nothing and leaves the pantry untouched.
    """
    if not raw_text or not raw_text.strip():
        logger.info("Receipt import skipped: no text")
        return 0
    expiry = default_expiry(reference_date)
    entries = [
        {'name': name, 'quantity': RECEIPT_DEFAULT_QUANTITY, 'expiry': expiry, 'category': DEFAULT_CATEGORY}
        for name in parse_receipt(raw_text)
    ]
    created = pantry.add_batch(entries, source='receipt')
    logger.info(f"Imported {len(created)} items from receipt")
    return len(created)
