"""PantryItem domain entity: one tracked food entry with its expiry date."""
from datetime import date, datetime
from typing import Optional

from pantrypal.utilities.constants import DEFAULT_CATEGORY


def _parse_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip())


class PantryItem:
    def __init__(self, id: str, name: str, quantity: str, expiry: date,
                 category: str = DEFAULT_CATEGORY, date_added: Optional[date] = None):
        self.id = id
        self.name = name
        self.quantity = quantity
        self.expiry = expiry
        self.category = category or DEFAULT_CATEGORY
        self.date_added = date_added or date.today()

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} - {self.category} - Exp: {self.expiry.isoformat()}"

    def __repr__(self) -> str:
        return f"PantryItem(id={self.id!r}, name={self.name!r}, expiry={self.expiry.isoformat()})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, PantryItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    @staticmethod
    def from_dict(data):
        '''Creates a PantryItem from its stored dictionary. Raises on missing or malformed fields.'''
        if not isinstance(data, dict):
            raise ValueError(f"Pantry entry must be an object, got {type(data).__name__}")
        item_id = data["id"]
        if not isinstance(item_id, str) or not item_id:
            raise ValueError(f"Invalid item id: {item_id!r}")
        return PantryItem(
            id=item_id,
            name=str(data["name"]),
            quantity=str(data["quantity"]),
            expiry=_parse_date(data["expiry"]),
            category=str(data.get("category") or DEFAULT_CATEGORY),
            date_added=_parse_date(data["dateAdded"]) if data.get("dateAdded") else None,
        )

    def to_dict(self):
        '''Converts the item to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "expiry": self.expiry.isoformat(),
            "category": self.category,
            "dateAdded": self.date_added.isoformat(),
        }
