from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from pantrypal.api.dependencies import get_pantry
from pantrypal.domain.Pantry import Pantry
from pantrypal.domain.PantryItem import PantryItem
from pantrypal.logic.pantry.analysis import (
    classify_expiry, days_until_expiry, format_expiry_label, format_category,
)
from pantrypal.logic.receipt.parser import default_expiry
from pantrypal.utilities.constants import CATEGORIES
from pantrypal.utilities.validators import PantryItemPayload

router = APIRouter(prefix="/api", tags=["pantry"])


def serialize_item(item: PantryItem, reference_date: date) -> dict:
    data = item.to_dict()
    data.update({
        'status': classify_expiry(item, reference_date).value,
        'days_left': days_until_expiry(item.expiry, reference_date),
        'expiry_label': format_expiry_label(item, reference_date),
        'category_label': format_category(item.category),
    })
    return data


@router.get("/items")
def list_items(search: Optional[str] = Query(default=None), pantry: Pantry = Depends(get_pantry)):
    today = pantry.today()
    items = [serialize_item(item, today) for item in pantry.list(search)]
    return {'items': items, 'count': len(items), 'total': len(pantry), 'search': search or ''}


@router.get("/items/{item_id}")
def get_item(item_id: str, pantry: Pantry = Depends(get_pantry)):
    return serialize_item(pantry.get(item_id), pantry.today())


@router.post("/items", status_code=201)
def add_item(payload: PantryItemPayload, pantry: Pantry = Depends(get_pantry)):
    item = pantry.add(payload.name, payload.quantity, payload.expiry, payload.category)
    return serialize_item(item, pantry.today())


@router.put("/items/{item_id}")
def update_item(item_id: str, payload: PantryItemPayload, pantry: Pantry = Depends(get_pantry)):
    item = pantry.update(item_id, payload.name, payload.quantity, payload.expiry, payload.category)
    return serialize_item(item, pantry.today())


@router.delete("/items/{item_id}")
def delete_item(item_id: str, pantry: Pantry = Depends(get_pantry)):
    pantry.delete(item_id)
    return {'status': 'deleted', 'id': item_id}


@router.post("/items/{item_id}/used")
def mark_item_used(item_id: str, pantry: Pantry = Depends(get_pantry)):
    item = pantry.mark_used(item_id)
    return {'status': 'used', 'id': item.id, 'name': item.name}


@router.get("/stats")
def pantry_stats(pantry: Pantry = Depends(get_pantry)):
    return pantry.stats()._asdict()


@router.get("/expiring")
def expiring_items(pantry: Pantry = Depends(get_pantry)):
    items = pantry.expiring()
    return {'items': items, 'count': len(items)}


@router.get("/defaults")
def form_defaults(pantry: Pantry = Depends(get_pantry)):
    """Values used to prefill the add-item form."""
    return {'expiry': default_expiry(pantry.today()).isoformat(), 'categories': list(CATEGORIES)}
