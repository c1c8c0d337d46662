from fastapi import APIRouter, Depends

from pantrypal.api.dependencies import get_pantry
from pantrypal.domain.Pantry import Pantry
from pantrypal.logic.receipt.parser import import_receipt
from pantrypal.utilities.constants import MSG_EMPTY_RECEIPT
from pantrypal.utilities.exceptions import ValidationError
from pantrypal.utilities.validators import ReceiptInput

router = APIRouter(prefix="/api", tags=["receipt"])


@router.post("/receipt")
def process_receipt(payload: ReceiptInput, pantry: Pantry = Depends(get_pantry)):
    added = import_receipt(pantry, payload.text, pantry.today())
    if added == 0:
        raise ValidationError(MSG_EMPTY_RECEIPT, details={'added': 0})
    return {'added': added, 'total': len(pantry)}
