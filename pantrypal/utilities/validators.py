"""
Input validation schemas using Pydantic for pantry item data integrity.
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from pantrypal.utilities.constants import DEFAULT_CATEGORY, MSG_INVALID_EXPIRY, MSG_REQUIRED_FIELDS
from pantrypal.utilities.exceptions import ValidationError


class PantryItemInput(BaseModel):
    """Schema for the mutable fields of a pantry item (add and update)."""
    name: str = Field(..., min_length=1)
    quantity: str = Field(..., min_length=1)
    expiry: date
    category: str = DEFAULT_CATEGORY

    @field_validator('name', 'quantity', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = str(v)
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('expiry', mode='before')
    @classmethod
    def blank_expiry(cls, v):
        """Treat a missing or blank date as missing."""
        if v is None:
            raise ValueError('Expiry date is required')
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError('Expiry date is required')
        return v

    @field_validator('category', mode='before')
    @classmethod
    def normalize_category(cls, v):
        """Empty or missing category falls back to the default tag."""
        if v is None:
            return DEFAULT_CATEGORY
        v = str(v).strip()
        return v or DEFAULT_CATEGORY


class PantryItemPayload(BaseModel):
    """Lenient request body; the pantry decides what is acceptable."""
    name: str = ""
    quantity: str = ""
    expiry: str = ""
    category: Optional[str] = None


class ReceiptInput(BaseModel):
    """Schema for a pasted receipt."""
    text: str = ""


def _is_malformed_date(err) -> bool:
    # pydantic reports unparseable dates as date_parsing, date_from_datetime_parsing, ...
    return err['type'].startswith('date_')


def validate_item_fields(name, quantity, expiry, category=None) -> PantryItemInput:
    """Validate raw item fields, raising the package ValidationError on failure.

    Missing fields win over a malformed expiry when both are wrong.
    """
    try:
        return PantryItemInput(name=name, quantity=quantity, expiry=expiry, category=category)
    except PydanticValidationError as e:
        errors = e.errors()
        details = {
            ".".join(str(part) for part in err['loc']): err['msg']
            for err in errors
        }
        message = MSG_INVALID_EXPIRY if all(_is_malformed_date(err) for err in errors) else MSG_REQUIRED_FIELDS
        raise ValidationError(message, details=details) from e
