from typing import Final

DEFAULT_CATEGORY: Final[str] = "other"
RECEIPT_DEFAULT_QUANTITY: Final[str] = "1"

# Categories offered by the add/edit forms; any other tag is accepted as-is
CATEGORIES: Final[tuple[str, ...]] = (
    'fruits', 'vegetables', 'dairy', 'meat', 'seafood', 'grains',
    'canned', 'frozen', 'snacks', 'beverages', 'condiments', 'other',
)

NOTICE_SUCCESS: Final[str] = "success"
NOTICE_ERROR: Final[str] = "error"

MSG_REQUIRED_FIELDS: Final[str] = "Please fill in all required fields"
MSG_INVALID_EXPIRY: Final[str] = "Please enter a valid expiry date"
MSG_EMPTY_RECEIPT: Final[str] = "Please enter some items from your receipt"
MSG_SAVE_FAILED: Final[str] = "Error saving data. Please try again."
MSG_ITEM_UPDATED: Final[str] = "Item updated successfully!"
MSG_ITEM_DELETED: Final[str] = "Item deleted!"
MSG_ITEM_USED: Final[str] = "Item marked as used!"
MSG_ITEM_NOT_FOUND: Final[str] = "Item not found"
