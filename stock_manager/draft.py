import logging
from typing import Optional

from . import utils
from .schemas import DRAFT_FIELDS, DraftItem, InventoryItem

logger = logging.getLogger(__name__)


class DraftBuffer:
    """
    Holds the in-progress field values of the add/edit form.

    Numeric fields only accept keystrokes that still parse; anything else is dropped
    and the previous value stays. An empty string is always allowed so the user can
    clear a field.
    """

    def __init__(self, item: Optional[InventoryItem] = None):
        self.draft = DraftItem()
        if item is not None:
            self.load(item)

    def reset(self):
        self.draft = DraftItem()

    def load(self, item: InventoryItem):
        self.draft = DraftItem(
            name=item.name,
            quantity=item.quantity,
            price=item.price,
            category=item.category,
        )

    def set_field(self, field: str, text: str) -> bool:
        """
        Applies one edit to `field`. Returns False when the input was dropped.
        """
        if field not in DRAFT_FIELDS:
            raise KeyError(f"Unknown draft field: {field}")

        if field == "quantity":
            value = "" if text == "" else utils.parse_leading_int(text)
        elif field == "price":
            value = "" if text == "" else utils.parse_leading_decimal(text)
        else:
            value = text

        if value is None:
            logger.debug(f"Ignored input {text!r} for '{field}', keeping {getattr(self.draft, field)!r}")
            return False

        setattr(self.draft, field, value)
        return True

    def is_complete(self) -> bool:
        return self.draft.is_complete()

    def missing_fields(self) -> list[str]:
        return self.draft.missing_fields()
