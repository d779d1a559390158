import logging
from decimal import Decimal
from itertools import count
from typing import Callable, Iterable, Mapping, Optional
from pydantic import ValidationError

from .schemas import DraftItem, InventoryItem

logger = logging.getLogger(__name__)

StoreListener = Callable[[str, InventoryItem], None]


class ItemStore:
    """
    The ordered, in-memory list of inventory records. Single source of truth for a session.

    Ids come from a counter that only moves forward, so deleting an item never frees
    its id for reuse.
    """

    def __init__(self, items: Optional[Iterable[InventoryItem | Mapping]] = None):
        self._items: list[InventoryItem] = []
        self._listeners: list[StoreListener] = []

        for item in items or []:
            if not isinstance(item, InventoryItem):
                item = InventoryItem(**item)
            if self.get(item.id) is not None:
                raise ValueError(f"Duplicate item id in initial data: {item.id}")
            self._items.append(item)

        start = max((item.id for item in self._items), default=0) + 1
        self._ids = count(start)

    # --- Observers ---

    def subscribe(self, listener: StoreListener):
        self._listeners.append(listener)

    def unsubscribe(self, listener: StoreListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, event: str, item: InventoryItem):
        for listener in list(self._listeners):
            listener(event, item)

    # --- Queries ---

    def list(self) -> list[InventoryItem]:
        return list(self._items)

    def get(self, item_id: int) -> InventoryItem | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def __len__(self) -> int:
        return len(self._items)

    def total_value(self) -> Decimal:
        """Full-precision sum of quantity * price. Round only when displaying."""
        return sum((item.total_value for item in self._items), Decimal("0"))

    # --- Commands ---

    def create(self, draft: DraftItem | Mapping) -> InventoryItem | None:
        draft = _as_draft(draft)
        if draft is None:
            return None
        if not draft.is_complete():
            logger.info(f"Add skipped, missing fields: {', '.join(draft.missing_fields())}")
            return None

        item = _validate(draft, item_id=None)
        if item is None:
            return None

        item = item.model_copy(update={"id": next(self._ids)})
        self._items.append(item)
        logger.info(f"Added item {item.id}: '{item.name}' ({item.category})")
        self._notify("created", item)
        return item

    def update(self, item_id: int, draft: DraftItem | Mapping) -> bool:
        draft = _as_draft(draft)
        if draft is None:
            return False
        position = self._position(item_id)
        if position is None:
            logger.warning(f"Update skipped, no item with id {item_id}.")
            return False
        if not draft.is_complete():
            logger.info(f"Update of item {item_id} skipped, missing fields: {', '.join(draft.missing_fields())}")
            return False

        item = _validate(draft, item_id=item_id)
        if item is None:
            return False

        self._items[position] = item
        logger.info(f"Updated item {item_id}: '{item.name}' ({item.category})")
        self._notify("updated", item)
        return True

    def delete(self, item_id: int) -> bool:
        position = self._position(item_id)
        if position is None:
            logger.warning(f"Delete skipped, no item with id {item_id}.")
            return False

        item = self._items.pop(position)
        logger.info(f"Deleted item {item_id}: '{item.name}'")
        self._notify("deleted", item)
        return True

    def _position(self, item_id: int) -> int | None:
        for position, item in enumerate(self._items):
            if item.id == item_id:
                return position
        return None


def _as_draft(draft: DraftItem | Mapping) -> DraftItem | None:
    if isinstance(draft, DraftItem):
        return draft
    # Missing values arrive as None or "", both of which count as not filled in.
    values = {field: "" if value is None else value for field, value in draft.items()}
    try:
        return DraftItem(**values)
    except ValidationError as e:
        logger.warning(f"Draft rejected, fields do not validate:\n{e}")
        return None


def _validate(draft: DraftItem, item_id: int | None) -> InventoryItem | None:
    """Turns a complete draft into an InventoryItem, or logs why it can't."""
    try:
        # Placeholder id 0 for new items; the store assigns the real one.
        return InventoryItem(id=0 if item_id is None else item_id, **draft.model_dump())
    except ValidationError as e:
        logger.warning(f"Item rejected, fields do not validate:\n{e}")
        return None
