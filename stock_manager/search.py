from typing import Iterable

from . import settings
from .schemas import InventoryItem


def filter_items(items: Iterable[InventoryItem], query: str) -> list[InventoryItem]:
    """
    Case-insensitive substring match against name or category, order preserved.
    An empty query returns everything.
    """
    items = list(items)
    if not query:
        return items

    needle = query.lower()
    return [
        item
        for item in items
        if needle in item.name.lower() or needle in item.category.lower()
    ]


def categories(items: Iterable[InventoryItem]) -> list[str]:
    """The "All" sentinel followed by each distinct category, in first-seen order."""
    # dict keeps insertion order, so this de-duplicates without re-sorting.
    seen = dict.fromkeys(item.category for item in items)
    seen.pop(settings.ALL_CATEGORY, None)
    return [settings.ALL_CATEGORY, *seen]


def items_in_category(items: Iterable[InventoryItem], category: str) -> list[InventoryItem]:
    if category == settings.ALL_CATEGORY:
        return list(items)
    return [item for item in items if item.category == category]
