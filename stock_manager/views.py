from decimal import Decimal
from typing import Iterable
import pandas as pd

from . import utils
from .schemas import InventoryItem

TABLE_COLUMNS = ["Name", "Quantity", "Price", "Category"]


def items_to_frame(items: Iterable[InventoryItem]) -> pd.DataFrame:
    """
    One row per item, columns named by the schema aliases (ID, Name, ...).
    The schema's field order is the source of truth for the column order.
    """
    columns = [info.alias for info in InventoryItem.model_fields.values()]
    rows = [item.model_dump(by_alias=True) for item in items]
    return pd.DataFrame(rows, columns=columns)


def stock_table(items: Iterable[InventoryItem]) -> pd.DataFrame:
    """The item list as shown to the user, prices formatted to two decimals."""
    df = items_to_frame(items)
    df["Price"] = df["Price"].map(utils.format_money)
    return df[TABLE_COLUMNS].reset_index(drop=True)


def category_totals(items: Iterable[InventoryItem]) -> pd.DataFrame:
    """Item count, units and stock value per category, in first-seen category order."""
    totals: dict[str, dict] = {}
    for item in items:
        row = totals.setdefault(
            item.category,
            {"Category": item.category, "Items": 0, "Quantity": 0, "Value": Decimal("0")},
        )
        row["Items"] += 1
        row["Quantity"] += item.quantity
        row["Value"] += item.total_value

    df = pd.DataFrame(list(totals.values()), columns=["Category", "Items", "Quantity", "Value"])
    df["Value"] = df["Value"].map(utils.round_money)
    return df
