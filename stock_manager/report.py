import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Iterable, Optional

from . import settings, utils
from .schemas import InventoryItem, StockReport, UserSession
from .search import items_in_category

logger = logging.getLogger(__name__)


def _render_item(item: InventoryItem) -> str:
    return (
        "\n"
        f"  Item: {item.name}\n"
        f"  Category: {item.category}\n"
        f"  Quantity: {item.quantity}\n"
        f"  Price: {utils.format_money(item.price)}\n"
        f"  Total Value: {utils.format_money(item.total_value)}\n"
    )


def render_report_text(
    items: list[InventoryItem],
    session: UserSession,
    category: str,
    grand_total: Decimal,
    generated_at: datetime,
) -> str:
    """Lays out the fixed plain-text report. `items` must already be filtered."""
    details = "\n".join(_render_item(item) for item in items)
    return (
        "\n"
        f"Stock Report for {session.display_name}\n"
        f"Generated on: {utils.format_timestamp(generated_at)}\n"
        "\n"
        f"Category: {category}\n"
        f"Total Inventory Value: {utils.format_money(grand_total)}\n"
        "\n"
        "Detailed Stock List:\n"
        f"{details}\n"
    )


def generate_report(
    items: Iterable[InventoryItem],
    session: UserSession,
    category: str = settings.ALL_CATEGORY,
    now: Optional[datetime] = None,
) -> StockReport:
    """
    Builds the valuation report for one category ("All" for the whole store).

    The grand total is summed at full precision and rounded once, so it can differ
    by a cent from adding up the rounded per-item totals.
    """
    generated_at = now or datetime.now()
    selected = items_in_category(items, category)
    grand_total = sum((item.total_value for item in selected), Decimal("0"))

    text = render_report_text(selected, session, category, grand_total, generated_at)
    logger.info(
        f"Generated report for '{category}': {len(selected)} items, total {utils.format_money(grand_total)}"
    )

    return StockReport(
        text=text,
        category=category,
        generated_at=generated_at,
        grand_total=utils.round_money(grand_total),
        item_count=len(selected),
        first_name=session.first_name,
        last_name=session.last_name,
    )


def export_report(report: StockReport, directory: Optional[Path] = None) -> Path:
    """Writes the report text to `directory` (OUTPUT_DIR by default) and returns the path."""
    directory = Path(directory) if directory is not None else settings.OUTPUT_DIR
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / report.filename
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(report.text)

    logger.info(f"✅ Report saved to: {path}")
    return path
