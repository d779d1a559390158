import argparse
import logging

from stock_manager import settings, utils
from stock_manager.app import StockApp
from stock_manager.logger import setup_logger
from stock_manager.views import category_totals, stock_table

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the stock list and write a valuation report.")
    parser.add_argument("first_name")
    parser.add_argument("last_name")
    parser.add_argument("--category", default=settings.ALL_CATEGORY, help="Report category (default: All)")
    parser.add_argument("--search", default="", help="Only list items whose name or category matches")
    parser.add_argument("--no-seed", action="store_true", help="Start with an empty stock list")
    parser.add_argument("--output-dir", default=None, help="Where to write the report file")
    parser.add_argument("--quiet", action="store_true", help="Log to the file only")
    return parser.parse_args(argv)


def run_process(argv=None):
    """Logs in, shows the stock table, then generates and saves the report."""
    args = parse_args(argv)
    setup_logger(console=not args.quiet)

    app = StockApp(load_seed_data=False if args.no_seed else None)
    if not app.login(args.first_name, args.last_name):
        logger.error("❌ First and last name are required. Aborting.")
        return None

    app.set_search(args.search)
    visible = app.visible_items()

    logger.info("\n--- Stock List ---")
    if visible:
        logger.info(stock_table(visible).to_string(index=False))
    else:
        logger.warning("No items match the current search.")
    logger.info(f"\nTotal Inventory Value: {utils.format_money(app.total_value())}")

    if len(app.store):
        logger.info("\n--- Value by Category ---")
        logger.info(category_totals(app.store.list()).to_string(index=False))

    if args.category not in app.categories():
        logger.warning(f"⚠️ Category '{args.category}' has no items; the report will be empty.")
    app.select_category(args.category)
    app.generate_report()
    logger.info(app.report.text)

    path = app.export_report(args.output_dir)
    logger.info("\n--- Process Finished Successfully ---")
    return path


if __name__ == "__main__":
    run_process()
