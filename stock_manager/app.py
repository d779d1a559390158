import logging
from decimal import Decimal
from pathlib import Path
from typing import Callable, Optional

from . import report as report_module
from . import settings
from .draft import DraftBuffer
from .schemas import InventoryItem, StockReport, UserSession
from .search import categories, filter_items
from .session import SessionGate
from .store import ItemStore

logger = logging.getLogger(__name__)

ChangeListener = Callable[[str], None]


class StockApp:
    """
    Owns every piece of state for one session: the item store, the edit form, the
    login gate, the search box, the report category and the last generated report.

    A presentation layer drives it through the methods below and re-renders whenever
    a listener registered with `subscribe` is told something changed. Change names
    are "stock", "draft", "editor", "search", "category", "report" and "session".
    """

    def __init__(self, items: Optional[list] = None, load_seed_data: Optional[bool] = None):
        if items is None:
            seed = settings.LOAD_SEED_DATA if load_seed_data is None else load_seed_data
            items = settings.SEED_ITEMS if seed else []

        self.store = ItemStore(items)
        self.editor = DraftBuffer()
        self.gate = SessionGate()

        self.search_term = ""
        self.selected_category = settings.ALL_CATEGORY
        self.editing_id: int | None = None
        self.is_editor_open = False
        self.report: StockReport | None = None

        self._listeners: list[ChangeListener] = []
        self.store.subscribe(self._on_store_change)

    # --- Observers ---

    def subscribe(self, listener: ChangeListener):
        self._listeners.append(listener)

    def unsubscribe(self, listener: ChangeListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, change: str):
        for listener in list(self._listeners):
            listener(change)

    def _on_store_change(self, event: str, item: InventoryItem):
        self._notify("stock")

    # --- Session ---

    @property
    def session(self) -> UserSession:
        return self.gate.session

    def login(self, first_name: str, last_name: str) -> bool:
        if self.gate.login(first_name, last_name):
            self._notify("session")
            return True
        return False

    # --- Edit surface ---

    def open_add(self):
        self.editor.reset()
        self.editing_id = None
        self.is_editor_open = True
        self._notify("editor")

    def open_edit(self, item_id: int) -> bool:
        item = self.store.get(item_id)
        if item is None:
            logger.warning(f"Edit skipped, no item with id {item_id}.")
            return False

        self.editor.load(item)
        self.editing_id = item_id
        self.is_editor_open = True
        self._notify("editor")
        return True

    def close(self):
        """Closes the edit surface and throws away the draft."""
        self.editor.reset()
        self.editing_id = None
        self.is_editor_open = False
        self._notify("editor")

    def set_field(self, field: str, text: str) -> bool:
        accepted = self.editor.set_field(field, text)
        if accepted:
            self._notify("draft")
        return accepted

    def commit(self) -> bool:
        """
        Adds the draft as a new item, or writes it over the item being edited.
        Leaves the edit surface open when nothing was committed.
        """
        if not self.is_editor_open:
            logger.debug("Commit ignored, the edit surface is closed.")
            return False

        draft = self.editor.draft
        if self.editing_id is not None:
            committed = self.store.update(self.editing_id, draft)
        else:
            committed = self.store.create(draft) is not None

        if not committed:
            return False

        self.editor.reset()
        self.editing_id = None
        self.is_editor_open = False
        self._notify("editor")
        return True

    def delete(self, item_id: int) -> bool:
        return self.store.delete(item_id)

    # --- Derived views ---

    def set_search(self, query: str):
        self.search_term = query
        self._notify("search")

    def visible_items(self) -> list[InventoryItem]:
        return filter_items(self.store.list(), self.search_term)

    def categories(self) -> list[str]:
        return categories(self.store.list())

    def total_value(self) -> Decimal:
        return self.store.total_value()

    # --- Reporting ---

    def select_category(self, category: str):
        self.selected_category = category
        self._notify("category")

    def generate_report(self, now=None) -> StockReport:
        """Builds a report for the selected category, replacing any previous one."""
        self.report = report_module.generate_report(
            self.store.list(), self.session, self.selected_category, now=now
        )
        self._notify("report")
        return self.report

    def export_report(self, directory: Optional[Path] = None) -> Path | None:
        if self.report is None:
            logger.info("Nothing to export, no report has been generated yet.")
            return None
        return report_module.export_report(self.report, directory)
