"""
Pytest configuration and fixtures for the stock manager tests
"""
from datetime import datetime
import pytest

from stock_manager import settings
from stock_manager.app import StockApp
from stock_manager.schemas import InventoryItem, UserSession
from stock_manager.store import ItemStore


@pytest.fixture
def seed_items():
    """The three demo items a fresh session starts with"""
    return [InventoryItem(**row) for row in settings.SEED_ITEMS]


@pytest.fixture
def store(seed_items):
    return ItemStore(seed_items)


@pytest.fixture
def empty_store():
    return ItemStore()


@pytest.fixture
def session():
    return UserSession(first_name="Ada", last_name="Lovelace", logged_in=True)


@pytest.fixture
def fixed_now():
    return datetime(2026, 10, 19, 15, 4, 5)


@pytest.fixture
def app():
    """A seeded app with a logged-in user"""
    app = StockApp(load_seed_data=True)
    app.login("Ada", "Lovelace")
    return app


@pytest.fixture
def complete_draft():
    return {"name": "Sprocket", "quantity": "12", "price": "3.25", "category": "Parts"}
