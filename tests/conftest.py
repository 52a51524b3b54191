"""Shared test fixtures for Inventory Store."""

import sys
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.inventory.database import Product, ProductStore, init_db


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def temp_db(tmp_path) -> Path:
    """Path to a temporary SQLite database file (not yet created)."""
    return tmp_path / "test_inventory.db"


@pytest.fixture
def db_conn(temp_db):
    """Provide an initialized SQLite connection on temp_db."""
    conn = init_db(temp_db)
    yield conn
    conn.close()


@pytest.fixture
def store(db_conn) -> ProductStore:
    return ProductStore(db_conn)


@pytest.fixture
def sample_product_data() -> dict:
    """Return sample product data for testing."""
    return {
        "name": "Widget",
        "price": 9.99,
        "quantity": 10,
        "category": "tools",
    }


@pytest.fixture
def stocked_store(store) -> tuple[ProductStore, Product, Product]:
    """A store holding a Widget and a Gadget, both in "tools"."""
    widget = Product(name="Widget", price=9.99, quantity=10, category="tools")
    gadget = Product(name="Gadget", price=19.99, quantity=5, category="tools")
    store.create_product(widget)
    store.create_product(gadget)
    return store, widget, gadget
