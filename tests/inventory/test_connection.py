"""Tests for database bootstrap and the Product model."""

from __future__ import annotations

import sqlite3

import pytest

from src.inventory.database.connection import TABLE_NAME, get_connection, init_db
from src.inventory.database.errors import SchemaError
from src.inventory.database.models import Product


class TestDatabaseInit:
    """Test database schema initialization."""

    def test_init_creates_products_table(self, db_conn):
        cursor = db_conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name"
        )
        tables = [row["name"] for row in cursor.fetchall()]
        assert TABLE_NAME in tables

    def test_column_order(self, db_conn):
        columns = [row["name"] for row in db_conn.execute(f"PRAGMA table_info({TABLE_NAME})")]
        assert columns == ["id", "name", "price", "quantity", "category"]

    def test_init_is_idempotent(self, temp_db):
        # Calling init_db again should not raise
        init_db(temp_db).close()
        init_db(temp_db).close()

    def test_init_creates_parent_directory(self, tmp_path):
        db_file = tmp_path / "nested" / "dir" / "inventory.db"
        conn = init_db(db_file)
        conn.close()
        assert db_file.exists()

    def test_in_memory_database(self):
        conn = init_db(":memory:")
        try:
            row = conn.execute(f"SELECT COUNT(*) FROM {TABLE_NAME}").fetchone()
            assert row[0] == 0
        finally:
            conn.close()

    def test_wal_mode(self, db_conn):
        row = db_conn.execute("PRAGMA journal_mode").fetchone()
        assert row[0] == "wal"

    def test_row_factory(self, temp_db):
        conn = get_connection(temp_db)
        try:
            assert conn.row_factory is sqlite3.Row
        finally:
            conn.close()

    def test_not_null_enforced(self, db_conn):
        with pytest.raises(sqlite3.IntegrityError):
            db_conn.execute(
                f"INSERT INTO {TABLE_NAME} (name, price, quantity, category) VALUES (?, ?, ?, ?)",
                (None, 1.0, 1, "tools"),
            )

    def test_unopenable_path_raises_schema_error(self, tmp_path):
        # A directory cannot be opened as a database file
        with pytest.raises(SchemaError) as exc_info:
            init_db(tmp_path)
        assert isinstance(exc_info.value.__cause__, sqlite3.Error)


class TestProductModel:
    """Test data model mapping."""

    def test_from_row_tuple(self):
        p = Product.from_row((7, "Widget", 9.99, 10, "tools"))
        assert p == Product(name="Widget", price=9.99, quantity=10, category="tools", id=7)

    def test_from_sqlite_row(self, db_conn):
        db_conn.execute(
            f"INSERT INTO {TABLE_NAME} (name, price, quantity, category) VALUES (?, ?, ?, ?)",
            ("Widget", 9.99, 10, "tools"),
        )
        row = db_conn.execute(
            f"SELECT id, name, price, quantity, category FROM {TABLE_NAME}"
        ).fetchone()
        p = Product.from_row(row)
        assert p.id == 1
        assert p.category == "tools"

    def test_to_dict(self):
        d = Product(name="Widget", price=9.99, quantity=10, category="tools", id=1).to_dict()
        assert d == {
            "id": 1,
            "name": "Widget",
            "price": 9.99,
            "quantity": 10,
            "category": "tools",
        }
