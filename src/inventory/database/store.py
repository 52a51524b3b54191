"""ProductStore: data-access layer over the products table.

Wraps an already-open, already-migrated SQLite connection (see
``connection.init_db``). Single-row mutations are guarded by an explicit
existence check, and ``batch_update_inventory`` applies many quantity
changes in one all-or-nothing transaction.

Usage:
    from src.inventory.database import ProductStore, init_db

    store = ProductStore(init_db("data/inventory.db"))
    widget = Product(name="Widget", price=9.99, quantity=10, category="tools")
    store.create_product(widget)
    store.batch_update_inventory({widget.id: 3})
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Mapping

from .connection import TABLE_NAME
from .errors import (
    BeginError,
    CommitError,
    DeleteError,
    IdentityRetrievalError,
    InsertError,
    NotFoundError,
    QueryError,
    RollbackError,
    UpdateError,
)
from .models import PRODUCT_COLUMNS, Product

logger = logging.getLogger(__name__)

_SELECT_SQL = f"SELECT {', '.join(PRODUCT_COLUMNS)} FROM {TABLE_NAME}"


class ProductStore:
    """Create, read, update, delete and batch-restock products.

    The store holds no state besides the connection: no caching and no
    locking of its own. A ``sqlite3.Connection`` belongs to the thread
    that opened it, and a batch's BEGIN covers every statement issued on
    that connection, so each thread needs its own connection and store.
    Stores on separate connections to one database file are serialized
    by SQLite's transaction isolation.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    # === Single-row operations ===

    def create_product(self, product: Product) -> None:
        """Insert a product and set ``product.id`` to the assigned ID.

        Any ID already on ``product`` is ignored and overwritten.

        Raises:
            InsertError: the INSERT failed.
            IdentityRetrievalError: the new row's ID could not be read.
        """
        try:
            cursor = self._conn.execute(
                f"INSERT INTO {TABLE_NAME} (name, price, quantity, category) "
                "VALUES (?, ?, ?, ?)",
                (product.name, product.price, product.quantity, product.category),
            )
            self._conn.commit()
        except sqlite3.Error as exc:
            self._rollback("insert product", exc)
            raise InsertError("insert product", str(exc)) from exc

        new_id = cursor.lastrowid
        if not new_id:
            raise IdentityRetrievalError(
                "get product id", f"no row id reported for {product.name!r}"
            )
        product.id = new_id
        logger.info("Created product %d (%s, %s)", new_id, product.name, product.category)

    def get_product(self, product_id: int) -> Product:
        """Fetch one product by ID.

        Raises:
            NotFoundError: no row has this ID.
            QueryError: the query itself failed.
        """
        try:
            row = self._conn.execute(
                f"{_SELECT_SQL} WHERE id = ?", (product_id,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise QueryError("get product", str(exc), product_id=product_id) from exc

        if row is None:
            raise NotFoundError(
                "get product", f"no product with id {product_id}", product_id=product_id
            )
        logger.debug("Fetched product %s", product_id)
        return Product.from_row(row)

    def update_product(self, product: Product) -> None:
        """Overwrite name, price, quantity and category of an existing product.

        Raises:
            NotFoundError / QueryError: the existence check failed; nothing
                was written.
            UpdateError: the UPDATE failed.
        """
        self.get_product(product.id)

        try:
            self._conn.execute(
                f"UPDATE {TABLE_NAME} SET name = ?, price = ?, quantity = ?, category = ? "
                "WHERE id = ?",
                (product.name, product.price, product.quantity, product.category, product.id),
            )
            self._conn.commit()
        except sqlite3.Error as exc:
            self._rollback("update product", exc, product.id)
            raise UpdateError("update product", str(exc), product_id=product.id) from exc
        logger.info("Updated product %d", product.id)

    def delete_product(self, product_id: int) -> None:
        """Remove an existing product.

        Raises:
            NotFoundError / QueryError: the existence check failed.
            DeleteError: the DELETE failed.
        """
        self.get_product(product_id)

        try:
            self._conn.execute(f"DELETE FROM {TABLE_NAME} WHERE id = ?", (product_id,))
            self._conn.commit()
        except sqlite3.Error as exc:
            self._rollback("delete product", exc, product_id)
            raise DeleteError("delete product", str(exc), product_id=product_id) from exc
        logger.info("Deleted product %d", product_id)

    def list_products(self, category: str = "") -> list[Product]:
        """Return all products, or only those in ``category`` when non-empty.

        Rows come back in SQLite's native order, which is unspecified.
        An empty list is a normal result.

        Raises:
            QueryError: the query or the row iteration failed. Rows read
                before the failure are discarded.
        """
        query = _SELECT_SQL
        params: tuple = ()
        if category:
            query += " WHERE category = ?"
            params = (category,)

        try:
            products = [Product.from_row(row) for row in self._conn.execute(query, params)]
        except sqlite3.Error as exc:
            raise QueryError("list products", str(exc)) from exc

        logger.debug("Listed %d products (category=%r)", len(products), category)
        return products

    # === Batch operation ===

    def batch_update_inventory(self, updates: Mapping[int, int]) -> None:
        """Set the quantity of several products in one transaction.

        Either every quantity in ``updates`` is applied or none is. Pairs
        are processed in mapping iteration order, which only decides
        which failure gets reported first.

        Raises:
            BeginError: the transaction could not be started.
            NotFoundError / QueryError: an ID failed its existence check;
                the batch was rolled back.
            UpdateError: a quantity write failed; the batch was rolled back.
            RollbackError: rolling back after a failure also failed; the
                batch's effect is unknown.
            CommitError: all writes succeeded but COMMIT failed; treat the
                batch as failed.
        """
        try:
            self._conn.execute("BEGIN")
        except sqlite3.Error as exc:
            raise BeginError("begin batch transaction", str(exc)) from exc

        try:
            for product_id, quantity in updates.items():
                self._apply_quantity(product_id, quantity)
        except BaseException as exc:
            self._rollback("batch update inventory", exc, getattr(exc, "product_id", None))
            raise

        try:
            self._conn.commit()
        except sqlite3.Error as exc:
            logger.error("Commit of batch (%d products) failed: %s", len(updates), exc)
            self._rollback("commit batch", exc)
            raise CommitError("commit batch", str(exc)) from exc

        logger.info("Batch updated quantity of %d products", len(updates))

    def _apply_quantity(self, product_id: int, quantity: int) -> None:
        """Existence check plus quantity write for one batch pair."""
        try:
            self.get_product(product_id)
        except QueryError as exc:
            raise type(exc)(
                "batch get product", exc.detail, product_id=product_id
            ) from exc

        try:
            self._conn.execute(
                f"UPDATE {TABLE_NAME} SET quantity = ? WHERE id = ?",
                (quantity, product_id),
            )
        except sqlite3.Error as exc:
            raise UpdateError(
                "batch update quantity", str(exc), product_id=product_id
            ) from exc

    def _rollback(
        self,
        operation: str,
        original: BaseException,
        product_id: int | None = None,
    ) -> None:
        """Discard the pending transaction after ``original`` failed.

        Raises:
            RollbackError: the rollback failed; the transaction's final
                state is unknown.
        """
        logger.warning("Rolling back %s: %s", operation, original)
        try:
            self._conn.rollback()
        except sqlite3.Error as exc:
            logger.error("Rollback of %s failed: %s", operation, exc)
            raise RollbackError(
                f"rollback {operation}",
                str(exc),
                product_id=product_id,
                original=original,
            ) from exc
