"""Exceptions raised by the product store.

Every error names the stage that failed (``operation``) and, where one
is involved, the product ID. The underlying ``sqlite3.Error`` is kept as
``__cause__``.
"""

from __future__ import annotations


class ProductStoreError(Exception):
    """Base class for all product store failures."""

    def __init__(
        self,
        operation: str,
        detail: str = "",
        *,
        product_id: int | None = None,
    ) -> None:
        self.operation = operation
        self.detail = detail
        self.product_id = product_id
        super().__init__(f"{operation}: {detail}" if detail else operation)


class SchemaError(ProductStoreError):
    """The database could not be opened or the table could not be created."""


class QueryError(ProductStoreError):
    """A read query or row iteration failed."""


class NotFoundError(QueryError):
    """No product row exists for the requested ID."""


class InsertError(ProductStoreError):
    """The INSERT statement failed."""


class IdentityRetrievalError(ProductStoreError):
    """The row was inserted but its assigned ID could not be read back."""


class UpdateError(ProductStoreError):
    """The UPDATE statement failed after the existence check passed."""


class DeleteError(ProductStoreError):
    """The DELETE statement failed after the existence check passed."""


class BeginError(ProductStoreError):
    """A batch transaction could not be started."""


class CommitError(ProductStoreError):
    """Every batch step succeeded but COMMIT failed.

    The outcome of the batch is unknown; treat it as failed.
    """


class RollbackError(ProductStoreError):
    """Rolling back a failed batch also failed.

    The final state of that batch's transaction is unknown. ``original``
    holds the error that triggered the rollback.
    """

    def __init__(
        self,
        operation: str,
        detail: str = "",
        *,
        product_id: int | None = None,
        original: BaseException | None = None,
    ) -> None:
        super().__init__(operation, detail, product_id=product_id)
        self.original = original
