"""Database layer for the inventory store."""

from .connection import TABLE_NAME, get_connection, init_db
from .errors import (
    BeginError,
    CommitError,
    DeleteError,
    IdentityRetrievalError,
    InsertError,
    NotFoundError,
    ProductStoreError,
    QueryError,
    RollbackError,
    SchemaError,
    UpdateError,
)
from .models import Product
from .store import ProductStore

__all__ = [
    "TABLE_NAME",
    "get_connection",
    "init_db",
    "Product",
    "ProductStore",
    "ProductStoreError",
    "SchemaError",
    "QueryError",
    "NotFoundError",
    "InsertError",
    "IdentityRetrievalError",
    "UpdateError",
    "DeleteError",
    "BeginError",
    "RollbackError",
    "CommitError",
]
