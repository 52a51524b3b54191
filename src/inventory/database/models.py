"""Data models for the inventory storage layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

# Column order used by every read query
PRODUCT_COLUMNS = ("id", "name", "price", "quantity", "category")


@dataclass
class Product:
    """An inventory item. ``id`` is assigned by the store on creation."""

    name: str
    price: float
    quantity: int
    category: str
    id: int | None = None

    @classmethod
    def from_row(cls, row: Sequence) -> Product:
        """Build a Product from a row laid out as PRODUCT_COLUMNS."""
        product_id, name, price, quantity, category = row
        return cls(
            name=name,
            price=price,
            quantity=quantity,
            category=category,
            id=product_id,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
            "category": self.category,
        }
