"""CLI entry point for the inventory store.

Usage:
    python -m src.inventory.main init
    python -m src.inventory.main add "Widget" 9.99 10 tools
    python -m src.inventory.main list --category tools
    python -m src.inventory.main restock 1=3 2=0
    python -m src.inventory.main --db /tmp/inventory.db delete 1
"""

from __future__ import annotations

import argparse
import json
import logging

from .common.config import settings
from .common.logging import setup_logging
from .database import Product, ProductStore, ProductStoreError, init_db

logger = logging.getLogger(__name__)


def _parse_restock(pairs: list[str]) -> dict[int, int]:
    """Turn ["1=3", "2=0"] into {1: 3, 2: 0}."""
    updates: dict[int, int] = {}
    for pair in pairs:
        product_id, sep, quantity = pair.partition("=")
        try:
            if not sep:
                raise ValueError("missing '='")
            product_id, quantity = int(product_id), int(quantity)
        except ValueError:
            raise argparse.ArgumentTypeError(f"expected ID=QUANTITY, got {pair!r}")
        if product_id in updates:
            raise argparse.ArgumentTypeError(f"product {product_id} listed more than once")
        updates[product_id] = quantity
    return updates


def _print_json(data) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inventory Store")
    parser.add_argument(
        "--db",
        type=str,
        help=f"SQLite database path (default: {settings.database.db_path})",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init", help="Create the products table")

    for name in ("add", "update"):
        p = sub.add_parser(name, help=f"{name.capitalize()} a product")
        if name == "update":
            p.add_argument("id", type=int)
        p.add_argument("name")
        p.add_argument("price", type=float)
        p.add_argument("quantity", type=int)
        p.add_argument("category")

    for name in ("get", "delete"):
        p = sub.add_parser(name, help=f"{name.capitalize()} a product by ID")
        p.add_argument("id", type=int)

    p = sub.add_parser("list", help="List products")
    p.add_argument("--category", default="", help="Only this category")

    p = sub.add_parser("restock", help="Set several quantities atomically")
    p.add_argument("pairs", nargs="+", metavar="ID=QUANTITY")

    return parser


def _run(store: ProductStore, args: argparse.Namespace, updates: dict[int, int]) -> None:
    if args.command == "add":
        product = Product(args.name, args.price, args.quantity, args.category)
        store.create_product(product)
        _print_json(product.to_dict())
    elif args.command == "get":
        _print_json(store.get_product(args.id).to_dict())
    elif args.command == "update":
        product = Product(args.name, args.price, args.quantity, args.category, id=args.id)
        store.update_product(product)
        _print_json(product.to_dict())
    elif args.command == "delete":
        store.delete_product(args.id)
        _print_json({"deleted": args.id})
    elif args.command == "list":
        _print_json([p.to_dict() for p in store.list_products(args.category)])
    elif args.command == "restock":
        store.batch_update_inventory(updates)
        _print_json({"updated": sorted(updates)})


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    updates: dict[int, int] = {}
    if args.command == "restock":
        try:
            updates = _parse_restock(args.pairs)
        except argparse.ArgumentTypeError as exc:
            parser.error(str(exc))

    setup_logging(settings.logging.level, settings.logging.logger_name)

    try:
        conn = init_db(args.db)
    except ProductStoreError as exc:
        logger.error("Could not open database: %s", exc)
        return 1

    try:
        if args.command != "init":
            _run(ProductStore(conn), args, updates)
    except ProductStoreError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
