"""
Inventory Store: SQLite-backed product inventory.

Modules:
- database: product table, ProductStore data-access layer, error types
- common: shared configuration and logging
- main: command line entry point
"""

__version__ = "0.1.0"
