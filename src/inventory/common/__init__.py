# Common utilities and shared modules
"""
Shared components used by the database layer and the CLI:
- Project configuration
- Logging configuration
"""

from .config import settings, PROJECT_ROOT, DATA_DIR
from .logging import setup_logging

__all__ = [
    "settings",
    "PROJECT_ROOT",
    "DATA_DIR",
    "setup_logging",
]
