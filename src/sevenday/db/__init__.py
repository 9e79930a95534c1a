"""Database layer for sevenday."""

from .engine import get_db_path, init_db
from .repositories import BlockRepository, WeightEntryRepository

__all__ = [
    "BlockRepository",
    "get_db_path",
    "init_db",
    "WeightEntryRepository",
]
