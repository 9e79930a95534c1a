"""CLI commands for sevenday."""

from .clear import clear
from .export import export
from .import_data import import_data
from .init import init
from .log import entries, log
from .plan import plan
from .progress import progress
from .week import week

__all__ = [
    "clear",
    "entries",
    "export",
    "import_data",
    "init",
    "log",
    "plan",
    "progress",
    "week",
]
