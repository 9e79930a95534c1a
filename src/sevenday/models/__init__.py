"""Data models for sevenday."""

from .block import Block, BlockType
from .week import BlockWeekSummary, ProgressWeek, WeekAverage, WeekKey
from .weight_entry import WeightEntry

__all__ = [
    "Block",
    "BlockType",
    "BlockWeekSummary",
    "ProgressWeek",
    "WeekAverage",
    "WeekKey",
    "WeightEntry",
]
