"""Week-level value types derived from entries and blocks."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from functools import total_ordering

from ..utils.dates import start_of_week, week_range_string
from .block import BlockType


@total_ordering
@dataclass(frozen=True)
class WeekKey:
    """Identifies a Monday-to-Sunday week.

    Built from any date in the week; two dates are in the same week iff
    their keys are equal.
    """

    monday: date

    def __init__(self, value: date | datetime):
        object.__setattr__(self, "monday", start_of_week(value))

    @property
    def sunday(self) -> date:
        return self.monday + timedelta(days=6)

    @property
    def range_string(self) -> str:
        return week_range_string(self.monday)

    def __lt__(self, other: "WeekKey") -> bool:
        if not isinstance(other, WeekKey):
            return NotImplemented
        return self.monday < other.monday


@dataclass(frozen=True)
class WeekAverage:
    """Mean, count and spread of the weights logged in one week."""

    week_key: WeekKey
    average: float
    count: int
    min: float
    max: float


@dataclass(frozen=True)
class ProgressWeek:
    """A week's average paired with the goal of the block covering it."""

    week_average: WeekAverage
    goal: float | None = None
    block_type: BlockType | None = None

    @property
    def delta(self) -> float | None:
        """Actual minus goal, or None outside any block."""
        if self.goal is None:
            return None
        return self.week_average.average - self.goal


@dataclass(frozen=True)
class BlockWeekSummary:
    """Goal versus actual for one week of a block."""

    week_index: int
    week_key: WeekKey
    goal: float
    actual: float | None = None
    entry_count: int = 0

    @property
    def delta(self) -> float | None:
        if self.actual is None:
            return None
        return self.actual - self.goal
