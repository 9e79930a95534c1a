"""Goal block data models."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum

from ..utils.dates import normalize_to_day, start_of_week

MIN_BLOCK_WEEKS = 1
MAX_BLOCK_WEEKS = 52
MAX_RATE = 10.0  # percent of start weight per week


class BlockType(str, Enum):
    """Direction of a goal block."""

    CUT = "cut"
    BULK = "bulk"
    MAINTAIN = "maintain"

    @property
    def multiplier(self) -> float:
        """Sign applied to the weekly change."""
        multipliers = {
            BlockType.CUT: -1.0,
            BlockType.BULK: 1.0,
            BlockType.MAINTAIN: 0.0,
        }
        return multipliers[self]


@dataclass
class Block:
    """A period of weeks with a linear weight goal.

    The goal starts at ``start_weight`` and moves by ``rate`` percent of the
    start weight each week, down for a cut and up for a bulk. A maintain
    block keeps the goal flat.

    Derived values are recomputed on every access so edits to
    ``start_date``, ``weeks`` or ``rate`` never leave stale results behind.
    """

    type: BlockType
    start_date: date
    weeks: int
    start_weight: float
    rate: float
    created_at: datetime | None = None
    id: int | None = None

    def __post_init__(self):
        self.type = BlockType(self.type)
        self.start_date = start_of_week(self.start_date)

    @property
    def end_date(self) -> date:
        """Last day (a Sunday) covered by the block."""
        return self.start_date + timedelta(days=self.weeks * 7 - 1)

    @property
    def multiplier(self) -> float:
        return self.type.multiplier

    @property
    def weekly_change(self) -> float:
        return self.start_weight * (self.rate / 100.0) * self.multiplier

    def goal_for_week(self, week_index: int) -> float:
        """Goal weight at the start of the given week.

        Args:
            week_index: Zero-based week offset, 0 through ``weeks``

        Returns:
            The projected goal weight
        """
        return self.start_weight + self.weekly_change * week_index

    @property
    def goal_end_weight(self) -> float:
        return self.goal_for_week(self.weeks)

    @property
    def total_change(self) -> float:
        return self.goal_end_weight - self.start_weight

    def contains_date(self, value: date | datetime) -> bool:
        """Check whether a day falls inside the block window."""
        day = normalize_to_day(value)
        return self.start_date <= day <= self.end_date

    def week_index(self, value: date | datetime) -> int | None:
        """Zero-based week of the block that ``value`` falls in.

        Returns None before the block starts or once it has ended.
        """
        monday = start_of_week(value)
        if monday < self.start_date:
            return None
        index = (monday - self.start_date).days // 7
        if index >= self.weeks:
            return None
        return index

    def is_active(self, today: date | None = None) -> bool:
        """Check whether the block covers today."""
        return self.contains_date(today or date.today())

    def sort_key(self) -> tuple:
        """Deterministic ordering: earliest start first."""
        return (
            self.start_date,
            self.created_at or datetime.min,
            self.id if self.id is not None else 0,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "type": self.type.value,
            "start_date": self.start_date.isoformat(),
            "weeks": self.weeks,
            "start_weight": self.start_weight,
            "rate": self.rate,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Block":
        """Create from dictionary."""
        created_at = None
        if data.get("created_at"):
            created_at = datetime.fromisoformat(data["created_at"])

        return cls(
            id=id,
            type=BlockType(data["type"]),
            start_date=date.fromisoformat(data["start_date"]),
            weeks=int(data["weeks"]),
            start_weight=float(data["start_weight"]),
            rate=float(data.get("rate", 0.0)),
            created_at=created_at,
        )
