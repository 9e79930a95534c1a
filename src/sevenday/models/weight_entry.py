"""Weight entry data model."""

import re
from dataclasses import dataclass
from datetime import date, datetime

from ..utils.dates import normalize_to_day, start_of_week

# Accepted weights are strictly inside this open interval
MIN_WEIGHT = 0.0
MAX_WEIGHT = 1000.0

# Signed ASCII decimal with an optional exponent. No digit separators
NUMBER_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def is_plain_number(text: str) -> bool:
    """Check that text is a plain decimal number such as ``180`` or ``-1.5e2``."""
    return NUMBER_PATTERN.fullmatch(text) is not None


def is_valid_weight(weight: float) -> bool:
    """Check that a weight is a finite value in (0, 1000)."""
    return MIN_WEIGHT < weight < MAX_WEIGHT


@dataclass
class WeightEntry:
    """A single day's logged body weight.

    At most one entry exists per calendar day; logging again for the same
    day overwrites the weight.
    """

    date: date
    weight: float
    created_at: datetime | None = None
    id: int | None = None

    def __post_init__(self):
        self.date = normalize_to_day(self.date)

    @property
    def week_monday(self) -> date:
        """The Monday of the week this entry falls in."""
        return start_of_week(self.date)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "date": self.date.isoformat(),
            "weight": self.weight,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "WeightEntry":
        """Create from dictionary."""
        created_at = None
        if data.get("created_at"):
            created_at = datetime.fromisoformat(data["created_at"])

        return cls(
            id=id,
            date=date.fromisoformat(data["date"]),
            weight=float(data["weight"]),
            created_at=created_at,
        )
