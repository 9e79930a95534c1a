"""Manual weight logging."""

import logging
from datetime import date

from ..errors import ValidationError
from ..models.weight_entry import WeightEntry, is_plain_number, is_valid_weight
from ..utils.dates import normalize_to_day

logger = logging.getLogger(__name__)


def parse_weight_input(value) -> float:
    """Parse a user-entered weight.

    Raises:
        ValidationError: Unless the value is a number in (0, 1000)
    """
    if isinstance(value, str):
        value = value.strip()
        if not is_plain_number(value):
            raise ValidationError("weight", f"'{value}' is not a number")
    try:
        weight = float(value)
    except (TypeError, ValueError):
        raise ValidationError("weight", f"'{value}' is not a number")

    if not is_valid_weight(weight):
        raise ValidationError("weight", "must be greater than 0 and less than 1000")
    return weight


def validate_log_date(day: date | None, today: date | None = None) -> date:
    """Resolve the day to log for; future days are rejected."""
    today = today or date.today()
    day = normalize_to_day(day) if day else today
    if day > today:
        raise ValidationError("date", f"{day.isoformat()} is in the future")
    return day


async def log_weight(
    repository,
    weight,
    day: date | None = None,
    today: date | None = None,
) -> WeightEntry:
    """Log a weight, overwriting any entry already stored for that day.

    Args:
        repository: A WeightEntryRepository
        weight: Raw weight input
        day: Day to log for (defaults to today)
        today: Override for the current date

    Returns:
        The stored entry
    """
    parsed = parse_weight_input(weight)
    target = validate_log_date(day, today)

    entry = await repository.upsert(target, parsed)
    logger.info("Logged %.1f for %s", parsed, target)
    return entry


async def edit_entry(repository, entry_id: int, weight) -> float:
    """Change the weight of a stored entry."""
    parsed = parse_weight_input(weight)
    await repository.update(entry_id, parsed)
    return parsed
