"""Goal block planning: validation, overlap detection and projection."""

import logging
import math
from datetime import date, datetime, timedelta

from ..errors import BlockOverlapError, BlockValidationError
from ..models.block import MAX_BLOCK_WEEKS, MAX_RATE, MIN_BLOCK_WEEKS, Block, BlockType
from ..models.week import BlockWeekSummary, WeekKey
from ..models.weight_entry import WeightEntry, is_valid_weight
from ..utils.dates import add_weeks, start_of_week
from .aggregation import week_average

logger = logging.getLogger(__name__)


def _is_same_block(block: Block, other: Block | None) -> bool:
    if other is None:
        return False
    if block.id is not None and other.id is not None:
        return block.id == other.id
    return block is other


def overlapping_blocks(
    start_date: date,
    weeks: int,
    existing_blocks: list[Block],
    excluding: Block | None = None,
) -> list[Block]:
    """Existing blocks whose window intersects the candidate window."""
    start = start_of_week(start_date)
    end = start + timedelta(days=weeks * 7 - 1)

    return [
        block
        for block in existing_blocks
        if not _is_same_block(block, excluding)
        and start <= block.end_date
        and end >= block.start_date
    ]


def block_overlaps(
    start_date: date,
    weeks: int,
    existing_blocks: list[Block],
    excluding: Block | None = None,
) -> bool:
    """Check whether a candidate block would overlap a stored one.

    Args:
        start_date: Candidate start, normalized to its Monday
        weeks: Candidate length in weeks
        existing_blocks: Blocks already stored
        excluding: The block being edited in place, if any

    Returns:
        True if the inclusive windows intersect for any other block
    """
    return bool(overlapping_blocks(start_date, weeks, existing_blocks, excluding))


def validate_block_fields(
    block_type: BlockType,
    weeks: int,
    start_weight: float,
    rate: float,
) -> float:
    """Validate block fields and return the effective rate.

    Maintain blocks always get a rate of exactly 0.

    Raises:
        BlockValidationError: If any field is out of range
    """
    block_type = BlockType(block_type)
    errors = {}

    if isinstance(weeks, bool) or not isinstance(weeks, int):
        errors["weeks"] = "must be a whole number of weeks"
    elif not MIN_BLOCK_WEEKS <= weeks <= MAX_BLOCK_WEEKS:
        errors["weeks"] = f"must be between {MIN_BLOCK_WEEKS} and {MAX_BLOCK_WEEKS}"

    if not is_valid_weight(start_weight):
        errors["start_weight"] = "must be greater than 0 and less than 1000"

    if block_type == BlockType.MAINTAIN:
        rate = 0.0
    elif not (math.isfinite(rate) and 0.0 <= rate <= MAX_RATE):
        errors["rate"] = f"must be between 0 and {MAX_RATE:g} percent per week"

    if errors:
        raise BlockValidationError(errors)

    return float(rate)


def plan_block(
    block_type: BlockType,
    start_date: date,
    weeks: int,
    start_weight: float,
    rate: float,
    existing_blocks: list[Block],
    excluding: Block | None = None,
) -> Block:
    """Build a validated block ready to be stored.

    When ``excluding`` is given the result keeps its id and creation time so
    the caller can save it as an edit of that block.

    Raises:
        BlockValidationError: If a field is out of range
        BlockOverlapError: If the window intersects another block
    """
    effective_rate = validate_block_fields(block_type, weeks, start_weight, rate)

    conflicts = overlapping_blocks(start_date, weeks, existing_blocks, excluding)
    if conflicts:
        logger.info(
            "Rejected %s block starting %s: overlaps %d block(s)",
            BlockType(block_type).value,
            start_of_week(start_date),
            len(conflicts),
        )
        raise BlockOverlapError(conflicts)

    return Block(
        type=BlockType(block_type),
        start_date=start_date,
        weeks=weeks,
        start_weight=float(start_weight),
        rate=effective_rate,
        created_at=excluding.created_at if excluding else datetime.now(),
        id=excluding.id if excluding else None,
    )


def block_week_summaries(
    block: Block, entries: list[WeightEntry]
) -> list[BlockWeekSummary]:
    """Goal and actual average for each week of a block."""
    summaries = []
    for i in range(block.weeks):
        week_key = WeekKey(add_weeks(block.start_date, i))
        avg = week_average(week_key, entries)
        summaries.append(
            BlockWeekSummary(
                week_index=i,
                week_key=week_key,
                goal=block.goal_for_week(i),
                actual=avg.average if avg else None,
                entry_count=avg.count if avg else 0,
            )
        )
    return summaries


def goal_line_points(block: Block) -> list[tuple[date, float]]:
    """(Monday, goal) pairs for drawing a block's goal line."""
    return [
        (add_weeks(block.start_date, i), block.goal_for_week(i))
        for i in range(block.weeks)
    ]


def block_preview_string(
    block_type: BlockType,
    start_weight: float,
    rate: float,
    weeks: int,
    unit: str = "lbs",
) -> str:
    """Summarize a block before it is saved.

    Example: '200.0 → 192.0 lbs (-8.0 over 4wk)'
    """
    multiplier = BlockType(block_type).multiplier
    weekly_change = start_weight * (rate / 100.0) * multiplier
    end_weight = start_weight + weekly_change * weeks
    total_change = end_weight - start_weight
    sign = "+" if total_change >= 0 else ""
    return (
        f"{start_weight:.1f} → {end_weight:.1f} {unit} "
        f"({sign}{total_change:.1f} over {weeks}wk)"
    )
