"""Weekly aggregation of weight entries against goal blocks."""

from collections import defaultdict
from datetime import date, timedelta
from enum import Enum

from ..models.block import Block, BlockType
from ..models.week import ProgressWeek, WeekAverage, WeekKey
from ..models.weight_entry import WeightEntry

# Maintain blocks tolerate this much drift either side of the goal
MAINTAIN_TOLERANCE = 1.0

# Fallback chart range when there is nothing to plot
DEFAULT_CHART_DOMAIN = (100.0, 200.0)


class DeltaStatus(str, Enum):
    """How a week's deviation from its goal should be read."""

    FAVORABLE = "favorable"
    UNFAVORABLE = "unfavorable"
    NEUTRAL = "neutral"


def _average_of(week_key: WeekKey, weights: list[float]) -> WeekAverage:
    return WeekAverage(
        week_key=week_key,
        average=sum(weights) / len(weights),
        count=len(weights),
        min=min(weights),
        max=max(weights),
    )


def week_average(week_key: WeekKey, entries: list[WeightEntry]) -> WeekAverage | None:
    """Average the entries logged during one week.

    Args:
        week_key: The week to aggregate
        entries: All entries (any order)

    Returns:
        The week's average, or None when nothing was logged that week
    """
    weights = [e.weight for e in entries if e.week_monday == week_key.monday]
    if not weights:
        return None
    return _average_of(week_key, weights)


def this_week_average(
    entries: list[WeightEntry], today: date | None = None
) -> WeekAverage | None:
    """Average for the current week."""
    return week_average(WeekKey(today or date.today()), entries)


def last_week_average(
    entries: list[WeightEntry], today: date | None = None
) -> WeekAverage | None:
    """Average for the week before the current one."""
    this_monday = WeekKey(today or date.today()).monday
    return week_average(WeekKey(this_monday - timedelta(days=7)), entries)


def all_weekly_averages(entries: list[WeightEntry]) -> list[WeekAverage]:
    """One average per week that has entries, oldest week first."""
    grouped: dict[WeekKey, list[float]] = defaultdict(list)
    for entry in entries:
        grouped[WeekKey(entry.date)].append(entry.weight)

    return [_average_of(key, weights) for key, weights in sorted(grouped.items())]


def find_block_for_date(blocks: list[Block], value: date) -> Block | None:
    """Find the block whose window contains ``value``.

    Blocks never overlap when written through the planner. If stored data
    does overlap, the block with the earliest start date wins.
    """
    for block in sorted(blocks, key=Block.sort_key):
        if block.contains_date(value):
            return block
    return None


def progress_weeks(
    entries: list[WeightEntry], blocks: list[Block]
) -> list[ProgressWeek]:
    """Pair every weekly average with the goal of the block covering it."""
    ordered_blocks = sorted(blocks, key=Block.sort_key)
    result = []

    for avg in all_weekly_averages(entries):
        monday = avg.week_key.monday
        block = find_block_for_date(ordered_blocks, monday)
        week_idx = block.week_index(monday) if block else None

        if block is not None and week_idx is not None:
            result.append(
                ProgressWeek(
                    week_average=avg,
                    goal=block.goal_for_week(week_idx),
                    block_type=block.type,
                )
            )
        else:
            result.append(ProgressWeek(week_average=avg))

    return result


def active_block(blocks: list[Block], today: date | None = None) -> Block | None:
    """The block covering today, if any."""
    return find_block_for_date(blocks, today or date.today())


def current_goal(block: Block | None, today: date | None = None) -> float | None:
    """Goal weight for the current week of ``block``."""
    if block is None:
        return None
    week_idx = block.week_index(today or date.today())
    if week_idx is None:
        return None
    return block.goal_for_week(week_idx)


def delta_status(delta: float, block_type: BlockType | None) -> DeltaStatus:
    """Classify actual-minus-goal for a block type.

    Being above goal is bad on a cut and good on a bulk. A maintain block
    only flags drift beyond the tolerance.
    """
    if block_type is None:
        return DeltaStatus.NEUTRAL

    if block_type == BlockType.CUT:
        return DeltaStatus.UNFAVORABLE if delta > 0 else DeltaStatus.FAVORABLE
    if block_type == BlockType.BULK:
        return DeltaStatus.FAVORABLE if delta > 0 else DeltaStatus.UNFAVORABLE
    if abs(delta) > MAINTAIN_TOLERANCE:
        return DeltaStatus.UNFAVORABLE
    return DeltaStatus.NEUTRAL


def delta_string(delta: float, unit: str = "lbs") -> str:
    """Format a delta as '+1.5 lbs' or '-0.8 lbs'."""
    sign = "+" if delta >= 0 else ""
    return f"{sign}{delta:.1f} {unit}"


def chart_domain(
    weeks: list[ProgressWeek], blocks: list[Block]
) -> tuple[float, float]:
    """Y-axis range covering averages, goals and every block goal point."""
    values = [pw.week_average.average for pw in weeks]
    values.extend(pw.goal for pw in weeks if pw.goal is not None)
    for block in blocks:
        values.extend(block.goal_for_week(i) for i in range(block.weeks + 1))

    if not values:
        return DEFAULT_CHART_DOMAIN

    low, high = min(values), max(values)
    padding = max((high - low) * 0.1, 1.0)
    return (low - padding, high + padding)
