"""Current week summary command."""

from datetime import date

import click

from ..config import get_settings
from ..db import BlockRepository, WeightEntryRepository
from ..models.week import WeekKey
from ..services.aggregation import (
    active_block,
    current_goal,
    last_week_average,
    this_week_average,
)
from .base import async_command, echo_info, ensure_initialized, styled_delta


@click.command()
@click.pass_context
@async_command
async def week(ctx):
    """Show this week's average against last week and the active goal."""
    ensure_initialized(ctx)

    entries = await WeightEntryRepository().list_all()
    blocks = await BlockRepository().list_all()
    unit = get_settings().weight_unit
    today = date.today()

    this_week = this_week_average(entries, today)
    last_week = last_week_average(entries, today)

    click.echo()
    click.echo(click.style(f"This week ({WeekKey(today).range_string})", bold=True))
    click.echo("=" * 40)

    if this_week is None:
        echo_info("No entries this week yet.")
    else:
        click.echo(
            f"Average: {this_week.average:.1f} {unit} "
            f"({this_week.count} entr{'y' if this_week.count == 1 else 'ies'})"
        )
        if this_week.count > 1:
            click.echo(f"Range:   {this_week.min:.1f}–{this_week.max:.1f}")

    if last_week is not None:
        click.echo(f"Last week: {last_week.average:.1f} {unit}")
        if this_week is not None:
            change = this_week.average - last_week.average
            click.echo(f"Change:    {change:+.1f} {unit}")

    block = active_block(blocks, today)
    goal = current_goal(block, today)
    if block is not None and goal is not None:
        week_number = block.week_index(today) + 1
        click.echo()
        click.echo(
            f"Goal ({block.type.value}, week {week_number} of {block.weeks}): "
            f"{goal:.1f} {unit}"
        )
        if this_week is not None:
            delta = this_week.average - goal
            click.echo(f"vs goal:   {styled_delta(delta, block.type, unit)}")
