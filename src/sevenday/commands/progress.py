"""Weekly progress history command."""

import click

from ..config import get_settings
from ..db import BlockRepository, WeightEntryRepository
from ..services.aggregation import chart_domain, progress_weeks
from .base import async_command, echo_info, ensure_initialized, format_table, styled_delta


@click.command()
@click.option(
    "--limit",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Show only the most recent N weeks",
)
@click.pass_context
@async_command
async def progress(ctx, limit: int | None):
    """Show weekly averages against block goals, newest week first."""
    ensure_initialized(ctx)

    entries = await WeightEntryRepository().list_all()
    blocks = await BlockRepository().list_all()
    unit = get_settings().weight_unit

    weeks = progress_weeks(entries, blocks)
    if not weeks:
        echo_info("No entries yet. Log one with 'sevenday log <weight>'")
        return

    shown = list(reversed(weeks))
    if limit is not None:
        shown = shown[:limit]

    headers = ["Week", "Average", "Entries", "Range", "Goal", "Delta", "Block"]
    rows = []
    for pw in shown:
        avg = pw.week_average
        spread = f"{avg.min:.1f}–{avg.max:.1f}" if avg.count > 1 else ""
        goal = f"{pw.goal:.1f}" if pw.goal is not None else ""
        delta = styled_delta(pw.delta, pw.block_type, unit) if pw.delta is not None else ""
        badge = pw.block_type.value.upper() if pw.block_type else ""
        rows.append([
            avg.week_key.range_string,
            f"{avg.average:.1f}",
            str(avg.count),
            spread,
            goal,
            delta,
            badge,
        ])

    low, high = chart_domain(weeks, blocks)

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(weeks)} week(s), plotted range {low:.1f}–{high:.1f} {unit}")
