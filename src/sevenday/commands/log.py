"""Weight logging and entry management commands."""

import click

from ..config import get_settings
from ..db import WeightEntryRepository
from ..errors import SevenDayError
from ..services.logbook import edit_entry, log_weight
from ..utils.dates import short_display
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    fail,
    format_table,
)


@click.command()
@click.argument("weight")
@click.option(
    "--date",
    "-d",
    "day",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Day to log for (defaults to today)",
)
@click.pass_context
@async_command
async def log(ctx, weight: str, day):
    """Log a weight for today or a past day.

    Logging again for the same day replaces the earlier weight.

    Examples:
        sevenday log 181.4
        sevenday log 180.2 --date 2024-01-15
    """
    ensure_initialized(ctx)

    repo = WeightEntryRepository()
    try:
        entry = await log_weight(repo, weight, day.date() if day else None)
    except SevenDayError as e:
        fail(ctx, e)

    unit = get_settings().weight_unit
    echo_success(f"Logged {entry.weight:.1f} {unit} for {short_display(entry.date)}")


@click.group()
@click.pass_context
def entries(ctx):
    """List, edit and delete logged weights."""
    ensure_initialized(ctx)


@entries.command(name="list")
@click.option("--limit", "-n", type=click.IntRange(min=1), default=None, help="Show only the most recent N")
@async_command
async def list_entries(limit: int | None):
    """List logged weights, newest first."""
    repo = WeightEntryRepository()
    all_entries = await repo.list_all()

    if not all_entries:
        echo_info("No entries yet. Log one with 'sevenday log <weight>'")
        return

    newest_first = list(reversed(all_entries))
    if limit is not None:
        newest_first = newest_first[:limit]

    unit = get_settings().weight_unit
    headers = ["ID", "Date", "Weight"]
    rows = [
        [str(e.id), short_display(e.date), f"{e.weight:.1f} {unit}"]
        for e in newest_first
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(all_entries)} entr{'y' if len(all_entries) == 1 else 'ies'}")


@entries.command()
@click.argument("entry_id", type=int)
@click.argument("weight")
@click.pass_context
@async_command
async def edit(ctx, entry_id: int, weight: str):
    """Change the weight of an entry."""
    repo = WeightEntryRepository()
    try:
        new_weight = await edit_entry(repo, entry_id, weight)
    except SevenDayError as e:
        fail(ctx, e)

    echo_success(f"Entry {entry_id} updated to {new_weight:.1f}")


@entries.command()
@click.argument("entry_id", type=int)
@click.pass_context
@async_command
async def delete(ctx, entry_id: int):
    """Delete an entry."""
    repo = WeightEntryRepository()
    try:
        await repo.delete(entry_id)
    except SevenDayError as e:
        fail(ctx, e)

    echo_success(f"Entry {entry_id} deleted")
