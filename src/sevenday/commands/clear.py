"""Bulk delete commands."""

import click

from ..db import BlockRepository, WeightEntryRepository
from .base import async_command, echo_success, ensure_initialized


@click.group()
@click.pass_context
def clear(ctx):
    """Permanently delete all entries or all blocks.

    There is no undo.
    """
    ensure_initialized(ctx)


@clear.command(name="entries")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@async_command
async def clear_entries(yes: bool):
    """Delete every weight entry."""
    repo = WeightEntryRepository()
    count = len(await repo.list_all())

    if not yes and not click.confirm(f"Delete all {count} weight entries?"):
        return

    removed = await repo.clear()
    echo_success(f"Deleted {removed} entries")


@clear.command(name="blocks")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@async_command
async def clear_blocks(yes: bool):
    """Delete every block."""
    repo = BlockRepository()
    count = len(await repo.list_all())

    if not yes and not click.confirm(f"Delete all {count} blocks?"):
        return

    removed = await repo.clear()
    echo_success(f"Deleted {removed} blocks")
