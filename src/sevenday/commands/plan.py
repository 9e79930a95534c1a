"""Goal block planning commands."""

from datetime import date

import click

from ..clients.manual import ManualInputClient
from ..config import get_settings
from ..db import BlockRepository, WeightEntryRepository
from ..errors import BlockOverlapError, SevenDayError
from ..models.block import BlockType
from ..services.aggregation import this_week_average
from ..services.planner import block_preview_string, block_week_summaries, plan_block
from ..utils.dates import short_display, start_of_week
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    fail,
    format_table,
    styled_delta,
)

BLOCK_TYPES = [t.value for t in BlockType]


def _report_overlap(error: BlockOverlapError) -> None:
    echo_error(str(error))
    for block in error.conflicts:
        click.echo(
            f"  #{block.id} {block.type.value}: "
            f"{short_display(block.start_date)} – {short_display(block.end_date)}"
        )


def _block_fields(block_type, start_date, weeks, start_weight, rate) -> dict:
    """Block fields from command line options. Rate may be omitted for maintain."""
    return {
        "type": BlockType(block_type),
        "start_date": start_date.date() if start_date else start_of_week(date.today()),
        "weeks": weeks,
        "start_weight": start_weight,
        "rate": rate if rate is not None else 0.0,
    }


@click.group()
@click.pass_context
def plan(ctx):
    """Plan cut, bulk and maintain blocks.

    A block sets a linear goal that moves by a percentage of the start
    weight each week. Blocks may not overlap.
    """
    ensure_initialized(ctx)


@plan.command(name="list")
@async_command
async def list_blocks():
    """List all blocks, earliest first."""
    blocks = await BlockRepository().list_all()

    if not blocks:
        echo_info("No blocks planned. Create one with 'sevenday plan create'")
        return

    unit = get_settings().weight_unit
    headers = ["ID", "Type", "Start", "End", "Weeks", "Rate", "Goal", "Active"]
    rows = []
    for block in blocks:
        rows.append([
            str(block.id),
            block.type.value.upper(),
            short_display(block.start_date),
            short_display(block.end_date),
            str(block.weeks),
            f"{block.rate:g}%",
            f"{block.start_weight:.1f} → {block.goal_end_weight:.1f} {unit}",
            "*" if block.is_active() else "",
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(blocks)} block(s)")


@plan.command()
@click.argument("block_id", type=int)
@click.pass_context
@async_command
async def show(ctx, block_id: int):
    """Show week-by-week goal and actual for a block."""
    block = await BlockRepository().get(block_id)
    if not block:
        echo_error(f"Block ID {block_id} not found")
        ctx.exit(1)

    entries = await WeightEntryRepository().list_all()
    unit = get_settings().weight_unit
    this_monday = start_of_week(date.today())

    click.echo()
    click.echo("=" * 60)
    click.echo(f"{block.type.value.upper()} block (ID: {block.id})")
    click.echo("=" * 60)
    click.echo(
        block_preview_string(block.type, block.start_weight, block.rate, block.weeks, unit)
    )
    click.echo(f"{short_display(block.start_date)} – {short_display(block.end_date)}")
    click.echo()

    headers = ["", "Week", "Dates", "Goal", "Actual", "Delta", "Entries"]
    rows = []
    for summary in block_week_summaries(block, entries):
        marker = ">" if summary.week_key.monday == this_monday else ""
        actual = f"{summary.actual:.1f}" if summary.actual is not None else "—"
        delta = (
            styled_delta(summary.delta, block.type, unit)
            if summary.delta is not None
            else ""
        )
        rows.append([
            marker,
            str(summary.week_index + 1),
            summary.week_key.range_string,
            f"{summary.goal:.1f}",
            actual,
            delta,
            str(summary.entry_count),
        ])

    click.echo(format_table(headers, rows))


@plan.command()
@click.option("--type", "-t", "block_type", type=click.Choice(BLOCK_TYPES), help="Block type")
@click.option(
    "--start",
    "-s",
    "start_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Start date (snaps to its Monday; defaults to this week)",
)
@click.option("--weeks", "-w", type=int, help="Length in weeks (1-52)")
@click.option("--start-weight", type=float, help="Start weight (defaults to this week's average)")
@click.option("--rate", "-r", type=float, help="Percent of start weight per week (0-10)")
@click.pass_context
@async_command
async def create(ctx, block_type, start_date, weeks, start_weight, rate):
    """Create a goal block.

    Without --type and --weeks an interactive form is shown, prefilled
    with any other options given. Cut and bulk blocks need --rate.

    Examples:
        sevenday plan create --type cut --weeks 12 --rate 0.5
        sevenday plan create -t maintain -w 4 --start 2024-03-04
    """
    block_repo = BlockRepository()
    existing = await block_repo.list_all()

    if block_type is None or weeks is None:
        avg = this_week_average(await WeightEntryRepository().list_all())
        fields = await ManualInputClient().collect_block(
            default_start_weight=avg.average if avg else None,
            defaults={
                "type": BlockType(block_type) if block_type else None,
                "start_date": start_date.date() if start_date else None,
                "weeks": weeks,
                "start_weight": start_weight,
                "rate": rate,
            },
        )
    else:
        if rate is None and BlockType(block_type) != BlockType.MAINTAIN:
            echo_error("--rate is required for cut and bulk blocks")
            ctx.exit(1)

        if start_weight is None:
            avg = this_week_average(await WeightEntryRepository().list_all())
            if avg is None:
                echo_error("No entries this week; pass --start-weight")
                ctx.exit(1)
            start_weight = round(avg.average, 1)

        fields = _block_fields(block_type, start_date, weeks, start_weight, rate)

    try:
        block = plan_block(
            fields["type"],
            fields["start_date"],
            fields["weeks"],
            fields["start_weight"],
            fields["rate"],
            existing,
        )
    except BlockOverlapError as e:
        _report_overlap(e)
        ctx.exit(1)
    except SevenDayError as e:
        fail(ctx, e)

    block_id = await block_repo.create(block)

    unit = get_settings().weight_unit
    echo_success(f"Created {block.type.value} block {block_id}")
    click.echo(
        block_preview_string(block.type, block.start_weight, block.rate, block.weeks, unit)
    )
    click.echo(f"{short_display(block.start_date)} – {short_display(block.end_date)}")


@plan.command()
@click.argument("block_id", type=int)
@click.option("--type", "-t", "block_type", type=click.Choice(BLOCK_TYPES), help="Block type")
@click.option("--start", "-s", "start_date", type=click.DateTime(formats=["%Y-%m-%d"]), help="Start date")
@click.option("--weeks", "-w", type=int, help="Length in weeks (1-52)")
@click.option("--start-weight", type=float, help="Start weight")
@click.option("--rate", "-r", type=float, help="Percent of start weight per week (0-10)")
@click.option("--interactive", "-i", is_flag=True, help="Edit with the interactive form")
@click.pass_context
@async_command
async def edit(ctx, block_id, block_type, start_date, weeks, start_weight, rate, interactive):
    """Edit a block in place.

    Options not given keep their current values.
    """
    block_repo = BlockRepository()
    current = await block_repo.get(block_id)
    if not current:
        echo_error(f"Block ID {block_id} not found")
        ctx.exit(1)

    if interactive:
        fields = await ManualInputClient().collect_block(existing=current)
    else:
        fields = {
            "type": BlockType(block_type) if block_type else current.type,
            "start_date": start_date.date() if start_date else current.start_date,
            "weeks": weeks if weeks is not None else current.weeks,
            "start_weight": start_weight if start_weight is not None else current.start_weight,
            "rate": rate if rate is not None else current.rate,
        }

    existing = await block_repo.list_all()
    try:
        updated = plan_block(
            fields["type"],
            fields["start_date"],
            fields["weeks"],
            fields["start_weight"],
            fields["rate"],
            existing,
            excluding=current,
        )
    except BlockOverlapError as e:
        _report_overlap(e)
        ctx.exit(1)
    except SevenDayError as e:
        fail(ctx, e)

    await block_repo.update(updated)

    unit = get_settings().weight_unit
    echo_success(f"Updated block {block_id}")
    click.echo(
        block_preview_string(updated.type, updated.start_weight, updated.rate, updated.weeks, unit)
    )


@plan.command()
@click.argument("block_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, block_id: int, yes: bool):
    """Delete a block. This cannot be undone."""
    block_repo = BlockRepository()
    block = await block_repo.get(block_id)
    if not block:
        echo_error(f"Block ID {block_id} not found")
        ctx.exit(1)

    if not yes and not click.confirm(
        f"Delete the {block.type.value} block starting {short_display(block.start_date)}?"
    ):
        return

    await block_repo.delete(block_id)
    echo_success(f"Block {block_id} deleted")
