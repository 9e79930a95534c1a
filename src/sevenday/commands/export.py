"""Export weight data command."""

import click
import pyperclip

from ..db import WeightEntryRepository
from ..services.csv_io import export_csv
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized


@click.command()
@click.option(
    "--clipboard",
    "-c",
    is_flag=True,
    help="Copy to clipboard instead of printing",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Write to file instead of stdout",
)
@click.pass_context
@async_command
async def export(ctx, clipboard: bool, output: str | None):
    """Export all entries as CSV.

    The output has a 'date,weight' header and one row per day, oldest
    first, and can be imported again with 'sevenday import csv'.

    Examples:
        sevenday export -o weights.csv
        sevenday export --clipboard
    """
    ensure_initialized(ctx)

    entries = await WeightEntryRepository().list_all()
    if not entries:
        echo_info("No entries to export.")
        return

    content = export_csv(entries)

    if clipboard:
        try:
            pyperclip.copy(content)
        except pyperclip.PyperclipException as e:
            echo_error(f"Could not copy to clipboard: {e}")
            ctx.exit(1)
        echo_success(f"Copied {len(entries)} entries to clipboard!")

    elif output:
        with open(output, "w") as f:
            f.write(content)
        echo_success(f"Exported {len(entries)} entries to {output}")

    else:
        click.echo(content, nl=False)
