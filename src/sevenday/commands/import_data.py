"""Import weight data commands."""

import click
import pyperclip

from ..db import WeightEntryRepository
from ..services.csv_io import import_csv
from .base import async_command, echo_error, echo_info, echo_success, echo_warning, ensure_initialized

# Errors printed after an import; the rest are summarized
MAX_ERRORS_SHOWN = 3


@click.group(name="import")
@click.pass_context
def import_data(ctx):
    """Import weight data from other sources."""
    ensure_initialized(ctx)


@import_data.command(name="csv")
@click.argument("path", type=click.File("r"), required=False)
@click.option("--clipboard", "-c", is_flag=True, help="Read rows from the clipboard")
@click.pass_context
@async_command
async def csv_command(ctx, path, clipboard: bool):
    """Import 'date, weight' rows.

    PATH is a text file (or '-' for stdin) with one row per line. Dates may
    be YYYY-MM-DD or MM/DD/YYYY. Rows for a day that is already logged
    replace its weight. Bad rows are skipped and reported.

    Examples:
        sevenday import csv weights.csv
        sevenday import csv --clipboard
    """
    if clipboard:
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            echo_error(f"Could not read the clipboard: {e}")
            ctx.exit(1)
    elif path is not None:
        text = path.read()
    else:
        echo_error("Give a file path, '-' for stdin, or --clipboard")
        ctx.exit(1)

    if not text.strip():
        echo_info("Nothing to import.")
        return

    result = await import_csv(text, WeightEntryRepository())

    if result.ok:
        echo_success(result.summary())
        return

    echo_warning(result.summary())
    for error in result.errors[:MAX_ERRORS_SHOWN]:
        click.echo(f"  {error}")
    if len(result.errors) > MAX_ERRORS_SHOWN:
        click.echo(f"  ... and {len(result.errors) - MAX_ERRORS_SHOWN} more")
