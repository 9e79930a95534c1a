"""Initialize project command."""

import click

from ..config import get_settings
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the sevenday data directory and database.

    This creates the data directory and the SQLite database holding
    weight entries and goal blocks.
    """
    data_dir = get_settings().data_dir
    echo_info(f"Initializing sevenday in {data_dir}")

    db_path = get_db_path(data_dir)
    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("sevenday is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Log today's weight:")
    click.echo("     sevenday log 181.4")
    click.echo()
    click.echo("  2. Plan a goal block:")
    click.echo("     sevenday plan create --type cut --weeks 12 --rate 0.5")
    click.echo()
    click.echo("  3. Bring in older data:")
    click.echo("     sevenday import csv weights.csv")
