"""CLI entry point for sevenday."""

import logging

import click
from pydantic import ValidationError as SettingsError

from . import __version__
from .commands import clear, entries, export, import_data, init, log, plan, progress, week
from .config import get_settings


def configure_logging(verbose: bool) -> None:
    """Send library logs to stderr at the configured level."""
    try:
        settings = get_settings()
    except SettingsError as e:
        raise click.ClickException(f"Invalid configuration: {e}")

    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.version_option(version=__version__, prog_name="sevenday")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """sevenday: weekly weight tracking against goal blocks.

    Log a weight each day, plan cut, bulk or maintain blocks, and compare
    weekly averages against the block's goal line.

    Example usage:

        # Initialize the project
        sevenday init

        # Log today's weight
        sevenday log 181.4

        # Plan a 12 week cut at 0.5% per week
        sevenday plan create --type cut --weeks 12 --rate 0.5

        # Review progress
        sevenday week
        sevenday progress
    """
    configure_logging(verbose)


# Register commands
main.add_command(init)
main.add_command(log)
main.add_command(entries)
main.add_command(week)
main.add_command(progress)
main.add_command(plan)
main.add_command(import_data)
main.add_command(export)
main.add_command(clear)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
