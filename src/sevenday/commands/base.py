"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..db import get_db_path
from ..errors import SevenDayError
from ..services.aggregation import DeltaStatus, delta_status, delta_string


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'sevenday init' first."
        )
        ctx.exit(1)


def fail(ctx: click.Context, error: SevenDayError) -> None:
    """Report a service error and exit with status 1."""
    echo_error(str(error))
    ctx.exit(1)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


DELTA_COLORS = {
    DeltaStatus.FAVORABLE: "green",
    DeltaStatus.UNFAVORABLE: "red",
    DeltaStatus.NEUTRAL: None,
}


def styled_delta(delta: float, block_type, unit: str) -> str:
    """Delta string coloured by whether it is on track for the block."""
    color = DELTA_COLORS[delta_status(delta, block_type)]
    return click.style(delta_string(delta, unit), fg=color)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(click.unstyle(str(cell))))

    lines = []

    header_line = ""
    for i, h in enumerate(headers):
        header_line += h.ljust(widths[i] + padding)
    lines.append(header_line.rstrip())

    sep_line = ""
    for w in widths:
        sep_line += "-" * w + " " * padding
    lines.append(sep_line.rstrip())

    for row in rows:
        row_line = ""
        for i, cell in enumerate(row):
            cell = str(cell)
            # Pad on visible width so coloured cells still line up
            row_line += cell + " " * (widths[i] + padding - len(click.unstyle(cell)))
        lines.append(row_line.rstrip())

    return "\n".join(lines)
