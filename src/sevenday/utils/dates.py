"""Monday-based calendar helpers.

Everything downstream compares at day granularity, so datetimes are
truncated to their calendar day and weeks always run Monday to Sunday.
"""

from datetime import date, datetime, timedelta


def normalize_to_day(value: date | datetime) -> date:
    """Strip the time of day from a date or datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


def start_of_week(value: date | datetime) -> date:
    """Return the Monday of the week containing ``value``."""
    day = normalize_to_day(value)
    # Monday = 0, Sunday = 6
    return day - timedelta(days=day.weekday())


def end_of_week(value: date | datetime) -> date:
    """Return the Sunday ending the week containing ``value``."""
    return start_of_week(value) + timedelta(days=6)


def weeks_between(start: date | datetime, end: date | datetime) -> int:
    """Number of whole weeks between the Mondays of two dates.

    Negative when ``end`` falls in an earlier week than ``start``.
    """
    days = (start_of_week(end) - start_of_week(start)).days
    return days // 7


def add_weeks(value: date, weeks: int) -> date:
    """Shift a date by a whole number of weeks."""
    return value + timedelta(days=weeks * 7)


def _month_day(value: date) -> str:
    return f"{value.strftime('%b')} {value.day}"


def short_display(value: date | datetime) -> str:
    """Format as 'Mon, Feb 3'."""
    day = normalize_to_day(value)
    return f"{day.strftime('%a')}, {_month_day(day)}"


def week_range_string(monday: date) -> str:
    """Format a week as 'Feb 3 – Feb 9'."""
    sunday = monday + timedelta(days=6)
    return f"{_month_day(monday)} – {_month_day(sunday)}"
