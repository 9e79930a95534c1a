"""CSV import and export of weight entries.

The text format is the one external contract of the app and has to keep
reading files exported by earlier versions:

    date,weight
    2024-01-01,180.5
    01/15/2024,182.0

Rows are ``date, weight`` with surrounding whitespace ignored. Dates are
``yyyy-mm-dd`` or ``mm/dd/yyyy``. Malformed rows are skipped and reported,
never fatal.
"""

import csv
import io
import logging
from dataclasses import dataclass, field
from datetime import date, datetime

from ..models.weight_entry import WeightEntry, is_plain_number, is_valid_weight

logger = logging.getLogger(__name__)

DATE_FORMATS = ["%Y-%m-%d", "%m/%d/%Y"]
EXPORT_HEADER = ["date", "weight"]


@dataclass
class ImportResult:
    """Outcome of an import batch."""

    imported_count: int = 0
    skipped_count: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        return f"{self.imported_count} imported, {self.skipped_count} skipped"


@dataclass
class ParsedImport:
    """Rows parsed from import text, before anything is stored."""

    entries: list[WeightEntry] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def to_result(self) -> ImportResult:
        return ImportResult(
            imported_count=len(self.entries),
            skipped_count=len(self.errors),
            errors=list(self.errors),
        )


def parse_date(token: str) -> date | None:
    """Parse a date in either accepted format.

    Returns None if neither format matches.
    """
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(token, fmt).date()
        except ValueError:
            continue
    return None


def parse_weight(token: str) -> float | None:
    """Parse a weight, returning None unless it is a number in (0, 1000)."""
    if not is_plain_number(token):
        return None
    try:
        weight = float(token)
    except ValueError:
        return None
    if not is_valid_weight(weight):
        return None
    return weight


def parse_csv(text: str) -> ParsedImport:
    """Parse import text into entries and per-row errors.

    Every valid row yields an entry, in input order. A day that appears more
    than once yields one entry per row; storing them in order leaves the
    last weight in place.
    """
    parsed = ParsedImport()

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        parts = [part.strip() for part in line.split(",")]
        if len(parts) < 2:
            parsed.errors.append(f"Bad format: {line}")
            continue

        day = parse_date(parts[0])
        if day is None:
            parsed.errors.append(f"Bad date: {parts[0]}")
            continue

        weight = parse_weight(parts[1])
        if weight is None:
            parsed.errors.append(f"Bad weight: {parts[1]}")
            continue

        parsed.entries.append(WeightEntry(date=day, weight=weight))

    return parsed


async def import_csv(text: str, repository) -> ImportResult:
    """Parse import text and upsert every valid row.

    Args:
        text: Raw CSV text
        repository: A WeightEntryRepository (anything with ``upsert_many``)

    Returns:
        Counts of imported and skipped rows with the skipped rows' errors
    """
    parsed = parse_csv(text)

    if parsed.entries:
        await repository.upsert_many(parsed.entries)

    result = parsed.to_result()
    logger.info("CSV import: %s", result.summary())
    for error in parsed.errors:
        logger.debug("Skipped row: %s", error)

    return result


def export_csv(entries: list[WeightEntry]) -> str:
    """Serialize entries oldest first with a ``date,weight`` header."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)

    for entry in sorted(entries, key=lambda e: e.date):
        writer.writerow([entry.date.strftime("%Y-%m-%d"), f"{entry.weight:.1f}"])

    return buffer.getvalue()
