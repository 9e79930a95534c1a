"""Tests for CSV import and export."""

import asyncio
from datetime import date

import pytest

from sevenday.models.weight_entry import WeightEntry
from sevenday.services.csv_io import (
    ImportResult,
    export_csv,
    import_csv,
    parse_csv,
    parse_date,
    parse_weight,
)

SAMPLE_CSV = "2024-01-01, 180.5\nbad-row\n01/15/2024,182.0"


class TestParseDate:
    """Tests for parse_date."""

    def test_iso(self):
        assert parse_date("2024-01-15") == date(2024, 1, 15)

    def test_us(self):
        assert parse_date("01/15/2024") == date(2024, 1, 15)

    @pytest.mark.parametrize("token", ["15/01/2024", "2024/01/15", "yesterday", "", "date"])
    def test_invalid(self, token):
        assert parse_date(token) is None


class TestParseWeight:
    """Tests for parse_weight."""

    def test_valid(self):
        assert parse_weight("180.5") == 180.5
        assert parse_weight("999") == 999.0

    @pytest.mark.parametrize(
        "token", ["0", "1000", "-3", "abc", "", "nan", "inf", "1_80", "١٨٠", "0x10"]
    )
    def test_invalid(self, token):
        assert parse_weight(token) is None

    def test_separator_and_non_ascii_digits_skipped(self):
        parsed = parse_csv("2024-01-01,1_80\n2024-01-02,١٨٠\n2024-01-03,180.5")

        assert [e.weight for e in parsed.entries] == [180.5]
        assert parsed.errors == ["Bad weight: 1_80", "Bad weight: ١٨٠"]


class TestParseCsv:
    """Tests for parse_csv."""

    def test_sample(self):
        parsed = parse_csv(SAMPLE_CSV)

        assert [e.date for e in parsed.entries] == [date(2024, 1, 1), date(2024, 1, 15)]
        assert [e.weight for e in parsed.entries] == [180.5, 182.0]
        assert parsed.errors == ["Bad format: bad-row"]

    def test_blank_lines_and_whitespace_ignored(self):
        parsed = parse_csv("\n   \n  2024-01-01 ,  180.5  \n\n")
        assert len(parsed.entries) == 1
        assert parsed.errors == []

    def test_error_messages(self):
        parsed = parse_csv("2024-13-45,180\n2024-01-02,heavy\n2024-01-03,1200\nonly-one-field")

        assert parsed.errors == [
            "Bad date: 2024-13-45",
            "Bad weight: heavy",
            "Bad weight: 1200",
            "Bad format: only-one-field",
        ]
        assert parsed.entries == []

    def test_extra_fields_allowed(self):
        parsed = parse_csv("2024-01-01,180.5,morning")
        assert parsed.entries[0].weight == 180.5

    def test_header_row_reported(self):
        parsed = parse_csv("date,weight\n2024-01-01,180.5")
        assert parsed.errors == ["Bad date: date"]
        assert len(parsed.entries) == 1

    def test_windows_line_endings(self):
        parsed = parse_csv("2024-01-01,180.5\r\n2024-01-02,181.0\r\n")
        assert len(parsed.entries) == 2

    def test_to_result(self):
        result = parse_csv(SAMPLE_CSV).to_result()
        assert result.imported_count == 2
        assert result.skipped_count == 1
        assert result.summary() == "2 imported, 1 skipped"
        assert not result.ok


class TestImportCsv:
    """Tests for import_csv against the entry repository."""

    def test_import_and_reimport_idempotent(self, entry_repo):
        first = asyncio.run(import_csv(SAMPLE_CSV, entry_repo))
        stored_first = asyncio.run(entry_repo.list_all())

        second = asyncio.run(import_csv(SAMPLE_CSV, entry_repo))
        stored_second = asyncio.run(entry_repo.list_all())

        assert (first.imported_count, first.skipped_count) == (2, 1)
        assert any("bad-row" in e for e in first.errors)
        assert second.imported_count == 2
        assert [(e.date, e.weight) for e in stored_second] == [
            (e.date, e.weight) for e in stored_first
        ]
        assert len(stored_second) == 2

    def test_overwrites_existing_day(self, entry_repo):
        asyncio.run(entry_repo.upsert(date(2024, 1, 1), 175.0))
        asyncio.run(import_csv("2024-01-01,180.5", entry_repo))

        entries = asyncio.run(entry_repo.list_all())
        assert len(entries) == 1
        assert entries[0].weight == 180.5

    def test_duplicate_day_in_batch_last_wins(self, entry_repo):
        result = asyncio.run(import_csv("2024-01-01,180\n01/01/2024,181", entry_repo))

        entries = asyncio.run(entry_repo.list_all())
        assert result.imported_count == 2
        assert len(entries) == 1
        assert entries[0].weight == 181.0

    def test_all_rows_bad(self, entry_repo):
        result = asyncio.run(import_csv("x\ny\n", entry_repo))

        assert result == ImportResult(
            imported_count=0,
            skipped_count=2,
            errors=["Bad format: x", "Bad format: y"],
        )
        assert asyncio.run(entry_repo.list_all()) == []


class TestExportCsv:
    """Tests for export_csv."""

    def test_format_and_order(self):
        entries = [
            WeightEntry(date=date(2024, 1, 3), weight=181.25),
            WeightEntry(date=date(2024, 1, 1), weight=180),
        ]
        assert export_csv(entries) == "date,weight\n2024-01-01,180.0\n2024-01-03,181.2\n"

    def test_empty(self):
        assert export_csv([]) == "date,weight\n"

    def test_round_trip(self, entry_repo):
        entries = [
            WeightEntry(date=date(2024, 1, 1), weight=180.5),
            WeightEntry(date=date(2024, 1, 2), weight=181.0),
            WeightEntry(date=date(2024, 2, 29), weight=178.3),
        ]

        result = asyncio.run(import_csv(export_csv(entries), entry_repo))
        stored = asyncio.run(entry_repo.list_all())

        assert result.imported_count == 3
        assert [(e.date, e.weight) for e in stored] == [(e.date, e.weight) for e in entries]
