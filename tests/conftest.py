"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from datetime import date
from pathlib import Path

import pytest

from sevenday.config import get_settings
from sevenday.db import BlockRepository, WeightEntryRepository, init_db
from sevenday.models.block import Block, BlockType
from sevenday.models.weight_entry import WeightEntry


@pytest.fixture
def temp_db_path():
    """Create a temporary, initialized database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        db_path = Path(tmpdir) / "test.db"
        asyncio.run(init_db(db_path))
        yield db_path


@pytest.fixture
def entry_repo(temp_db_path):
    return WeightEntryRepository(temp_db_path)


@pytest.fixture
def block_repo(temp_db_path):
    return BlockRepository(temp_db_path)


@pytest.fixture
def data_dir(monkeypatch):
    """Point the CLI's settings at a fresh data directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.setenv("SEVENDAY_DATA_DIR", tmpdir)
        get_settings.cache_clear()
        yield Path(tmpdir)
    get_settings.cache_clear()


@pytest.fixture
def sample_entries():
    """Two weeks of entries starting Monday 2024-01-01."""
    return [
        WeightEntry(date=date(2024, 1, 1), weight=200.0),
        WeightEntry(date=date(2024, 1, 3), weight=199.0),
        WeightEntry(date=date(2024, 1, 6), weight=198.0),
        WeightEntry(date=date(2024, 1, 8), weight=197.0),
        WeightEntry(date=date(2024, 1, 14), weight=196.0),
    ]


@pytest.fixture
def cut_block():
    """A 4 week cut at 1% per week starting 2024-01-01."""
    return Block(
        type=BlockType.CUT,
        start_date=date(2024, 1, 1),
        weeks=4,
        start_weight=200.0,
        rate=1.0,
        id=1,
    )
