"""Data access layer for sevenday."""

import logging
from datetime import date, datetime
from pathlib import Path

import aiosqlite

from ..errors import NotFoundError
from ..models.block import Block, BlockType
from ..models.weight_entry import WeightEntry
from ..utils.dates import normalize_to_day
from .engine import get_db_path

logger = logging.getLogger(__name__)

UPSERT_ENTRY_SQL = """
    INSERT INTO weight_entries (date, weight, created_at)
    VALUES (?, ?, ?)
    ON CONFLICT(date) DO UPDATE SET weight = excluded.weight
"""


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class WeightEntryRepository:
    """Repository for daily weight entries."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def list_all(self) -> list[WeightEntry]:
        """List all entries, oldest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM weight_entries ORDER BY date ASC")
            rows = await cursor.fetchall()
            return [self._row_to_entry(row) for row in rows]

    async def get(self, entry_id: int) -> WeightEntry | None:
        """Get an entry by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM weight_entries WHERE id = ?", (entry_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_entry(row)

    async def get_by_date(self, day: date) -> WeightEntry | None:
        """Get the entry logged for a calendar day."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM weight_entries WHERE date = ?",
                (normalize_to_day(day).isoformat(),),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_entry(row)

    async def upsert(self, day: date, weight: float) -> WeightEntry:
        """Log a weight for a day, overwriting any existing entry.

        The insert-or-update is a single statement so readers see either
        the old weight or the new one.
        """
        day = normalize_to_day(day)
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                UPSERT_ENTRY_SQL,
                (day.isoformat(), weight, datetime.now().isoformat()),
            )
            await db.commit()

        logger.debug("Upserted entry %s = %.1f", day, weight)
        return await self.get_by_date(day)

    async def upsert_many(self, entries: list[WeightEntry]) -> int:
        """Upsert a batch of entries in one transaction, in order."""
        now = datetime.now().isoformat()
        async with aiosqlite.connect(self.db_path) as db:
            await db.executemany(
                UPSERT_ENTRY_SQL,
                [(e.date.isoformat(), e.weight, now) for e in entries],
            )
            await db.commit()

        logger.debug("Upserted %d entries", len(entries))
        return len(entries)

    async def update(self, entry_id: int, weight: float) -> None:
        """Change the weight of an existing entry."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "UPDATE weight_entries SET weight = ? WHERE id = ?",
                (weight, entry_id),
            )
            await db.commit()
            if cursor.rowcount == 0:
                raise NotFoundError("entry", entry_id)

    async def delete(self, entry_id: int) -> None:
        """Delete an entry."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM weight_entries WHERE id = ?", (entry_id,)
            )
            await db.commit()
            if cursor.rowcount == 0:
                raise NotFoundError("entry", entry_id)

    async def clear(self) -> int:
        """Delete every entry. Returns the number removed."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM weight_entries")
            await db.commit()
            count = cursor.rowcount

        logger.info("Cleared %d weight entries", count)
        return count

    def _row_to_entry(self, row: aiosqlite.Row) -> WeightEntry:
        """Convert a database row to a WeightEntry."""
        return WeightEntry(
            id=row["id"],
            date=date.fromisoformat(row["date"]),
            weight=row["weight"],
            created_at=_parse_timestamp(row["created_at"]),
        )


class BlockRepository:
    """Repository for goal blocks."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def list_all(self) -> list[Block]:
        """List all blocks, earliest start first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM blocks ORDER BY start_date ASC, created_at ASC, id ASC"
            )
            rows = await cursor.fetchall()
            return [self._row_to_block(row) for row in rows]

    async def get(self, block_id: int) -> Block | None:
        """Get a block by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM blocks WHERE id = ?", (block_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_block(row)

    async def create(self, block: Block) -> int:
        """Store a new block."""
        data = block.to_dict()
        created_at = data["created_at"] or datetime.now().isoformat()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO blocks
                (type, start_date, weeks, start_weight, rate, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    data["type"],
                    data["start_date"],
                    data["weeks"],
                    data["start_weight"],
                    data["rate"],
                    created_at,
                ),
            )
            await db.commit()
            block_id = cursor.lastrowid

        logger.info("Created %s block %d starting %s", data["type"], block_id, data["start_date"])
        return block_id

    async def update(self, block: Block) -> None:
        """Update an existing block."""
        if block.id is None:
            raise ValueError("Block must have an ID to update")

        data = block.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                UPDATE blocks SET
                    type = ?, start_date = ?, weeks = ?, start_weight = ?, rate = ?
                WHERE id = ?
                """,
                (
                    data["type"],
                    data["start_date"],
                    data["weeks"],
                    data["start_weight"],
                    data["rate"],
                    block.id,
                ),
            )
            await db.commit()
            if cursor.rowcount == 0:
                raise NotFoundError("block", block.id)

    async def delete(self, block_id: int) -> None:
        """Delete a block."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM blocks WHERE id = ?", (block_id,))
            await db.commit()
            if cursor.rowcount == 0:
                raise NotFoundError("block", block_id)

    async def clear(self) -> int:
        """Delete every block. Returns the number removed."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM blocks")
            await db.commit()
            count = cursor.rowcount

        logger.info("Cleared %d blocks", count)
        return count

    def _row_to_block(self, row: aiosqlite.Row) -> Block:
        """Convert a database row to a Block."""
        return Block(
            id=row["id"],
            type=BlockType(row["type"]),
            start_date=date.fromisoformat(row["start_date"]),
            weeks=row["weeks"],
            start_weight=row["start_weight"],
            rate=row["rate"],
            created_at=_parse_timestamp(row["created_at"]),
        )
