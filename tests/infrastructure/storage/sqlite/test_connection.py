"""Tests for the aiosqlite connection pool."""

from pathlib import Path

import pytest

from goldbook.infrastructure.storage.sqlite import ConnectionPool, close_pool, get_pool


class TestConnectionPool:
    async def test_lazy_initialization(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path, pool_size=1)
        assert not pool.is_ready

        async with pool.acquire() as conn:
            cursor = await conn.execute("SELECT 1")
            assert (await cursor.fetchone())[0] == 1

        assert pool.is_ready
        await pool.close()
        assert not pool.is_ready

    async def test_pragmas(self, pool: ConnectionPool):
        async with pool.acquire() as conn:
            cursor = await conn.execute("PRAGMA journal_mode")
            assert (await cursor.fetchone())[0] == "wal"

    async def test_transaction_commits(self, pool: ConnectionPool):
        async with pool.transaction() as conn:
            await conn.execute(
                "INSERT INTO traders (id, position, payload) VALUES ('a', 0, '{}')"
            )

        async with pool.acquire() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM traders")
            assert (await cursor.fetchone())[0] == 1

    async def test_transaction_rolls_back_on_error(self, pool: ConnectionPool):
        with pytest.raises(RuntimeError):
            async with pool.transaction() as conn:
                await conn.execute(
                    "INSERT INTO traders (id, position, payload) VALUES ('a', 0, '{}')"
                )
                raise RuntimeError("boom")

        async with pool.acquire() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM traders")
            assert (await cursor.fetchone())[0] == 0

    def test_pool_size_is_at_least_one(self, temp_db_path: Path):
        assert ConnectionPool(temp_db_path, pool_size=0).pool_size == 1


async def test_global_pool_uses_settings():
    pool = await get_pool()
    try:
        assert pool.is_ready
        assert pool.db_path.name == "goldbook.db"
        assert await get_pool() is pool
    finally:
        await close_pool()
