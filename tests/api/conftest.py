"""API test fixtures: the real app over a migrated temporary database."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from goldbook.api.dependencies import get_store
from goldbook.api.main import app
from goldbook.infrastructure.storage.sqlite import ConnectionPool, SQLiteLedgerStore
from goldbook.infrastructure.storage.sqlite.migrations.migrator import initialize_database


@pytest.fixture
async def api_store(tmp_path: Path) -> AsyncGenerator[SQLiteLedgerStore, None]:
    db_path = tmp_path / "api.db"
    await initialize_database(db_path, create_backup_before=False)
    pool = ConnectionPool(db_path, pool_size=2)
    yield SQLiteLedgerStore(pool)
    await pool.close()


@pytest.fixture
async def client(api_store: SQLiteLedgerStore) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_store] = lambda: api_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def invoice_payload() -> dict:
    """Sell 10g 21k (1050) and buy back 1g 24k (3000 + 50 cash-back); 500 paid."""
    return {
        "date": "2024-05-01",
        "customer": {"name": "Mona", "phone": "01012345678"},
        "items": [
            {
                "sale_type": "SELL",
                "category": "GOLD",
                "karat": 21,
                "weight": 10,
                "price_per_gram": 100,
                "workmanship_value": 5,
            },
            {
                "sale_type": "SELL",
                "category": "SILVER",
                "weight": 50,
                "price_per_gram": 60,
                "workmanship_type": "PER_PIECE",
                "workmanship_value": 950,
            },
            {
                "sale_type": "BUY_BACK",
                "category": "GOLD",
                "karat": 24,
                "weight": 1,
                "price_per_gram": 3000,
                "cash_back_per_gram": 50,
            },
        ],
        "payments": [{"amount": 500, "method": "CASH"}],
    }
