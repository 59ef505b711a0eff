"""Tests for health endpoints."""


async def test_root_health_check(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_api_health_check(client):
    response = await client.get("/api/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert "uptime_seconds" in data
    assert response.headers["X-Request-ID"]


async def test_db_health(client):
    response = await client.get("/api/health/db")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"]["available"] is True
    assert data["database"]["name"] == "SQLiteLedgerStore"
