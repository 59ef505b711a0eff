"""
Integration test for a day of bookkeeping.

Runs the real app with its lifespan (migrations, connection pool) against
the temporary data directory set up by the root conftest.
"""

import pytest
from fastapi.testclient import TestClient

from goldbook.api.main import app
from goldbook.config import get_settings


@pytest.fixture
def client():
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


class TestBookkeepingFlow:
    def test_startup_creates_database(self, client):
        assert get_settings().storage.db_path.exists()

        response = client.get("/api/health/db")
        assert response.json()["database"]["available"] is True

    def test_sale_trader_and_treasury(self, client):
        # A customer buys 10g of 21k and trades in 1g of 24k, paying part now
        invoice = client.post(
            "/api/invoices",
            json={
                "date": "2024-05-03",
                "customer": {"name": "أحمد علي", "phone": "01012345678"},
                "items": [
                    {
                        "sale_type": "SELL",
                        "category": "GOLD",
                        "karat": 21,
                        "weight": 10,
                        "price_per_gram": 3000,
                        "workmanship_value": 100,
                    },
                    {
                        "sale_type": "BUY_BACK",
                        "category": "GOLD",
                        "karat": 24,
                        "weight": 1,
                        "price_per_gram": 3400,
                    },
                ],
                "payments": [{"amount": 20000, "method": "CASH"}],
            },
        ).json()
        # 31000 - 3400 - 20000
        assert invoice["remaining_balance"] == pytest.approx(7600)

        trader = client.post("/api/traders", json={"name": "الصاغة"}).json()
        client.post(
            f"/api/traders/{trader['id']}/transactions",
            json={
                "date": "2024-05-03",
                "work_weight": 50,
                "scrap_weight": 20,
                "workmanship_fee": 2500,
                "cash_payment": 1000,
            },
        )
        client.post(
            "/api/treasury/transactions",
            json={"type": "EXPENSE", "amount": 500, "date": "2024-05-03"},
        )

        # The customer settles the rest by InstaPay
        paid = client.post(
            f"/api/invoices/{invoice['id']}/payments",
            json={"amount": 7600, "method": "INSTAPAY"},
        ).json()
        assert paid["balance_state"] == "SETTLED"

        wallets = client.get("/api/treasury/wallets").json()
        assert wallets["cash"] == pytest.approx(20000 - 1000 - 500)
        assert wallets["instapay"] == pytest.approx(7600)

        statement = client.get(f"/api/traders/{trader['id']}").json()
        assert statement["account"]["gold_balance"] == pytest.approx(30)
        assert statement["account"]["cash_balance"] == pytest.approx(1500)

        params = {"range": "custom", "start": "2024-05-03", "end": "2024-05-03"}
        dashboard = client.get("/api/reports/dashboard", params=params).json()
        assert dashboard["sales_summary"]["store"]["gold21"]["cash"] == pytest.approx(31000)
        assert dashboard["sales_summary"]["buy_back"]["gold24"]["weight"] == pytest.approx(1)
        # 30g from the trader + 24/21g bought back - 10g sold
        assert dashboard["inventory"]["total_gold_in_store"] == pytest.approx(20 + 24 / 21)

        log = client.get("/api/reports/log").json()
        assert {e["record_type"] for e in log["entries"]} == {
            "invoice",
            "general",
            "traderTransaction",
        }

    def test_records_survive_restart(self):
        with TestClient(app) as first:
            created = first.post(
                "/api/treasury/transactions", json={"type": "DEPOSIT", "amount": 250}
            ).json()

        with TestClient(app) as restarted:
            listed = restarted.get("/api/treasury/transactions").json()

        assert [t["id"] for t in listed] == [created["id"]]
