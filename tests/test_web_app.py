"""Mini README: Tests for the FastAPI ledger service.

Each test builds its own application around a fresh ledger so state never
leaks between tests. Requests use form encoding like the browser client.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from smartspend.configuration import SmartSpendSettings
from smartspend.finance import Ledger
from smartspend.interface import create_application
from smartspend.logging_utils import get_logger


@pytest.fixture()
def client(tmp_path: Path) -> TestClient:
    settings = SmartSpendSettings(data_directory=tmp_path, projection_days=30)
    return TestClient(create_application(ledger=Ledger(), settings=settings))


def _initialise(client: TestClient, allowance: str = "20") -> None:
    response = client.post("/initialize", data={"allowance": allowance})
    assert response.status_code == 200


def test_writes_before_initialise_conflict(client: TestClient) -> None:
    response = client.post("/transactions", data={"transaction_type": "expense", "amount": "5"})

    assert response.status_code == 409


def test_initialise_rejects_missing_or_negative_allowance(client: TestClient) -> None:
    assert client.post("/initialize", data={}).status_code == 400
    assert client.post("/initialize", data={"allowance": "-1"}).status_code == 400
    assert client.get("/summary").json()["active"] is False


def test_transaction_flow_updates_summary(client: TestClient) -> None:
    _initialise(client)

    created = client.post(
        "/transactions",
        data={"transaction_type": "income", "amount": "100", "description": "salary"},
    )
    client.post("/transactions", data={"transaction_type": "expense", "amount": "30"})

    assert created.status_code == 201
    assert created.json()["description"] == "salary"
    summary = client.get("/summary").json()
    assert summary["totalIncome"] == 100.0
    assert summary["totalExpenses"] == 30.0
    assert summary["balance"] == 70.0
    listed = client.get("/transactions").json()["transactions"]
    assert [entry["description"] for entry in listed] == ["Untitled", "salary"]


def test_invalid_amount_is_rejected(client: TestClient) -> None:
    _initialise(client)

    response = client.post("/transactions", data={"transaction_type": "expense", "amount": "0"})

    assert response.status_code == 400
    assert client.get("/transactions").json()["transactions"] == []


def test_lookup_and_delete_transaction(client: TestClient) -> None:
    _initialise(client)
    created = client.post(
        "/transactions", data={"transaction_type": "expense", "amount": "5"}
    ).json()

    assert client.get(f"/transactions/{created['id']}").json()["amount"] == 5.0
    assert client.delete(f"/transactions/{created['id']}").json() == {"deleted": True}
    assert client.delete(f"/transactions/{created['id']}").json() == {"deleted": False}
    assert client.get(f"/transactions/{created['id']}").status_code == 404


def test_savings_flow_and_clear(client: TestClient) -> None:
    _initialise(client)
    bonus = client.post("/savings", data={"description": "bonus", "amount": "100"}).json()
    client.post("/savings", data={"description": "gift", "amount": "50"})

    listed = client.get("/savings").json()["savings"]
    assert [entry["description"] for entry in listed] == ["bonus", "gift"]
    assert client.delete(f"/savings/{bonus['id']}").json() == {"deleted": True}
    assert client.get("/summary").json()["totalSavings"] == 50.0

    summary = client.post("/savings/clear").json()
    assert summary["savingsCount"] == 0


def test_projection_uses_configured_default(client: TestClient) -> None:
    _initialise(client)
    client.post("/transactions", data={"transaction_type": "expense", "amount": "5"})
    client.post("/transactions", data={"transaction_type": "expense", "amount": "10"})

    default = client.get("/projection").json()
    shorter = client.get("/projection", params={"days_left": 10}).json()

    assert default["daysLeft"] == 30
    assert default["projectedSavings"] == 375.0
    assert shorter["projectedSavings"] == 125.0
    assert client.get("/projection", params={"days_left": -3}).status_code == 400


def test_reset_returns_to_uninitialised(client: TestClient) -> None:
    _initialise(client)
    client.post("/transactions", data={"transaction_type": "income", "amount": "10"})

    summary = client.post("/reset").json()

    assert summary["active"] is False
    assert summary["dailyAllowance"] == 0.0
    assert summary["totalIncome"] == 0.0
    assert client.post("/transactions/clear").status_code == 409


def test_export_download_and_write(client: TestClient, tmp_path: Path) -> None:
    _initialise(client)
    client.post("/transactions", data={"transaction_type": "income", "amount": "10"})

    download = client.get("/export")
    assert download.status_code == 200
    assert "attachment" in download.headers["content-disposition"]
    assert download.json()["totalIncome"] == 10.0

    written = client.post("/export")
    assert written.status_code == 201
    path = Path(written.json()["path"])
    assert path.parent == tmp_path.resolve()
    assert json.loads(path.read_text(encoding="utf-8"))["dailyAllowance"] == 20.0


@pytest.mark.parametrize("amount", ["1e400", "1e1000000"])
def test_oversized_amount_is_rejected_and_reads_keep_working(client: TestClient, amount: str) -> None:
    _initialise(client)

    transaction = client.post("/transactions", data={"transaction_type": "income", "amount": amount})
    saving = client.post("/savings", data={"amount": amount})

    assert transaction.status_code == 400
    assert saving.status_code == 400
    summary = client.get("/summary")
    assert summary.status_code == 200
    assert summary.json()["transactionCount"] == 0
    assert client.get("/projection").status_code == 200
    assert client.get("/export").status_code == 200


@pytest.mark.parametrize("form", [{"transaction_type": "transfer", "amount": "5"}, {"amount": "5"}])
def test_bad_or_missing_transaction_type_is_rejected(client: TestClient, form: dict) -> None:
    _initialise(client)

    response = client.post("/transactions", data=form)

    assert response.status_code == 400
    assert client.get("/transactions").json()["transactions"] == []


def test_projection_rejects_horizon_beyond_limit(client: TestClient) -> None:
    _initialise(client)

    assert client.get("/projection", params={"days_left": 100000}).status_code == 400


def test_application_applies_configured_log_level(tmp_path: Path) -> None:
    root_logger = logging.getLogger()
    previous = root_logger.level
    try:
        settings = SmartSpendSettings(data_directory=tmp_path, log_level="debug")
        create_application(ledger=Ledger(), settings=settings)
        get_logger("smartspend.tests.later_import")

        assert root_logger.level == logging.DEBUG
    finally:
        root_logger.setLevel(previous)
