"""Tests for the HTTP API."""

import logging

import pytest
from fastapi.testclient import TestClient

from payment_instructions.api import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def request_body(instruction):
    return {
        "accounts": [
            {"id": "A1", "balance": 1000, "currency": "GHS"},
            {"id": "B1", "balance": 200, "currency": "GHS"},
        ],
        "instruction": instruction,
    }


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_successful_transfer(client):
    response = client.post(
        "/payment-instructions",
        json=request_body("debit 250 ghs from account A1 for credit to account B1"),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "successful"
    assert body["status_code"] == "AP00"
    assert body["currency"] == "GHS"
    assert body["accounts"] == [
        {"id": "A1", "balance": 750, "balance_before": 1000, "currency": "GHS"},
        {"id": "B1", "balance": 450, "balance_before": 200, "currency": "GHS"},
    ]


def test_failed_outcome_still_answers_200(client):
    response = client.post(
        "/payment-instructions",
        json=request_body("DEBIT 250 GHS FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT C9"),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "failed"
    assert body["status_code"] == "AC03"
    assert [account["id"] for account in body["accounts"]] == ["A1"]


def test_unparseable_instruction(client):
    response = client.post("/payment-instructions", json=request_body("send money please"))

    body = response.json()
    assert body["status_code"] == "SY03"
    assert body["type"] is None
    assert body["accounts"] == []


def test_malformed_body(client):
    response = client.post("/payment-instructions", json={"accounts": [], "instruction": 12})

    assert response.status_code == 200
    body = response.json()
    assert body["status_code"] == "SY01"
    assert "instruction must be a string" in body["status_reason"]


def test_invalid_json(client):
    response = client.post(
        "/payment-instructions",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 200
    assert response.json()["status_code"] == "SY01"


def test_overlong_amount_is_unparseable(client):
    instruction = "DEBIT " + "9" * 5000 + " GHS FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1"
    response = client.post("/payment-instructions", json=request_body(instruction))

    assert response.status_code == 200
    body = response.json()
    assert body["status_code"] == "SY03"
    assert body["amount"] is None


def test_future_date_is_pending(client):
    response = client.post(
        "/payment-instructions",
        json=request_body("CREDIT 100 GHS TO ACCOUNT B1 FOR DEBIT FROM ACCOUNT A1 ON 2099-01-01"),
    )

    body = response.json()
    assert body["status"] == "pending"
    assert body["status_code"] == "AP01"
    assert body["execute_by"] == "2099-01-01"
    assert body["accounts"] == [
        {"id": "A1", "balance": 1000, "balance_before": 1000, "currency": "GHS"},
        {"id": "B1", "balance": 200, "balance_before": 200, "currency": "GHS"},
    ]


def test_same_account_lists_it_once(client):
    response = client.post(
        "/payment-instructions",
        json=request_body("DEBIT 100 GHS FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT A1"),
    )

    body = response.json()
    assert body["status_code"] == "AC02"
    assert body["accounts"] == [
        {"id": "A1", "balance": 1000, "balance_before": 1000, "currency": "GHS"},
    ]


def test_failures_are_not_kept_in_memory(client):
    for _ in range(5):
        client.post("/payment-instructions", json=request_body("send money please"))

    assert client.app.state.service.error_handler is None


def test_create_app_leaves_logging_alone():
    package_logger = logging.getLogger("payment_instructions")
    marker = logging.NullHandler()
    package_logger.addHandler(marker)
    propagate = package_logger.propagate
    try:
        create_app()
        assert marker in package_logger.handlers
        assert package_logger.propagate == propagate
    finally:
        package_logger.removeHandler(marker)
