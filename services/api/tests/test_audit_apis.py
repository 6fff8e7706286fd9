from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    db_path = tmp_path / "shopdesk_audit.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+pysqlite:///{db_path}")
    monkeypatch.setenv("SHOPDESK_DB_AUTO_CREATE", "true")
    monkeypatch.setenv("SHOPDESK_ABILITY_REGISTRY", "mock")

    from services.api.app.confirmation.factory import reset_confirmation_workflow
    from services.api.app.main import app

    reset_confirmation_workflow()
    with TestClient(app) as c:
        yield c
    reset_confirmation_workflow()


def _chat(client: TestClient, message: str, user_id: str = "admin-1", **extra) -> dict:
    body = {"message": message, "user_id": user_id, "session_id": "sess-1", **extra}
    return client.post("/v1/chat", json=body).json()


def _confirm(client: TestClient, reply: dict, user_id: str = "admin-1") -> None:
    payload = dict(reply["actions"][0]["payload"])
    code = reply["pending_action"]["confirmation_code"]
    if code:
        payload["confirmation_code"] = code
    resp = client.post("/v1/actions/confirm", json={**payload, "user_id": user_id, "session_id": "sess-1"})
    assert resp.status_code in {200, 422}, resp.text


def test_audit_log_records_confirmed_and_cancelled_actions(client: TestClient) -> None:
    _confirm(client, _chat(client, "refund order #1042"))

    coupon = _chat(client, "delete coupon SAVE10")
    client.post("/v1/actions/cancel", json={"confirmation_token": coupon["pending_action"]["confirmation_token"]})

    resp = client.get("/v1/audit-log")
    assert resp.status_code == 200
    rows = resp.json()
    assert len(rows) == 2

    by_status = {row["status"]: row for row in rows}
    refund = by_status["success"]
    assert refund["action_type"] == "confirmed_action"
    assert refund["action_category"] == "orders"
    assert refund["ability_id"] == "shop/orders/refund"
    assert refund["description"] == "Confirmed and executed: Processed order refund #1042"
    assert refund["object_type"] == "order"
    assert refund["object_id"] == 1042
    assert refund["user_id"] == "admin-1"
    assert refund["result"]["status"] == "refunded"

    cancelled = by_status["cancelled"]
    assert cancelled["action_type"] == "cancelled_action"
    assert cancelled["description"] == "Cancelled action: Deleted coupon"
    assert cancelled["object_type"] == "coupon"


def test_audit_log_records_failures(client: TestClient) -> None:
    _confirm(client, _chat(client, "cancel order #1043"))

    rows = client.get("/v1/audit-log", params={"status": "failed"}).json()

    assert len(rows) == 1
    assert rows[0]["ability_id"] == "shop/orders/cancel"
    assert rows[0]["result"] == {"error": "Order #1043 is completed and cannot be cancelled."}


def test_audit_log_filters(client: TestClient) -> None:
    _confirm(client, _chat(client, "mark order #1044 as completed"))
    _confirm(client, _chat(client, "cancel my subscription", user_id="cust-7", caller_context="customer"), "cust-7")

    assert len(client.get("/v1/audit-log", params={"user_id": "cust-7"}).json()) == 1
    assert [r["ability_id"] for r in client.get("/v1/audit-log", params={"category": "orders"}).json()] == [
        "shop/orders/update-status"
    ]
    assert client.get("/v1/audit-log", params={"category": "coupons"}).json() == []
    assert len(client.get("/v1/audit-log", params={"limit": 1}).json()) == 1
    assert client.get("/v1/audit-log", params={"limit": 0}).status_code == 422
    assert client.get("/v1/audit-log", params={"limit": 201}).status_code == 422


def test_audit_stats(client: TestClient) -> None:
    _confirm(client, _chat(client, "mark order #1044 as completed"))
    _confirm(client, _chat(client, "cancel my subscription", user_id="cust-7", caller_context="customer"), "cust-7")

    resp = client.get("/v1/audit-log/stats", params={"days": 7})
    assert resp.status_code == 200

    stats = resp.json()
    assert stats["total"] == 2
    assert stats["period_days"] == 7
    assert stats["by_status"] == {"success": 2}
    assert stats["by_category"] == {"orders": 1, "customer": 1}
    assert stats["by_user_type"] == {"admin": 1, "customer": 1}


def test_chat_request_detail_lists_events(client: TestClient) -> None:
    reply = _chat(client, "refund order #1042")
    chat_request_id = reply["chat_request_id"]

    resp = client.get(f"/v1/chat-requests/{chat_request_id}")
    assert resp.status_code == 200

    detail = resp.json()
    assert detail["chat_request_id"] == chat_request_id
    assert detail["message"] == "refund order #1042"
    assert detail["caller_context"] == "admin"
    assert detail["matches"][0]["ability_id"] == "shop/orders/refund"

    event_types = {e["event_type"] for e in detail["events"]}
    assert event_types == {"MESSAGE_RECEIVED", "INTENT_CLASSIFIED", "CONFIRMATION_REQUESTED"}

    requested = next(e for e in detail["events"] if e["event_type"] == "CONFIRMATION_REQUESTED")
    assert requested["entity_type"] == "PendingConfirmation"
    assert requested["entity_id"] == reply["pending_action"]["confirmation_token"]


def test_chat_request_not_found(client: TestClient) -> None:
    resp = client.get("/v1/chat-requests/does-not-exist")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Chat request not found"
