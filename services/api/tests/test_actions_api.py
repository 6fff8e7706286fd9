from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from services.api.app.services.ability_base import AbilityNotFoundError, AbilityParameterError


@pytest.fixture()
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    db_path = tmp_path / "shopdesk_actions.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+pysqlite:///{db_path}")
    monkeypatch.setenv("SHOPDESK_DB_AUTO_CREATE", "true")
    monkeypatch.setenv("SHOPDESK_ABILITY_REGISTRY", "mock")

    from services.api.app.confirmation.factory import reset_confirmation_workflow
    from services.api.app.main import app

    reset_confirmation_workflow()
    with TestClient(app) as c:
        yield c
    reset_confirmation_workflow()


def _pending(client: TestClient, message: str, user_id: str = "admin-1") -> dict:
    reply = client.post("/v1/chat", json={"message": message, "user_id": user_id, "session_id": "sess-1"}).json()
    assert reply["type"] == "CONFIRM", reply
    return reply["pending_action"]


def _confirm(client: TestClient, token: str, user_id: str = "admin-1", code: str | None = None):
    body = {"confirmation_token": token, "user_id": user_id, "session_id": "sess-1"}
    if code is not None:
        body["confirmation_code"] = code
    return client.post("/v1/actions/confirm", json=body)


def test_confirm_refund_executes_once(client: TestClient) -> None:
    token = _pending(client, "refund order #1042")["confirmation_token"]

    done = _confirm(client, token, code="refund")
    assert done.status_code == 200, done.text
    body = done.json()
    assert body["success"] is True
    assert body["message"] == "Action completed: Refund full amount from Order #1042"
    assert body["result"]["status"] == "refunded"

    again = _confirm(client, token, code="REFUND")
    assert again.status_code == 410
    assert again.json()["detail"]["code"] == "confirmation_expired"

    order = client.post("/v1/chat", json={"message": "show order #1042", "user_id": "admin-1", "session_id": "s"})
    assert order.json()["results"]["order_get"]["status"] == "refunded"


def test_wrong_code_is_400_and_token_survives(client: TestClient) -> None:
    token = _pending(client, "refund order #1042")["confirmation_token"]

    bad = _confirm(client, token, code="YES")
    assert bad.status_code == 400
    assert bad.json()["detail"] == {
        "code": "confirmation_code_invalid",
        "message": 'Invalid confirmation code. Please type "REFUND" to confirm.',
    }

    assert _confirm(client, token, code="REFUND").status_code == 200


def test_confirm_button_payload_alone_needs_typed_code(client: TestClient) -> None:
    reply = client.post(
        "/v1/chat", json={"message": "refund order #1042", "user_id": "admin-1", "session_id": "sess-1"}
    ).json()
    button = reply["actions"][0]

    resp = client.post("/v1/actions/confirm", json={**button["payload"], "user_id": "admin-1", "session_id": "sess-1"})
    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == "confirmation_code_invalid"

    token = reply["pending_action"]["confirmation_token"]
    assert _confirm(client, token, code="REFUND").status_code == 200


def test_other_user_is_403_and_token_survives(client: TestClient) -> None:
    token = _pending(client, "delete product #12")["confirmation_token"]

    denied = _confirm(client, token, user_id="someone-else", code="DELETE")
    assert denied.status_code == 403
    assert denied.json()["detail"]["code"] == "confirmation_invalid_user"

    assert _confirm(client, token, code="DELETE").status_code == 200


def test_unknown_token_is_410(client: TestClient) -> None:
    resp = _confirm(client, "0" * 32)
    assert resp.status_code == 410
    assert resp.json()["detail"]["message"] == "This confirmation has expired. Please try again."


def test_failed_ability_is_422_and_consumes_token(client: TestClient) -> None:
    token = _pending(client, "cancel order #1043")["confirmation_token"]

    failed = _confirm(client, token, code="CANCEL")
    assert failed.status_code == 422
    assert failed.json()["detail"] == {
        "code": "ability_error",
        "message": "Order #1043 is completed and cannot be cancelled.",
    }

    assert _confirm(client, token, code="CANCEL").status_code == 410


def test_cancel_drops_pending_action(client: TestClient) -> None:
    token = _pending(client, "create coupon FALL20 for 20% off")["confirmation_token"]

    first = client.post("/v1/actions/cancel", json={"confirmation_token": token})
    second = client.post("/v1/actions/cancel", json={"confirmation_token": token})

    assert first.json() == {"success": True}
    assert second.json() == {"success": False}
    assert _confirm(client, token).status_code == 410


class _RaisingWorkflow:
    def __init__(self, error: Exception) -> None:
        self.error = error

    def peek(self, token: str) -> None:
        return None

    def redeem(self, token, requester, confirmation_code=None):
        raise self.error


@pytest.mark.parametrize(
    ("error", "status_code", "code"),
    [
        (AbilityNotFoundError("shop/orders/teleport"), 404, "ability_not_found"),
        (AbilityParameterError.missing("order_id"), 422, "ability_invalid_parameter"),
    ],
)
def test_ability_errors_are_mapped(
    client: TestClient, monkeypatch: pytest.MonkeyPatch, error: Exception, status_code: int, code: str
) -> None:
    import services.api.app.routers.actions as actions_router

    monkeypatch.setattr(actions_router, "get_confirmation_workflow", lambda: _RaisingWorkflow(error))

    resp = _confirm(client, "a" * 32)

    assert resp.status_code == status_code
    assert resp.json()["detail"] == {"code": code, "message": str(error)}


def test_unexpected_errors_are_500(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    import services.api.app.routers.actions as actions_router

    monkeypatch.setattr(actions_router, "get_confirmation_workflow", lambda: _RaisingWorkflow(RuntimeError("disk on fire")))

    resp = _confirm(client, "a" * 32)

    assert resp.status_code == 500
    assert resp.json()["detail"] == "Internal Server Error"


def test_unknown_registry_setting_is_500(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    from services.api.app.confirmation.factory import reset_confirmation_workflow

    reset_confirmation_workflow()
    monkeypatch.setenv("SHOPDESK_ABILITY_REGISTRY", "woocommerce")

    resp = client.post("/v1/actions/cancel", json={"confirmation_token": "a" * 32})

    assert resp.status_code == 500
    assert "Unknown SHOPDESK_ABILITY_REGISTRY" in resp.json()["detail"]
