from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from packages.shared.schemas.confirmation import ConfirmationLevelV1
from packages.shared.schemas.events import AuditActionTypeV1, AuditStatusV1
from services.api.app.confirmation.errors import (
    ConfirmationExpiredError,
    InvalidConfirmationCodeError,
    WrongUserError,
)
from services.api.app.confirmation.workflow import ActionConfirmationWorkflow, Requester
from services.api.app.services.ability_base import AbilityExecutionError
from services.api.app.services.ability_mock import MockAbilityRegistry
from services.api.app.services.audit_log import AuditRecord, MemoryAuditSink

ADMIN = Requester(user_id="admin-1", session_id="sess-1")


class FakeClock:
    def __init__(self, now: float = 1_760_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class BrokenAuditSink:
    def record(self, entry: AuditRecord) -> None:
        raise RuntimeError("audit database is down")


@pytest.fixture()
def registry() -> MockAbilityRegistry:
    return MockAbilityRegistry()


@pytest.fixture()
def audit() -> MemoryAuditSink:
    return MemoryAuditSink()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def workflow(registry: MockAbilityRegistry, audit: MemoryAuditSink, clock: FakeClock) -> ActionConfirmationWorkflow:
    return ActionConfirmationWorkflow(registry, audit=audit, clock=clock)


def test_read_ability_needs_no_confirmation(workflow: ActionConfirmationWorkflow) -> None:
    request = workflow.create("shop/orders/get", {"order_id": 1042}, ADMIN)

    assert request.requires_confirmation is False
    assert request.confirmation_token is None
    assert len(workflow.store) == 0


def test_full_refund_request(workflow: ActionConfirmationWorkflow, clock: FakeClock) -> None:
    request = workflow.create("shop/orders/refund", {"order_id": 1042, "restock_items": True}, ADMIN)

    assert request.requires_confirmation is True
    assert request.level == ConfirmationLevelV1.DOUBLE
    assert request.preview == "Refund full amount from Order #1042"
    assert request.confirmation_code == "REFUND"
    assert request.is_destructive is True
    assert request.action_name == "Refund Order"
    assert request.expires_in == 300
    assert request.action_summary is not None
    assert request.action_summary.title == "Process Refund"
    assert request.action_summary.details == ["Order #1042"]
    assert request.warning_message.startswith("This will process a refund")
    assert len(request.confirmation_token) == 32


def test_single_level_has_no_code(workflow: ActionConfirmationWorkflow) -> None:
    request = workflow.create("shop/orders/update-status", {"order_id": 1042, "status": "completed"}, ADMIN)

    assert request.level == ConfirmationLevelV1.SINGLE
    assert request.confirmation_code is None
    assert request.preview == 'Change Order #1042 status to "Completed"'

    result = workflow.redeem(request.confirmation_token, ADMIN)
    assert result.success is True


def test_tokens_are_unique(workflow: ActionConfirmationWorkflow) -> None:
    tokens = {workflow.create("shop/products/delete", {"product_id": 12}, ADMIN).confirmation_token for _ in range(50)}
    assert len(tokens) == 50


def test_redeem_executes_once_and_audits(
    workflow: ActionConfirmationWorkflow, registry: MockAbilityRegistry, audit: MemoryAuditSink
) -> None:
    token = workflow.create("shop/orders/refund", {"order_id": 1042}, ADMIN).confirmation_token

    result = workflow.redeem(token, ADMIN, confirmation_code="REFUND")

    assert result.success is True
    assert result.message == "Action completed: Refund full amount from Order #1042"
    assert result.result["status"] == "refunded"
    assert registry.calls == [("shop/orders/refund", {"order_id": 1042})]

    [record] = audit.records
    assert record.action_type is AuditActionTypeV1.CONFIRMED_ACTION
    assert record.status is AuditStatusV1.SUCCESS
    assert record.description == "Confirmed and executed: Processed order refund #1042"
    assert record.session_id == "sess-1"

    with pytest.raises(ConfirmationExpiredError):
        workflow.redeem(token, ADMIN, confirmation_code="REFUND")
    assert len(registry.calls) == 1


def test_code_is_trimmed_and_case_insensitive(workflow: ActionConfirmationWorkflow) -> None:
    token = workflow.create("shop/coupons/delete", {"code": "SAVE10"}, ADMIN).confirmation_token
    assert workflow.redeem(token, ADMIN, confirmation_code="  delete ").success is True


def test_wrong_code_keeps_token_redeemable(
    workflow: ActionConfirmationWorkflow, registry: MockAbilityRegistry
) -> None:
    token = workflow.create("shop/orders/refund", {"order_id": 1042}, ADMIN).confirmation_token

    with pytest.raises(InvalidConfirmationCodeError, match='Please type "REFUND" to confirm.') as excinfo:
        workflow.redeem(token, ADMIN, confirmation_code="REFUN")
    assert excinfo.value.expected_code == "REFUND"

    with pytest.raises(InvalidConfirmationCodeError):
        workflow.redeem(token, ADMIN)

    assert registry.calls == []
    assert workflow.redeem(token, ADMIN, confirmation_code="REFUND").success is True


def test_other_user_cannot_redeem(workflow: ActionConfirmationWorkflow, registry: MockAbilityRegistry) -> None:
    token = workflow.create("shop/products/delete", {"product_id": 12}, ADMIN).confirmation_token

    with pytest.raises(WrongUserError, match="belongs to a different user"):
        workflow.redeem(token, Requester(user_id="intruder"), confirmation_code="DELETE")

    assert registry.calls == []
    assert workflow.peek(token) is not None
    assert workflow.redeem(token, ADMIN, confirmation_code="DELETE").success is True


def test_token_expires_after_ttl(workflow: ActionConfirmationWorkflow, clock: FakeClock) -> None:
    token = workflow.create("shop/products/delete", {"product_id": 12}, ADMIN).confirmation_token

    clock.now += 301

    with pytest.raises(ConfirmationExpiredError, match="has expired"):
        workflow.redeem(token, ADMIN, confirmation_code="DELETE")


def test_unknown_token_reads_as_expired(workflow: ActionConfirmationWorkflow) -> None:
    with pytest.raises(ConfirmationExpiredError):
        workflow.redeem("f" * 32, ADMIN)


def test_failed_execution_consumes_token(
    workflow: ActionConfirmationWorkflow, audit: MemoryAuditSink
) -> None:
    token = workflow.create("shop/orders/refund", {"order_id": 9999}, ADMIN).confirmation_token

    with pytest.raises(AbilityExecutionError, match="Order #9999 not found."):
        workflow.redeem(token, ADMIN, confirmation_code="REFUND")

    [record] = audit.records
    assert record.status is AuditStatusV1.FAILED
    assert record.result == {"error": "Order #9999 not found."}

    with pytest.raises(ConfirmationExpiredError):
        workflow.redeem(token, ADMIN, confirmation_code="REFUND")


def test_cancel_is_idempotent_and_audited(
    workflow: ActionConfirmationWorkflow, registry: MockAbilityRegistry, audit: MemoryAuditSink
) -> None:
    token = workflow.create("shop/subscriptions/cancel", {"subscription_id": 301}, ADMIN).confirmation_token

    assert workflow.cancel(token) is True
    assert workflow.cancel(token) is False
    assert registry.calls == []

    [record] = audit.records
    assert record.action_type is AuditActionTypeV1.CANCELLED_ACTION
    assert record.status is AuditStatusV1.CANCELLED
    assert record.description == "Cancelled action: Cancelled subscription #301"

    with pytest.raises(ConfirmationExpiredError):
        workflow.redeem(token, ADMIN, confirmation_code="CANCEL")


def test_audit_failure_does_not_fail_redeem(registry: MockAbilityRegistry, caplog: pytest.LogCaptureFixture) -> None:
    workflow = ActionConfirmationWorkflow(registry, audit=BrokenAuditSink())
    token = workflow.create("shop/orders/add-note", {"order_id": 1042, "note": "Called"}, ADMIN).confirmation_token

    result = workflow.redeem(token, ADMIN)

    assert result.success is True
    assert "Audit sink failed" in caplog.text


def test_concurrent_redeems_execute_once(registry: MockAbilityRegistry) -> None:
    workflow = ActionConfirmationWorkflow(registry)
    token = workflow.create("shop/orders/refund", {"order_id": 1042, "amount": 10.0}, ADMIN).confirmation_token

    workers = 100
    barrier = threading.Barrier(workers)

    def attempt() -> str:
        barrier.wait()
        try:
            workflow.redeem(token, ADMIN, confirmation_code="REFUND")
        except ConfirmationExpiredError:
            return "expired"
        return "ok"

    with ThreadPoolExecutor(max_workers=workers) as pool:
        outcomes = list(pool.map(lambda _: attempt(), range(workers)))

    assert outcomes.count("ok") == 1
    assert outcomes.count("expired") == workers - 1
    assert len(registry.calls) == 1
    assert len(registry.orders[1042]["refunds"]) == 1
