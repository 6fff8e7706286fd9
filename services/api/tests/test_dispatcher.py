from __future__ import annotations

import logging

import pytest
from packages.shared.schemas.intent import CallerContextV1
from services.api.app.confirmation.workflow import ActionConfirmationWorkflow, Requester
from services.api.app.intents.base import PatternTable, pattern
from services.api.app.intents.classifier import IntentClassifier
from services.api.app.intents.table import build_pattern_table
from services.api.app.services.ability_mock import MockAbilityRegistry
from services.api.app.services.dispatcher import MAX_DISPATCHED_RESULTS, Dispatcher

ADMIN = Requester(user_id="admin-1")


@pytest.fixture()
def registry() -> MockAbilityRegistry:
    return MockAbilityRegistry()


def _dispatcher(registry: MockAbilityRegistry, *patterns) -> Dispatcher:
    table = PatternTable(patterns) if patterns else build_pattern_table()
    return Dispatcher(IntentClassifier(table), ActionConfirmationWorkflow(registry))


def test_unrecognised_message_dispatches_nothing(registry: MockAbilityRegistry) -> None:
    outcome = _dispatcher(registry).dispatch("what's the weather like", ADMIN)

    assert outcome.understood is False
    assert outcome.results == {}
    assert outcome.pending_action is None
    assert registry.calls == []


def test_reads_are_capped(registry: MockAbilityRegistry) -> None:
    dispatcher = _dispatcher(
        registry,
        pattern("orders", ability_id="shop/orders/list", keywords=("everything",)),
        pattern("products", ability_id="shop/products/list", keywords=("everything",)),
        pattern("customers", ability_id="shop/customers/list", keywords=("everything",)),
        pattern("coupons", ability_id="shop/coupons/list", keywords=("everything",)),
    )

    outcome = dispatcher.dispatch("show me everything", ADMIN)

    assert len(outcome.matches) == 4
    assert list(outcome.results) == ["orders", "products", "customers"]
    assert len(registry.calls) == MAX_DISPATCHED_RESULTS


def test_same_ability_runs_once(registry: MockAbilityRegistry) -> None:
    dispatcher = _dispatcher(
        registry,
        pattern("orders_a", ability_id="shop/orders/list", keywords=("orders",), priority=2),
        pattern("orders_b", ability_id="shop/orders/list", keywords=("orders",), priority=1),
    )

    outcome = dispatcher.dispatch("list orders", ADMIN)

    assert list(outcome.results) == ["orders_a"]
    assert len(registry.calls) == 1


def test_action_is_parked_not_executed(registry: MockAbilityRegistry) -> None:
    outcome = _dispatcher(registry).dispatch("refund order #1042", ADMIN)

    assert outcome.pending_action is not None
    assert outcome.pending_action.ability_id == "shop/orders/refund"
    assert outcome.pending_action.confirmation_code == "REFUND"
    assert outcome.results == {}
    assert registry.calls == []
    assert registry.orders[1042]["status"] == "processing"


def test_reads_before_the_action_still_run(registry: MockAbilityRegistry) -> None:
    fixed = lambda message: {"order_id": 1042}
    dispatcher = _dispatcher(
        registry,
        pattern("order_get", ability_id="shop/orders/get", regexes=(r"order\s*#?\s*\d+",), priority=20, extractor=fixed),
        pattern("cancel", ability_id="shop/orders/cancel", regexes=(r"order\s*#?\s*\d+",), is_action=True, extractor=fixed),
        pattern("products", ability_id="shop/products/list", regexes=(r"order\s*#?\s*\d+",)),
    )

    outcome = dispatcher.dispatch("cancel order #1042", ADMIN)

    assert list(outcome.results) == ["order_get"]
    assert outcome.pending_action is not None
    assert outcome.pending_action.ability_id == "shop/orders/cancel"
    assert [call[0] for call in registry.calls] == ["shop/orders/get"]


def test_action_without_confirmation_level_executes(registry: MockAbilityRegistry) -> None:
    dispatcher = _dispatcher(
        registry,
        pattern("tax_rates", ability_id="shop/store/tax-rates", keywords=("tax",), is_action=True),
    )

    outcome = dispatcher.dispatch("tax rates", ADMIN)

    assert outcome.pending_action is None
    assert "tax_rates" in outcome.results


def test_ability_errors_are_collected(registry: MockAbilityRegistry) -> None:
    outcome = _dispatcher(registry).dispatch("show order #9999", ADMIN)

    assert outcome.understood is True
    assert outcome.errors["order_get"] == "Order #9999 not found."
    assert "order_get" not in outcome.results


def test_unregistered_abilities_are_discarded(
    registry: MockAbilityRegistry, caplog: pytest.LogCaptureFixture
) -> None:
    dispatcher = _dispatcher(
        registry,
        pattern("ghost", ability_id="shop/ghosts/list", keywords=("orders",)),
        pattern("orders", ability_id="shop/orders/list", keywords=("orders",)),
    )

    with caplog.at_level(logging.WARNING):
        outcome = dispatcher.dispatch("list orders", ADMIN)

    assert [m.intent_name for m in outcome.matches] == ["orders"]
    assert "shop/ghosts/list" in caplog.text


def test_customer_context_routes_to_self_service(registry: MockAbilityRegistry) -> None:
    customer = Requester(user_id="cust-7", user_type="customer")

    outcome = _dispatcher(registry).dispatch("cancel my subscription", customer, CallerContextV1.CUSTOMER)

    assert outcome.pending_action is not None
    assert outcome.pending_action.ability_id == "shop/customer/cancel-subscription"
    assert outcome.pending_action.preview == "Cancel your subscription"
