from __future__ import annotations

import logging

import pytest
from packages.shared.schemas.intent import CallerContextV1, PatternScopeV1
from services.api.app.intents.base import PatternTable, pattern
from services.api.app.intents.classifier import IntentClassifier
from services.api.app.intents.table import build_pattern_table


def _classifier(*patterns) -> IntentClassifier:
    return IntentClassifier(PatternTable(patterns))


def test_no_overlap_returns_empty_list() -> None:
    classifier = _classifier(
        pattern("greeting", ability_id="x/y/hello", keywords=("hello",), regexes=(r"\bhi\b",)),
    )
    assert classifier.classify("what's the weather like") == []
    assert classifier.get_best_match("what's the weather like") is None


def test_empty_message_never_fails() -> None:
    classifier = IntentClassifier(build_pattern_table())
    assert classifier.classify("") == []


def test_keyword_scores_one_and_regex_scores_three() -> None:
    classifier = _classifier(
        pattern("kw", ability_id="x/y/kw", keywords=("stock",)),
        pattern("rx", ability_id="x/y/rx", regexes=(r"stock\s+level",)),
        pattern("both", ability_id="x/y/both", keywords=("stock", "level"), regexes=(r"stock\s+level",)),
    )

    scores = {m.intent_name: m.score for m in classifier.classify("Stock Level please")}

    assert scores == {"kw": 1, "rx": 3, "both": 5}


def test_keywords_match_case_insensitively() -> None:
    classifier = _classifier(pattern("kw", ability_id="x/y/kw", keywords=("Low Stock",)))
    match = classifier.get_best_match("show me LOW STOCK items")
    assert match is not None
    assert match.score == 1


def test_orders_by_score_then_priority() -> None:
    classifier = _classifier(
        pattern("low_score_high_priority", ability_id="x/y/a", keywords=("order",), priority=99),
        pattern("high_score", ability_id="x/y/b", keywords=("order",), regexes=(r"order\s+\d+",), priority=1),
        pattern("tie_low_priority", ability_id="x/y/c", keywords=("order", "status"), priority=2),
        pattern("tie_high_priority", ability_id="x/y/d", keywords=("order", "status"), priority=7),
    )

    names = [m.intent_name for m in classifier.classify("order 42 status")]

    assert names == ["high_score", "tie_high_priority", "tie_low_priority", "low_score_high_priority"]


def test_full_ties_keep_registration_order() -> None:
    classifier = _classifier(
        pattern("first", ability_id="x/y/a", keywords=("refund",)),
        pattern("second", ability_id="x/y/b", keywords=("refund",)),
        pattern("third", ability_id="x/y/c", keywords=("refund",)),
    )

    assert [m.intent_name for m in classifier.classify("refund")] == ["first", "second", "third"]


def test_extractor_receives_original_case_message() -> None:
    seen: list[str] = []

    def extractor(message: str) -> dict:
        seen.append(message)
        return {"code": message.split()[-1]}

    classifier = _classifier(pattern("coupon", ability_id="x/y/c", keywords=("coupon",), extractor=extractor))
    match = classifier.get_best_match("Look up coupon SaveBig")

    assert seen == ["Look up coupon SaveBig"]
    assert match is not None
    assert match.params == {"code": "SaveBig"}


def test_raising_extractor_yields_empty_params(caplog: pytest.LogCaptureFixture) -> None:
    def broken(message: str) -> dict:
        raise RuntimeError("boom")

    classifier = _classifier(pattern("broken", ability_id="x/y/z", keywords=("orders",), extractor=broken))

    with caplog.at_level(logging.WARNING):
        match = classifier.get_best_match("list orders")

    assert match is not None
    assert match.params == {}
    assert "broken" in caplog.text


def test_match_carries_action_flag_and_scope() -> None:
    classifier = _classifier(
        pattern("act", ability_id="x/y/act", keywords=("do it",), is_action=True, scope=PatternScopeV1.ANY),
    )
    match = classifier.get_best_match("please do it")
    assert match is not None
    assert match.is_action is True
    assert match.scope == PatternScopeV1.ANY


def test_scope_filters_patterns_before_scoring() -> None:
    classifier = _classifier(
        pattern("admin_only", ability_id="x/admin/a", keywords=("subscription",)),
        pattern("customer_only", ability_id="x/customer/c", keywords=("subscription",), scope=PatternScopeV1.CUSTOMER),
        pattern("shared", ability_id="x/any/s", keywords=("subscription",), scope=PatternScopeV1.ANY),
    )

    admin = [m.intent_name for m in classifier.classify("my subscription", scope=CallerContextV1.ADMIN)]
    customer = [m.intent_name for m in classifier.classify("my subscription", scope=CallerContextV1.CUSTOMER)]
    unscoped = [m.intent_name for m in classifier.classify("my subscription")]

    assert admin == ["admin_only", "shared"]
    assert customer == ["customer_only", "shared"]
    assert unscoped == ["admin_only", "customer_only", "shared"]


@pytest.fixture(scope="module")
def store_classifier() -> IntentClassifier:
    return IntentClassifier(build_pattern_table())


def test_refund_order_routes_to_refund_action(store_classifier: IntentClassifier) -> None:
    match = store_classifier.get_best_match("refund order #1042", scope=CallerContextV1.ADMIN)

    assert match is not None
    assert match.ability_id == "shop/orders/refund"
    assert match.is_action is True
    assert match.params["order_id"] == 1042
    assert "amount" not in match.params


def test_partial_refund_beats_order_lookup_on_priority(store_classifier: IntentClassifier) -> None:
    matches = store_classifier.classify("refund $25 from order #1042", scope=CallerContextV1.ADMIN)
    by_name = {m.intent_name: m for m in matches}

    assert matches[0].ability_id == "shop/orders/refund"
    assert matches[0].params["amount"] == 25.0
    assert by_name["order_get"].score == matches[0].score


@pytest.mark.parametrize(
    ("message", "ability_id"),
    [
        ("show order #1042", "shop/orders/get"),
        ("mark order #1042 as completed", "shop/orders/update-status"),
        ("delete product #12", "shop/products/delete"),
        ("update product #12 price to $19.99", "shop/products/update"),
        ("create coupon SAVE10 for 10% off", "shop/coupons/create"),
        ("delete coupon SAVE10 permanently", "shop/coupons/delete"),
    ],
)
def test_store_table_top_matches(store_classifier: IntentClassifier, message: str, ability_id: str) -> None:
    match = store_classifier.get_best_match(message, scope=CallerContextV1.ADMIN)
    assert match is not None
    assert match.ability_id == ability_id


def test_customer_scope_never_sees_admin_actions(store_classifier: IntentClassifier) -> None:
    matches = store_classifier.classify("refund order #1042", scope=CallerContextV1.CUSTOMER)
    assert all(m.scope != PatternScopeV1.ADMIN for m in matches)


def test_customer_cancel_routes_to_self_service(store_classifier: IntentClassifier) -> None:
    match = store_classifier.get_best_match("cancel my subscription", scope=CallerContextV1.CUSTOMER)
    assert match is not None
    assert match.ability_id == "shop/customer/cancel-subscription"

    admin = store_classifier.classify("cancel my subscription", scope=CallerContextV1.ADMIN)
    assert not any(m.ability_id.startswith("shop/customer/") for m in admin)
