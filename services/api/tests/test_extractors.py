from __future__ import annotations

from datetime import date

import pytest
from services.api.app.intents import extractors as ex
from services.api.app.intents import integration_extractors as ix

# A Sunday.
TODAY = date(2026, 10, 18)


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        ("where is order #1042?", {"order_id": 1042}),
        ("order 77 please", {"order_id": 77}),
        ("status of 5512", {"order_id": 5512}),
        ("status of 42", {}),
        ("hello there", {}),
    ],
)
def test_extract_order_id(message: str, expected: dict) -> None:
    assert ex.extract_order_id(message) == expected


def test_order_list_caps_limit_and_reads_status() -> None:
    assert ex.extract_order_list_params("show last 80 processing orders") == {"limit": 50, "status": "processing"}
    assert ex.extract_order_list_params("list orders") == {"limit": 10}


def test_order_search_keeps_email_case() -> None:
    params = ex.extract_order_search_params("orders from Ana.Silva@Example.com")
    assert params == {"limit": 10, "email": "Ana.Silva@Example.com"}


def test_refund_without_amount_is_full_refund() -> None:
    assert ex.extract_refund_params("refund order #1042") == {"order_id": 1042, "restock_items": True}


def test_refund_amount_and_reason() -> None:
    params = ex.extract_refund_params("refund $25 from order #1042")
    assert params == {"order_id": 1042, "amount": 25.0, "restock_items": True}

    params = ex.extract_refund_params("refund order #1042 for damaged item")
    assert params["order_id"] == 1042
    assert params["reason"] == "damaged item"
    assert "amount" not in params


def test_refund_bare_order_number_is_not_an_amount() -> None:
    params = ex.extract_refund_params("refund order 1042 for damaged item")
    assert params == {"order_id": 1042, "reason": "damaged item", "restock_items": True}

    params = ex.extract_refund_params("refund 25 for order 1042")
    assert params["order_id"] == 1042
    assert params["amount"] == 25.0


def test_order_status_update_maps_synonyms() -> None:
    assert ex.extract_order_status_update_params("mark order #1042 as shipped") == {
        "order_id": 1042,
        "status": "completed",
    }
    assert ex.extract_order_status_update_params("put order #9 on hold")["status"] == "on-hold"


def test_order_note_text_sources() -> None:
    quoted = ex.extract_order_note_params('add note to order #1042: "Customer called about delivery"')
    assert quoted == {"order_id": 1042, "note": "Customer called about delivery", "is_customer_note": True}

    colon = ex.extract_order_note_params("add note to order #55: left at door")
    assert colon == {"order_id": 55, "note": "left at door", "is_customer_note": False}


def test_low_stock_threshold_defaults() -> None:
    assert ex.extract_low_stock_params("low stock products") == {"threshold": 10, "limit": 20}
    assert ex.extract_low_stock_params("products with stock less than 3") == {"threshold": 3, "limit": 20}


def test_product_id_prefers_sku() -> None:
    assert ex.extract_product_id("product sku: MUG-BLUE") == {"sku": "MUG-BLUE"}
    assert ex.extract_product_id("show product #12") == {"product_id": 12}


def test_create_product_defaults_to_draft() -> None:
    params = ex.extract_create_product_params('create product called "Linen Apron" at $24.50')
    assert params == {"name": "Linen Apron", "regular_price": "24.50", "status": "draft"}


def test_update_product_price_and_stock_do_not_collide() -> None:
    assert ex.extract_update_product_params("update product #12 price to $19.99") == {
        "product_id": 12,
        "price": "19.99",
    }
    assert ex.extract_update_product_params("update product #12 stock to 40") == {
        "product_id": 12,
        "stock_quantity": 40,
    }


def test_delete_product_force_flag() -> None:
    assert ex.extract_delete_product_params("delete product #12") == {"product_id": 12, "force": False}
    assert ex.extract_delete_product_params("permanently delete product #12")["force"] is True


def test_create_coupon_percent_and_fixed() -> None:
    assert ex.extract_create_coupon_params("create coupon SAVE10 for 10% off") == {
        "code": "SAVE10",
        "amount": "10",
        "discount_type": "percent",
    }
    # "for" is never taken as the code.
    assert ex.extract_create_coupon_params("create a coupon for $5 off") == {
        "amount": "5",
        "discount_type": "fixed_cart",
    }


def test_coupon_reference_by_code_or_id() -> None:
    assert ex.extract_delete_coupon_params("delete coupon save10 permanently") == {"code": "SAVE10", "force": True}
    assert ex.extract_delete_coupon_params("remove coupon #501") == {"coupon_id": 501, "force": False}
    assert ex.extract_update_coupon_params("update coupon WELCOME10 to 15%") == {"code": "WELCOME10", "amount": "15"}


def test_coupon_code_is_upper_cased() -> None:
    assert ex.extract_coupon_code('look up coupon "summer5"') == {"code": "SUMMER5"}


def test_days_are_capped_and_named() -> None:
    assert ex.extract_days_params("refunds in the last 500 days") == {"days": 365}
    assert ex.extract_days_params("refunds this week") == {"days": 7}
    assert ex.extract_days_params("refunds this month") == {"days": 30}
    assert ex.extract_days_params("refunds") == {}


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("on 2026-12-01", "2026-12-01"),
        ("tomorrow", "2026-10-19"),
        ("yesterday", "2026-10-17"),
        ("today", "2026-10-18"),
        ("next friday", "2026-10-23"),
        ("next sunday", "2026-10-25"),
        ("sometime", None),
    ],
)
def test_resolve_relative_date(text: str, expected: str | None) -> None:
    assert ex.resolve_relative_date(text, TODAY) == expected


def test_daily_summary_uses_injected_today() -> None:
    assert ex.extract_daily_summary_params("summary for yesterday", today=TODAY) == {"date": "2026-10-17"}
    assert ex.extract_daily_summary_params("daily summary", today=TODAY) == {}


def test_sales_period() -> None:
    assert ex.extract_sales_params("sales today") == {"period": "today"}
    assert ex.extract_sales_params("sales this quarter") == {"period": "quarter"}
    assert ex.extract_sales_params("how are sales") == {"period": "month"}


def test_booking_availability_day_of_month() -> None:
    params = ix.extract_booking_availability_params(
        "availability for product #90 on the 25th of December", today=TODAY
    )
    assert params == {"product_id": 90, "date": "2026-12-25"}

    invalid = ix.extract_booking_availability_params("slots on the 31st of February", today=TODAY)
    assert "date" not in invalid


def test_booking_status_update() -> None:
    assert ix.extract_booking_status_update_params("confirm booking #401") == {"booking_id": 401, "status": "confirmed"}


def test_customer_subscription_maps_paused_to_on_hold() -> None:
    assert ix.extract_customer_subscription_params("show my paused subscriptions") == {"status": "on-hold"}


def test_customer_action_params_without_id_are_empty() -> None:
    assert ix.extract_customer_subscription_action_params("cancel my subscription") == {}
    assert ix.extract_customer_subscription_action_params("cancel subscription #301") == {"subscription_id": 301}


def test_sale_products_limit_is_capped() -> None:
    assert ex.extract_sale_products_params("list 80 products on sale") == {"limit": 50}
    assert ex.extract_sale_products_params("show me 5 discounted products")["limit"] == 5
