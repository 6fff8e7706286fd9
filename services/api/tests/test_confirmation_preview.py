from __future__ import annotations

import pytest
from packages.shared.schemas.confirmation import ConfirmationLevelV1
from services.api.app.confirmation.policy import (
    confirmation_code,
    confirmation_level,
    requires_confirmation,
    warning_message,
)
from services.api.app.confirmation.preview import build_action_summary, build_preview
from services.api.app.services.ability_base import AbilityMetadata


@pytest.mark.parametrize(
    ("ability_id", "params", "expected"),
    [
        ("shop/orders/refund", {"order_id": 1042}, "Refund full amount from Order #1042"),
        ("shop/orders/refund", {"order_id": 1042, "amount": 25}, "Refund $25.00 from Order #1042"),
        ("shop/orders/update-status", {"order_id": 7, "status": "on-hold"}, 'Change Order #7 status to "On-hold"'),
        ("shop/orders/add-note", {"order_id": 7, "note": "hi"}, "Add note to Order #7"),
        ("shop/orders/cancel", {"order_id": 55}, "Cancel Order #55"),
        ("shop/products/create", {"name": "Linen Apron"}, 'Create new product: "Linen Apron"'),
        ("shop/products/update", {"product_id": 12, "price": "19.99", "stock_quantity": 40},
         "Update Product #12: price to $19.99, stock to 40"),
        ("shop/products/update", {"product_id": 12}, "Update Product #12: details"),
        ("shop/products/delete", {"product_id": 12}, "Move to trash Product #12"),
        ("shop/products/delete", {"product_id": 12, "force": True}, "Permanently delete Product #12"),
        ("shop/coupons/create", {"code": "SAVE10", "amount": "10"}, 'Create coupon "SAVE10" for 10% off'),
        ("shop/coupons/create", {"code": "FIVE", "amount": "5", "discount_type": "fixed_cart"},
         'Create coupon "FIVE" for 5 off'),
        ("shop/coupons/delete", {"code": "SAVE10", "force": True}, 'Permanently delete Coupon "SAVE10"'),
        ("shop/coupons/update", {"coupon_id": 501}, "Update Coupon #501"),
        ("shop/subscriptions/terminate", {"subscription_id": 301}, "Terminate Subscription #301"),
        ("shop/customer/cancel-membership", {}, "Cancel your membership"),
        ("shop/customer/cancel-booking", {"booking_id": 401}, "Cancel Booking #401"),
        ("shop/bookings/update-status", {"booking_id": 401}, 'Change Booking #401 status to "?"'),
    ],
)
def test_build_preview(ability_id: str, params: dict, expected: str) -> None:
    assert build_preview(ability_id, params) == expected


def test_preview_falls_back_to_description() -> None:
    metadata = AbilityMetadata(ability_id="shop/bookings/update", label="Update Booking", description="Change a booking.")
    assert build_preview("shop/bookings/update", {"booking_id": 1}, metadata) == "Change a booking."
    assert build_preview("shop/bookings/update", {"booking_id": 1}) == "Perform action"


def test_action_summary_details() -> None:
    summary = build_action_summary("shop/orders/refund", {"order_id": 1042, "amount": 25.5})
    assert summary.title == "Process Refund"
    assert summary.details == ["Order #1042", "$25.50"]

    summary = build_action_summary("shop/coupons/create", {"code": "SAVE10", "amount": "10"})
    assert summary.details == ["Code: SAVE10"]

    summary = build_action_summary("shop/subscriptions/update-status", {"subscription_id": 301, "status": "active"})
    assert summary.title == "Confirm Action"
    assert summary.details == ["Subscription #301", "Status: Active"]


def test_levels_and_codes() -> None:
    assert confirmation_level("shop/orders/refund") == ConfirmationLevelV1.DOUBLE
    assert confirmation_level("shop/coupons/create") == ConfirmationLevelV1.SINGLE
    assert confirmation_level("shop/orders/get") is None
    assert requires_confirmation("shop/orders/get") is False

    assert confirmation_code("shop/subscriptions/terminate") == "TERMINATE"
    assert confirmation_code("shop/products/delete") == "DELETE"
    assert confirmation_code("shop/something/else") == "CONFIRM"


def test_warning_message_defaults_by_level() -> None:
    assert warning_message("shop/orders/refund").startswith("This will process a refund")
    assert warning_message("shop/coupons/create") == "Please confirm this action."
