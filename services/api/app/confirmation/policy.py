"""Which abilities need confirmation, and how strongly.

Single-level actions need one click. Double-level actions are destructive and also need the user
to type a short code such as REFUND or DELETE.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from packages.shared.schemas.confirmation import ConfirmationLevelV1

SINGLE_CONFIRMATION_ABILITIES = frozenset(
    {
        "shop/orders/update-status",
        "shop/orders/add-note",
        "shop/coupons/create",
        "shop/coupons/update",
        "shop/products/create",
        "shop/products/update",
        "shop/subscriptions/pause",
        "shop/subscriptions/skip",
        "shop/subscriptions/update-status",
        "shop/bookings/update",
        "shop/bookings/update-status",
        "shop/memberships/update-status",
        "shop/customer/pause-subscription",
        "shop/customer/resume-subscription",
    }
)

DOUBLE_CONFIRMATION_ABILITIES = frozenset(
    {
        "shop/orders/refund",
        "shop/orders/cancel",
        "shop/coupons/delete",
        "shop/products/delete",
        "shop/subscriptions/cancel",
        "shop/subscriptions/terminate",
        "shop/bookings/cancel",
        "shop/memberships/cancel",
        "shop/customer/cancel-subscription",
        "shop/customer/cancel-booking",
        "shop/customer/cancel-membership",
    }
)

CONFIRMATION_LEVELS: Mapping[str, ConfirmationLevelV1] = MappingProxyType(
    {
        **{ability_id: ConfirmationLevelV1.SINGLE for ability_id in SINGLE_CONFIRMATION_ABILITIES},
        **{ability_id: ConfirmationLevelV1.DOUBLE for ability_id in DOUBLE_CONFIRMATION_ABILITIES},
    }
)

DEFAULT_CONFIRMATION_CODE = "CONFIRM"

CONFIRMATION_CODES: Mapping[str, str] = MappingProxyType(
    {
        "shop/orders/refund": "REFUND",
        "shop/orders/cancel": "CANCEL",
        "shop/coupons/delete": "DELETE",
        "shop/products/delete": "DELETE",
        "shop/subscriptions/cancel": "CANCEL",
        "shop/subscriptions/terminate": "TERMINATE",
        "shop/bookings/cancel": "CANCEL",
        "shop/memberships/cancel": "CANCEL",
        "shop/customer/cancel-subscription": "CANCEL",
        "shop/customer/cancel-booking": "CANCEL",
        "shop/customer/cancel-membership": "CANCEL",
    }
)

DEFAULT_DOUBLE_WARNING = "This action cannot be easily undone. Please confirm."
DEFAULT_SINGLE_WARNING = "Please confirm this action."

WARNING_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "shop/orders/refund": "This will process a refund and cannot be easily undone. The customer will be refunded.",
        "shop/orders/cancel": "This will cancel the order. Inventory may be restocked.",
        "shop/coupons/delete": "This will permanently delete the coupon.",
        "shop/products/delete": "This will move the product to trash.",
        "shop/subscriptions/cancel": "This will cancel the subscription. The customer will lose access.",
        "shop/subscriptions/terminate": "This will end the subscription immediately. The customer will lose access.",
        "shop/bookings/cancel": "This will cancel the booking. The customer will be notified.",
        "shop/memberships/cancel": "This will cancel the membership. The customer will lose access.",
        "shop/customer/cancel-subscription": "This will cancel your subscription. You will lose access to benefits.",
        "shop/customer/cancel-booking": "This will cancel your booking.",
        "shop/customer/cancel-membership": "This will cancel your membership. You will lose access to member benefits.",
    }
)

DEFAULT_SUMMARY_TITLE = "Confirm Action"

SUMMARY_TITLES: Mapping[str, str] = MappingProxyType(
    {
        "shop/orders/refund": "Process Refund",
        "shop/orders/cancel": "Cancel Order",
        "shop/orders/update-status": "Update Order Status",
        "shop/orders/add-note": "Add Order Note",
        "shop/coupons/create": "Create Coupon",
        "shop/coupons/update": "Update Coupon",
        "shop/coupons/delete": "Delete Coupon",
        "shop/products/create": "Create Product",
        "shop/products/update": "Update Product",
        "shop/products/delete": "Delete Product",
        "shop/subscriptions/pause": "Pause Subscription",
        "shop/subscriptions/skip": "Skip Renewal",
        "shop/subscriptions/cancel": "Cancel Subscription",
        "shop/subscriptions/terminate": "Terminate Subscription",
        "shop/bookings/cancel": "Cancel Booking",
        "shop/memberships/cancel": "Cancel Membership",
        "shop/customer/pause-subscription": "Pause Your Subscription",
        "shop/customer/resume-subscription": "Resume Your Subscription",
        "shop/customer/cancel-subscription": "Cancel Your Subscription",
        "shop/customer/cancel-booking": "Cancel Your Booking",
        "shop/customer/cancel-membership": "Cancel Your Membership",
    }
)


def confirmation_level(ability_id: str) -> ConfirmationLevelV1 | None:
    return CONFIRMATION_LEVELS.get(ability_id)


def requires_confirmation(ability_id: str) -> bool:
    return ability_id in CONFIRMATION_LEVELS


def is_destructive(ability_id: str) -> bool:
    return ability_id in DOUBLE_CONFIRMATION_ABILITIES


def confirmation_code(ability_id: str) -> str:
    return CONFIRMATION_CODES.get(ability_id, DEFAULT_CONFIRMATION_CODE)


def warning_message(ability_id: str) -> str:
    if ability_id in WARNING_MESSAGES:
        return WARNING_MESSAGES[ability_id]
    return DEFAULT_DOUBLE_WARNING if is_destructive(ability_id) else DEFAULT_SINGLE_WARNING


def summary_title(ability_id: str) -> str:
    return SUMMARY_TITLES.get(ability_id, DEFAULT_SUMMARY_TITLE)
