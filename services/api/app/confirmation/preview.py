from __future__ import annotations

from typing import Any

from packages.shared.schemas.confirmation import ActionSummaryV1
from services.api.app.confirmation.policy import summary_title
from services.api.app.services.ability_base import AbilityMetadata, ability_category

_DEFAULT_PREVIEW = "Perform action"

# ability id -> (verb, id parameter, noun)
_OBJECT_ACTIONS: dict[str, tuple[str, str, str]] = {
    "shop/orders/cancel": ("Cancel", "order_id", "Order"),
    "shop/subscriptions/pause": ("Pause", "subscription_id", "Subscription"),
    "shop/subscriptions/skip": ("Skip next renewal of", "subscription_id", "Subscription"),
    "shop/subscriptions/cancel": ("Cancel", "subscription_id", "Subscription"),
    "shop/subscriptions/terminate": ("Terminate", "subscription_id", "Subscription"),
    "shop/bookings/cancel": ("Cancel", "booking_id", "Booking"),
    "shop/memberships/cancel": ("Cancel", "membership_id", "Membership"),
    "shop/customer/pause-subscription": ("Pause", "subscription_id", "Subscription"),
    "shop/customer/resume-subscription": ("Resume", "subscription_id", "Subscription"),
    "shop/customer/cancel-subscription": ("Cancel", "subscription_id", "Subscription"),
    "shop/customer/cancel-booking": ("Cancel", "booking_id", "Booking"),
    "shop/customer/cancel-membership": ("Cancel", "membership_id", "Membership"),
}

# ability id -> (id parameter, noun)
_STATUS_UPDATES: dict[str, tuple[str, str]] = {
    "shop/orders/update-status": ("order_id", "Order"),
    "shop/subscriptions/update-status": ("subscription_id", "Subscription"),
    "shop/bookings/update-status": ("booking_id", "Booking"),
    "shop/memberships/update-status": ("membership_id", "Membership"),
}

_DETAIL_LABELS = (
    ("order_id", "Order"),
    ("product_id", "Product"),
    ("coupon_id", "Coupon"),
    ("subscription_id", "Subscription"),
    ("booking_id", "Booking"),
    ("membership_id", "Membership"),
)


def format_money(amount: Any) -> str:
    return f"${float(amount):.2f}"


def _ref(params: dict[str, Any], key: str) -> Any:
    value = params.get(key)
    return "?" if value is None else value


def _coupon_ref(params: dict[str, Any]) -> str:
    if params.get("coupon_id") is not None:
        return f"Coupon #{params['coupon_id']}"
    if params.get("code"):
        return f'Coupon "{params["code"]}"'
    return "Coupon #?"


def _status_label(status: Any) -> str:
    return str(status).capitalize() if status is not None else "?"


def build_preview(ability_id: str, params: dict[str, Any], metadata: AbilityMetadata | None = None) -> str:
    """One-line, human readable description of what confirming will do."""

    if ability_id in _STATUS_UPDATES:
        key, noun = _STATUS_UPDATES[ability_id]
        return f'Change {noun} #{_ref(params, key)} status to "{_status_label(params.get("status"))}"'

    if ability_id == "shop/orders/refund":
        amount = params.get("amount")
        amount_text = format_money(amount) if amount is not None else "full amount"
        return f"Refund {amount_text} from Order #{_ref(params, 'order_id')}"

    if ability_id == "shop/orders/add-note":
        return f"Add note to Order #{_ref(params, 'order_id')}"

    if ability_id == "shop/products/create":
        return f'Create new product: "{params.get("name") or "New Product"}"'

    if ability_id == "shop/products/update":
        changes: list[str] = []
        if params.get("price") is not None:
            changes.append(f"price to {format_money(params['price'])}")
        if params.get("stock_quantity") is not None:
            changes.append(f"stock to {int(params['stock_quantity'])}")
        if params.get("status") is not None:
            changes.append(f"status to {params['status']}")
        return f"Update Product #{_ref(params, 'product_id')}: {', '.join(changes) or 'details'}"

    if ability_id == "shop/products/delete":
        action = "Permanently delete" if params.get("force") else "Move to trash"
        return f"{action} Product #{_ref(params, 'product_id')}"

    if ability_id == "shop/coupons/create":
        suffix = "%" if params.get("discount_type", "percent") == "percent" else ""
        return f'Create coupon "{params.get("code") or "NEW_COUPON"}" for {params.get("amount") or "?"}{suffix} off'

    if ability_id == "shop/coupons/update":
        return f"Update {_coupon_ref(params)}"

    if ability_id == "shop/coupons/delete":
        action = "Permanently delete" if params.get("force") else "Move to trash"
        return f"{action} {_coupon_ref(params)}"

    if ability_id in _OBJECT_ACTIONS:
        verb, key, noun = _OBJECT_ACTIONS[ability_id]
        if params.get(key) is None and ability_category(ability_id) == "customer":
            return f"{verb} your {noun.lower()}"
        return f"{verb} {noun} #{_ref(params, key)}"

    if metadata is not None and metadata.description:
        return metadata.description
    return _DEFAULT_PREVIEW


def build_action_summary(ability_id: str, params: dict[str, Any]) -> ActionSummaryV1:
    details: list[str] = []

    for key, noun in _DETAIL_LABELS:
        value = params.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            details.append(f"{noun} #{value}")

    if ability_id == "shop/orders/refund" and params.get("amount") is not None:
        details.append(format_money(params["amount"]))

    if params.get("code"):
        details.append(f"Code: {params['code']}")

    if ability_id in _STATUS_UPDATES and params.get("status"):
        details.append(f"Status: {_status_label(params['status'])}")

    return ActionSummaryV1(title=summary_title(ability_id), details=details[:8])
