"""Parameter extractors for the subscriptions, bookings and memberships packs."""

from __future__ import annotations

import re
from datetime import date
from typing import Any

from services.api.app.intents.extractors import EMAIL_RE, resolve_relative_date

SUBSCRIPTION_STATUSES = ("active", "on-hold", "cancelled", "expired", "pending-cancel", "pending")
BOOKING_STATUSES = ("unpaid", "pending-confirmation", "confirmed", "paid", "cancelled", "complete")
MEMBERSHIP_STATUSES = ("active", "paused", "expired", "cancelled", "pending", "free_trial", "complimentary")

BOOKING_STATUS_WORDS = {"confirmed", "paid", "cancelled", "complete", "unpaid"}

MONTHS = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)


def _search(regex: str, text: str) -> re.Match[str] | None:
    return re.search(regex, text, re.IGNORECASE)


def _id_param(message: str, key: str, *labels: str) -> dict[str, Any]:
    for label in labels:
        m = _search(label + r"\s*#?\s*(\d+)", message)
        if m:
            return {key: int(m.group(1))}
    m = re.search(r"\b(\d{3,})\b", message)
    if m:
        return {key: int(m.group(1))}
    return {}


def _status_param(message: str, statuses: tuple[str, ...]) -> str | None:
    message_lower = message.lower()
    for status in statuses:
        if status in message_lower:
            return status
    return None


def _limit(message: str, default: int, regex: str = r"(?:last|recent|top|first)\s+(\d+)") -> int:
    m = _search(regex, message)
    return min(int(m.group(1)), 50) if m else default


def _search_query(message: str, *, name_overrides: bool = False) -> dict[str, Any]:
    params: dict[str, Any] = {"limit": 10}
    m = EMAIL_RE.search(message)
    if m:
        params["query"] = m.group(1).strip()
    m = re.search(r"[\"']([^\"']+)[\"']", message)
    if m:
        params["query"] = m.group(1).strip()

    if name_overrides or "query" not in params:
        m = _search(r"(?:for|named|from)\s+([a-zA-Z\s]+)", message)
        if m and len(m.group(1).strip()) > 2:
            params["query"] = m.group(1).strip()
    return params


def _horizon_days(message: str, default: int) -> int:
    m = _search(r"(?:next|within|in)\s+(\d+)\s+days?", message)
    if m:
        return int(m.group(1))
    if _search(r"this\s+week", message):
        return 7
    if _search(r"this\s+month", message):
        return 30
    return default


def _analytics_period(message: str) -> dict[str, Any]:
    m = _search(r"(?:last|past)\s+(\d+)\s+days?", message)
    if m:
        return {"period": f"{int(m.group(1))}days"}
    if _search(r"this\s+week", message):
        return {"period": "7days"}
    if _search(r"this\s+month", message):
        return {"period": "30days"}
    if _search(r"(?:this|last)\s+year", message):
        return {"period": "year"}
    if _search(r"(?:quarter|90\s*days?)", message):
        return {"period": "90days"}
    return {"period": "30days"}


# Subscriptions


def extract_subscription_id(message: str) -> dict[str, Any]:
    return _id_param(message, "subscription_id", "subscription")


def extract_subscription_list_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {"limit": _limit(message, 10)}
    status = _status_param(message, SUBSCRIPTION_STATUSES)
    if status:
        params["status"] = status
    return params


def extract_subscription_search_params(message: str) -> dict[str, Any]:
    return _search_query(message, name_overrides=True)


def extract_subscription_expiring_params(message: str) -> dict[str, Any]:
    return {
        "days": _horizon_days(message, 30),
        "limit": _limit(message, 10, r"(?:top|first)\s+(\d+)"),
    }


def extract_customer_subscription_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {}
    m = _search(r"subscription\s*#?\s*(\d+)", message)
    if m:
        params["subscription_id"] = int(m.group(1))

    status = _status_param(message, ("active", "on-hold", "cancelled", "expired", "paused"))
    if status:
        params["status"] = "on-hold" if status == "paused" else status
    return params


def extract_customer_subscription_action_params(message: str) -> dict[str, Any]:
    m = _search(r"subscription\s*#?\s*(\d+)", message)
    return {"subscription_id": int(m.group(1))} if m else {}


# Bookings


def extract_booking_id(message: str) -> dict[str, Any]:
    return _id_param(message, "booking_id", "booking", "reservation")


def extract_booking_list_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {"limit": _limit(message, 10)}
    status = _status_param(message, BOOKING_STATUSES)
    if status:
        params["status"] = status
    return params


def extract_booking_today_params(message: str) -> dict[str, Any]:
    if _search(r"confirmed", message):
        return {"status": "confirmed"}
    if _search(r"paid", message):
        return {"status": "paid"}
    return {}


def extract_booking_upcoming_params(message: str) -> dict[str, Any]:
    days = _horizon_days(message, 7)
    if days == 7 and _search(r"next\s+week", message):
        days = 14
    return {"days": days, "limit": _limit(message, 20)}


def extract_booking_search_params(message: str) -> dict[str, Any]:
    return _search_query(message)


def extract_booking_analytics_params(message: str) -> dict[str, Any]:
    return _analytics_period(message)


def _day_of_month(message: str, today: date) -> str | None:
    m = _search(r"(?:on|for)\s+(?:the\s+)?(\d{1,2})(?:st|nd|rd|th)?(?:\s+of)?\s*([a-z]+)?", message)
    if not m:
        return None

    month = today.month
    name = (m.group(2) or "").lower()
    for index, month_name in enumerate(MONTHS, start=1):
        if len(name) >= 3 and month_name.startswith(name):
            month = index
            break

    try:
        return date(today.year, month, int(m.group(1))).isoformat()
    except ValueError:
        return None


def extract_booking_availability_params(message: str, *, today: date | None = None) -> dict[str, Any]:
    today = today or date.today()
    params: dict[str, Any] = {}
    m = _search(r"product\s*#?\s*(\d+)", message)
    if m:
        params["product_id"] = int(m.group(1))

    resolved = resolve_relative_date(message, today) or _day_of_month(message, today)
    if resolved:
        params["date"] = resolved
    return params


def extract_booking_status_update_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {}
    m = _search(r"booking\s*#?\s*(\d+)", message)
    if m:
        params["booking_id"] = int(m.group(1))

    if _search(r"(?:confirm|approve)", message):
        params["status"] = "confirmed"
    elif _search(r"(?:cancel|reject)", message):
        params["status"] = "cancelled"
    elif _search(r"(?:complete|finish)", message):
        params["status"] = "complete"
    else:
        m = _search(r"(?:mark|set)\s+.*?\s+(?:as\s+)?(\w+)$", message)
        if m and m.group(1).lower() in BOOKING_STATUS_WORDS:
            params["status"] = m.group(1).lower()
    return params


def extract_customer_booking_params(message: str) -> dict[str, Any]:
    if _search(r"confirmed|upcoming|future", message):
        return {"status": "confirmed"}
    if _search(r"cancelled", message):
        return {"status": "cancelled"}
    return {}


def extract_customer_booking_details_params(message: str) -> dict[str, Any]:
    return _id_param(message, "booking_id", "booking")


def extract_customer_booking_cancel_params(message: str) -> dict[str, Any]:
    return _id_param(message, "booking_id", "booking")


def extract_customer_availability_params(message: str, *, today: date | None = None) -> dict[str, Any]:
    today = today or date.today()
    params: dict[str, Any] = {}
    m = _search(r"product\s*#?\s*(\d+)", message)
    if m:
        params["product_id"] = int(m.group(1))

    resolved = resolve_relative_date(message, today)
    if resolved:
        params["date"] = resolved

    m = _search(r"book\s+(?:an?\s+)?([a-zA-Z\s]+?)(?:\s+(?:on|for|tomorrow|today|next))", message)
    if m and len(m.group(1).strip()) > 2:
        params["service_name"] = m.group(1).strip()
    return params


# Memberships


def extract_membership_id(message: str) -> dict[str, Any]:
    return _id_param(message, "membership_id", "membership")


def extract_membership_list_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {"limit": _limit(message, 10)}
    status = _status_param(message, MEMBERSHIP_STATUSES)
    if status:
        params["status"] = status
    return params


def extract_membership_search_params(message: str) -> dict[str, Any]:
    return _search_query(message)


def extract_membership_analytics_params(message: str) -> dict[str, Any]:
    return _analytics_period(message)


def extract_membership_expiring_params(message: str) -> dict[str, Any]:
    return {"days": _horizon_days(message, 30), "limit": _limit(message, 20)}


def extract_membership_by_plan_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {"limit": 20}
    m = _search(r"plan\s*#?\s*(\d+)", message)
    if m:
        params["plan_id"] = int(m.group(1))

    status = _status_param(message, ("active", "paused", "expired", "cancelled"))
    if status:
        params["status"] = status
    return params


def extract_customer_membership_params(message: str) -> dict[str, Any]:
    status = _status_param(message, ("active", "expired", "cancelled"))
    return {"status": status} if status else {}


def extract_customer_membership_cancel_params(message: str) -> dict[str, Any]:
    return _id_param(message, "membership_id", "membership")
