"""Parameter extractors for the core store patterns.

Each extractor takes the original-case message and returns a plain dict of ability params. They
are total: no input makes them raise, and an unrecognised message just yields defaults.
Date-dependent extractors accept a keyword-only `today` so tests can pin the calendar.
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Any

EMAIL_RE = re.compile(r"([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})")

ORDER_STATUSES = ("pending", "processing", "on-hold", "completed", "cancelled", "refunded", "failed")
PRODUCT_TYPES = ("simple", "variable", "grouped", "external")
SETTINGS_GROUPS = ("general", "products", "tax", "shipping", "checkout", "accounts", "emails", "advanced")
CONTENT_TONES = ("professional", "casual", "luxury", "playful")

# Insertion order matters: the first keyword contained in the message wins.
ORDER_STATUS_MAP = {
    "processing": "processing",
    "completed": "completed",
    "complete": "completed",
    "shipped": "completed",
    "on-hold": "on-hold",
    "on hold": "on-hold",
    "hold": "on-hold",
    "pending": "pending",
    "cancelled": "cancelled",
    "cancel": "cancelled",
    "refunded": "refunded",
    "failed": "failed",
}

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

_COUPON_CODE_STOPWORDS = {"CODE", "FOR", "WITH", "THAT", "TO", "OF", "A", "AN", "THE"}


def _search(regex: str, text: str) -> re.Match[str] | None:
    return re.search(regex, text, re.IGNORECASE)


def _first_contained(text_lower: str, options: tuple[str, ...]) -> str | None:
    for option in options:
        if option in text_lower:
            return option
    return None


def _email(message: str) -> str | None:
    m = EMAIL_RE.search(message)
    return m.group(1) if m else None


def _capped_int(regex: str, message: str, cap: int) -> int | None:
    m = _search(regex, message)
    if not m:
        return None
    return min(int(m.group(1)), cap)


def resolve_relative_date(text: str, today: date) -> str | None:
    """Resolve the first date phrase in `text` against `today`.

    Supports ISO `YYYY-MM-DD`, `today`, `tomorrow`, `yesterday` and `next <weekday>`. Returns an
    ISO string or None when nothing is recognised.
    """

    m = re.search(r"(\d{4}-\d{2}-\d{2})", text)
    if m:
        return m.group(1)

    text_lower = text.lower()
    if "tomorrow" in text_lower:
        return (today + timedelta(days=1)).isoformat()
    if "yesterday" in text_lower:
        return (today - timedelta(days=1)).isoformat()
    if "today" in text_lower:
        return today.isoformat()

    m = re.search(r"next\s+(" + "|".join(WEEKDAYS) + r")", text_lower)
    if m:
        target = WEEKDAYS.index(m.group(1))
        ahead = (target - today.weekday()) % 7 or 7
        return (today + timedelta(days=ahead)).isoformat()

    return None


def extract_empty_params(message: str) -> dict[str, Any]:
    return {}


# Orders


def extract_order_id(message: str) -> dict[str, Any]:
    m = _search(r"order\s*#?\s*(\d+)", message)
    if m:
        return {"order_id": int(m.group(1))}
    m = re.search(r"\b(\d{3,})\b", message)
    if m:
        return {"order_id": int(m.group(1))}
    return {}


def extract_order_list_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {"limit": 10}
    status = _first_contained(message.lower(), ORDER_STATUSES)
    if status:
        params["status"] = status

    limit = _capped_int(r"(?:last|recent|top)\s+(\d+)", message, 50)
    if limit is not None:
        params["limit"] = limit
    return params


def extract_last_order_params(message: str) -> dict[str, Any]:
    status = _first_contained(message.lower(), ORDER_STATUSES)
    return {"status": status} if status else {}


def extract_order_search_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {"limit": 10}
    email = _email(message)
    if email:
        params["email"] = email
    return params


def extract_order_status_update_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {}
    m = _search(r"order\s*#?\s*(\d+)", message)
    if m:
        params["order_id"] = int(m.group(1))

    message_lower = message.lower()
    for keyword, status in ORDER_STATUS_MAP.items():
        if keyword in message_lower:
            params["status"] = status
            break

    if "status" not in params:
        m = _search(r"(?:to|as|status)\s+(\w+)", message)
        if m and m.group(1).lower() in ORDER_STATUS_MAP:
            params["status"] = ORDER_STATUS_MAP[m.group(1).lower()]
    return params


def extract_refund_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {}
    m = _search(r"order\s*#?\s*(\d+)", message)
    amount_text = message
    if m:
        params["order_id"] = int(m.group(1))
        # The order number is never an amount.
        amount_text = message[: m.start()] + message[m.end() :]

    m = _search(r"(?<![#\d])\$?(\d+(?:\.\d{2})?)\s*(?:refund|from|for)\b", amount_text)
    if m is None:
        m = _search(r"refund\s*\$?(\d+(?:\.\d{2})?)", amount_text)
    if m:
        params["amount"] = float(m.group(1))

    m = _search(r"(?:reason|because|for(?!\s+order))[:\s]+[\"']?([^\"']+)[\"']?$", message)
    if m:
        params["reason"] = m.group(1).strip()

    params["restock_items"] = True
    return params


def extract_order_note_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {}
    m = _search(r"order\s*#?\s*(\d+)", message)
    if m:
        params["order_id"] = int(m.group(1))

    m = re.search(r"[\"']([^\"']+)[\"']", message)
    if m is None:
        m = _search(r"note\s*:\s*(.+)$", message)
    if m is None:
        m = _search(r"order\s*#?\s*\d+\s*:\s*(.+)$", message)
    if m is None:
        m = _search(r"note\s+(?!to\b|on\b|for\b)(.+)$", message)
    if m:
        params["note"] = m.group(1).strip()

    params["is_customer_note"] = bool(_search(r"(?:notify|email|customer)", message))
    return params


# Products


def extract_product_id(message: str) -> dict[str, Any]:
    m = _search(r"sku\s*[:\s]*([a-zA-Z0-9_-]+)", message)
    if m:
        return {"sku": m.group(1)}
    m = _search(r"product\s*#?\s*(\d+)", message)
    if m:
        return {"product_id": int(m.group(1))}
    return {}


def _stock_status(message_lower: str) -> str | None:
    if "out of stock" in message_lower:
        return "outofstock"
    if "in stock" in message_lower:
        return "instock"
    return None


def extract_product_list_params(message: str) -> dict[str, Any]:
    message_lower = message.lower()
    params: dict[str, Any] = {"limit": 10}

    product_type = _first_contained(message_lower, PRODUCT_TYPES)
    if product_type:
        params["type"] = product_type
    if "virtual" in message_lower:
        params["virtual"] = True
    if "downloadable" in message_lower:
        params["downloadable"] = True

    stock_status = _stock_status(message_lower)
    if stock_status:
        params["stock_status"] = stock_status
    return params


def extract_product_count_params(message: str) -> dict[str, Any]:
    message_lower = message.lower()
    params: dict[str, Any] = {}

    product_type = _first_contained(message_lower, PRODUCT_TYPES)
    if product_type:
        params["type"] = product_type
    if "virtual" in message_lower:
        params["virtual"] = True
    if "downloadable" in message_lower or "digital" in message_lower:
        params["downloadable"] = True
    if "featured" in message_lower:
        params["featured"] = True
    if "on sale" in message_lower or "discounted" in message_lower:
        params["on_sale"] = True

    stock_status = _stock_status(message_lower)
    if stock_status:
        params["stock_status"] = stock_status
    return params


def extract_virtual_product_params(message: str) -> dict[str, Any]:
    if "downloadable" in message.lower():
        return {"downloadable": True}
    return {"virtual": True}


def extract_product_search_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {"limit": 10}
    m = _search(r"(?:search|find)\s+products?\s+(?:for\s+)?[\"']?(.+?)[\"']?$", message)
    if m:
        params["search"] = m.group(1).strip()
    return params


def extract_low_stock_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {"threshold": 10, "limit": 20}
    m = _search(r"(?:below|under|less\s+than)\s+(\d+)", message)
    if m:
        params["threshold"] = int(m.group(1))
    return params


def extract_product_availability_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {}
    m = _search(r"product\s*#?\s*(\d+)", message)
    if m:
        params["product_id"] = int(m.group(1))

    m = re.search(r'"([^"]+)"', message)
    if m:
        params["product_name"] = m.group(1)
        return params

    m = _search(r"\b(?:is|are|do\s+you\s+have|check)\s+(.+?)(?:\s+(?:in\s+stock|available)|\?|$)", message)
    if m:
        name = re.sub(r"^(?:the|any|some)\s+", "", m.group(1).strip(), flags=re.IGNORECASE)
        if len(name) > 2:
            params["product_name"] = name
    return params


def extract_related_products_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {"limit": 5}
    m = _search(r"product\s*#?\s*(\d+)", message)
    if m:
        params["product_id"] = int(m.group(1))

    m = _search(r"(?:in|from|category)\s+([a-zA-Z\s]+?)(?:\s+category)?$", message)
    if m:
        params["category"] = m.group(1).strip()

    limit = _capped_int(r"(?:show|give|find)\s+(?:me\s+)?(\d+)", message, 20)
    if limit is not None:
        params["limit"] = limit
    return params


def extract_top_products_params(message: str) -> dict[str, Any]:
    message_lower = message.lower()
    params: dict[str, Any] = {"limit": 10}
    if "this week" in message_lower:
        params["period"] = "week"
    elif "this month" in message_lower:
        params["period"] = "month"
    elif "this year" in message_lower:
        params["period"] = "year"

    limit = _capped_int(r"top\s+(\d+)", message, 50)
    if limit is not None:
        params["limit"] = limit
    return params


def extract_sale_products_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {"limit": 10}
    limit = _capped_int(r"(?:top|first|show\s+me|list)\s+(\d+)", message, 50)
    if limit is not None:
        params["limit"] = limit

    m = _search(r"(?:in|from|under)\s+(?:the\s+)?(?:category\s+)?[\"']?([^\"']+?)[\"']?\s+category", message)
    if m is None:
        m = _search(r"(?:category|categories):\s*[\"']?([^\"']+)[\"']?", message)
    if m:
        params["category"] = m.group(1).strip()
    return params


def extract_sku_params(message: str) -> dict[str, Any]:
    for regex in (
        r"sku\s*[:#]?\s*([a-zA-Z0-9_-]+)",
        r"product\s+(?:code|sku)\s*[:#]?\s*([a-zA-Z0-9_-]+)",
    ):
        m = _search(regex, message)
        if m:
            return {"sku": m.group(1).strip()}
    return {}


def extract_sales_by_product_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {"days": 30, "limit": 10}
    m = _search(r"product\s*#?\s*(\d+)", message)
    if m:
        params["product_id"] = int(m.group(1))

    m = _search(r"(?:last|past)\s+(\d+)\s+days?", message)
    if m:
        params["days"] = int(m.group(1))
    elif _search(r"this\s+week", message):
        params["days"] = 7
    elif _search(r"this\s+month", message):
        params["days"] = 30

    m = _search(r"(?:top|first|best)\s+(\d+)", message)
    if m:
        params["limit"] = int(m.group(1))
    return params


def extract_create_product_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {}
    m = _search(r"(?:called|named|:)\s*[\"']?([^\"']+?)[\"']?(?:\s+(?:at|for|with|price)\b|$)", message)
    if m is None:
        m = re.search(r"product\s+[\"']([^\"']+)[\"']", message)
    if m:
        params["name"] = m.group(1).strip()

    m = _search(r"(?:price|at|for)\s*\$?(\d+(?:\.\d{2})?)", message)
    if m:
        params["regular_price"] = m.group(1)

    params["status"] = "draft"
    return params


def extract_update_product_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {}
    m = _search(r"product\s*#?\s*(\d+)", message)
    if m:
        params["product_id"] = int(m.group(1))

    stock = _search(r"stock\s*(?:quantity\s*)?(?:to|=|:)?\s*(\d+)", message)
    if stock:
        params["stock_quantity"] = int(stock.group(1))

    m = _search(r"price\s*(?:to|=|:)?\s*\$?(\d+(?:\.\d{2})?)", message)
    if m is None and stock is None:
        m = _search(r"\bto\s*\$?(\d+(?:\.\d{2})?)", message)
    if m:
        params["price"] = m.group(1)

    m = _search(r"(?:status|set)\s+(?:to\s+)?(publish|draft|pending|private)", message)
    if m:
        params["status"] = m.group(1).lower()
    return params


def extract_delete_product_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {}
    m = _search(r"product\s*#?\s*(\d+)", message)
    if m:
        params["product_id"] = int(m.group(1))
    params["force"] = bool(_search(r"(?:permanent|forever|complete)", message))
    return params


# Customers


def extract_customer_id(message: str) -> dict[str, Any]:
    email = _email(message)
    if email:
        return {"email": email}
    m = _search(r"customer\s*#?\s*(\d+)", message)
    if m:
        return {"customer_id": int(m.group(1))}
    return {}


def extract_customer_list_params(message: str) -> dict[str, Any]:
    message_lower = message.lower()
    params: dict[str, Any] = {"limit": 10}
    if "top" in message_lower or "best" in message_lower:
        params.update(orderby="total_spent", order="DESC")
    elif "recent" in message_lower or "new" in message_lower:
        params.update(orderby="registered", order="DESC")
    return params


def extract_top_customers_params(message: str) -> dict[str, Any]:
    message_lower = message.lower()
    params: dict[str, Any] = {"limit": 10, "orderby": "total_spent", "period": "all"}
    for period in ("week", "month", "year"):
        if period in message_lower:
            params["period"] = period
            break

    if "order count" in message_lower or "most orders" in message_lower:
        params["orderby"] = "order_count"
    return params


def extract_repeat_customers_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {"min_orders": 2, "limit": 20}
    m = _search(r"(\d+)\+?\s+orders?", message)
    if m:
        params["min_orders"] = max(2, int(m.group(1)))

    limit = _capped_int(r"(?:top|first|show)\s+(\d+)", message, 100)
    if limit is not None:
        params["limit"] = limit
    return params


def extract_customer_lookup_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {}
    m = _search(r"(?:customer|user)\s*#?\s*(\d+)", message)
    if m:
        params["customer_id"] = int(m.group(1))
    email = _email(message)
    if email:
        params["email"] = email
    return params


def extract_customer_search_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {"limit": 10}
    email = _email(message)
    if email:
        params["email"] = email

    m = re.search(r"[\"']([^\"']+)[\"']", message)
    if m:
        params["search"] = m.group(1).strip()
    m = _search(r"(?:named|called)\s+([a-zA-Z\s]+)", message)
    if m:
        params["search"] = m.group(1).strip()
    return params


def extract_customer_orders_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {"limit": 10}
    m = _search(r"customer\s*#?\s*(\d+)", message)
    if m:
        params["customer_id"] = int(m.group(1))
    email = _email(message)
    if email:
        params["email"] = email

    limit = _capped_int(r"(?:last|recent|top)\s+(\d+)", message, 50)
    if limit is not None:
        params["limit"] = limit
    return params


# Analytics


def extract_sales_params(message: str) -> dict[str, Any]:
    message_lower = message.lower()
    period = "month"
    if "today" in message_lower:
        period = "today"
    elif "yesterday" in message_lower:
        period = "yesterday"
    elif "week" in message_lower:
        period = "week"
    elif "year" in message_lower:
        period = "year"
    elif "quarter" in message_lower:
        period = "quarter"
    return {"period": period}


def extract_revenue_params(message: str) -> dict[str, Any]:
    params = extract_sales_params(message)
    params["compare"] = "compare" in message.lower()
    return params


def extract_daily_summary_params(message: str, *, today: date | None = None) -> dict[str, Any]:
    today = today or date.today()
    params: dict[str, Any] = {}
    if "yesterday" in message.lower():
        params["date"] = (today - timedelta(days=1)).isoformat()

    m = re.search(r"(\d{4}-\d{2}-\d{2})", message)
    if m:
        params["date"] = m.group(1)
    return params


def extract_basic_limit_params(message: str) -> dict[str, Any]:
    limit = _capped_int(r"(?:top|first|show|limit)\s+(\d+)", message, 100)
    return {"limit": limit} if limit is not None else {}


def extract_days_params(message: str) -> dict[str, Any]:
    days = _capped_int(r"(?:last|past)\s+(\d+)\s+days?", message, 365)
    if days is not None:
        return {"days": days}

    message_lower = message.lower()
    if "this week" in message_lower:
        return {"days": 7}
    if "this month" in message_lower:
        return {"days": 30}
    return {}


def extract_period_params(message: str) -> dict[str, Any]:
    message_lower = message.lower()
    if "week" in message_lower:
        return {"period": "week"}
    if "year" in message_lower:
        return {"period": "year"}
    return {"period": "month"}


def extract_comparison_params(message: str) -> dict[str, Any]:
    message_lower = message.lower()
    for period in ("month", "quarter", "year"):
        if period in message_lower:
            return {"period": period}
    return {"period": "week"}


# Settings and coupons


def extract_settings_params(message: str) -> dict[str, Any]:
    group = _first_contained(message.lower(), SETTINGS_GROUPS)
    return {"group": group or "all"}


def extract_tax_params(message: str) -> dict[str, Any]:
    message_lower = message.lower()
    if "reduced" in message_lower:
        return {"tax_class": "reduced-rate"}
    if "zero" in message_lower:
        return {"tax_class": "zero-rate"}
    return {}


def extract_coupon_list_params(message: str) -> dict[str, Any]:
    message_lower = message.lower()
    params: dict[str, Any] = {"limit": 10}
    if "active" in message_lower:
        params["status"] = "publish"
    elif "expired" in message_lower:
        params["status"] = "expired"
    return params


def extract_coupon_code(message: str) -> dict[str, Any]:
    m = re.search(r"[\"']([A-Z0-9_-]+)[\"']", message, re.IGNORECASE)
    if m is None:
        m = _search(r"coupon\s+(?:code\s+)?([A-Z0-9_-]{3,})", message)
    if m:
        return {"code": m.group(1).upper()}
    return {}


def _coupon_reference(message: str) -> dict[str, Any]:
    m = _search(r"coupon\s*#\s*(\d+)", message) or _search(r"coupon\s+(\d+)\b", message)
    if m:
        return {"coupon_id": int(m.group(1))}

    for m in re.finditer(r"coupon\s+(?:code\s+)?[\"']?([A-Za-z0-9_-]+)[\"']?", message, re.IGNORECASE):
        code = m.group(1).upper()
        if code not in _COUPON_CODE_STOPWORDS:
            return {"code": code}
    return {}


def extract_create_coupon_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for m in re.finditer(r"(?:code|coupon)\s*[:\s]*[\"']?([A-Za-z0-9_-]+)[\"']?", message, re.IGNORECASE):
        code = m.group(1).strip().upper()
        if code not in _COUPON_CODE_STOPWORDS:
            params["code"] = code
            break

    m = re.search(r"(\d+(?:\.\d{2})?)\s*%", message)
    if m:
        params.update(amount=m.group(1), discount_type="percent")
        return params

    m = re.search(r"\$(\d+(?:\.\d{2})?)", message)
    if m:
        params.update(amount=m.group(1), discount_type="fixed_cart")
        return params

    m = _search(r"(\d+(?:\.\d{2})?)\s*(?:off|discount)", message)
    if m:
        params.update(amount=m.group(1), discount_type="percent")
    return params


def extract_update_coupon_params(message: str) -> dict[str, Any]:
    params = _coupon_reference(message)
    m = _search(r"(?:to|=|:)\s*(\d+(?:\.\d{2})?)\s*%?", message)
    if m:
        params["amount"] = m.group(1)
    return params


def extract_delete_coupon_params(message: str) -> dict[str, Any]:
    params = _coupon_reference(message)
    params["force"] = bool(_search(r"(?:permanent|forever|complete)", message))
    return params


# Content


def extract_content_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {"limit": 20}
    m = _search(r"(?:about|containing|with)\s+[\"']?([^\"']+)[\"']?", message)
    if m:
        params["search"] = m.group(1).strip()
    m = _search(r"(?:top|first|last)\s+(\d+)", message)
    if m:
        params["limit"] = int(m.group(1))
    return params


def extract_content_generation_params(message: str) -> dict[str, Any]:
    params: dict[str, Any] = {}
    m = (
        _search(r"product\s*#?\s*(\d+)", message)
        or _search(r"\bid\s*[:=]?\s*(\d+)", message)
        or re.search(r"\b(\d{2,})\b", message)
    )
    if m:
        params["product_id"] = int(m.group(1))

    tone = _first_contained(message.lower(), CONTENT_TONES)
    if tone:
        params["tone"] = tone

    if _search(r"\b(?:short|brief|concise)\b", message):
        params["length"] = "short"
    elif _search(r"\b(?:long|detailed|comprehensive)\b", message):
        params["length"] = "long"
    elif _search(r"\b(?:medium|standard)\b", message):
        params["length"] = "medium"

    m = _search(r"keywords?[:=]?\s*[\"']?([^\"']+)[\"']?", message)
    if m:
        params["keywords"] = m.group(1).strip()
    if _search(r"\b(?:apply|save|update)\b", message):
        params["apply"] = True

    m = _search(r"(\d+)\s*tags?", message)
    if m:
        params["count"] = int(m.group(1))
    return params
