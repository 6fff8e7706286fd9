"""State-changing store patterns. Every pattern here is an action and routes through the
confirmation workflow instead of executing directly."""

from __future__ import annotations

from services.api.app.intents import extractors as ex
from services.api.app.intents.base import IntentPattern, pattern

ACTION_PRIORITY = 15


def store_action_patterns() -> list[IntentPattern]:
    return [
        pattern(
            "action_update_order_status",
            ability_id="shop/orders/update-status",
            keywords=(
                "update order",
                "change order",
                "mark order",
                "set order",
                "order to processing",
                "order to completed",
                "order to shipped",
            ),
            regexes=(
                r"(?:update|change|set|mark)\s+order\s*#?\s*(\d+)\s+(?:to|as|status)\s+(\w+)",
                r"order\s*#?\s*(\d+)\s+(?:to|as)\s+(?:processing|completed|shipped|on-hold|cancelled|refunded)",
                r"mark\s+order\s*#?\s*(\d+)\s+(?:as\s+)?(\w+)",
                r"(?:ship|complete|cancel)\s+order\s*#?\s*(\d+)",
            ),
            extractor=ex.extract_order_status_update_params,
            priority=ACTION_PRIORITY,
            is_action=True,
        ),
        pattern(
            "action_cancel_order",
            ability_id="shop/orders/cancel",
            keywords=("cancel order",),
            regexes=(r"cancel\s+(?:the\s+)?order\s*#?\s*(\d+)",),
            extractor=ex.extract_order_id,
            # Above the status update so "cancel order #N" cancels instead of relabelling.
            priority=ACTION_PRIORITY + 1,
            is_action=True,
        ),
        pattern(
            "action_refund_order",
            ability_id="shop/orders/refund",
            keywords=("refund order", "refund", "process refund", "issue refund", "give refund", "refund customer"),
            regexes=(
                r"refund\s+order\s*#?\s*(\d+)",
                r"(?:process|issue|give)\s+(?:a\s+)?refund\s+(?:for\s+)?order\s*#?\s*(\d+)",
                r"refund\s+\$?(\d+(?:\.\d{2})?)\s+(?:from|for|to)\s+order\s*#?\s*(\d+)",
                # Outranks the plain order lookup whenever a refund names an order.
                r"\brefund\b.*?\border\s*#?\s*\d+",
            ),
            extractor=ex.extract_refund_params,
            priority=ACTION_PRIORITY,
            is_action=True,
        ),
        pattern(
            "action_create_product",
            ability_id="shop/products/create",
            keywords=("create product", "add product", "new product", "make product"),
            regexes=(
                r"(?:create|add|make)\s+(?:a\s+)?(?:new\s+)?product\s+(?:called|named)\s+[\"']?(.+?)[\"']?$",
                r"(?:create|add)\s+(?:a\s+)?(?:new\s+)?product",
                r"new\s+product\s+[\"']?(.+?)[\"']?",
            ),
            extractor=ex.extract_create_product_params,
            priority=ACTION_PRIORITY,
            is_action=True,
        ),
        pattern(
            "action_update_product",
            ability_id="shop/products/update",
            keywords=("update product", "change product", "edit product", "modify product", "set price", "change price"),
            regexes=(
                r"(?:update|change|edit|modify)\s+product\s*#?\s*(\d+)",
                r"(?:set|change)\s+(?:the\s+)?price\s+(?:of\s+)?product\s*#?\s*(\d+)\s+to\s+\$?(\d+(?:\.\d{2})?)",
                r"product\s*#?\s*(\d+)\s+price\s+(?:to|=)\s+\$?(\d+(?:\.\d{2})?)",
            ),
            extractor=ex.extract_update_product_params,
            priority=ACTION_PRIORITY,
            is_action=True,
        ),
        pattern(
            "action_delete_product",
            ability_id="shop/products/delete",
            keywords=("delete product", "remove product", "trash product"),
            regexes=(
                r"(?:delete|remove|trash)\s+(?:the\s+)?product\s*#?\s*(\d+)",
                r"(?:permanently\s+)?delete\s+product",
            ),
            extractor=ex.extract_delete_product_params,
            priority=ACTION_PRIORITY,
            is_action=True,
        ),
        pattern(
            "action_create_coupon",
            ability_id="shop/coupons/create",
            keywords=("create coupon", "add coupon", "new coupon", "make coupon", "generate coupon"),
            regexes=(
                r"(?:create|add|make|generate)\s+(?:a\s+)?(?:new\s+)?coupon\s+(?:code\s+)?[\"']?([A-Za-z0-9_-]+)[\"']?",
                r"(?:create|add)\s+(?:a\s+)?(?:new\s+)?coupon",
                r"(?:new\s+)?coupon\s+(?:for|with)\s+(\d+)\s*%?\s+(?:off|discount)",
            ),
            extractor=ex.extract_create_coupon_params,
            priority=ACTION_PRIORITY,
            is_action=True,
        ),
        pattern(
            "action_update_coupon",
            ability_id="shop/coupons/update",
            keywords=("update coupon", "change coupon", "edit coupon", "modify coupon"),
            regexes=(
                r"(?:update|change|edit|modify)\s+coupon\s+(?:code\s+)?[\"']?([A-Za-z0-9_-]+)[\"']?",
                r"(?:set|change)\s+coupon\s+[\"']?([A-Za-z0-9_-]+)[\"']?\s+(?:to|discount)\s+(\d+)",
            ),
            extractor=ex.extract_update_coupon_params,
            priority=ACTION_PRIORITY,
            is_action=True,
        ),
        pattern(
            "action_delete_coupon",
            ability_id="shop/coupons/delete",
            keywords=("delete coupon", "remove coupon", "trash coupon"),
            regexes=(
                r"(?:delete|remove|trash)\s+coupon\s+(?:code\s+)?[\"']?([A-Za-z0-9_-]+)[\"']?",
                r"(?:delete|remove)\s+coupon\s*#?\s*(\d+)",
            ),
            extractor=ex.extract_delete_coupon_params,
            priority=ACTION_PRIORITY,
            is_action=True,
        ),
        pattern(
            "action_add_order_note",
            ability_id="shop/orders/add-note",
            keywords=("add note", "order note", "note to order"),
            regexes=(
                r"add\s+(?:a\s+)?note\s+to\s+order\s*#?\s*(\d+)",
                r"order\s*#?\s*(\d+)\s+note[:]\s*[\"']?(.+?)[\"']?$",
            ),
            extractor=ex.extract_order_note_params,
            priority=ACTION_PRIORITY,
            is_action=True,
        ),
    ]
