from __future__ import annotations

import copy
from collections.abc import Callable
from datetime import date
from typing import Any

from services.api.app.services.ability_base import (
    AbilityExecutionError,
    AbilityMetadata,
    AbilityNotFoundError,
    validate_parameters,
)
from services.api.app.services.ability_catalog import ABILITY_CATALOG

Handler = Callable[[dict[str, Any]], Any]

_SEED_ORDERS: dict[int, dict[str, Any]] = {
    1042: {
        "id": 1042,
        "status": "processing",
        "customer_id": 7,
        "billing_email": "ana@example.com",
        "total": 120.00,
        "date_created": "2026-10-16",
        "line_items": [{"product_id": 12, "name": "Blue Mug", "quantity": 4, "total": 48.00}],
    },
    1043: {
        "id": 1043,
        "status": "completed",
        "customer_id": 8,
        "billing_email": "ben@example.com",
        "total": 45.50,
        "date_created": "2026-10-17",
        "line_items": [{"product_id": 15, "name": "Canvas Tote", "quantity": 1, "total": 45.50}],
    },
    1044: {
        "id": 1044,
        "status": "pending",
        "customer_id": 7,
        "billing_email": "ana@example.com",
        "total": 89.99,
        "date_created": "2026-10-18",
        "line_items": [{"product_id": 21, "name": "E-book Guide", "quantity": 1, "total": 89.99}],
    },
}

_SEED_PRODUCTS: dict[int, dict[str, Any]] = {
    12: {
        "id": 12,
        "name": "Blue Mug",
        "sku": "MUG-BLUE",
        "price": "12.00",
        "stock_quantity": 4,
        "status": "publish",
        "type": "simple",
        "virtual": False,
        "featured": True,
        "on_sale": False,
    },
    15: {
        "id": 15,
        "name": "Canvas Tote",
        "sku": "TOTE-01",
        "price": "45.50",
        "stock_quantity": 0,
        "status": "publish",
        "type": "simple",
        "virtual": False,
        "featured": False,
        "on_sale": True,
    },
    21: {
        "id": 21,
        "name": "E-book Guide",
        "sku": "EBOOK-01",
        "price": "89.99",
        "stock_quantity": None,
        "status": "publish",
        "type": "simple",
        "virtual": True,
        "featured": False,
        "on_sale": False,
    },
}

_SEED_CUSTOMERS: dict[int, dict[str, Any]] = {
    7: {"id": 7, "email": "ana@example.com", "first_name": "Ana", "last_name": "Silva", "orders_count": 2},
    8: {"id": 8, "email": "ben@example.com", "first_name": "Ben", "last_name": "Okafor", "orders_count": 1},
}

_SEED_COUPONS: dict[int, dict[str, Any]] = {
    501: {"id": 501, "code": "WELCOME10", "amount": "10", "discount_type": "percent", "status": "publish", "usage_count": 3},
    502: {"id": 502, "code": "SAVE10", "amount": "10", "discount_type": "fixed_cart", "status": "publish", "usage_count": 0},
}

_SEED_SUBSCRIPTIONS: dict[int, dict[str, Any]] = {
    301: {"id": 301, "customer_id": 7, "status": "active", "total": 19.00, "next_payment": "2026-11-01"},
    302: {"id": 302, "customer_id": 8, "status": "on-hold", "total": 29.00, "next_payment": None},
}

_SEED_BOOKINGS: dict[int, dict[str, Any]] = {
    401: {"id": 401, "customer_id": 7, "status": "confirmed", "product_id": 90, "start": "2026-10-20T10:00:00"},
}

_SEED_MEMBERSHIPS: dict[int, dict[str, Any]] = {
    601: {"id": 601, "customer_id": 7, "status": "active", "plan": "Gold", "end_date": "2027-01-01"},
}


class MockAbilityRegistry:
    """In-memory store backing every catalogued ability.

    Handlers cover the abilities the chat flows exercise end to end; any other catalogued ability
    echoes its parameters back so classification can be tested without a real store.
    """

    vendor = "SHOP_MOCK"

    def __init__(self, catalog: tuple[AbilityMetadata, ...] = ABILITY_CATALOG) -> None:
        self._catalog = {metadata.ability_id: metadata for metadata in catalog}
        self.orders = copy.deepcopy(_SEED_ORDERS)
        self.products = copy.deepcopy(_SEED_PRODUCTS)
        self.customers = copy.deepcopy(_SEED_CUSTOMERS)
        self.coupons = copy.deepcopy(_SEED_COUPONS)
        self.subscriptions = copy.deepcopy(_SEED_SUBSCRIPTIONS)
        self.bookings = copy.deepcopy(_SEED_BOOKINGS)
        self.memberships = copy.deepcopy(_SEED_MEMBERSHIPS)
        self.calls: list[tuple[str, dict[str, Any]]] = []

        self._handlers: dict[str, Handler] = {
            "shop/orders/get": self._get_order,
            "shop/orders/get-last": self._get_last_order,
            "shop/orders/list": self._list_orders,
            "shop/orders/search": self._search_orders,
            "shop/orders/update-status": self._update_order_status,
            "shop/orders/refund": self._refund_order,
            "shop/orders/add-note": self._add_order_note,
            "shop/orders/cancel": self._cancel_order,
            "shop/products/get": self._get_product,
            "shop/products/list": self._list_products,
            "shop/products/count": self._count_products,
            "shop/products/low-stock": self._low_stock,
            "shop/products/by-sku": self._get_product,
            "shop/products/create": self._create_product,
            "shop/products/update": self._update_product,
            "shop/products/delete": self._delete_product,
            "shop/customers/get": self._get_customer,
            "shop/customers/list": self._list_customers,
            "shop/coupons/list": self._list_coupons,
            "shop/coupons/get": self._get_coupon,
            "shop/coupons/create": self._create_coupon,
            "shop/coupons/update": self._update_coupon,
            "shop/coupons/delete": self._delete_coupon,
            "shop/analytics/sales": self._sales_report,
            "shop/analytics/daily-summary": self._daily_summary,
            "shop/subscriptions/list": self._list_subscriptions,
            "shop/subscriptions/get": self._get_subscription,
            "shop/subscriptions/pause": self._subscription_status("on-hold"),
            "shop/subscriptions/cancel": self._subscription_status("pending-cancel"),
            "shop/subscriptions/terminate": self._subscription_status("cancelled"),
            "shop/subscriptions/update-status": self._update_subscription_status,
            "shop/customer/pause-subscription": self._subscription_status("on-hold"),
            "shop/customer/resume-subscription": self._subscription_status("active"),
            "shop/customer/cancel-subscription": self._subscription_status("pending-cancel"),
            "shop/bookings/get": self._get_booking,
            "shop/bookings/update-status": self._update_booking_status,
            "shop/bookings/cancel": self._cancel_booking,
            "shop/customer/cancel-booking": self._cancel_booking,
            "shop/memberships/get": self._get_membership,
            "shop/memberships/update-status": self._update_membership_status,
            "shop/memberships/cancel": self._cancel_membership,
            "shop/customer/cancel-membership": self._cancel_membership,
        }

    def describe(self, ability_id: str) -> AbilityMetadata | None:
        return self._catalog.get(ability_id)

    def ability_ids(self) -> list[str]:
        return list(self._catalog)

    def execute(self, ability_id: str, params: dict[str, Any]) -> Any:
        metadata = self.describe(ability_id)
        if metadata is None:
            raise AbilityNotFoundError(ability_id)

        validate_parameters(metadata, params)
        self.calls.append((ability_id, dict(params)))

        handler = self._handlers.get(ability_id)
        if handler is None:
            return {"ability_id": ability_id, "params": dict(params), "items": []}
        return handler(params)

    # Orders

    def _order(self, order_id: int) -> dict[str, Any]:
        order = self.orders.get(order_id)
        if order is None:
            raise AbilityExecutionError(f"Order #{order_id} not found.")
        return order

    def _get_order(self, params: dict[str, Any]) -> dict[str, Any]:
        return dict(self._order(params["order_id"]))

    def _get_last_order(self, params: dict[str, Any]) -> dict[str, Any]:
        orders = self._filter_orders(params.get("status"))
        if not orders:
            raise AbilityExecutionError("No orders found.")
        return dict(max(orders, key=lambda order: order["id"]))

    def _filter_orders(self, status: str | None) -> list[dict[str, Any]]:
        orders = list(self.orders.values())
        if status:
            orders = [order for order in orders if order["status"] == status]
        return orders

    def _list_orders(self, params: dict[str, Any]) -> dict[str, Any]:
        orders = self._filter_orders(params.get("status"))
        limit = params.get("limit") or 10
        items = sorted(orders, key=lambda order: order["id"], reverse=True)[:limit]
        return {"items": items, "total": len(orders)}

    def _search_orders(self, params: dict[str, Any]) -> dict[str, Any]:
        email = (params.get("email") or "").lower()
        items = [order for order in self.orders.values() if not email or order["billing_email"] == email]
        return {"items": items, "total": len(items)}

    def _update_order_status(self, params: dict[str, Any]) -> dict[str, Any]:
        order = self._order(params["order_id"])
        previous = order["status"]
        order["status"] = params["status"]
        return {"order_id": order["id"], "previous_status": previous, "status": order["status"]}

    def _refund_order(self, params: dict[str, Any]) -> dict[str, Any]:
        order = self._order(params["order_id"])
        refunded = sum(refund["amount"] for refund in order.get("refunds", []))
        remaining = round(order["total"] - refunded, 2)

        amount = params.get("amount")
        amount = remaining if amount is None else round(float(amount), 2)
        if amount <= 0:
            raise AbilityExecutionError("Refund amount must be positive.")
        if amount > remaining:
            raise AbilityExecutionError(
                f"Refund of ${amount:.2f} exceeds the refundable balance of ${remaining:.2f} on Order #{order['id']}."
            )

        refund = {
            "id": 9000 + len(order.setdefault("refunds", [])) + 1,
            "amount": amount,
            "reason": params.get("reason") or "",
            "restock_items": bool(params.get("restock_items", False)),
        }
        order["refunds"].append(refund)
        if amount == remaining:
            order["status"] = "refunded"

        return {"order_id": order["id"], "refund_id": refund["id"], "amount": amount, "status": order["status"]}

    def _add_order_note(self, params: dict[str, Any]) -> dict[str, Any]:
        order = self._order(params["order_id"])
        note = {
            "id": len(order.setdefault("notes", [])) + 1,
            "note": params["note"],
            "customer_note": bool(params.get("is_customer_note", False)),
        }
        order["notes"].append(note)
        return {"order_id": order["id"], "note_id": note["id"]}

    def _cancel_order(self, params: dict[str, Any]) -> dict[str, Any]:
        order = self._order(params["order_id"])
        if order["status"] in {"completed", "refunded", "cancelled"}:
            raise AbilityExecutionError(f"Order #{order['id']} is {order['status']} and cannot be cancelled.")
        order["status"] = "cancelled"
        return {"order_id": order["id"], "status": "cancelled"}

    # Products

    def _product(self, params: dict[str, Any]) -> dict[str, Any]:
        product_id = params.get("product_id")
        if product_id is not None:
            product = self.products.get(product_id)
            if product is None:
                raise AbilityExecutionError(f"Product #{product_id} not found.")
            return product

        sku = (params.get("sku") or "").upper()
        for product in self.products.values():
            if product["sku"] == sku:
                return product
        raise AbilityExecutionError(f"Product with SKU {sku or '?'} not found.")

    def _get_product(self, params: dict[str, Any]) -> dict[str, Any]:
        return dict(self._product(params))

    def _filter_products(self, params: dict[str, Any]) -> list[dict[str, Any]]:
        products = [product for product in self.products.values() if product["status"] != "trash"]
        if params.get("stock_status") == "outofstock":
            products = [product for product in products if product["stock_quantity"] == 0]
        if params.get("type") == "virtual":
            products = [product for product in products if product["virtual"]]
        return products

    def _list_products(self, params: dict[str, Any]) -> dict[str, Any]:
        products = self._filter_products(params)
        limit = params.get("limit") or 10
        return {"items": products[:limit], "total": len(products)}

    def _count_products(self, params: dict[str, Any]) -> dict[str, Any]:
        return {"count": len(self._filter_products(params))}

    def _low_stock(self, params: dict[str, Any]) -> dict[str, Any]:
        threshold = params.get("threshold") or 5
        items = [
            product
            for product in self.products.values()
            if product["stock_quantity"] is not None and product["stock_quantity"] <= threshold
        ]
        return {"items": items, "threshold": threshold}

    def _create_product(self, params: dict[str, Any]) -> dict[str, Any]:
        product_id = max(self.products, default=0) + 1
        product = {
            "id": product_id,
            "name": params["name"],
            "sku": "",
            "price": params.get("regular_price") or "0.00",
            "stock_quantity": None,
            "status": params.get("status") or "draft",
            "type": "simple",
            "virtual": False,
            "featured": False,
            "on_sale": False,
        }
        self.products[product_id] = product
        return {"product_id": product_id, "name": product["name"], "status": product["status"]}

    def _update_product(self, params: dict[str, Any]) -> dict[str, Any]:
        product = self._product(params)
        changed: list[str] = []
        if params.get("price") is not None:
            product["price"] = params["price"]
            changed.append("price")
        if params.get("stock_quantity") is not None:
            product["stock_quantity"] = params["stock_quantity"]
            changed.append("stock_quantity")
        if params.get("status") is not None:
            product["status"] = params["status"]
            changed.append("status")
        return {"product_id": product["id"], "updated": changed}

    def _delete_product(self, params: dict[str, Any]) -> dict[str, Any]:
        product = self._product(params)
        if params.get("force"):
            del self.products[product["id"]]
            return {"product_id": product["id"], "deleted": True}
        product["status"] = "trash"
        return {"product_id": product["id"], "status": "trash"}

    # Customers

    def _get_customer(self, params: dict[str, Any]) -> dict[str, Any]:
        customer_id = params.get("customer_id")
        email = (params.get("email") or "").lower()
        for customer in self.customers.values():
            if customer["id"] == customer_id or (email and customer["email"] == email):
                return dict(customer)
        raise AbilityExecutionError("Customer not found.")

    def _list_customers(self, params: dict[str, Any]) -> dict[str, Any]:
        limit = params.get("limit") or 10
        customers = list(self.customers.values())
        return {"items": customers[:limit], "total": len(customers)}

    # Coupons

    def _coupon(self, params: dict[str, Any]) -> dict[str, Any]:
        coupon_id = params.get("coupon_id")
        code = (params.get("code") or "").upper()
        for coupon in self.coupons.values():
            if coupon["id"] == coupon_id or (code and coupon["code"] == code):
                return coupon
        label = f"#{coupon_id}" if coupon_id is not None else f'"{code}"'
        raise AbilityExecutionError(f"Coupon {label} not found.")

    def _list_coupons(self, params: dict[str, Any]) -> dict[str, Any]:
        coupons = [coupon for coupon in self.coupons.values() if coupon["status"] != "trash"]
        if params.get("status"):
            coupons = [coupon for coupon in coupons if coupon["status"] == params["status"]]
        limit = params.get("limit") or 10
        return {"items": coupons[:limit], "total": len(coupons)}

    def _get_coupon(self, params: dict[str, Any]) -> dict[str, Any]:
        return dict(self._coupon(params))

    def _create_coupon(self, params: dict[str, Any]) -> dict[str, Any]:
        code = params["code"].upper()
        if any(coupon["code"] == code for coupon in self.coupons.values()):
            raise AbilityExecutionError(f'Coupon "{code}" already exists.')

        coupon_id = max(self.coupons, default=500) + 1
        self.coupons[coupon_id] = {
            "id": coupon_id,
            "code": code,
            "amount": params.get("amount") or "0",
            "discount_type": params.get("discount_type") or "percent",
            "status": "publish",
            "usage_count": 0,
        }
        return {"coupon_id": coupon_id, "code": code}

    def _update_coupon(self, params: dict[str, Any]) -> dict[str, Any]:
        coupon = self._coupon(params)
        if params.get("amount") is not None:
            coupon["amount"] = params["amount"]
        return {"coupon_id": coupon["id"], "code": coupon["code"], "amount": coupon["amount"]}

    def _delete_coupon(self, params: dict[str, Any]) -> dict[str, Any]:
        coupon = self._coupon(params)
        if params.get("force"):
            del self.coupons[coupon["id"]]
            return {"coupon_id": coupon["id"], "deleted": True}
        coupon["status"] = "trash"
        return {"coupon_id": coupon["id"], "status": "trash"}

    # Analytics

    def _sales_report(self, params: dict[str, Any]) -> dict[str, Any]:
        paid = [order for order in self.orders.values() if order["status"] in {"processing", "completed"}]
        total = round(sum(order["total"] for order in paid), 2)
        return {"period": params.get("period") or "week", "orders": len(paid), "total_sales": total}

    def _daily_summary(self, params: dict[str, Any]) -> dict[str, Any]:
        day = params.get("date") or date.today().isoformat()
        orders = [order for order in self.orders.values() if order["date_created"] == day]
        return {
            "date": day,
            "orders": len(orders),
            "revenue": round(sum(order["total"] for order in orders), 2),
        }

    # Subscriptions, bookings and memberships

    def _subscription(self, params: dict[str, Any]) -> dict[str, Any]:
        subscription_id = params.get("subscription_id")
        if subscription_id is None:
            # Self-service requests may not name the subscription; use the first one on file.
            return next(iter(self.subscriptions.values()))
        subscription = self.subscriptions.get(subscription_id)
        if subscription is None:
            raise AbilityExecutionError(f"Subscription #{subscription_id} not found.")
        return subscription

    def _list_subscriptions(self, params: dict[str, Any]) -> dict[str, Any]:
        items = list(self.subscriptions.values())
        if params.get("status"):
            items = [item for item in items if item["status"] == params["status"]]
        return {"items": items, "total": len(items)}

    def _get_subscription(self, params: dict[str, Any]) -> dict[str, Any]:
        return dict(self._subscription(params))

    def _subscription_status(self, status: str) -> Handler:
        def handler(params: dict[str, Any]) -> dict[str, Any]:
            subscription = self._subscription(params)
            subscription["status"] = status
            return {"subscription_id": subscription["id"], "status": status}

        return handler

    def _update_subscription_status(self, params: dict[str, Any]) -> dict[str, Any]:
        return self._subscription_status(params["status"])(params)

    def _booking(self, params: dict[str, Any]) -> dict[str, Any]:
        booking_id = params.get("booking_id")
        if booking_id is None:
            return next(iter(self.bookings.values()))
        booking = self.bookings.get(booking_id)
        if booking is None:
            raise AbilityExecutionError(f"Booking #{booking_id} not found.")
        return booking

    def _get_booking(self, params: dict[str, Any]) -> dict[str, Any]:
        return dict(self._booking(params))

    def _update_booking_status(self, params: dict[str, Any]) -> dict[str, Any]:
        booking = self._booking(params)
        booking["status"] = params["status"]
        return {"booking_id": booking["id"], "status": booking["status"]}

    def _cancel_booking(self, params: dict[str, Any]) -> dict[str, Any]:
        booking = self._booking(params)
        booking["status"] = "cancelled"
        return {"booking_id": booking["id"], "status": "cancelled"}

    def _membership(self, params: dict[str, Any]) -> dict[str, Any]:
        membership_id = params.get("membership_id")
        if membership_id is None:
            return next(iter(self.memberships.values()))
        membership = self.memberships.get(membership_id)
        if membership is None:
            raise AbilityExecutionError(f"Membership #{membership_id} not found.")
        return membership

    def _get_membership(self, params: dict[str, Any]) -> dict[str, Any]:
        return dict(self._membership(params))

    def _update_membership_status(self, params: dict[str, Any]) -> dict[str, Any]:
        membership = self._membership(params)
        membership["status"] = params["status"]
        return {"membership_id": membership["id"], "status": membership["status"]}

    def _cancel_membership(self, params: dict[str, Any]) -> dict[str, Any]:
        membership = self._membership(params)
        membership["status"] = "cancelled"
        return {"membership_id": membership["id"], "status": "cancelled"}
