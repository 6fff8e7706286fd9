"""Static catalogue of the store abilities the chat layer can call.

Ids follow `shop/<category>/<action>`. Parameter declarations drive required-parameter and type
validation in the registry before any handler runs.
"""

from __future__ import annotations

from services.api.app.services.ability_base import AbilityMetadata, AbilityParameter


def _p(name: str, type_: str = "string", *, required: bool = False) -> AbilityParameter:
    return AbilityParameter(name=name, type=type_, required=required)


def _ability(
    ability_id: str,
    label: str,
    description: str,
    *parameters: AbilityParameter,
    destructive: bool = False,
) -> AbilityMetadata:
    return AbilityMetadata(
        ability_id=ability_id,
        label=label,
        description=description,
        parameters=parameters,
        is_destructive=destructive,
    )


_LIMIT = _p("limit", "integer")
_DAYS = _p("days", "integer")
_PERIOD = _p("period")

ORDER_ABILITIES = (
    _ability("shop/orders/get", "Get Order", "Retrieve a single order by ID.", _p("order_id", "integer", required=True)),
    _ability("shop/orders/get-last", "Get Last Order", "Retrieve the most recent order.", _p("status")),
    _ability("shop/orders/list", "List Orders", "List orders, optionally filtered by status.", _p("status"), _LIMIT),
    _ability("shop/orders/search", "Search Orders", "Search orders by customer email.", _p("email"), _LIMIT),
    _ability("shop/orders/ready-to-ship", "Orders Ready to Ship", "List paid orders waiting for fulfilment.", _LIMIT),
    _ability("shop/orders/pending-payment", "Orders Pending Payment", "List orders awaiting payment.", _LIMIT),
    _ability("shop/orders/failed", "Failed Orders", "List orders whose payment failed.", _DAYS),
    _ability("shop/orders/processing-count", "Processing Count", "Count orders still being processed."),
    _ability(
        "shop/orders/update-status",
        "Update Order Status",
        "Change the status of an order.",
        _p("order_id", "integer", required=True),
        _p("status", required=True),
    ),
    _ability(
        "shop/orders/refund",
        "Refund Order",
        "Refund all or part of an order.",
        _p("order_id", "integer", required=True),
        _p("amount", "number"),
        _p("reason"),
        _p("restock_items", "boolean"),
        destructive=True,
    ),
    _ability(
        "shop/orders/add-note",
        "Add Order Note",
        "Attach a note to an order.",
        _p("order_id", "integer", required=True),
        _p("note", required=True),
        _p("is_customer_note", "boolean"),
    ),
    _ability(
        "shop/orders/cancel",
        "Cancel Order",
        "Cancel an order.",
        _p("order_id", "integer", required=True),
        destructive=True,
    ),
)

PRODUCT_ABILITIES = (
    _ability("shop/products/get", "Get Product", "Retrieve a product by ID or SKU.", _p("product_id", "integer"), _p("sku")),
    _ability("shop/products/list", "List Products", "List products with optional filters.", _p("type"), _p("stock_status"), _LIMIT),
    _ability("shop/products/count", "Count Products", "Count products matching filters.", _p("type"), _p("stock_status")),
    _ability("shop/products/search", "Search Products", "Search products by name.", _p("search"), _LIMIT),
    _ability(
        "shop/products/low-stock",
        "Low Stock Products",
        "List products at or below a stock threshold.",
        _p("threshold", "integer"),
        _LIMIT,
    ),
    _ability("shop/products/out-of-stock", "Out of Stock Products", "List products with no stock.", _LIMIT),
    _ability("shop/products/stock-value", "Stock Value", "Total value of inventory on hand."),
    _ability("shop/products/pending-reviews", "Pending Reviews", "List reviews awaiting moderation.", _LIMIT),
    _ability("shop/products/availability", "Product Availability", "Check whether a product is in stock.", _p("product_id", "integer"), _p("product_name")),
    _ability("shop/products/related", "Related Products", "Suggest products related to another.", _p("product_id", "integer"), _p("category"), _LIMIT),
    _ability("shop/products/on-sale", "Products on Sale", "List discounted products.", _p("category"), _LIMIT),
    _ability("shop/products/featured", "Featured Products", "List featured products.", _LIMIT),
    _ability("shop/products/by-sku", "Product by SKU", "Find a product by SKU.", _p("sku", required=True)),
    _ability("shop/products/most-stocked", "Most Stocked Products", "List products with the highest stock.", _LIMIT),
    _ability(
        "shop/products/create",
        "Create Product",
        "Create a new product.",
        _p("name", required=True),
        _p("regular_price"),
        _p("status"),
    ),
    _ability(
        "shop/products/update",
        "Update Product",
        "Update price, stock or status of a product.",
        _p("product_id", "integer", required=True),
        _p("price"),
        _p("stock_quantity", "integer"),
        _p("status"),
    ),
    _ability(
        "shop/products/delete",
        "Delete Product",
        "Move a product to the trash, or delete it permanently.",
        _p("product_id", "integer", required=True),
        _p("force", "boolean"),
        destructive=True,
    ),
)

CUSTOMER_ABILITIES = (
    _ability("shop/customers/get", "Get Customer", "Retrieve a customer by ID or email.", _p("customer_id", "integer"), _p("email")),
    _ability("shop/customers/list", "List Customers", "List customers.", _p("orderby"), _LIMIT),
    _ability("shop/customers/recent", "Recent Customers", "List recently registered customers.", _DAYS),
    _ability("shop/customers/repeat", "Repeat Customers", "List customers with several orders.", _p("min_orders", "integer"), _LIMIT),
    _ability("shop/customers/search", "Search Customers", "Search customers by name or email.", _p("search"), _p("email"), _LIMIT),
    _ability("shop/customers/orders", "Customer Orders", "List orders placed by a customer.", _p("customer_id", "integer"), _p("email"), _LIMIT),
    _ability("shop/customers/lifetime-value", "Customer Lifetime Value", "Total spent by a customer.", _p("customer_id", "integer"), _p("email")),
)

ANALYTICS_ABILITIES = (
    _ability("shop/analytics/sales", "Sales Report", "Sales totals for a period.", _PERIOD),
    _ability("shop/analytics/revenue", "Revenue Breakdown", "Net and gross revenue for a period.", _PERIOD, _p("compare", "boolean")),
    _ability("shop/analytics/top-products", "Top Products", "Best selling products.", _PERIOD, _LIMIT),
    _ability("shop/analytics/top-customers", "Top Customers", "Highest spending customers.", _PERIOD, _p("orderby"), _LIMIT),
    _ability("shop/analytics/daily-summary", "Daily Summary", "Store summary for a single day.", _p("date")),
    _ability("shop/analytics/refunds", "Refund Report", "Refunds issued over a period.", _DAYS),
    _ability("shop/analytics/payment-methods", "Payment Methods", "Revenue by payment method.", _PERIOD),
    _ability("shop/analytics/reviews", "Reviews Summary", "Recent reviews and average rating.", _DAYS),
    _ability("shop/analytics/comparison", "Period Comparison", "Compare this period with the previous one.", _PERIOD),
    _ability("shop/analytics/category-sales", "Category Sales", "Sales by product category.", _PERIOD),
    _ability("shop/analytics/aov", "Average Order Value", "Average order value for a period.", _PERIOD),
    _ability("shop/analytics/by-product", "Sales by Product", "Sales per product.", _p("product_id", "integer"), _DAYS, _LIMIT),
    _ability("shop/analytics/by-location", "Sales by Location", "Sales per country.", _DAYS),
    _ability("shop/analytics/tax-collected", "Tax Collected", "Tax collected over a period.", _DAYS),
)

STORE_ABILITIES = (
    _ability("shop/store/settings", "Store Settings", "Read store settings for a group.", _p("group")),
    _ability("shop/store/status", "Store Status", "System status report."),
    _ability("shop/store/payment-gateways", "Payment Gateways", "List enabled payment gateways."),
    _ability("shop/store/shipping-zones", "Shipping Zones", "List shipping zones and methods."),
    _ability("shop/store/tax-rates", "Tax Rates", "List tax rates.", _p("tax_class")),
    _ability("shop/store/shipping-classes", "Shipping Classes", "List shipping classes."),
    _ability("shop/store/tax-classes", "Tax Classes", "List tax classes."),
)

COUPON_ABILITIES = (
    _ability("shop/coupons/list", "List Coupons", "List coupons.", _p("status"), _LIMIT),
    _ability("shop/coupons/get", "Get Coupon", "Retrieve a coupon by code.", _p("code", required=True)),
    _ability("shop/coupons/available", "Available Coupons", "List coupons customers can use now.", _LIMIT),
    _ability("shop/coupons/stats", "Coupon Stats", "Coupon usage over a period.", _DAYS),
    _ability(
        "shop/coupons/create",
        "Create Coupon",
        "Create a discount coupon.",
        _p("code", required=True),
        _p("amount"),
        _p("discount_type"),
    ),
    _ability(
        "shop/coupons/update",
        "Update Coupon",
        "Change the amount of a coupon.",
        _p("coupon_id", "integer"),
        _p("code"),
        _p("amount"),
    ),
    _ability(
        "shop/coupons/delete",
        "Delete Coupon",
        "Move a coupon to the trash, or delete it permanently.",
        _p("coupon_id", "integer"),
        _p("code"),
        _p("force", "boolean"),
        destructive=True,
    ),
)

CONTENT_ABILITIES = (
    _ability("shop/content/categories", "Product Categories", "List product categories.", _p("search"), _LIMIT),
    _ability("shop/content/tags", "Product Tags", "List product tags.", _p("search"), _LIMIT),
    _ability("shop/content/product-title", "Generate Product Title", "Draft a product title.", _p("product_id", "integer", required=True), _p("tone")),
    _ability(
        "shop/content/product-description",
        "Generate Product Description",
        "Draft a product description.",
        _p("product_id", "integer", required=True),
        _p("tone"),
        _p("length"),
    ),
    _ability(
        "shop/content/short-description",
        "Generate Short Description",
        "Draft a short product description.",
        _p("product_id", "integer", required=True),
        _p("tone"),
    ),
    _ability(
        "shop/content/meta-description",
        "Generate Meta Description",
        "Draft an SEO meta description.",
        _p("product_id", "integer", required=True),
        _p("keywords"),
    ),
    _ability(
        "shop/content/product-tags",
        "Generate Product Tags",
        "Suggest product tags.",
        _p("product_id", "integer", required=True),
        _p("count", "integer"),
    ),
)

SUBSCRIPTION_ABILITIES = (
    _ability("shop/subscriptions/list", "List Subscriptions", "List subscriptions.", _p("status"), _LIMIT),
    _ability("shop/subscriptions/get", "Get Subscription", "Retrieve a subscription.", _p("subscription_id", "integer", required=True)),
    _ability("shop/subscriptions/search", "Search Subscriptions", "Search subscriptions.", _p("query"), _LIMIT),
    _ability("shop/subscriptions/analytics", "Subscription Analytics", "MRR, churn and subscriber counts.", _PERIOD),
    _ability("shop/subscriptions/churn-risk", "Churn Risk", "Subscriptions at risk of cancelling.", _LIMIT),
    _ability("shop/subscriptions/failed-payments", "Failed Renewals", "Subscriptions with failed renewals.", _LIMIT),
    _ability("shop/subscriptions/expiring-soon", "Expiring Subscriptions", "Subscriptions ending soon.", _DAYS, _LIMIT),
    _ability("shop/subscriptions/pause", "Pause Subscription", "Put a subscription on hold.", _p("subscription_id", "integer", required=True)),
    _ability("shop/subscriptions/skip", "Skip Renewal", "Skip the next renewal payment.", _p("subscription_id", "integer", required=True)),
    _ability(
        "shop/subscriptions/update-status",
        "Update Subscription Status",
        "Change the status of a subscription.",
        _p("subscription_id", "integer", required=True),
        _p("status", required=True),
    ),
    _ability(
        "shop/subscriptions/cancel",
        "Cancel Subscription",
        "Cancel a subscription at the end of the paid period.",
        _p("subscription_id", "integer", required=True),
        destructive=True,
    ),
    _ability(
        "shop/subscriptions/terminate",
        "Terminate Subscription",
        "End a subscription immediately.",
        _p("subscription_id", "integer", required=True),
        destructive=True,
    ),
)

BOOKING_ABILITIES = (
    _ability("shop/bookings/list", "List Bookings", "List bookings.", _p("status"), _LIMIT),
    _ability("shop/bookings/get", "Get Booking", "Retrieve a booking.", _p("booking_id", "integer", required=True)),
    _ability("shop/bookings/today", "Today's Bookings", "Bookings scheduled for today.", _p("status")),
    _ability("shop/bookings/upcoming", "Upcoming Bookings", "Bookings in the coming days.", _DAYS, _LIMIT),
    _ability("shop/bookings/search", "Search Bookings", "Search bookings.", _p("query"), _LIMIT),
    _ability("shop/bookings/analytics", "Booking Analytics", "Booking volume and revenue.", _PERIOD),
    _ability("shop/bookings/availability", "Booking Availability", "Free slots for a bookable product.", _p("product_id", "integer"), _p("date")),
    _ability("shop/bookings/resources", "Booking Resources", "List bookable resources.", _LIMIT),
    _ability("shop/bookings/update", "Update Booking", "Change booking details.", _p("booking_id", "integer", required=True)),
    _ability(
        "shop/bookings/update-status",
        "Update Booking Status",
        "Confirm, complete or cancel a booking.",
        _p("booking_id", "integer", required=True),
        _p("status", required=True),
    ),
    _ability(
        "shop/bookings/cancel",
        "Cancel Booking",
        "Cancel a booking.",
        _p("booking_id", "integer", required=True),
        destructive=True,
    ),
)

MEMBERSHIP_ABILITIES = (
    _ability("shop/memberships/list", "List Memberships", "List memberships.", _p("status"), _LIMIT),
    _ability("shop/memberships/get", "Get Membership", "Retrieve a membership.", _p("membership_id", "integer", required=True)),
    _ability("shop/memberships/plans", "Membership Plans", "List membership plans.", _LIMIT),
    _ability("shop/memberships/search", "Search Memberships", "Search memberships.", _p("query"), _LIMIT),
    _ability("shop/memberships/analytics", "Membership Analytics", "Member counts and trends.", _PERIOD),
    _ability("shop/memberships/expiring", "Expiring Memberships", "Memberships ending soon.", _DAYS, _LIMIT),
    _ability("shop/memberships/members-by-plan", "Members by Plan", "Members of a plan.", _p("plan_id", "integer"), _p("status"), _LIMIT),
    _ability(
        "shop/memberships/update-status",
        "Update Membership Status",
        "Change the status of a membership.",
        _p("membership_id", "integer", required=True),
        _p("status", required=True),
    ),
    _ability(
        "shop/memberships/cancel",
        "Cancel Membership",
        "Cancel a membership.",
        _p("membership_id", "integer", required=True),
        destructive=True,
    ),
)

CUSTOMER_SELF_SERVICE_ABILITIES = (
    _ability("shop/customer/my-subscriptions", "My Subscriptions", "Your subscriptions.", _p("status")),
    _ability("shop/customer/next-payment", "Next Payment", "When your next renewal is charged."),
    _ability("shop/customer/update-payment", "Update Payment Method", "Where to change your card."),
    _ability("shop/customer/update-address", "Update Address", "Where to change your shipping address."),
    _ability("shop/customer/pause-subscription", "Pause Subscription", "Put your subscription on hold.", _p("subscription_id", "integer")),
    _ability("shop/customer/resume-subscription", "Resume Subscription", "Reactivate your subscription.", _p("subscription_id", "integer")),
    _ability(
        "shop/customer/cancel-subscription",
        "Cancel Subscription",
        "Cancel your subscription.",
        _p("subscription_id", "integer"),
        destructive=True,
    ),
    _ability("shop/customer/my-bookings", "My Bookings", "Your bookings.", _p("status")),
    _ability("shop/customer/upcoming-bookings", "My Upcoming Bookings", "Your next bookings.", _p("status")),
    _ability("shop/customer/booking-details", "Booking Details", "Details of one of your bookings.", _p("booking_id", "integer")),
    _ability(
        "shop/customer/cancel-booking",
        "Cancel Booking",
        "Cancel one of your bookings.",
        _p("booking_id", "integer"),
        destructive=True,
    ),
    _ability("shop/customer/check-availability", "Check Availability", "Free slots you can book.", _p("date"), _p("service_name")),
    _ability("shop/customer/my-memberships", "My Memberships", "Your memberships.", _p("status")),
    _ability("shop/customer/membership-benefits", "Membership Benefits", "What your membership includes."),
    _ability("shop/customer/check-access", "Check Access", "Whether your membership grants access."),
    _ability(
        "shop/customer/cancel-membership",
        "Cancel Membership",
        "Cancel your membership.",
        _p("membership_id", "integer"),
        destructive=True,
    ),
)

ABILITY_CATALOG: tuple[AbilityMetadata, ...] = (
    *ORDER_ABILITIES,
    *PRODUCT_ABILITIES,
    *CUSTOMER_ABILITIES,
    *ANALYTICS_ABILITIES,
    *STORE_ABILITIES,
    *COUPON_ABILITIES,
    *CONTENT_ABILITIES,
    *SUBSCRIPTION_ABILITIES,
    *BOOKING_ABILITIES,
    *MEMBERSHIP_ABILITIES,
    *CUSTOMER_SELF_SERVICE_ABILITIES,
)
