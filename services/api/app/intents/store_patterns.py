"""Read-only patterns for the core store catalogue: orders, products, customers, analytics,
settings, coupons and content generation."""

from __future__ import annotations

from packages.shared.schemas.intent import PatternScopeV1
from services.api.app.intents import extractors as ex
from services.api.app.intents.base import IntentPattern, pattern


def order_patterns() -> list[IntentPattern]:
    return [
        pattern(
            "order_get",
            ability_id="shop/orders/get",
            keywords=("order #", "order number", "order id", "show order", "get order", "find order", "lookup order", "check order"),
            regexes=(r"order\s*#?\s*(\d+)", r"\border\b.*?(\d{3,})"),
            extractor=ex.extract_order_id,
            priority=10,
        ),
        pattern(
            "order_get_last",
            ability_id="shop/orders/get-last",
            keywords=("last order", "recent order", "latest order", "most recent order", "newest order"),
            regexes=(
                r"(?:the\s+)?(?:last|most\s+recent|latest|newest)\s+order(?:\s+details?)?",
                r"check\s+(?:the\s+)?(?:last|latest|recent)\s+order",
                r"what.*(?:last|latest|recent)\s+order",
                r"show\s+(?:me\s+)?(?:the\s+)?(?:last|latest|recent)\s+order",
            ),
            extractor=ex.extract_last_order_params,
            priority=12,
        ),
        pattern(
            "order_list",
            ability_id="shop/orders/list",
            keywords=("orders", "list order", "show orders", "all order", "how many order", "order count", "total order"),
            regexes=(
                r"(?:show|list|all|pending|processing|completed|cancelled|on-hold)\s*orders",
                r"how\s+many\s+(?:total\s+)?orders?",
                r"(?:total|count)\s+(?:of\s+)?orders?",
                r"orders?\s+(?:do\s+)?(?:i|we)\s+have",
            ),
            extractor=ex.extract_order_list_params,
            priority=5,
        ),
        pattern(
            "order_search",
            ability_id="shop/orders/search",
            keywords=("search order", "find order", "orders from", "orders by"),
            regexes=(r"search\s+orders?\s+(?:for\s+)?(.+)", r"find\s+orders?\s+(.+)"),
            extractor=ex.extract_order_search_params,
            priority=8,
        ),
        pattern(
            "orders_ready_to_ship",
            ability_id="shop/orders/ready-to-ship",
            keywords=("ready to ship", "ship today", "fulfillment", "needs shipping", "pending shipment", "to ship"),
            regexes=(
                r"(?:orders?\s+)?ready\s+to\s+ship",
                r"(?:orders?\s+)?(?:need|needs|pending)\s+(?:to\s+)?ship",
                r"what\s+(?:orders?\s+)?(?:need|needs|should)\s+(?:i|we)\s+ship",
                r"fulfillment\s+(?:queue|list)",
            ),
            extractor=ex.extract_basic_limit_params,
            priority=10,
        ),
        pattern(
            "pending_payment",
            ability_id="shop/orders/pending-payment",
            keywords=("awaiting payment", "pending payment", "unpaid", "not paid", "waiting for payment"),
            regexes=(
                r"(?:orders?\s+)?(?:awaiting|pending|waiting\s+for)\s+payment",
                r"unpaid\s+orders?",
                r"orders?\s+not\s+paid",
                r"who\s+(?:hasn't|has\s+not)\s+paid",
            ),
            extractor=ex.extract_basic_limit_params,
            priority=10,
        ),
        pattern(
            "failed_orders",
            ability_id="shop/orders/failed",
            keywords=("failed order", "failed payment", "payment failure", "declined"),
            regexes=(
                r"(?:failed|declined)\s+(?:orders?|payments?)",
                r"(?:orders?|payments?)\s+(?:that\s+)?failed",
                r"payment\s+(?:failures?|declines?)",
            ),
            extractor=ex.extract_days_params,
            priority=9,
        ),
        pattern(
            "processing_count",
            ability_id="shop/orders/processing-count",
            keywords=("processing count", "how many orders", "orders to ship", "orders waiting", "unfulfilled"),
            regexes=(
                r"how\s+many\s+(?:orders?\s+)?(?:to\s+)?(?:process|ship|fulfill)",
                r"(?:unfulfilled|unshipped|pending)\s+orders?\s+count",
                r"orders?\s+(?:to\s+be\s+)?(?:processed|shipped|fulfilled)",
                r"processing\s+(?:orders?\s+)?count",
            ),
            extractor=ex.extract_empty_params,
            priority=7,
        ),
    ]


def product_patterns() -> list[IntentPattern]:
    return [
        pattern(
            "product_get",
            ability_id="shop/products/get",
            keywords=("product #", "product id", "show product", "get product", "find product"),
            regexes=(r"product\s*#?\s*(\d+)", r"\bproduct\b.*?(\d{2,})", r"sku\s*[:\s]*([a-zA-Z0-9_-]+)"),
            extractor=ex.extract_product_id,
            priority=10,
        ),
        pattern(
            "product_list",
            ability_id="shop/products/list",
            keywords=("products", "list product", "show product", "all product", "my product", "our product", "created product", "new product"),
            regexes=(
                r"(?:list|show|all|recent|my|our)\s*products?",
                r"products?\s+(?:do\s+)?(?:i|we)\s+have",
                r"(?:what|which)\s+products?\s+(?:do\s+)?(?:i|we)\s+have",
                r"(?:created|added|new)\s+products?",
                r"how\s+many\s+products?",
            ),
            extractor=ex.extract_product_list_params,
            priority=5,
        ),
        pattern(
            "product_count",
            ability_id="shop/products/count",
            keywords=("how many product", "count product", "number of product", "total product"),
            regexes=(
                r"how\s+many\s+(?:(\w+)\s+)?products?",
                r"count\s+(?:(\w+)\s+)?products?",
                r"number\s+of\s+(?:(\w+)\s+)?products?",
                r"total\s+(?:(\w+)\s+)?products?",
            ),
            extractor=ex.extract_product_count_params,
            priority=9,
        ),
        pattern(
            "product_search",
            ability_id="shop/products/search",
            keywords=("search product", "find product", "products named", "products called"),
            regexes=(r"search\s+products?\s+(?:for\s+)?(.+)", r"find\s+products?\s+(.+)"),
            extractor=ex.extract_product_search_params,
            priority=8,
        ),
        pattern(
            "product_low_stock",
            ability_id="shop/products/low-stock",
            keywords=("low stock", "low inventory", "running low", "out of stock", "stock level", "inventory low"),
            regexes=(r"low\s*(?:on\s*)?stock", r"out\s*of\s*stock", r"inventory\s+(?:is\s+)?low", r"running\s+low"),
            extractor=ex.extract_low_stock_params,
            priority=9,
        ),
        pattern(
            "product_virtual",
            ability_id="shop/products/count",
            keywords=("virtual product", "digital product", "downloadable", "non-physical"),
            regexes=(r"virtual\s+products?", r"digital\s+products?", r"downloadable\s+products?"),
            extractor=ex.extract_virtual_product_params,
            priority=9,
        ),
        pattern(
            "out_of_stock",
            ability_id="shop/products/out-of-stock",
            keywords=("out of stock", "no stock", "zero stock", "sold out"),
            regexes=(
                r"(?:products?\s+)?out\s+of\s+stock",
                r"(?:products?\s+)?(?:with\s+)?(?:no|zero)\s+stock",
                r"sold\s+out\s+(?:products?|items?)",
                r"what'?s?\s+out\s+of\s+stock",
            ),
            extractor=ex.extract_basic_limit_params,
            priority=10,
        ),
        pattern(
            "stock_value",
            ability_id="shop/products/stock-value",
            keywords=("stock value", "inventory value", "worth of inventory", "total stock"),
            regexes=(
                r"(?:stock|inventory)\s+value",
                r"worth\s+of\s+(?:stock|inventory)",
                r"(?:total|how\s+much)\s+(?:is\s+)?(?:my|our)\s+(?:stock|inventory)",
            ),
            extractor=ex.extract_empty_params,
            priority=10,
        ),
        pattern(
            "pending_reviews",
            ability_id="shop/products/pending-reviews",
            keywords=("pending review", "unapproved review", "review moderation", "approve review"),
            regexes=(
                r"(?:pending|unapproved|awaiting)\s+reviews?",
                r"reviews?\s+(?:to\s+)?(?:approve|moderate)",
                r"(?:any|are\s+there)\s+reviews?\s+(?:pending|waiting)",
            ),
            extractor=ex.extract_basic_limit_params,
            priority=9,
        ),
        pattern(
            "product_availability",
            ability_id="shop/products/availability",
            keywords=("in stock", "available", "can i buy", "is there", "do you have"),
            regexes=(
                r"(?:is|are)\s+.+\s+(?:in\s+stock|available)",
                r"(?:do\s+you|does\s+the\s+store)\s+have\s+.+",
                r"(?:can\s+i|is\s+it\s+possible\s+to)\s+(?:buy|get|order)\s+.+",
                r"(?:check|what'?s?)\s+(?:the\s+)?(?:stock|availability)",
            ),
            extractor=ex.extract_product_availability_params,
            priority=8,
            scope=PatternScopeV1.ANY,
        ),
        pattern(
            "related_products",
            ability_id="shop/products/related",
            keywords=("similar", "like this", "recommend", "suggestion", "alternative"),
            regexes=(
                r"(?:similar|related|like\s+this)\s+products?",
                r"(?:recommend|suggest)\s+(?:me\s+)?(?:some\s+)?products?",
                r"(?:any|what)\s+(?:alternatives?|other\s+options?)",
                r"(?:show|find)\s+(?:me\s+)?(?:similar|related)",
            ),
            extractor=ex.extract_related_products_params,
            priority=8,
            scope=PatternScopeV1.ANY,
        ),
        pattern(
            "products_on_sale",
            ability_id="shop/products/on-sale",
            keywords=("on sale", "sale items", "discounted", "deals", "sales", "what's on sale"),
            regexes=(
                r"(?:what|show|list|any|are\s+there)\s+(?:products?\s+)?(?:on\s+)?sale",
                r"sale\s+(?:items?|products?)",
                r"(?:current|today'?s?)\s+(?:sales?|deals?)",
                r"(?:discounted|reduced)\s+(?:items?|products?)",
            ),
            extractor=ex.extract_sale_products_params,
            priority=8,
            scope=PatternScopeV1.ANY,
        ),
        pattern(
            "products_featured",
            ability_id="shop/products/featured",
            keywords=("featured", "featured products", "recommended", "top picks", "best products"),
            regexes=(
                r"(?:show|list|what\s+are)\s+(?:the\s+)?featured\s+(?:products?|items?)",
                r"featured\s+(?:products?|items?)",
                r"(?:top|best)\s+(?:picks?|recommendations?)",
                r"(?:recommended|popular)\s+(?:products?|items?)",
            ),
            extractor=ex.extract_basic_limit_params,
            priority=7,
            scope=PatternScopeV1.ANY,
        ),
        pattern(
            "product_by_sku",
            ability_id="shop/products/by-sku",
            keywords=("sku", "product code", "item code", "part number"),
            regexes=(
                r"sku\s*[:#]?\s*([a-zA-Z0-9_-]+)",
                r"product\s+(?:code|sku)\s*[:#]?\s*([a-zA-Z0-9_-]+)",
                r"find\s+(?:by\s+)?sku\s+([a-zA-Z0-9_-]+)",
            ),
            extractor=ex.extract_sku_params,
            priority=10,
        ),
        pattern(
            "most_stocked",
            ability_id="shop/products/most-stocked",
            keywords=("most stocked", "highest stock", "most inventory", "overstocked"),
            regexes=(
                r"(?:most|highest)\s+(?:stocked?|inventory)",
                r"products?\s+with\s+(?:most|highest)\s+stock",
                r"(?:overstocked?|excess)\s+(?:products?|inventory)",
            ),
            extractor=ex.extract_basic_limit_params,
            priority=7,
        ),
        pattern(
            "low_stock",
            ability_id="shop/products/low-stock",
            keywords=("low stock", "running low", "almost out", "need restock", "low inventory"),
            regexes=(
                r"(?:low|running\s+low)\s+(?:on\s+)?stock",
                r"(?:products?|items?)\s+(?:running|almost)\s+(?:low|out)",
                r"(?:need|needs?)\s+(?:to\s+)?restock",
                r"low\s+(?:stock|inventory)\s+(?:products?|items?|alert)",
            ),
            extractor=ex.extract_low_stock_params,
            priority=8,
        ),
    ]


def customer_patterns() -> list[IntentPattern]:
    return [
        pattern(
            "customer_get",
            ability_id="shop/customers/get",
            keywords=("customer #", "customer id", "show customer", "get customer", "find customer"),
            regexes=(r"customer\s*#?\s*(\d+)", r"customer\s+(.+@.+\..+)"),
            extractor=ex.extract_customer_id,
            priority=10,
        ),
        pattern(
            "customer_list",
            ability_id="shop/customers/list",
            keywords=("customers", "list customer", "show customer", "all customer", "buyer", "client", "my customer", "our customer"),
            regexes=(
                r"(?:list|show|all|recent|my|our)\s*customers?",
                r"customers?\s+(?:do\s+)?(?:i|we)\s+have",
                r"(?:what|which|how\s+many)\s+customers?",
                r"\bbuyers?\b",
                r"\bclients?\b",
            ),
            extractor=ex.extract_customer_list_params,
            priority=5,
        ),
        pattern(
            "top_customers",
            ability_id="shop/analytics/top-customers",
            keywords=("top customer", "best customer", "vip customer", "high value", "loyal customer"),
            regexes=(r"top\s+customers?", r"best\s+customers?", r"vip\s+customers?", r"high\s*value\s+customers?"),
            extractor=ex.extract_top_customers_params,
            priority=9,
        ),
        pattern(
            "recent_customers",
            ability_id="shop/customers/recent",
            keywords=("new customer", "recent customer", "latest customer", "just signed up"),
            regexes=(
                r"(?:new|recent|latest)\s+customers?",
                r"customers?\s+(?:who\s+)?(?:just\s+)?signed?\s+up",
                r"(?:who|how\s+many)\s+(?:new\s+)?customers?\s+(?:this|today|last)",
            ),
            extractor=ex.extract_days_params,
            priority=9,
        ),
        pattern(
            "repeat_customers",
            ability_id="shop/customers/repeat",
            keywords=("repeat customer", "loyal customer", "returning customer", "multiple order"),
            regexes=(
                r"(?:repeat|loyal|returning)\s+customers?",
                r"customers?\s+(?:with\s+)?multiple\s+orders?",
                r"who\s+(?:bought|ordered)\s+(?:more\s+than\s+once|again)",
            ),
            extractor=ex.extract_repeat_customers_params,
            priority=9,
        ),
        pattern(
            "customer_search",
            ability_id="shop/customers/search",
            keywords=("search customer", "find customer", "look up customer", "customer named", "customer email"),
            regexes=(
                r"search\s+(?:for\s+)?customers?",
                r"find\s+(?:a\s+)?customer",
                r"look\s*up\s+customer",
                r"customer\s+(?:named|called|with\s+email)",
                r"who\s+is\s+customer",
            ),
            extractor=ex.extract_customer_search_params,
            priority=8,
        ),
        pattern(
            "customer_orders",
            ability_id="shop/customers/orders",
            keywords=("customer order", "orders from customer", "order history", "customer purchase", "bought by"),
            regexes=(
                r"orders?\s+(?:from|by|for)\s+customer",
                r"customer\s*#?\s*\d+.*orders?",
                r"(?:order|purchase)\s+history\s+(?:for|of)",
                r"what\s+(?:did|has)\s+customer.*(?:order|buy|purchase)",
                r"(?:orders?|purchases?)\s+(?:made\s+)?by",
            ),
            extractor=ex.extract_customer_orders_params,
            priority=8,
        ),
        pattern(
            "customer_lifetime",
            ability_id="shop/customers/lifetime-value",
            keywords=("lifetime value", "customer value", "total spent", "customer history", "clv", "ltv"),
            regexes=(
                r"(?:customer|user)\s+(?:lifetime\s+)?value",
                r"(?:how\s+much|total)\s+(?:has\s+)?(?:customer|user)\s+spent",
                r"(?:clv|ltv)\s+(?:for|of)\s+(?:customer|user)",
                r"customer\s+(?:purchase|order)\s+history",
            ),
            extractor=ex.extract_customer_lookup_params,
            priority=8,
        ),
    ]


def analytics_patterns() -> list[IntentPattern]:
    return [
        pattern(
            "sales_analytics",
            ability_id="shop/analytics/sales",
            keywords=("sales", "revenue", "how much", "total", "earning", "income", "made today", "made this"),
            regexes=(
                r"(?:sales|revenue|earning|income)\s*(?:today|this\s+week|this\s+month|this\s+year)?",
                r"how\s+much\s+(?:did\s+(?:we|i)\s+)?(?:make|earn|sell)",
                r"total\s+(?:sales|revenue)",
            ),
            extractor=ex.extract_sales_params,
            priority=8,
        ),
        pattern(
            "revenue_analytics",
            ability_id="shop/analytics/revenue",
            keywords=("revenue breakdown", "revenue detail", "net revenue", "gross revenue", "tax collected", "shipping revenue"),
            regexes=(r"revenue\s+(?:breakdown|detail|report)", r"(?:net|gross)\s+revenue"),
            extractor=ex.extract_revenue_params,
            priority=9,
        ),
        pattern(
            "top_products",
            ability_id="shop/analytics/top-products",
            keywords=("top product", "best selling", "bestseller", "popular product", "top seller", "most sold"),
            regexes=(r"top\s+(?:selling\s+)?products?", r"best\s*sell(?:ing|er)", r"popular\s+products?", r"most\s+sold"),
            extractor=ex.extract_top_products_params,
            priority=9,
        ),
        pattern(
            "daily_summary",
            ability_id="shop/analytics/daily-summary",
            keywords=("summary", "overview", "today", "how are we doing", "store status", "daily report", "daily stats", "dashboard", "update", "briefing"),
            regexes=(
                r"(?:daily|today'?s?|store|business)\s+(?:summary|overview|report|stats|update)",
                r"how\s+(?:are\s+we|is\s+(?:the\s+)?(?:store|business))\s+doing",
                r"store\s+(?:status|overview|summary|dashboard)",
                r"what'?s?\s+(?:happening|going\s+on|new)\s+(?:today|in\s+(?:the\s+)?store)",
                r"give\s+(?:me\s+)?(?:a\s+)?(?:summary|overview|update)",
                r"(?:store|business|sales)\s+(?:performance|update)",
                r"how\s+(?:is|was)\s+(?:today|yesterday|this\s+week)",
            ),
            extractor=ex.extract_daily_summary_params,
            priority=10,
        ),
        pattern(
            "refunds",
            ability_id="shop/analytics/refunds",
            keywords=("refund", "refunded", "money back", "return"),
            regexes=(r"(?:recent|show|list)?\s*refunds?", r"how\s+(?:many|much)\s+refund", r"refund\s+(?:summary|report|stats)"),
            extractor=ex.extract_days_params,
            priority=9,
        ),
        pattern(
            "payment_methods_stats",
            ability_id="shop/analytics/payment-methods",
            keywords=("payment method", "how do customers pay", "payment breakdown", "popular payment"),
            regexes=(
                r"payment\s+(?:method|breakdown|stats)",
                r"how\s+(?:do|are)\s+(?:customers?|people)\s+pay",
                r"popular\s+payment",
                r"revenue\s+by\s+payment",
            ),
            extractor=ex.extract_period_params,
            priority=9,
        ),
        pattern(
            "reviews_summary",
            ability_id="shop/analytics/reviews",
            keywords=("review", "rating", "feedback", "customer review"),
            regexes=(
                r"(?:recent|show|list)?\s*reviews?",
                r"(?:product|customer)\s+(?:reviews?|ratings?|feedback)",
                r"how\s+are\s+(?:our|the)\s+reviews?",
                r"(?:average|overall)\s+rating",
            ),
            extractor=ex.extract_days_params,
            priority=9,
        ),
        pattern(
            "order_comparison",
            ability_id="shop/analytics/comparison",
            keywords=("compare", "vs", "versus", "compared to", "this week vs", "growth"),
            regexes=(
                r"(?:compare|comparison)\s+(?:orders?|sales|revenue)",
                r"(?:this|last)\s+(?:week|month|year)\s+(?:vs|versus|compared)",
                r"(?:sales|revenue|orders?)\s+(?:vs|versus|compared)",
                r"(?:are\s+we|how\s+are\s+we)\s+(?:doing|growing)",
            ),
            extractor=ex.extract_comparison_params,
            priority=10,
        ),
        pattern(
            "category_sales",
            ability_id="shop/analytics/category-sales",
            keywords=("category sales", "best category", "top category", "sales by category"),
            regexes=(
                r"(?:category|categories)\s+(?:sales|performance|revenue)",
                r"(?:best|top)\s+(?:selling\s+)?(?:category|categories)",
                r"sales\s+by\s+category",
                r"which\s+(?:category|categories)\s+(?:sell|perform)",
            ),
            extractor=ex.extract_period_params,
            priority=9,
        ),
        pattern(
            "aov",
            ability_id="shop/analytics/aov",
            keywords=("average order", "aov", "average cart", "order value"),
            regexes=(
                r"(?:average|avg)\s+(?:order|cart)\s+(?:value|size)",
                r"\baov\b",
                r"(?:what|how\s+much)\s+(?:is|are)\s+(?:customers?|people)\s+spending",
            ),
            extractor=ex.extract_period_params,
            priority=9,
        ),
        pattern(
            "sales_by_product",
            ability_id="shop/analytics/by-product",
            keywords=("product sales", "sales by product", "top selling", "best sellers", "product performance"),
            regexes=(
                r"(?:sales|revenue)\s+(?:by|per)\s+product",
                r"product\s+(?:sales|performance|stats?)",
                r"(?:top|best)\s+sell(?:ing|ers?)",
                r"which\s+products?\s+(?:are\s+)?sell(?:ing|s?)\s+(?:best|most)",
            ),
            extractor=ex.extract_sales_by_product_params,
            priority=8,
        ),
        pattern(
            "sales_by_location",
            ability_id="shop/analytics/by-location",
            keywords=("sales by location", "geographic sales", "sales by country", "regional sales", "where are customers"),
            regexes=(
                r"(?:sales|revenue|orders?)\s+(?:by|per)\s+(?:location|country|region|state)",
                r"(?:geographic|regional)\s+(?:sales|breakdown)",
                r"where\s+(?:are\s+)?(?:my\s+)?(?:customers?|orders?)\s+(?:from|coming)",
                r"(?:top|main)\s+(?:countries?|locations?|regions?)",
            ),
            extractor=ex.extract_days_params,
            priority=8,
        ),
        pattern(
            "tax_collected",
            ability_id="shop/analytics/tax-collected",
            keywords=("tax collected", "tax report", "taxes", "tax summary", "sales tax"),
            regexes=(
                r"(?:tax|taxes)\s+(?:collected|report|summary)",
                r"how\s+much\s+tax\s+(?:collected|received)",
                r"(?:sales|total)\s+tax\s+(?:collected|amount)",
            ),
            extractor=ex.extract_days_params,
            priority=7,
        ),
    ]


def store_config_patterns() -> list[IntentPattern]:
    return [
        pattern(
            "store_settings",
            ability_id="shop/store/settings",
            keywords=("store setting", "shop setting", "woocommerce setting", "configuration"),
            regexes=(r"(?:store|shop|woocommerce)\s+settings?", r"store\s+config"),
            extractor=ex.extract_settings_params,
            priority=7,
        ),
        pattern(
            "store_status",
            ability_id="shop/store/status",
            keywords=("store status", "system status", "woocommerce status", "health check", "store health"),
            regexes=(r"(?:store|system|woocommerce)\s+status", r"health\s+check"),
            priority=7,
        ),
        pattern(
            "payment_gateways",
            ability_id="shop/store/payment-gateways",
            keywords=("payment gateway", "payment method", "payment option", "how can customer pay"),
            regexes=(r"payment\s+(?:gateway|method|option)s?", r"how\s+(?:can|do)\s+customers?\s+pay"),
            priority=7,
        ),
        pattern(
            "shipping_zones",
            ability_id="shop/store/shipping-zones",
            keywords=("shipping zone", "shipping method", "shipping option", "delivery zone"),
            regexes=(r"shipping\s+(?:zone|method|option)s?", r"delivery\s+zones?"),
            priority=7,
        ),
        pattern(
            "tax_rates",
            ability_id="shop/store/tax-rates",
            keywords=("tax rate", "tax class", "vat rate", "sales tax"),
            regexes=(r"tax\s+(?:rate|class|setting)s?", r"(?:vat|sales)\s+tax"),
            extractor=ex.extract_tax_params,
            priority=7,
        ),
        pattern(
            "shipping_classes",
            ability_id="shop/store/shipping-classes",
            keywords=("shipping class", "shipping classes", "freight class", "delivery class"),
            regexes=(r"shipping\s+class(?:es)?", r"(?:list|show|what)\s+shipping\s+class", r"(?:freight|delivery)\s+class"),
            priority=7,
        ),
        pattern(
            "tax_classes",
            ability_id="shop/store/tax-classes",
            keywords=("tax class", "tax classes", "vat class", "tax type"),
            regexes=(r"tax\s+class(?:es)?", r"(?:list|show|what)\s+tax\s+class", r"(?:vat|sales\s+tax)\s+class"),
            priority=7,
        ),
    ]


def coupon_patterns() -> list[IntentPattern]:
    return [
        pattern(
            "coupon_list",
            ability_id="shop/coupons/list",
            keywords=("coupons", "coupon", "discount code", "promo code", "list coupon", "show coupon", "what coupon", "my coupon"),
            regexes=(
                r"(?:list|show|all|active)\s*coupons?",
                r"discount\s*codes?",
                r"promo\s*codes?",
                r"(?:what|which)\s+coupons?\s+(?:do\s+)?(?:i|we)\s+have",
                r"coupons?\s+(?:do\s+)?(?:i|we)\s+have",
                r"(?:my|our)\s+coupons?",
                r"(?:give|share|tell)\s+(?:me\s+)?(?:the\s+)?coupon",
            ),
            extractor=ex.extract_coupon_list_params,
            priority=6,
        ),
        pattern(
            "coupon_get",
            ability_id="shop/coupons/get",
            keywords=("coupon code", "get coupon", "show coupon", "coupon detail"),
            regexes=(r"coupon\s+(?:code\s+)?[\"']?([A-Z0-9_-]+)[\"']?", r"show\s+coupon\s+(.+)"),
            extractor=ex.extract_coupon_code,
            priority=8,
        ),
        pattern(
            "coupons_available",
            ability_id="shop/coupons/available",
            keywords=("coupon", "discount code", "promo code", "coupons", "discount", "voucher"),
            regexes=(
                r"(?:any|available|current|valid)\s+(?:coupon|discount|promo)\s*(?:code)?s?",
                r"(?:do\s+you\s+have|is\s+there)\s+(?:a\s+)?(?:coupon|discount|promo)",
                r"(?:show|give|list)\s+(?:me\s+)?(?:coupon|discount|promo)\s*(?:code)?s?",
                r"(?:what\s+)?(?:coupon|discount|promo)\s*(?:code)?s?\s+(?:can\s+i\s+use|available)",
            ),
            extractor=ex.extract_basic_limit_params,
            priority=9,
            scope=PatternScopeV1.ANY,
        ),
        pattern(
            "coupon_stats",
            ability_id="shop/coupons/stats",
            keywords=("coupon stats", "coupon usage", "coupon performance", "discount stats", "coupon report"),
            regexes=(
                r"coupon\s+(?:stats?|statistics?|usage|performance|report)",
                r"(?:how\s+are|which)\s+coupons?\s+(?:performing|used)",
                r"(?:top|best|most\s+used)\s+coupons?",
            ),
            extractor=ex.extract_days_params,
            priority=8,
        ),
    ]


def content_patterns() -> list[IntentPattern]:
    return [
        pattern(
            "content_categories",
            ability_id="shop/content/categories",
            keywords=("categories", "product categories", "category list", "show categories"),
            regexes=(
                r"(?:list|show|all|what)\s+(?:product\s+)?categories",
                r"product\s+categories",
                r"categories\s+(?:do\s+)?(?:we|i)\s+have",
                r"(?:my|our)\s+categories",
            ),
            extractor=ex.extract_content_params,
            priority=6,
        ),
        pattern(
            "content_tags",
            ability_id="shop/content/tags",
            keywords=("tags", "product tags", "tag list", "show tags"),
            regexes=(
                r"(?:list|show|all|what)\s+(?:product\s+)?tags",
                r"product\s+tags",
                r"tags\s+(?:do\s+)?(?:we|i)\s+have",
                r"(?:my|our)\s+tags",
            ),
            extractor=ex.extract_content_params,
            priority=6,
        ),
        pattern(
            "content_product_title",
            ability_id="shop/content/product-title",
            keywords=("generate title", "create title", "write title", "product title", "new title", "better title"),
            regexes=(
                r"(?:generate|create|write|make)\s+(?:a\s+)?(?:product\s+)?title",
                r"(?:new|better|seo|optimized)\s+(?:product\s+)?title",
                r"title\s+(?:for|of)\s+(?:product|item)",
                r"product\s+(?:#?\d+|id\s*\d+).*?title",
            ),
            extractor=ex.extract_content_generation_params,
            priority=9,
        ),
        pattern(
            "content_product_description",
            ability_id="shop/content/product-description",
            keywords=("generate description", "create description", "write description", "product description", "new description"),
            regexes=(
                r"(?:generate|create|write|make)\s+(?:a\s+)?(?:product\s+)?description",
                r"(?:new|better|seo|optimized|full)\s+(?:product\s+)?description",
                r"description\s+(?:for|of)\s+(?:product|item)",
                r"product\s+(?:#?\d+|id\s*\d+).*?description",
            ),
            extractor=ex.extract_content_generation_params,
            priority=9,
        ),
        pattern(
            "content_short_description",
            ability_id="shop/content/short-description",
            keywords=("short description", "excerpt", "summary", "brief description"),
            regexes=(
                r"(?:generate|create|write|make)\s+(?:a\s+)?short\s+description",
                r"short\s+description\s+(?:for|of)",
                r"(?:product|item)\s+(?:excerpt|summary)",
                r"brief\s+description",
            ),
            extractor=ex.extract_content_generation_params,
            priority=9,
        ),
        pattern(
            "content_meta_description",
            ability_id="shop/content/meta-description",
            keywords=("meta description", "seo description", "search description", "yoast", "rankmath"),
            regexes=(
                r"(?:generate|create|write|make)\s+(?:a\s+)?meta\s+description",
                r"(?:seo|search|google)\s+description",
                r"meta\s+(?:desc|description)\s+(?:for|of)",
                r"(?:yoast|rankmath|seo)\s+(?:meta\s+)?description",
            ),
            extractor=ex.extract_content_generation_params,
            priority=9,
        ),
        pattern(
            "content_product_tags",
            ability_id="shop/content/product-tags",
            keywords=("generate tags", "create tags", "product tags", "suggest tags", "new tags"),
            regexes=(
                r"(?:generate|create|suggest|make)\s+(?:product\s+)?tags",
                r"(?:new|better|seo)\s+tags\s+(?:for|of)",
                r"tags\s+(?:for|of)\s+(?:product|item)",
                r"product\s+(?:#?\d+|id\s*\d+).*?tags",
            ),
            extractor=ex.extract_content_generation_params,
            priority=9,
        ),
    ]


def store_read_patterns() -> list[IntentPattern]:
    return [
        *order_patterns(),
        *product_patterns(),
        *customer_patterns(),
        *analytics_patterns(),
        *store_config_patterns(),
        *coupon_patterns(),
        *content_patterns(),
    ]
