"""Optional pattern packs for stores running the subscriptions, bookings or memberships
extensions. Customer-scoped patterns route to `shop/customer/*` abilities, which act on the
requesting customer's own records."""

from __future__ import annotations

from packages.shared.schemas.intent import PatternScopeV1
from services.api.app.intents import extractors as ex
from services.api.app.intents import integration_extractors as ix
from services.api.app.intents.base import IntentPattern, pattern

CUSTOMER = PatternScopeV1.CUSTOMER


def subscription_patterns() -> list[IntentPattern]:
    return [
        pattern(
            "subscription_list",
            ability_id="shop/subscriptions/list",
            keywords=("subscriptions", "list subscription", "show subscription", "all subscription", "active subscription"),
            regexes=(
                r"(?:list|show|all|active|cancelled|on-hold|expired)\s*subscriptions?",
                r"subscriptions?\s+(?:do\s+)?(?:i|we)\s+have",
                r"how\s+many\s+subscriptions?",
                r"(?:what|which)\s+subscriptions?",
            ),
            extractor=ix.extract_subscription_list_params,
            priority=6,
        ),
        pattern(
            "subscription_get",
            ability_id="shop/subscriptions/get",
            keywords=("subscription #", "subscription id", "show subscription", "get subscription"),
            regexes=(r"subscription\s*#?\s*(\d+)", r"show\s+subscription\s*#?\s*(\d+)", r"get\s+subscription\s*#?\s*(\d+)"),
            extractor=ix.extract_subscription_id,
            priority=10,
        ),
        pattern(
            "subscription_search",
            ability_id="shop/subscriptions/search",
            keywords=("search subscription", "find subscription", "subscription for"),
            regexes=(r"search\s+subscriptions?\s+(?:for\s+)?(.+)", r"find\s+subscriptions?\s+(.+)", r"subscriptions?\s+for\s+(.+)"),
            extractor=ix.extract_subscription_search_params,
            priority=8,
        ),
        pattern(
            "subscription_analytics",
            ability_id="shop/subscriptions/analytics",
            keywords=("mrr", "monthly recurring", "subscription analytics", "churn rate", "ltv", "lifetime value", "subscription revenue"),
            regexes=(
                r"\b(?:mrr|arr)\b",
                r"monthly\s+recurring\s+revenue",
                r"subscription\s+(?:analytics?|stats?|metrics?|revenue)",
                r"churn\s+(?:rate|percentage)",
                r"(?:customer\s+)?(?:ltv|lifetime\s+value)",
                r"(?:how\s+many\s+)?(?:active\s+)?subscribers?",
            ),
            extractor=ex.extract_period_params,
            priority=9,
        ),
        pattern(
            "subscription_churn_risk",
            ability_id="shop/subscriptions/churn-risk",
            keywords=("churn risk", "at risk", "risk of churn", "likely to cancel"),
            regexes=(
                r"(?:churn|churning)\s+risk",
                r"(?:at\s+risk|risky)\s+subscriptions?",
                r"subscriptions?\s+(?:at\s+)?risk",
                r"(?:likely|about)\s+to\s+(?:cancel|churn)",
                r"(?:who|which\s+customers?)\s+(?:might|will)\s+(?:cancel|churn)",
            ),
            extractor=ex.extract_basic_limit_params,
            priority=9,
        ),
        pattern(
            "subscription_failed_payments",
            ability_id="shop/subscriptions/failed-payments",
            keywords=("failed subscription", "subscription failed", "failed renewal", "renewal failed"),
            regexes=(
                r"failed\s+subscription\s+(?:payments?|renewals?)",
                r"subscription\s+(?:payment|renewal)\s+(?:failures?|failed)",
                r"(?:renewals?|subscriptions?)\s+(?:that\s+)?failed",
                r"(?:on-hold|on\s+hold)\s+subscriptions?",
            ),
            extractor=ex.extract_basic_limit_params,
            priority=9,
        ),
        pattern(
            "subscription_expiring",
            ability_id="shop/subscriptions/expiring-soon",
            keywords=("expiring subscription", "subscription expiring", "ending soon"),
            regexes=(
                r"(?:expiring|ending)\s+subscriptions?",
                r"subscriptions?\s+(?:expiring|ending)\s+(?:soon|this)",
                r"subscriptions?\s+(?:about\s+to|going\s+to)\s+(?:expire|end)",
            ),
            extractor=ix.extract_subscription_expiring_params,
            priority=9,
        ),
        pattern(
            "admin_subscription_pause",
            ability_id="shop/subscriptions/pause",
            keywords=("pause subscription", "suspend subscription", "hold subscription"),
            regexes=(r"(?:pause|suspend|hold)\s+subscription\s*#?\s*(\d+)",),
            extractor=ix.extract_subscription_id,
            priority=15,
            is_action=True,
        ),
        pattern(
            "admin_subscription_skip",
            ability_id="shop/subscriptions/skip",
            keywords=("skip renewal", "skip next payment", "skip subscription"),
            regexes=(r"skip\s+(?:the\s+)?(?:next\s+)?(?:renewal|payment)\s+(?:for|of|on)\s+subscription\s*#?\s*(\d+)", r"skip\s+subscription\s*#?\s*(\d+)"),
            extractor=ix.extract_subscription_id,
            priority=15,
            is_action=True,
        ),
        pattern(
            "admin_subscription_cancel",
            ability_id="shop/subscriptions/cancel",
            keywords=("cancel subscription",),
            regexes=(r"cancel\s+subscription\s*#?\s*(\d+)",),
            extractor=ix.extract_subscription_id,
            priority=15,
            is_action=True,
        ),
        pattern(
            "admin_subscription_terminate",
            ability_id="shop/subscriptions/terminate",
            keywords=("terminate subscription", "end subscription immediately"),
            regexes=(r"terminate\s+subscription\s*#?\s*(\d+)",),
            extractor=ix.extract_subscription_id,
            priority=16,
            is_action=True,
        ),
        pattern(
            "my_subscriptions",
            ability_id="shop/customer/my-subscriptions",
            keywords=("my subscription", "my membership", "my plan", "subscription status"),
            regexes=(
                r"(?:my|view\s+my)\s+subscriptions?",
                r"(?:what|which)\s+subscriptions?\s+do\s+i\s+have",
                r"(?:my|view\s+my)\s+(?:membership|plan)",
                r"subscription\s+status",
            ),
            extractor=ix.extract_customer_subscription_params,
            priority=7,
            scope=CUSTOMER,
        ),
        pattern(
            "subscription_next_payment",
            ability_id="shop/customer/next-payment",
            keywords=("next payment", "when charged", "next bill", "payment due", "renewal date"),
            regexes=(
                r"(?:when\s+is\s+)?(?:my\s+)?next\s+(?:payment|billing|charge|renewal)",
                r"(?:when\s+)?(?:will\s+)?(?:i\s+)?(?:be\s+)?(?:charged|billed)",
                r"(?:payment|renewal)\s+(?:date|due)",
                r"how\s+much\s+(?:is\s+)?(?:my\s+)?next\s+(?:payment|bill)",
            ),
            extractor=ix.extract_customer_subscription_params,
            priority=8,
            scope=CUSTOMER,
        ),
        pattern(
            "subscription_pause",
            ability_id="shop/customer/pause-subscription",
            keywords=("pause subscription", "pause my subscription", "put on hold", "suspend subscription"),
            regexes=(
                r"pause\s+(?:my\s+)?subscription",
                r"(?:put|place)\s+(?:my\s+)?subscription\s+on\s+hold",
                r"(?:suspend|hold)\s+(?:my\s+)?subscription",
                r"(?:i\s+)?want\s+to\s+pause",
            ),
            extractor=ix.extract_customer_subscription_action_params,
            priority=10,
            scope=CUSTOMER,
            is_action=True,
        ),
        pattern(
            "subscription_resume",
            ability_id="shop/customer/resume-subscription",
            keywords=("resume subscription", "reactivate", "unpause", "restart subscription"),
            regexes=(
                r"(?:resume|reactivate|unpause|restart)\s+(?:my\s+)?subscription",
                r"(?:take|remove)\s+(?:my\s+)?subscription\s+off\s+hold",
                r"(?:i\s+)?want\s+to\s+(?:resume|reactivate)",
            ),
            extractor=ix.extract_customer_subscription_action_params,
            priority=10,
            scope=CUSTOMER,
            is_action=True,
        ),
        pattern(
            "subscription_cancel",
            ability_id="shop/customer/cancel-subscription",
            keywords=("cancel subscription", "cancel my subscription", "end subscription", "stop subscription"),
            regexes=(
                r"cancel\s+(?:my\s+)?subscription",
                r"(?:end|stop|terminate)\s+(?:my\s+)?subscription",
                r"(?:i\s+)?(?:want|would\s+like)\s+to\s+cancel",
                r"(?:don'?t|do\s+not)\s+want\s+(?:my\s+)?subscription",
            ),
            extractor=ix.extract_customer_subscription_action_params,
            priority=10,
            scope=CUSTOMER,
            is_action=True,
        ),
        pattern(
            "subscription_update_payment",
            ability_id="shop/customer/update-payment",
            keywords=("update payment", "change card", "new card", "payment method"),
            regexes=(
                r"(?:update|change)\s+(?:my\s+)?(?:payment|card|credit\s+card)",
                r"(?:new|different)\s+(?:payment|card|credit\s+card)",
                r"(?:my\s+)?(?:payment\s+method|card)\s+(?:expired|declined|changed)",
            ),
            extractor=ix.extract_customer_subscription_params,
            priority=8,
            scope=CUSTOMER,
        ),
        pattern(
            "subscription_update_address",
            ability_id="shop/customer/update-address",
            keywords=("update address", "change address", "new address", "shipping address"),
            regexes=(
                r"(?:update|change)\s+(?:my\s+)?(?:shipping\s+)?address",
                r"(?:new|different)\s+(?:shipping\s+)?address",
                r"(?:i\s+)?(?:moved|moving)",
                r"send\s+(?:to|my\s+subscription\s+to)\s+(?:a\s+)?(?:new|different)\s+address",
            ),
            extractor=ix.extract_customer_subscription_params,
            priority=8,
            scope=CUSTOMER,
        ),
    ]


def booking_patterns() -> list[IntentPattern]:
    return [
        pattern(
            "booking_list",
            ability_id="shop/bookings/list",
            keywords=("bookings", "list booking", "show booking", "all booking", "reservations", "appointments"),
            regexes=(
                r"(?:list|show|all|confirmed|paid|cancelled|complete)\s*bookings?",
                r"bookings?\s+(?:do\s+)?(?:i|we)\s+have",
                r"how\s+many\s+bookings?",
                r"(?:what|which)\s+bookings?",
                r"(?:list|show|all)\s*(?:reservations?|appointments?)",
            ),
            extractor=ix.extract_booking_list_params,
            priority=6,
        ),
        pattern(
            "booking_get",
            ability_id="shop/bookings/get",
            keywords=("booking #", "booking id", "show booking", "get booking", "reservation #"),
            regexes=(
                r"booking\s*#?\s*(\d+)",
                r"show\s+booking\s*#?\s*(\d+)",
                r"get\s+booking\s*#?\s*(\d+)",
                r"reservation\s*#?\s*(\d+)",
            ),
            extractor=ix.extract_booking_id,
            priority=10,
        ),
        pattern(
            "booking_today",
            ability_id="shop/bookings/today",
            keywords=("today booking", "booking today", "today appointment", "today schedule", "today reservation"),
            regexes=(
                r"(?:today'?s?|todays)\s*(?:bookings?|appointments?|reservations?|schedule)",
                r"(?:bookings?|appointments?|reservations?)\s+(?:for\s+)?today",
                r"what\s+(?:do\s+)?(?:i|we)\s+have\s+today",
                r"(?:schedule|calendar)\s+(?:for\s+)?today",
            ),
            extractor=ix.extract_booking_today_params,
            priority=9,
        ),
        pattern(
            "booking_upcoming",
            ability_id="shop/bookings/upcoming",
            keywords=("upcoming booking", "next booking", "future booking", "upcoming appointment", "this week booking"),
            regexes=(
                r"(?:upcoming|next|future|scheduled)\s*(?:bookings?|appointments?|reservations?)",
                r"(?:bookings?|appointments?)\s+(?:this|next)\s+(?:week|month)",
                r"what\s+(?:bookings?|appointments?)\s+(?:are\s+)?(?:coming|next)",
            ),
            extractor=ix.extract_booking_upcoming_params,
            priority=8,
        ),
        pattern(
            "booking_search",
            ability_id="shop/bookings/search",
            keywords=("search booking", "find booking", "booking for", "reservation for"),
            regexes=(
                r"search\s+bookings?\s+(?:for\s+)?(.+)",
                r"find\s+bookings?\s+(.+)",
                r"bookings?\s+for\s+(?:customer\s+)?(.+)",
                r"(?:who\s+)?booked\s+(.+)",
            ),
            extractor=ix.extract_booking_search_params,
            priority=8,
        ),
        pattern(
            "booking_analytics",
            ability_id="shop/bookings/analytics",
            keywords=("booking analytics", "booking stats", "booking revenue", "booking report", "popular service"),
            regexes=(
                r"booking\s+(?:analytics?|stats?|statistics?|metrics?|report)",
                r"(?:how\s+many|total)\s+bookings?\s+(?:this|last)",
                r"booking\s+revenue",
                r"(?:popular|top|best)\s+(?:bookable\s+)?(?:services?|products?)",
                r"cancellation\s+rate",
            ),
            extractor=ix.extract_booking_analytics_params,
            priority=8,
        ),
        pattern(
            "booking_availability",
            ability_id="shop/bookings/availability",
            keywords=("availability", "available slot", "check availability", "open slot"),
            regexes=(
                r"(?:check|what|any)\s*(?:is\s+)?availability",
                r"available\s+(?:slots?|times?|dates?)",
                r"(?:when|what\s+times?)\s+(?:is|are)\s+available",
                r"(?:can\s+)?(?:i|we|they)\s+book",
            ),
            extractor=ix.extract_booking_availability_params,
            priority=7,
        ),
        pattern(
            "booking_resources",
            ability_id="shop/bookings/resources",
            keywords=("resources", "bookable resource", "booking resource", "staff", "room"),
            regexes=(
                r"(?:list|show|all)\s*(?:bookable\s+)?resources?",
                r"(?:what|which)\s+resources?",
                r"(?:staff|rooms?|equipment)\s+(?:available|list)",
            ),
            extractor=ex.extract_basic_limit_params,
            priority=6,
        ),
        pattern(
            "booking_update_status",
            ability_id="shop/bookings/update-status",
            keywords=("confirm booking", "cancel booking", "complete booking", "mark booking"),
            regexes=(
                r"(?:confirm|approve)\s+booking\s*#?\s*(\d+)",
                r"(?:cancel|reject)\s+booking\s*#?\s*(\d+)",
                r"(?:complete|finish)\s+booking\s*#?\s*(\d+)",
                r"(?:mark|set)\s+booking\s*#?\s*(\d+)\s+(?:as\s+)?(\w+)",
            ),
            extractor=ix.extract_booking_status_update_params,
            priority=10,
            is_action=True,
        ),
        pattern(
            "admin_booking_cancel",
            ability_id="shop/bookings/cancel",
            keywords=("cancel booking",),
            regexes=(r"cancel\s+booking\s*#?\s*(\d+)",),
            extractor=ix.extract_booking_id,
            priority=15,
            is_action=True,
        ),
        pattern(
            "my_bookings",
            ability_id="shop/customer/my-bookings",
            keywords=("my booking", "my appointment", "my reservation", "view booking"),
            regexes=(
                r"(?:my|view\s+my)\s+(?:bookings?|appointments?|reservations?)",
                r"(?:what|which)\s+(?:bookings?|appointments?)\s+do\s+i\s+have",
                r"(?:do\s+i\s+have\s+any)\s+(?:bookings?|appointments?)",
                r"(?:show|list)\s+(?:my\s+)?(?:bookings?|appointments?)",
            ),
            extractor=ix.extract_customer_booking_params,
            priority=7,
            scope=CUSTOMER,
        ),
        pattern(
            "my_upcoming_bookings",
            ability_id="shop/customer/upcoming-bookings",
            keywords=("upcoming appointment", "next appointment", "my next booking", "when is my booking"),
            regexes=(
                r"(?:my\s+)?(?:upcoming|next|future)\s+(?:bookings?|appointments?)",
                r"when\s+is\s+my\s+(?:next\s+)?(?:booking|appointment)",
                r"(?:do\s+i\s+have\s+)?(?:any\s+)?upcoming\s+(?:bookings?|appointments?)",
            ),
            extractor=ix.extract_customer_booking_params,
            priority=8,
            scope=CUSTOMER,
        ),
        pattern(
            "my_booking_details",
            ability_id="shop/customer/booking-details",
            keywords=("booking details", "appointment details", "reservation details"),
            regexes=(
                r"(?:details?\s+(?:of|for)\s+)?(?:my\s+)?booking\s*#?\s*(\d+)",
                r"(?:show|get)\s+(?:my\s+)?(?:booking|appointment)\s*#?\s*(\d+)",
                r"(?:what|when)\s+is\s+(?:my\s+)?booking\s*#?\s*(\d+)",
            ),
            extractor=ix.extract_customer_booking_details_params,
            priority=9,
            scope=CUSTOMER,
        ),
        pattern(
            "cancel_booking",
            ability_id="shop/customer/cancel-booking",
            keywords=("cancel booking", "cancel appointment", "cancel reservation"),
            regexes=(
                r"cancel\s+(?:my\s+)?(?:booking|appointment|reservation)",
                r"(?:i\s+)?(?:want|need)\s+to\s+cancel\s+(?:my\s+)?(?:booking|appointment)",
                r"(?:can'?t|cannot|won'?t)\s+(?:make|attend)\s+(?:my\s+)?(?:booking|appointment)",
            ),
            extractor=ix.extract_customer_booking_cancel_params,
            priority=10,
            scope=CUSTOMER,
            is_action=True,
        ),
        pattern(
            "check_booking_availability",
            ability_id="shop/customer/check-availability",
            keywords=("book", "make appointment", "schedule", "available time", "can i book"),
            regexes=(
                r"(?:can\s+i|i'?d?\s+like\s+to)\s+(?:book|schedule|make\s+(?:an?\s+)?(?:booking|appointment))",
                r"(?:is|are)\s+(?:there|any)\s+(?:available|open)\s+(?:slots?|times?)",
                r"(?:when\s+can\s+i|what\s+times?\s+(?:can\s+i|are\s+available\s+to))\s+book",
                r"(?:check|see)\s+(?:if\s+)?(?:there'?s?\s+)?availability",
            ),
            extractor=ix.extract_customer_availability_params,
            priority=7,
            scope=CUSTOMER,
        ),
    ]


def membership_patterns() -> list[IntentPattern]:
    return [
        pattern(
            "membership_list",
            ability_id="shop/memberships/list",
            keywords=("memberships", "list membership", "show membership", "all membership", "active member"),
            regexes=(
                r"(?:list|show|all|active|paused|expired|cancelled)\s*memberships?",
                r"memberships?\s+(?:do\s+)?(?:i|we)\s+have",
                r"how\s+many\s+memberships?",
                r"(?:what|which)\s+memberships?",
                r"(?:list|show|all)\s*members?",
            ),
            extractor=ix.extract_membership_list_params,
            priority=6,
        ),
        pattern(
            "membership_get",
            ability_id="shop/memberships/get",
            keywords=("membership #", "membership id", "show membership", "get membership"),
            regexes=(
                r"membership\s*#?\s*(\d+)",
                r"show\s+membership\s*#?\s*(\d+)",
                r"get\s+membership\s*#?\s*(\d+)",
                r"user\s+membership\s*#?\s*(\d+)",
            ),
            extractor=ix.extract_membership_id,
            priority=10,
        ),
        pattern(
            "membership_plans",
            ability_id="shop/memberships/plans",
            keywords=("membership plan", "plan", "available plan", "membership level", "tier"),
            regexes=(
                r"(?:list|show|all|available)\s*(?:membership\s+)?plans?",
                r"membership\s+(?:plans?|levels?|tiers?)",
                r"(?:what|which)\s+(?:membership\s+)?plans?",
            ),
            extractor=ex.extract_basic_limit_params,
            priority=7,
        ),
        pattern(
            "membership_search",
            ability_id="shop/memberships/search",
            keywords=("search membership", "find membership", "membership for", "member named"),
            regexes=(
                r"search\s+memberships?\s+(?:for\s+)?(.+)",
                r"find\s+memberships?\s+(.+)",
                r"memberships?\s+for\s+(?:customer\s+)?(.+)",
                r"(?:is\s+)?(.+)\s+a\s+member",
            ),
            extractor=ix.extract_membership_search_params,
            priority=8,
        ),
        pattern(
            "membership_analytics",
            ability_id="shop/memberships/analytics",
            keywords=("membership analytics", "membership stats", "membership report", "member count"),
            regexes=(
                r"membership\s+(?:analytics?|stats?|statistics?|metrics?|report)",
                r"(?:how\s+many|total)\s+(?:active\s+)?members?",
                r"member\s+(?:count|statistics)",
                r"(?:popular|top)\s+(?:membership\s+)?plans?",
            ),
            extractor=ix.extract_membership_analytics_params,
            priority=8,
        ),
        pattern(
            "membership_expiring",
            ability_id="shop/memberships/expiring",
            keywords=("expiring membership", "membership expiring", "ending soon", "about to expire"),
            regexes=(
                r"(?:expiring|ending)\s+memberships?",
                r"memberships?\s+(?:expiring|ending)\s+(?:soon|this)",
                r"memberships?\s+(?:about\s+to|going\s+to)\s+expire",
                r"(?:who|which\s+members?)\s+(?:are\s+)?expiring",
            ),
            extractor=ix.extract_membership_expiring_params,
            priority=9,
        ),
        pattern(
            "membership_by_plan",
            ability_id="shop/memberships/members-by-plan",
            keywords=("members of plan", "who is in plan", "members in", "plan members"),
            regexes=(
                r"members?\s+(?:of|in|on)\s+(?:plan\s+)?(.+)",
                r"(?:who|which\s+users?)\s+(?:are|is)\s+(?:in|on)\s+(?:the\s+)?(.+)\s+plan",
                r"(.+)\s+plan\s+members?",
            ),
            extractor=ix.extract_membership_by_plan_params,
            priority=8,
        ),
        pattern(
            "admin_membership_cancel",
            ability_id="shop/memberships/cancel",
            keywords=("cancel membership",),
            regexes=(r"cancel\s+membership\s*#?\s*(\d+)",),
            extractor=ix.extract_membership_id,
            priority=15,
            is_action=True,
        ),
        pattern(
            "my_memberships",
            ability_id="shop/customer/my-memberships",
            keywords=("my membership", "my plan", "membership status", "am i a member"),
            regexes=(
                r"(?:my|view\s+my)\s+memberships?",
                r"(?:what|which)\s+memberships?\s+do\s+i\s+have",
                r"(?:my|view\s+my)\s+(?:membership\s+)?plan",
                r"am\s+i\s+(?:a\s+)?member",
                r"(?:do\s+i\s+have\s+)?(?:a\s+)?membership",
            ),
            extractor=ix.extract_customer_membership_params,
            priority=7,
            scope=CUSTOMER,
        ),
        pattern(
            "membership_benefits",
            ability_id="shop/customer/membership-benefits",
            keywords=("membership benefit", "member perk", "what do i get", "membership include"),
            regexes=(
                r"(?:my\s+)?membership\s+(?:benefits?|perks?|privileges?)",
                r"what\s+(?:do\s+)?(?:i\s+)?get\s+(?:with|as)\s+(?:a\s+)?member",
                r"(?:what'?s?\s+)?included\s+(?:in|with)\s+(?:my\s+)?membership",
                r"member\s+(?:benefits?|perks?|discounts?)",
            ),
            extractor=ix.extract_customer_membership_params,
            priority=8,
            scope=CUSTOMER,
        ),
        pattern(
            "membership_check_access",
            ability_id="shop/customer/check-access",
            keywords=("do i have access", "can i access", "am i eligible", "member access"),
            regexes=(
                r"(?:do\s+)?(?:i\s+)?have\s+access\s+to",
                r"(?:can\s+)?(?:i\s+)?access\s+(?:the\s+)?(.+)",
                r"am\s+i\s+(?:eligible|allowed)",
                r"(?:is\s+)?(?:my\s+)?membership\s+(?:active|valid)",
            ),
            extractor=ix.extract_customer_membership_params,
            priority=7,
            scope=CUSTOMER,
        ),
        pattern(
            "cancel_membership",
            ability_id="shop/customer/cancel-membership",
            keywords=("cancel membership", "cancel my membership", "end membership", "stop membership"),
            regexes=(
                r"cancel\s+(?:my\s+)?membership",
                r"(?:end|stop|terminate)\s+(?:my\s+)?membership",
                r"(?:i\s+)?(?:want|would\s+like)\s+to\s+cancel\s+(?:my\s+)?membership",
                r"(?:don'?t|do\s+not)\s+want\s+(?:my\s+)?membership",
            ),
            extractor=ix.extract_customer_membership_cancel_params,
            priority=10,
            scope=CUSTOMER,
            is_action=True,
        ),
    ]
