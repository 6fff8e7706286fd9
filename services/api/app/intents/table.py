from __future__ import annotations

from collections.abc import Callable, Iterable

from services.api.app.intents.action_patterns import store_action_patterns
from services.api.app.intents.base import IntentPattern, PatternTable
from services.api.app.intents.integration_patterns import (
    booking_patterns,
    membership_patterns,
    subscription_patterns,
)
from services.api.app.intents.store_patterns import store_read_patterns

INTEGRATION_PACKS: dict[str, Callable[[], list[IntentPattern]]] = {
    "subscriptions": subscription_patterns,
    "bookings": booking_patterns,
    "memberships": membership_patterns,
}


def build_pattern_table(integrations: Iterable[str] = tuple(INTEGRATION_PACKS)) -> PatternTable:
    """Assemble the store pack plus the requested integration packs, in that order."""

    patterns = [*store_read_patterns(), *store_action_patterns()]
    for name in integrations:
        try:
            pack = INTEGRATION_PACKS[name]
        except KeyError:
            expected = ", ".join(INTEGRATION_PACKS)
            raise ValueError(f"Unknown integration pack {name!r}. Expected one of: {expected}.") from None
        patterns.extend(pack())

    return PatternTable(patterns)
