from __future__ import annotations

import os

from services.api.app.intents.base import PatternTable
from services.api.app.intents.classifier import IntentClassifier
from services.api.app.intents.table import INTEGRATION_PACKS, build_pattern_table

_TABLE: PatternTable | None = None
_TABLE_KEY: tuple[str, ...] | None = None


def enabled_integrations() -> tuple[str, ...]:
    """Parse SHOPDESK_INTEGRATIONS.

    Default enables every pack. `none` disables all of them. Otherwise a comma list of pack names.
    """

    raw = os.getenv("SHOPDESK_INTEGRATIONS", "all").strip().lower()

    if raw in {"", "all"}:
        return tuple(INTEGRATION_PACKS)
    if raw == "none":
        return ()

    names = tuple(part.strip() for part in raw.split(",") if part.strip())
    unknown = [name for name in names if name not in INTEGRATION_PACKS]
    if unknown:
        expected = ", ".join(INTEGRATION_PACKS)
        raise ValueError(f"Unknown SHOPDESK_INTEGRATIONS={raw!r}. Expected all, none or a list of: {expected}.")
    return names


def get_pattern_table() -> PatternTable:
    """Return a cached pattern table.

    We cache based on the enabled integrations so tests can change SHOPDESK_INTEGRATIONS freely.
    """

    global _TABLE, _TABLE_KEY

    key = enabled_integrations()
    if _TABLE is not None and _TABLE_KEY == key:
        return _TABLE

    _TABLE = build_pattern_table(key)
    _TABLE_KEY = key
    return _TABLE


def get_intent_classifier() -> IntentClassifier:
    return IntentClassifier(get_pattern_table())
