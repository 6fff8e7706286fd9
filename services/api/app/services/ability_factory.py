from __future__ import annotations

import os

from services.api.app.services.ability_base import AbilityRegistry
from services.api.app.services.ability_mock import MockAbilityRegistry


def get_ability_registry() -> AbilityRegistry:
    """Select an ability registry based on env vars.

    Only the in-memory mock ships today. It is the default so tests and local dev stay deterministic.
    """

    mode = os.getenv("SHOPDESK_ABILITY_REGISTRY", "mock").strip().lower()

    if mode == "mock":
        return MockAbilityRegistry()

    raise ValueError(f"Unknown SHOPDESK_ABILITY_REGISTRY={mode!r}. Expected mock.")
