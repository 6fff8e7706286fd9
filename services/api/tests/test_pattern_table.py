from __future__ import annotations

import pytest
from packages.shared.schemas.intent import CallerContextV1, PatternScopeV1
from services.api.app.confirmation.policy import CONFIRMATION_LEVELS
from services.api.app.intents.base import PatternTable, pattern
from services.api.app.intents.factory import enabled_integrations, get_intent_classifier, get_pattern_table
from services.api.app.intents.table import build_pattern_table
from services.api.app.services.ability_catalog import ABILITY_CATALOG


def _table() -> PatternTable:
    return PatternTable(
        [
            pattern("a", ability_id="x/a/get", keywords=("a",)),
            pattern("b", ability_id="x/b/delete", keywords=("b",), is_action=True),
            pattern("c", ability_id="x/c/get", keywords=("c",), scope=PatternScopeV1.CUSTOMER),
        ]
    )


def test_duplicate_names_are_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate intent pattern name: 'a'"):
        PatternTable([pattern("a", ability_id="x/a/get"), pattern("a", ability_id="x/a/list")])


def test_table_keeps_registration_order() -> None:
    assert _table().names() == ["a", "b", "c"]


def test_without_and_extended_return_new_tables() -> None:
    table = _table()

    trimmed = table.without("b")
    grown = table.extended([pattern("d", ability_id="x/d/get")])

    assert trimmed.names() == ["a", "c"]
    assert grown.names() == ["a", "b", "c", "d"]
    assert len(table) == 3
    assert "d" not in table


def test_by_scope_and_actions() -> None:
    table = _table()
    assert table.by_scope(CallerContextV1.ADMIN).names() == ["a", "b"]
    assert table.by_scope(CallerContextV1.CUSTOMER).names() == ["c"]
    assert table.actions().names() == ["b"]


def test_build_pattern_table_rejects_unknown_pack() -> None:
    with pytest.raises(ValueError, match="Unknown integration pack 'hotels'"):
        build_pattern_table(["hotels"])


def test_store_only_table_has_no_integration_abilities() -> None:
    table = build_pattern_table(())
    categories = {p.ability_id.split("/")[1] for p in table}
    assert not categories & {"subscriptions", "bookings", "memberships", "customer"}


def test_every_pattern_resolves_in_the_catalog() -> None:
    catalog = {metadata.ability_id for metadata in ABILITY_CATALOG}
    missing = [p.ability_id for p in build_pattern_table() if p.ability_id not in catalog]
    assert missing == []


def test_every_confirmed_ability_is_catalogued() -> None:
    catalog = {metadata.ability_id for metadata in ABILITY_CATALOG}
    assert set(CONFIRMATION_LEVELS) <= catalog


def test_action_patterns_all_need_confirmation() -> None:
    unconfirmed = [p.name for p in build_pattern_table().actions() if p.ability_id not in CONFIRMATION_LEVELS]
    assert unconfirmed == []


def test_enabled_integrations_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SHOPDESK_INTEGRATIONS", raising=False)
    assert enabled_integrations() == ("subscriptions", "bookings", "memberships")

    monkeypatch.setenv("SHOPDESK_INTEGRATIONS", "none")
    assert enabled_integrations() == ()

    monkeypatch.setenv("SHOPDESK_INTEGRATIONS", " Bookings , memberships ")
    assert enabled_integrations() == ("bookings", "memberships")


def test_enabled_integrations_rejects_unknown(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHOPDESK_INTEGRATIONS", "bookings,hotels")
    with pytest.raises(ValueError, match="Unknown SHOPDESK_INTEGRATIONS"):
        enabled_integrations()


def test_pattern_table_cache_follows_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHOPDESK_INTEGRATIONS", "all")
    full = get_pattern_table()
    assert get_pattern_table() is full

    monkeypatch.setenv("SHOPDESK_INTEGRATIONS", "none")
    store_only = get_pattern_table()
    assert len(store_only) < len(full)
    assert get_intent_classifier().table is store_only
