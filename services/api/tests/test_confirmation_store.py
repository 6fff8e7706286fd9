from __future__ import annotations

import pytest
from services.api.app.confirmation.store import InMemoryConfirmationStore


class FakeClock:
    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> InMemoryConfirmationStore:
    return InMemoryConfirmationStore(clock=clock)


def test_put_then_get_leaves_entry_in_place(store: InMemoryConfirmationStore) -> None:
    store.put("abc", {"ability_id": "shop/orders/refund"}, ttl_seconds=300)

    assert store.get("abc") == {"ability_id": "shop/orders/refund"}
    assert store.get("abc") == {"ability_id": "shop/orders/refund"}
    assert len(store) == 1


def test_take_claims_entry_once(store: InMemoryConfirmationStore) -> None:
    store.put("abc", "value", ttl_seconds=300)

    assert store.take("abc") == "value"
    assert store.take("abc") is None
    assert store.get("abc") is None


def test_entry_expires_at_ttl(store: InMemoryConfirmationStore, clock: FakeClock) -> None:
    store.put("abc", "value", ttl_seconds=300)

    clock.now += 299
    assert store.get("abc") == "value"

    clock.now += 1
    assert store.get("abc") is None
    assert store.take("abc") is None


def test_duplicate_live_key_is_rejected(store: InMemoryConfirmationStore, clock: FakeClock) -> None:
    store.put("abc", "first", ttl_seconds=300)

    with pytest.raises(ValueError, match="Confirmation key already in use"):
        store.put("abc", "second", ttl_seconds=300)

    clock.now += 301
    store.put("abc", "second", ttl_seconds=300)
    assert store.get("abc") == "second"


def test_delete_reports_whether_entry_existed(store: InMemoryConfirmationStore) -> None:
    store.put("abc", "value", ttl_seconds=300)

    assert store.delete("abc") is True
    assert store.delete("abc") is False


def test_purge_expired_and_len(store: InMemoryConfirmationStore, clock: FakeClock) -> None:
    store.put("short", 1, ttl_seconds=10)
    store.put("long", 2, ttl_seconds=300)

    clock.now += 60

    assert len(store) == 1
    assert store.purge_expired() == 1
    assert store.purge_expired() == 0
    assert store.get("long") == 2
