from __future__ import annotations

import threading
import time
from collections.abc import Callable
from typing import Any, Protocol


class ConfirmationStore(Protocol):
    def put(self, key: str, value: Any, ttl_seconds: float) -> None: ...

    def get(self, key: str) -> Any | None: ...

    def take(self, key: str) -> Any | None: ...

    def delete(self, key: str) -> bool: ...

    def purge_expired(self) -> int: ...


class InMemoryConfirmationStore:
    """Process-local key/value store with per-entry TTL.

    Expired entries are dropped lazily when touched. `take` is the only way to claim an entry, so
    at most one caller ever receives a given value.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, tuple[Any, float]] = {}

    def __len__(self) -> int:
        with self._lock:
            now = self._clock()
            return sum(1 for _, expires_at in self._entries.values() if expires_at > now)

    def _live(self, key: str, now: float) -> tuple[Any, float] | None:
        # Caller must hold the lock.
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry[1] <= now:
            del self._entries[key]
            return None
        return entry

    def put(self, key: str, value: Any, ttl_seconds: float) -> None:
        with self._lock:
            now = self._clock()
            if self._live(key, now) is not None:
                raise ValueError(f"Confirmation key already in use: {key!r}")
            self._entries[key] = (value, now + ttl_seconds)

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._live(key, self._clock())
            return entry[0] if entry is not None else None

    def take(self, key: str) -> Any | None:
        with self._lock:
            entry = self._live(key, self._clock())
            if entry is None:
                return None
            del self._entries[key]
            return entry[0]

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def purge_expired(self) -> int:
        with self._lock:
            now = self._clock()
            expired = [key for key, (_, expires_at) in self._entries.items() if expires_at <= now]
            for key in expired:
                del self._entries[key]
            return len(expired)
