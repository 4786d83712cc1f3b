from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable

from mfakit.domain.ports.token_store import AtomicTokenStorePort, TokenStorePort


@dataclass
class _Entry:
    value: str
    expires_at: float | None


class InMemoryTokenStore(TokenStorePort, AtomicTokenStorePort):
    """
    Process-local store with lazy expiry: an entry is checked against the
    clock when read, and dropped if it has expired. There is no sweeper.
    """

    def __init__(self, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def write(self, key: str, value: str, ttl: float | None = None) -> None:
        if ttl is not None and ttl <= 0:
            raise ValueError("ttl must be positive")
        expires_at = self._clock() + ttl if ttl is not None else None
        with self._lock:
            self._entries[key] = _Entry(value=value, expires_at=expires_at)

    def read(self, key: str) -> str | None:
        with self._lock:
            entry = self._live_entry(key)
            return entry.value if entry else None

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def delete_if_equals(self, key: str, expected: str) -> bool:
        with self._lock:
            entry = self._live_entry(key)
            if entry is None or entry.value != expected:
                return False
            del self._entries[key]
            return True

    def _live_entry(self, key: str) -> _Entry | None:
        # caller holds the lock
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at is not None and self._clock() >= entry.expires_at:
            del self._entries[key]
            return None
        return entry
