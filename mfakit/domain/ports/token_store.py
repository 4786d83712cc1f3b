from typing import Protocol, runtime_checkable


class TokenStorePort(Protocol):
    def write(self, key: str, value: str, ttl: float | None = None) -> None:
        """Store/replace `value` under `key`; expire after `ttl` seconds if given."""

    def read(self, key: str) -> str | None:
        """Current value, or None if never written, deleted or expired."""

    def delete(self, key: str) -> None:
        """Remove `key`. Deleting a missing key is a no-op."""


@runtime_checkable
class AtomicTokenStorePort(Protocol):
    def delete_if_equals(self, key: str, expected: str) -> bool:
        """Delete `key` only if it still holds `expected`; True if it was deleted."""
