from __future__ import annotations

from redis import Redis

from mfakit.domain.ports.token_store import AtomicTokenStorePort, TokenStorePort


_LUA_DELETE_IF_EQUALS = """
-- KEYS[1]: token key
-- ARGV[1]: expected value
local cur = redis.call('GET', KEYS[1])
if not cur then
  return 0
end
if cur ~= ARGV[1] then
  return 0
end
redis.call('DEL', KEYS[1])
return 1
"""


class RedisTokenStore(TokenStorePort, AtomicTokenStorePort):
    def __init__(self, redis: Redis, *, key_prefix: str = "mfa:") -> None:
        self._redis = redis
        self._prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def write(self, key: str, value: str, ttl: float | None = None) -> None:
        if ttl is None:
            self._redis.set(self._key(key), value)
            return
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        # PX keeps sub-second TTLs meaningful
        self._redis.set(self._key(key), value, px=max(1, int(ttl * 1000)))

    def read(self, key: str) -> str | None:
        value = self._redis.get(self._key(key))
        # clients built without decode_responses=True hand back bytes
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def delete(self, key: str) -> None:
        self._redis.delete(self._key(key))

    def delete_if_equals(self, key: str, expected: str) -> bool:
        # atomic compare-and-delete
        res = self._redis.eval(_LUA_DELETE_IF_EQUALS, 1, self._key(key), expected)
        return int(res) == 1
