from __future__ import annotations

from typing import Optional

from redis import Redis

_client: Optional[Redis] = None


def get_redis(url: str) -> Redis:
    """
    Lazy singleton Redis client.
    decode_responses=True -> we get/put str, not bytes.
    """
    global _client
    if _client is None:
        _client = Redis.from_url(url, encoding="utf-8", decode_responses=True)
    return _client


def close_redis() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
