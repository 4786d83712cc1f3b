# tests/integration/conftest.py
import os

import pytest
from redis import Redis
from redis.exceptions import ConnectionError as RedisConnectionError


@pytest.fixture
def redis_client():
    url = os.environ.get("MFA_REDIS_URL", "redis://redis:6379/0")
    r = Redis.from_url(
        url, encoding="utf-8", decode_responses=True, socket_connect_timeout=1
    )
    try:
        r.ping()
    except (RedisConnectionError, OSError) as e:
        r.close()
        pytest.skip(f"redis not reachable at {url}: {e}")
    try:
        yield r
    finally:
        r.close()
