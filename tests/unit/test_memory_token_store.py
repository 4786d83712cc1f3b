import threading

import pytest

from mfakit.domain.ports.token_store import AtomicTokenStorePort
from mfakit.infrastructure.memory.token_store import InMemoryTokenStore


def test_write_then_read(store):
    store.write("k", "v")
    assert store.read("k") == "v"


def test_read_missing_key_returns_none(store):
    assert store.read("nonexistent") is None


def test_write_overwrites(store):
    store.write("k", "v1", ttl=60)
    store.write("k", "v2", ttl=60)
    assert store.read("k") == "v2"


def test_ttl_expiry_is_lazy_and_strict(store, clock):
    store.write("k", "v", ttl=1)
    clock.advance(0.5)
    assert store.read("k") == "v"

    clock.advance(0.5)
    assert store.read("k") is None
    # purged on read, not merely hidden
    assert "k" not in store._entries


def test_no_ttl_never_expires(store, clock):
    store.write("k", "v")
    clock.advance(10**9)
    assert store.read("k") == "v"


def test_overwrite_resets_ttl(store, clock):
    store.write("k", "v1", ttl=10)
    clock.advance(8)
    store.write("k", "v2", ttl=10)
    clock.advance(8)
    assert store.read("k") == "v2"


@pytest.mark.parametrize("ttl", [0, -5])
def test_non_positive_ttl_rejected(store, ttl):
    with pytest.raises(ValueError):
        store.write("k", "v", ttl=ttl)


def test_delete_removes_key(store):
    store.write("k", "v")
    store.delete("k")
    assert store.read("k") is None


def test_delete_is_idempotent(store):
    store.delete("nonexistent")
    store.delete("nonexistent")


def test_delete_if_equals(store, clock):
    assert isinstance(store, AtomicTokenStorePort)
    store.write("k", "v", ttl=5)

    assert store.delete_if_equals("k", "other") is False
    assert store.read("k") == "v"

    assert store.delete_if_equals("k", "v") is True
    assert store.read("k") is None
    assert store.delete_if_equals("k", "v") is False


def test_delete_if_equals_ignores_expired_entry(store, clock):
    store.write("k", "v", ttl=1)
    clock.advance(2)
    assert store.delete_if_equals("k", "v") is False


def test_default_clock_is_used_without_injection():
    s = InMemoryTokenStore()
    s.write("k", "v", ttl=60)
    assert s.read("k") == "v"


def test_concurrent_delete_if_equals_only_one_wins():
    s = InMemoryTokenStore()
    s.write("k", "v", ttl=60)
    barrier = threading.Barrier(8)
    results: list[bool] = []
    lock = threading.Lock()

    def worker():
        barrier.wait()
        ok = s.delete_if_equals("k", "v")
        with lock:
            results.append(ok)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(results) == [False] * 7 + [True]
