from __future__ import annotations

from typing import Optional
import httpx

_client: Optional[httpx.Client] = None


def open_http_client(timeout: float = 10.0) -> httpx.Client:
    """Create a single shared Client (if not already created)."""
    global _client
    if _client is None:
        _client = httpx.Client(timeout=timeout)
    return _client


def get_http_client() -> httpx.Client:
    """Return the shared client. Must have been opened at startup."""
    if _client is None:
        raise RuntimeError(
            "HTTP client not opened yet. Call open_http_client() at startup."
        )
    return _client


def close_http_client() -> None:
    """Close and drop the shared client."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
