# mfakit/domain/services.py
from __future__ import annotations

import hmac
import secrets

import pyotp


def generate_numeric_code(length: int) -> str:
    """
    Uniform numeric code in [10**(length-1), 10**length - 1].
    The first digit is never zero, so the string is always `length` long.
    """
    if length < 1:
        raise ValueError("code length must be at least 1")
    low = 10 ** (length - 1)
    high = 10**length - 1
    return str(low + secrets.randbelow(high - low + 1))


def generate_totp_secret() -> str:
    """Base32 TOTP secret (32 chars, 160 bits)."""
    return pyotp.random_base32()


def secure_compare(a: str, b: str) -> bool:
    """
    Constant-time comparison for secrets.
    Accepts strings; falls back to bytes if needed.
    """
    try:
        # hmac.compare_digest supports str if both are ASCII
        return hmac.compare_digest(a, b)
    except TypeError:
        return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))
