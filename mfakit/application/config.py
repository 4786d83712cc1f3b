from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from mfakit.domain.errors import Misconfigured
from mfakit.domain.ports.notifier import EmailSender, SmsSender
from mfakit.domain.ports.token_store import TokenStorePort

if TYPE_CHECKING:
    from mfakit.settings import Settings


@dataclass(frozen=True)
class MFAConfig:
    """
    Explicit configuration handed to the MFA components at construction.

    Built once at process start (usually from Settings) and passed down;
    nothing in the core reads ambient settings.
    """

    code_length: int = 6
    code_expiry_seconds: float = 300
    sms_provider: SmsSender | None = None
    email_provider: EmailSender | None = None
    token_store: TokenStorePort | None = None
    totp_issuer: str = "mfakit"
    totp_drift_seconds: int = 30

    def __post_init__(self):
        if self.code_length < 1:
            raise Misconfigured("code_length must be at least 1")
        if self.code_expiry_seconds <= 0:
            raise Misconfigured("code_expiry_seconds must be positive")
        if self.totp_drift_seconds < 0:
            raise Misconfigured("totp_drift_seconds cannot be negative")
        if not self.totp_issuer:
            raise Misconfigured("totp_issuer is required")

    @classmethod
    def from_settings(cls, settings: "Settings", **overrides: Any) -> "MFAConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"unknown MFAConfig fields: {sorted(unknown)}")
        values: dict[str, Any] = {
            "code_length": settings.code_length,
            "code_expiry_seconds": settings.code_expiry_seconds,
            "totp_issuer": settings.totp_issuer,
            "totp_drift_seconds": settings.totp_drift_seconds,
        }
        values.update(overrides)
        return cls(**values)
