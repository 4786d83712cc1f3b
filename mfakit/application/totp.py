"""TOTP (RFC 6238) enrollment and verification on top of pyotp.

Verification is past-only: a code is accepted for the current time step and
for any step that started within ``drift_seconds`` before now, to absorb an
authenticator clock running slightly behind. Future steps are never accepted.
"""

from __future__ import annotations

import binascii
import time
from dataclasses import dataclass
from datetime import datetime, timezone

import pyotp
from pyotp.utils import strings_equal

import mfakit.domain.services as domain_services
from mfakit.application.config import MFAConfig
from mfakit.domain.errors import InvalidState, Misconfigured


@dataclass(frozen=True)
class TotpEnrollment:
    secret: str
    provisioning_uri: str


def _timestamp(for_time: int | float | datetime | None) -> int:
    if for_time is None:
        return int(time.time())
    if isinstance(for_time, datetime):
        return int(for_time.timestamp())
    return int(for_time)


def _utc(timestamp: int) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


class TotpVerifier:
    def __init__(
        self,
        *,
        issuer: str = "mfakit",
        drift_seconds: int = 30,
        interval: int = 30,
        digits: int = 6,
    ) -> None:
        self.issuer = issuer
        self.drift_seconds = drift_seconds
        self.interval = interval
        self.digits = digits

    @classmethod
    def from_config(cls, config: MFAConfig) -> "TotpVerifier":
        return cls(issuer=config.totp_issuer, drift_seconds=config.totp_drift_seconds)

    def _totp(self, secret: str, issuer: str | None = None) -> pyotp.TOTP:
        totp = pyotp.TOTP(
            secret, digits=self.digits, interval=self.interval, issuer=issuer
        )
        try:
            totp.byte_secret()
        except (binascii.Error, ValueError) as exc:
            raise Misconfigured(f"Invalid TOTP secret: {exc}") from exc
        return totp

    def enroll(self, account_label: str, issuer: str | None = None) -> TotpEnrollment:
        """New secret plus its otpauth:// URI. Persisting the secret is up to the caller."""
        secret = domain_services.generate_totp_secret()
        return TotpEnrollment(
            secret=secret,
            provisioning_uri=self.provisioning_uri(secret, account_label, issuer),
        )

    def provisioning_uri(
        self, secret: str | None, account_label: str, issuer: str | None = None
    ) -> str:
        if not secret:
            raise InvalidState("No mfa_secret present")
        totp = self._totp(secret, issuer or self.issuer)
        return totp.provisioning_uri(name=account_label)

    def at(self, secret: str, for_time: int | float | datetime) -> str:
        """The code an authenticator shows at `for_time`."""
        totp = self._totp(secret)
        return totp.generate_otp(totp.timecode(_utc(_timestamp(for_time))))

    def verify(
        self,
        secret: str | None,
        submitted_code: str | None,
        drift_seconds: int | None = None,
        for_time: int | float | datetime | None = None,
    ) -> bool:
        if not secret or not isinstance(submitted_code, str):
            # an int would already have lost its leading zeros
            return False
        code = submitted_code.strip()
        if not code:
            return False

        drift = self.drift_seconds if drift_seconds is None else drift_seconds
        now = _timestamp(for_time)
        totp = self._totp(secret)
        first = totp.timecode(_utc(now - drift))
        last = totp.timecode(_utc(now))

        matched = False
        for counter in range(first, last + 1):
            # no early exit, every step in the window is compared
            matched = strings_equal(code, totp.generate_otp(counter)) or matched
        return matched
