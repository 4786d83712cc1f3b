from __future__ import annotations

from mfakit.application.config import MFAConfig
from mfakit.application.dispatch import NotifierDispatch
from mfakit.application.token_manager import TokenManager
from mfakit.application.totp import TotpEnrollment, TotpVerifier
from mfakit.domain.entities import Channel, MFAPrincipal
from mfakit.domain.errors import Misconfigured


class MFAService:
    """Per-principal MFA operations: numeric codes over SMS/email, and TOTP."""

    def __init__(
        self,
        token_manager: TokenManager,
        totp: TotpVerifier,
        dispatch: NotifierDispatch,
    ) -> None:
        self.token_manager = token_manager
        self.totp = totp
        self.dispatch = dispatch

    @classmethod
    def from_config(cls, config: MFAConfig) -> "MFAService":
        return cls(
            token_manager=TokenManager.from_config(config),
            totp=TotpVerifier.from_config(config),
            dispatch=NotifierDispatch.from_config(config),
        )

    def send_numeric_code(
        self, principal: MFAPrincipal, via: Channel | str = Channel.SMS
    ) -> str:
        # Resolve everything before issuing, so a rejected request never
        # replaces a code the principal is still holding. A failed delivery
        # does replace it, and the provider error propagates.
        target = self.dispatch.channel_for(via)
        destination = _destination(principal, target.channel)
        code = self.token_manager.issue_code(principal.id)
        self.dispatch.dispatch(target.channel, destination, code)
        return code

    def verify_numeric_code(self, principal: MFAPrincipal, code: object) -> bool:
        return self.token_manager.verify_code(principal.id, code)

    def enroll_totp(
        self, principal: MFAPrincipal, issuer: str | None = None
    ) -> TotpEnrollment:
        return self.totp.enroll(principal.label, issuer)

    def totp_provisioning_uri(
        self, principal: MFAPrincipal, issuer: str | None = None
    ) -> str:
        return self.totp.provisioning_uri(principal.mfa_secret, principal.label, issuer)

    def verify_totp(self, principal: MFAPrincipal, code: str | None) -> bool:
        return self.totp.verify(principal.mfa_secret, code)


def _destination(principal: MFAPrincipal, channel: Channel) -> str:
    if channel is Channel.SMS:
        if not principal.phone:
            raise Misconfigured("principal has no phone number for sms delivery")
        return principal.phone
    if not principal.email:
        raise Misconfigured("principal has no email address for email delivery")
    return principal.email
