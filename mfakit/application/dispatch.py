from __future__ import annotations

import logging

from mfakit.application.config import MFAConfig
from mfakit.domain.entities import Channel
from mfakit.domain.errors import Misconfigured, UnsupportedChannel
from mfakit.domain.ports.notifier import EmailSender, SmsSender

logger = logging.getLogger("mfakit.application.dispatch")

DEFAULT_SMS_TEMPLATE = "Your verification code is: {code}"
DEFAULT_EMAIL_SUBJECT = "Your verification code"
DEFAULT_EMAIL_TEMPLATE = "Code: {code}"


class SmsChannel:
    channel = Channel.SMS

    def __init__(self, send: SmsSender, *, template: str = DEFAULT_SMS_TEMPLATE) -> None:
        self._send = send
        self._template = template

    def deliver(self, destination: str, code: str) -> None:
        self._send(destination, self._template.format(code=code))


class EmailChannel:
    channel = Channel.EMAIL

    def __init__(
        self,
        send: EmailSender,
        *,
        subject: str = DEFAULT_EMAIL_SUBJECT,
        template: str = DEFAULT_EMAIL_TEMPLATE,
    ) -> None:
        self._send = send
        self._subject = subject
        self._template = template

    def deliver(self, destination: str, code: str) -> None:
        self._send(destination, self._subject, self._template.format(code=code))


class NotifierDispatch:
    """
    Routes a code to the delivery provider registered for a channel.
    Delivery errors raised by a provider propagate unchanged.
    """

    def __init__(
        self,
        *,
        sms_provider: SmsSender | None = None,
        email_provider: EmailSender | None = None,
        sms_template: str = DEFAULT_SMS_TEMPLATE,
        email_subject: str = DEFAULT_EMAIL_SUBJECT,
        email_template: str = DEFAULT_EMAIL_TEMPLATE,
    ) -> None:
        self._channels: dict[Channel, SmsChannel | EmailChannel] = {}
        if sms_provider is not None:
            self._channels[Channel.SMS] = SmsChannel(sms_provider, template=sms_template)
        if email_provider is not None:
            self._channels[Channel.EMAIL] = EmailChannel(
                email_provider, subject=email_subject, template=email_template
            )

    @classmethod
    def from_config(cls, config: MFAConfig) -> "NotifierDispatch":
        return cls(sms_provider=config.sms_provider, email_provider=config.email_provider)

    def channel_for(self, via: Channel | str) -> SmsChannel | EmailChannel:
        try:
            channel = Channel(via)
        except ValueError:
            raise UnsupportedChannel(via) from None
        try:
            return self._channels[channel]
        except KeyError:
            raise Misconfigured(f"{channel.value}_provider not configured") from None

    def dispatch(self, via: Channel | str, destination: str, code: str) -> None:
        target = self.channel_for(via)
        target.deliver(destination, code)
        logger.info("code dispatched", extra={"channel": target.channel.value})
