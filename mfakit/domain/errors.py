class MFAError(Exception):
    """Base class for all MFA errors."""

    pass


class Misconfigured(MFAError):
    """A required delivery provider, secret or setting was not supplied."""

    pass


class UnsupportedChannel(MFAError):
    """Delivery channel is neither 'sms' nor 'email'."""

    def __init__(self, channel: object) -> None:
        self.channel = channel
        super().__init__(f"Unsupported channel: {channel!r}")


class InvalidState(MFAError):
    """TOTP operation attempted before a secret was provisioned."""

    pass
