from dataclasses import dataclass
from enum import Enum


class Channel(str, Enum):
    SMS = "sms"
    EMAIL = "email"


@dataclass(frozen=True)
class MFAPrincipal:
    """
    The subject of MFA as seen by this package.

    The host builds one from its own user record; nothing here persists it.
    """

    id: int | str
    email: str | None = None
    phone: str | None = None
    mfa_secret: str | None = None

    def __post_init__(self):
        if self.id is None or (isinstance(self.id, str) and not self.id.strip()):
            raise ValueError("principal id is required")
        if self.email is not None:
            email = self.email.strip().lower()
            object.__setattr__(self, "email", email or None)

    @property
    def label(self) -> str:
        return self.email or "user"
