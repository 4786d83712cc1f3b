from __future__ import annotations

from typing import Protocol


class SmsSender(Protocol):
    def __call__(self, to: str, message: str) -> None:
        """Deliver an SMS."""


class EmailSender(Protocol):
    def __call__(self, to: str, subject: str, body: str) -> None:
        """Deliver an email."""
