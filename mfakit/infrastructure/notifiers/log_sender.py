"""
Development delivery providers: write the message to the log instead of
sending it. They expose the code in clear text, so never wire them outside dev.
"""

from __future__ import annotations

import logging

from mfakit.domain.ports.notifier import EmailSender, SmsSender

logger = logging.getLogger("mfakit.infrastructure.notifiers.log_sender")


class LoggingSmsSender(SmsSender):
    def __call__(self, to: str, message: str) -> None:
        logger.info("sms delivered to log", extra={"to": to, "text": message})


class LoggingEmailSender(EmailSender):
    def __call__(self, to: str, subject: str, body: str) -> None:
        logger.info(
            "email delivered to log",
            extra={"to": to, "subject": subject, "body": body},
        )
