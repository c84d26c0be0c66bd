from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from studylink.config import settings


logger = logging.getLogger(__name__)


@dataclass
class EmailMessage:
    to: str
    subject: str
    html: str


class Mailer:
    """Sends transactional email through the Resend HTTP API."""

    def __init__(
        self,
        api_key: str,
        api_url: str,
        sender: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.api_url = api_url
        self.sender = sender
        self.timeout = timeout
        self.transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    def send(self, message: EmailMessage) -> bool:
        if not self.enabled:
            logger.info("Email delivery disabled, skipping '%s' to %s", message.subject, message.to)
            return False

        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            response = client.post(
                self.api_url,
                headers={"Authorization": f"Bearer {self.api_key}"},
                json={
                    "from": self.sender,
                    "to": [message.to],
                    "subject": message.subject,
                    "html": message.html,
                },
            )
            response.raise_for_status()
        logger.info("Email '%s' sent to %s", message.subject, message.to)
        return True


def get_mailer() -> Mailer:
    return Mailer(
        api_key=settings.resend_api_key,
        api_url=settings.resend_api_url,
        sender=settings.email_from,
    )
