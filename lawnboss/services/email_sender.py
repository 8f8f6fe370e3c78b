"""SendGrid e-mail sender."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from lawnboss.core.config import Config, get_config
from lawnboss.core.exceptions import ConfigurationError, UpstreamServiceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutboundEmail:
    to_email: str
    to_name: str
    subject: str
    text_body: str
    html_body: str


class SendGridEmailSender:
    """Sends transactional e-mail through the SendGrid v3 ``mail/send`` API.

    A single attempt is made per message. Any non-2xx answer is raised as
    UpstreamServiceError carrying the provider's status and body.
    """

    def __init__(self, config: Config | None = None, session: requests.Session | None = None) -> None:
        self.config = config or get_config()
        self.session = session or requests.Session()

    def ensure_configured(self) -> None:
        if not self.config.SENDGRID_API_KEY:
            raise ConfigurationError("SendGrid API key not configured")
        if not self.config.SENDGRID_FROM_EMAIL:
            raise ConfigurationError("SendGrid from email not configured")

    def build_payload(self, email: OutboundEmail) -> dict:
        return {
            "personalizations": [
                {
                    "to": [{"email": email.to_email, "name": email.to_name}],
                    "subject": email.subject,
                }
            ],
            "from": {"email": self.config.SENDGRID_FROM_EMAIL, "name": self.config.SENDGRID_FROM_NAME},
            "content": [
                {"type": "text/plain", "value": email.text_body},
                {"type": "text/html", "value": email.html_body},
            ],
        }

    def send(self, email: OutboundEmail) -> None:
        self.ensure_configured()
        try:
            response = self.session.post(
                self.config.SENDGRID_API_URL,
                json=self.build_payload(email),
                headers={
                    "Authorization": f"Bearer {self.config.SENDGRID_API_KEY}",
                    "Content-Type": "application/json",
                },
                timeout=self.config.SENDGRID_TIMEOUT_SECONDS,
            )
        except requests.exceptions.RequestException as exc:
            logger.error(
                "email.sendgrid.unreachable",
                extra={"event": "email.sendgrid.unreachable", "error": str(exc)},
            )
            raise UpstreamServiceError(f"Failed to send email: {exc}") from exc

        if not 200 <= response.status_code < 300:
            logger.error(
                "email.sendgrid.rejected",
                extra={
                    "event": "email.sendgrid.rejected",
                    "status_code": response.status_code,
                    "to_email": email.to_email,
                },
            )
            raise UpstreamServiceError(
                f"Failed to send email: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        logger.info(
            "email.sendgrid.accepted",
            extra={"event": "email.sendgrid.accepted", "status_code": response.status_code, "to_email": email.to_email},
        )
