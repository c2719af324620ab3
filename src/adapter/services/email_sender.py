"""
Invitation e-mail delivery.

Resend's HTTP API is the primary channel; SMTP is the fallback. When
neither is configured the message is logged and reported as not sent.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage

import httpx

from src.app.services.notification_sender import INotificationSender

logger = logging.getLogger(__name__)


class EmailNotificationSender(INotificationSender):
    def __init__(self, config):
        self.resend_api_key = config.RESEND_API_KEY
        self.resend_api_url = config.RESEND_API_URL
        self.resend_from = config.RESEND_FROM
        self.smtp_host = config.SMTP_HOST
        self.smtp_port = config.SMTP_PORT
        self.smtp_user = config.SMTP_USER
        self.smtp_pass = config.SMTP_PASS
        self.smtp_from = config.SMTP_FROM
        self.smtp_starttls = config.SMTP_STARTTLS
        self.timeout = config.EXTERNAL_CALL_TIMEOUT_SECONDS

    async def send(self, to: str, subject: str, html: str) -> bool:
        if self.resend_api_key:
            if await self._send_resend(to, subject, html):
                return True
            logger.warning("Resend delivery to %s failed, falling back to SMTP", to)

        if not (self.smtp_host and self.smtp_user and self.smtp_pass):
            logger.warning(
                "No e-mail channel configured; message to %s not sent (subject: %s)",
                to,
                subject,
            )
            return False

        try:
            await asyncio.wait_for(
                asyncio.to_thread(self._send_smtp, to, subject, html),
                timeout=self.timeout,
            )
        except (OSError, smtplib.SMTPException, asyncio.TimeoutError):
            logger.exception("SMTP delivery to %s failed", to)
            return False

        logger.info("E-mail sent via SMTP to %s", to)
        return True

    async def _send_resend(self, to: str, subject: str, html: str) -> bool:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.resend_api_url,
                    json={
                        "from": self.resend_from,
                        "to": [to],
                        "subject": subject,
                        "html": html,
                    },
                    headers={"Authorization": f"Bearer {self.resend_api_key}"},
                )
                response.raise_for_status()
        except httpx.HTTPError:
            logger.exception("Resend request for %s failed", to)
            return False

        logger.info("E-mail sent via Resend to %s (status %s)", to, response.status_code)
        return True

    def _send_smtp(self, to: str, subject: str, html: str) -> None:
        msg = EmailMessage()
        msg["From"] = self.smtp_from
        msg["To"] = to
        msg["Subject"] = subject
        msg.set_content("Open this message in an HTML-capable mail client.")
        msg.add_alternative(html, subtype="html")

        with smtplib.SMTP(self.smtp_host, int(self.smtp_port), timeout=self.timeout) as s:
            if self.smtp_starttls:
                s.starttls()
            s.login(self.smtp_user, self.smtp_pass)
            s.send_message(msg)
