from __future__ import annotations

from email.message import EmailMessage
import logging
import smtplib

from .config import NotifyConfig

logger = logging.getLogger(__name__)


def send_email(config: NotifyConfig, subject: str, body: str = "") -> None:
    """Send a plain-text email through the configured SMTP server."""
    message = EmailMessage()
    message["From"] = config.sender
    message["To"] = config.recipient
    message["Subject"] = subject
    message.set_content(body)
    with smtplib.SMTP(config.smtp_host, config.smtp_port) as smtp:
        smtp.send_message(message)
    logger.info("Sent '%s' to %s", subject, config.recipient)
