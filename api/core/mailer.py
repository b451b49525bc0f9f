"""
SMTP transport for outbound e-mail (aiosmtplib).

Settings come from the environment and are read once per process:

- EMAIL_HOST, EMAIL_PORT          SMTP server
- EMAIL_USER, EMAIL_PASSWORD      SMTP credentials
- EMAIL_FROM                      "addr@host" or "Name <addr@host>"
- EMAIL_SECURE                    "true" for implicit TLS (port 465 style);
                                  otherwise STARTTLS is used when offered
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import make_msgid, parseaddr
from functools import lru_cache

import aiosmtplib
from email_validator import EmailNotValidError, validate_email

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 30.0


class MailConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class MailSettings:
    host: str
    port: int
    username: str
    password: str
    sender: str
    secure: bool

    @property
    def sender_address(self) -> str:
        return parseaddr(self.sender)[1]


def _required(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise MailConfigError(f"{name} is not set.")
    return value


def _parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise MailConfigError(f"EMAIL_PORT must be an integer, got {value!r}.") from None
    if not 0 < port < 65536:
        raise MailConfigError(f"EMAIL_PORT out of range: {port}.")
    return port


def _check_sender(sender: str) -> str:
    address = parseaddr(sender)[1]
    try:
        validate_email(address, check_deliverability=False)
    except EmailNotValidError as exc:
        raise MailConfigError(
            "EMAIL_FROM must be a valid address or 'Name <addr@host>'."
        ) from exc
    return sender


@lru_cache(maxsize=1)
def mail_settings() -> MailSettings:
    return MailSettings(
        host=_required("EMAIL_HOST"),
        port=_parse_port(_required("EMAIL_PORT")),
        username=_required("EMAIL_USER"),
        password=_required("EMAIL_PASSWORD"),
        sender=_check_sender(_required("EMAIL_FROM")),
        secure=os.environ.get("EMAIL_SECURE", "").strip().lower() == "true",
    )


def build_message(
    *,
    sender: str,
    to: str,
    subject: str,
    text: str,
    html: str | None = None,
) -> EmailMessage:
    """
    Plain-text message with an optional HTML alternative part.
    """
    domain = parseaddr(sender)[1].rpartition("@")[2] or None
    message = EmailMessage()
    message["From"] = sender
    message["To"] = to
    message["Subject"] = subject
    message["Message-ID"] = make_msgid(domain=domain)
    message.set_content(text)
    if html:
        message.add_alternative(html, subtype="html")
    return message


async def send_message(
    *,
    to: str,
    subject: str,
    text: str,
    html: str | None = None,
) -> str:
    """
    Deliver one message and return its Message-ID.

    Any SMTP/connection failure propagates to the caller.
    """
    settings = mail_settings()
    message = build_message(
        sender=settings.sender,
        to=to,
        subject=subject,
        text=text,
        html=html,
    )
    await aiosmtplib.send(
        message,
        hostname=settings.host,
        port=settings.port,
        username=settings.username,
        password=settings.password,
        use_tls=settings.secure,
        validate_certs=False,
        timeout=DEFAULT_TIMEOUT_S,
    )
    return str(message["Message-ID"])


async def verify() -> bool:
    """
    Connect and authenticate once; log the outcome.

    Called from the app lifespan. A broken SMTP server does not stop the API.
    """
    settings = mail_settings()
    smtp = aiosmtplib.SMTP(
        hostname=settings.host,
        port=settings.port,
        use_tls=settings.secure,
        validate_certs=False,
        timeout=DEFAULT_TIMEOUT_S,
    )
    try:
        await smtp.connect()
        await smtp.login(settings.username, settings.password)
        await smtp.quit()
    except (aiosmtplib.SMTPException, OSError):
        logger.exception("smtp_verify_failed host=%s port=%s", settings.host, settings.port)
        if smtp.is_connected:
            smtp.close()
        return False

    logger.info("smtp_ready host=%s port=%s", settings.host, settings.port)
    return True
