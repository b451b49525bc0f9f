"""SMTP transport: settings parsing, message building, aiosmtplib calls."""

import aiosmtplib
import pytest

from core import mailer

MAIL_ENV = {
    "EMAIL_HOST": "sandbox.smtp.mailtrap.io",
    "EMAIL_PORT": "2525",
    "EMAIL_USER": "user",
    "EMAIL_PASSWORD": "secret",
    "EMAIL_FROM": "Eventos <no-reply@eventos.com.br>",
    "EMAIL_SECURE": "false",
}


@pytest.fixture
def mail_env(monkeypatch):
    for key, value in MAIL_ENV.items():
        monkeypatch.setenv(key, value)
    mailer.mail_settings.cache_clear()
    yield
    mailer.mail_settings.cache_clear()


def test_settings_from_env(mail_env):
    settings = mailer.mail_settings()
    assert settings.host == "sandbox.smtp.mailtrap.io"
    assert settings.port == 2525
    assert settings.secure is False
    assert settings.sender_address == "no-reply@eventos.com.br"


@pytest.mark.parametrize(
    "key, value",
    [
        ("EMAIL_HOST", ""),
        ("EMAIL_PORT", "smtp"),
        ("EMAIL_PORT", "70000"),
        ("EMAIL_FROM", "Eventos <not-an-address>"),
    ],
)
def test_bad_settings_raise(mail_env, monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(mailer.MailConfigError):
        mailer.mail_settings()


def test_build_message_with_html_alternative():
    message = mailer.build_message(
        sender="Eventos <no-reply@eventos.com.br>",
        to="fan@example.com",
        subject="Seu ingresso",
        text="Obrigado pela compra!",
        html="<p>Obrigado pela compra!</p>",
    )
    assert message["To"] == "fan@example.com"
    assert message["Message-ID"].endswith("@eventos.com.br>")
    assert message.is_multipart()
    assert message.get_body(("plain",)).get_content().strip() == "Obrigado pela compra!"
    assert "<p>" in message.get_body(("html",)).get_content()


async def test_send_message_uses_settings(mail_env, monkeypatch):
    captured = {}

    async def fake_send(message, **kwargs):
        captured["message"] = message
        captured.update(kwargs)
        return {}, "250 OK"

    monkeypatch.setattr(aiosmtplib, "send", fake_send)

    message_id = await mailer.send_message(to="fan@example.com", subject="Oi!", text="0123456789")
    assert message_id == captured["message"]["Message-ID"]
    assert captured["hostname"] == "sandbox.smtp.mailtrap.io"
    assert captured["port"] == 2525
    assert captured["use_tls"] is False
    assert captured["username"] == "user"


async def test_verify_logs_failure_and_returns_false(mail_env, monkeypatch):
    async def refuse(self, *args, **kwargs):
        raise aiosmtplib.SMTPConnectError("refused")

    monkeypatch.setattr(aiosmtplib.SMTP, "connect", refuse)
    assert await mailer.verify() is False
