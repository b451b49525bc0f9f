"""
Mail dispatch: validate the outbound message, then hand it to the SMTP
transport. The transport is never called for an invalid payload.
"""

from __future__ import annotations

import logging
from typing import Any

from core import mailer as transport
from core.errors import server_error
from core.validation import require_valid

from . import schemas

logger = logging.getLogger(__name__)

SENT_MESSAGE = "E-mail enviado com sucesso"
SEND_FAILED = "Erro ao enviar e-mail"


async def send_mail(payload: Any) -> dict:
    data = require_valid(schemas.SendMailRequest, payload)

    try:
        message_id = await transport.send_message(
            to=str(data.to),
            subject=data.subject,
            text=data.text,
            # Clients without an HTML part still get a rendered body.
            html=data.html or data.text,
        )
    except Exception as exc:
        logger.exception("mail_send_failed to=%s", data.to)
        raise server_error(str(exc) or SEND_FAILED, exc) from exc

    logger.info("mail_sent message_id=%s", message_id)
    return {"message": SENT_MESSAGE, "messageId": message_id}
