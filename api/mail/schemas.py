"""
Pydantic schemas for the mail endpoint.
"""

from __future__ import annotations

from typing import Any

from pydantic import EmailStr, Field, field_validator

from core.validation import ResourceSchema


class SendMailRequest(ResourceSchema):
    to: EmailStr
    subject: str = Field(..., min_length=3)
    text: str = Field(..., min_length=10)
    html: str | None = None

    error_messages = {
        "to": "E-mail de destino inválido",
        "subject": "Assunto deve ter pelo menos 3 caracteres",
        "text": "Mensagem deve ter pelo menos 10 caracteres",
        "html": "HTML deve ser um texto",
    }
    field_labels = {"to": "E-mail de destino", "subject": "Assunto", "text": "Mensagem"}

    @field_validator("subject", mode="before")
    @classmethod
    def single_line_subject(cls, value: Any) -> Any:
        # Header values cannot carry line breaks.
        if isinstance(value, str):
            return " ".join(value.splitlines())
        return value
