"""
Pydantic schemas for event endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import AwareDatetime, Field, field_validator

from core.validation import ResourceSchema


class EventPayload(ResourceSchema):
    nome: str = Field(..., min_length=3)
    data_hora: AwareDatetime = Field(..., alias="dataHora")
    local: str = Field(..., min_length=3)
    preco_base: float = Field(..., gt=0, strict=True, allow_inf_nan=False)
    descricao: str | None = None

    error_messages = {
        "nome": "Nome deve ter pelo menos 3 caracteres",
        "dataHora": "Data deve ser um datetime válido",
        "local": "Local deve ter pelo menos 3 caracteres",
        "preco_base": "Preço base deve ser um número positivo",
        "descricao": "Descrição deve ser um texto",
    }
    field_labels = {"dataHora": "Data", "preco_base": "Preço base"}

    @field_validator("data_hora", mode="before")
    @classmethod
    def iso_string_only(cls, value: Any) -> Any:
        # Reject epoch numbers; only ISO-8601 strings are accepted.
        if not isinstance(value, str):
            raise ValueError("dataHora must be an ISO-8601 string")
        return value
