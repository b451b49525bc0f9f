"""
Pydantic schemas for ticket endpoints.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from core.validation import PG_INT_MAX, ResourceSchema


class TicketType(str, Enum):
    VIP = "VIP"
    COMMON = "COMMON"
    HALF_PRICE = "HALF-PRICE"


class TicketPayload(ResourceSchema):
    evento_id: int = Field(..., alias="eventoId", gt=0, le=PG_INT_MAX, strict=True)
    tipo: TicketType
    preco: float = Field(..., gt=0, strict=True, allow_inf_nan=False)
    quantidade: int = Field(..., gt=0, le=PG_INT_MAX, strict=True)

    error_messages = {
        "eventoId": "ID do evento deve ser positivo",
        "tipo": "Tipo deve ser VIP, COMMON ou HALF-PRICE",
        "preco": "Preço deve ser um número positivo",
        "quantidade": "Quantidade deve ser um número positivo",
    }
    field_labels = {"eventoId": "ID do evento", "preco": "Preço"}
