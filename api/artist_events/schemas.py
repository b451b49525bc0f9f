"""
Pydantic schemas for artist/event association endpoints.
"""

from __future__ import annotations

from pydantic import Field

from core.validation import PG_INT_MAX, ResourceSchema


class ArtistEventPayload(ResourceSchema):
    artista_id: int = Field(..., alias="artistaId", gt=0, le=PG_INT_MAX, strict=True)
    evento_id: int = Field(..., alias="eventoId", gt=0, le=PG_INT_MAX, strict=True)

    error_messages = {
        "artistaId": "ID do artista deve ser positivo",
        "eventoId": "ID do evento deve ser positivo",
    }
    field_labels = {"artistaId": "ID do artista", "eventoId": "ID do evento"}
