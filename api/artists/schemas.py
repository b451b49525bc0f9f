"""
Pydantic schemas for artist endpoints.
"""

from __future__ import annotations

from pydantic import Field

from core.validation import ResourceSchema


class ArtistPayload(ResourceSchema):
    nome: str = Field(..., min_length=3)
    genero: str = Field(..., min_length=3)

    error_messages = {
        "nome": "Nome deve ter pelo menos 3 caracteres",
        "genero": "Gênero deve ter pelo menos 3 caracteres",
    }
    field_labels = {"genero": "Gênero"}
