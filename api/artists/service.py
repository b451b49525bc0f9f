"""
Artist business logic: validation, existence checks and error mapping.
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from core.errors import storage_errors
from core.validation import parse_id, require_row, require_valid

from . import repository, schemas

NOT_FOUND = "Artista não encontrado"


async def list_artists() -> list[dict]:
    with storage_errors("Erro ao buscar artistas"):
        return await repository.list_artists()


async def create_artist(payload: Any) -> dict:
    data = require_valid(schemas.ArtistPayload, payload)
    with storage_errors("Erro ao criar artista"):
        return await repository.create_artist(nome=data.nome, genero=data.genero)


async def update_artist(raw_id: str, payload: Any) -> dict:
    artist_id = parse_id(raw_id)
    with storage_errors("Erro ao atualizar artista"):
        await require_row(repository.get_artist, artist_id, not_found=NOT_FOUND)
        data = require_valid(schemas.ArtistPayload, payload)
        row = await repository.update_artist(artist_id, nome=data.nome, genero=data.genero)
        if row is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
        return row


async def delete_artist(raw_id: str) -> None:
    artist_id = parse_id(raw_id)
    with storage_errors("Erro ao deletar artista"):
        await require_row(repository.get_artist, artist_id, not_found=NOT_FOUND)
        if not await repository.delete_artist(artist_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
