"""
Artist/event association business logic.

Both sides of a link must exist when it is written, and a given pair is
stored at most once (409 on a duplicate instead of a raw constraint error).
"""

from __future__ import annotations

import asyncio
from typing import Any

from fastapi import HTTPException, status

from artists import repository as artists_repository
from core.errors import storage_errors
from core.validation import parse_id, require_row, require_valid
from events import repository as events_repository

from . import repository, schemas

NOT_FOUND = "Associação não encontrada"
REFERENCE_NOT_FOUND = "Artista ou Evento não encontrado"
ALREADY_LINKED = "Associação já existe"
INVALID_IDS = "IDs inválidos"


def _parse_pair(raw_artista_id: str, raw_evento_id: str) -> tuple[int, int]:
    return (
        parse_id(raw_artista_id, message=INVALID_IDS),
        parse_id(raw_evento_id, message=INVALID_IDS),
    )


async def _require_references(artista_id: int, evento_id: int) -> None:
    artista, evento = await asyncio.gather(
        artists_repository.get_artist(artista_id),
        events_repository.get_event(evento_id),
    )
    if artista is None or evento is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=REFERENCE_NOT_FOUND)


async def _reject_duplicate(artista_id: int, evento_id: int) -> None:
    if await repository.get_link(artista_id, evento_id) is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=ALREADY_LINKED)


async def list_links() -> list[dict]:
    with storage_errors("Erro ao buscar associações artista-evento"):
        return await repository.list_links()


async def create_link(payload: Any) -> dict:
    data = require_valid(schemas.ArtistEventPayload, payload)
    with storage_errors("Erro ao associar artista ao evento"):
        await _require_references(data.artista_id, data.evento_id)
        await _reject_duplicate(data.artista_id, data.evento_id)
        return await repository.create_link(artista_id=data.artista_id, evento_id=data.evento_id)


async def update_link(raw_artista_id: str, raw_evento_id: str, payload: Any) -> dict:
    current = _parse_pair(raw_artista_id, raw_evento_id)
    with storage_errors("Erro ao atualizar associação"):
        await require_row(repository.get_link, *current, not_found=NOT_FOUND)
        data = require_valid(schemas.ArtistEventPayload, payload)
        target = (data.artista_id, data.evento_id)
        if target != current:
            if data.artista_id != current[0]:
                await require_row(artists_repository.get_artist, data.artista_id, not_found=REFERENCE_NOT_FOUND)
            if data.evento_id != current[1]:
                await require_row(events_repository.get_event, data.evento_id, not_found=REFERENCE_NOT_FOUND)
            await _reject_duplicate(*target)

        row = await repository.update_link(current, artista_id=data.artista_id, evento_id=data.evento_id)
        if row is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
        return row


async def delete_link(raw_artista_id: str, raw_evento_id: str) -> None:
    artista_id, evento_id = _parse_pair(raw_artista_id, raw_evento_id)
    with storage_errors("Erro ao remover associação"):
        await require_row(repository.get_link, artista_id, evento_id, not_found=NOT_FOUND)
        if not await repository.delete_link(artista_id, evento_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
