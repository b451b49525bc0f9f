"""
Event business logic.
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from core.errors import storage_errors
from core.validation import parse_id, require_row, require_valid

from . import repository, schemas

NOT_FOUND = "Evento não encontrado"


def _fields(data: schemas.EventPayload) -> dict[str, Any]:
    return {
        "nome": data.nome,
        "data_hora": data.data_hora,
        "local": data.local,
        "preco_base": data.preco_base,
        "descricao": data.descricao,
    }


async def list_events() -> list[dict]:
    with storage_errors("Erro ao buscar eventos"):
        return await repository.list_events()


async def create_event(payload: Any) -> dict:
    data = require_valid(schemas.EventPayload, payload)
    with storage_errors("Erro ao criar evento"):
        return await repository.create_event(**_fields(data))


async def update_event(raw_id: str, payload: Any) -> dict:
    event_id = parse_id(raw_id)
    with storage_errors("Erro ao atualizar evento"):
        await require_row(repository.get_event, event_id, not_found=NOT_FOUND)
        data = require_valid(schemas.EventPayload, payload)
        row = await repository.update_event(event_id, **_fields(data))
        if row is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
        return row


async def delete_event(raw_id: str) -> None:
    event_id = parse_id(raw_id)
    with storage_errors("Erro ao deletar evento"):
        await require_row(repository.get_event, event_id, not_found=NOT_FOUND)
        if not await repository.delete_event(event_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
