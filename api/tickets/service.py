"""
Ticket business logic.

A ticket must reference an existing event; the check runs on create and,
on update, only when the event id changes.
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from core.errors import storage_errors
from core.validation import parse_id, require_row, require_valid
from events import repository as events_repository
from events.service import NOT_FOUND as EVENT_NOT_FOUND

from . import repository, schemas

NOT_FOUND = "Ingresso não encontrado"


def _fields(data: schemas.TicketPayload) -> dict[str, Any]:
    return {
        "evento_id": data.evento_id,
        "tipo": data.tipo.value,
        "preco": data.preco,
        "quantidade": data.quantidade,
    }


async def list_tickets() -> list[dict]:
    with storage_errors("Erro ao buscar ingressos"):
        return await repository.list_tickets()


async def create_ticket(payload: Any) -> dict:
    data = require_valid(schemas.TicketPayload, payload)
    with storage_errors("Erro ao criar ingresso"):
        await require_row(events_repository.get_event, data.evento_id, not_found=EVENT_NOT_FOUND)
        return await repository.create_ticket(**_fields(data))


async def update_ticket(raw_id: str, payload: Any) -> dict:
    ticket_id = parse_id(raw_id)
    with storage_errors("Erro ao atualizar ingresso"):
        existing = await require_row(repository.get_ticket, ticket_id, not_found=NOT_FOUND)
        data = require_valid(schemas.TicketPayload, payload)
        if data.evento_id != int(existing["eventoId"]):
            await require_row(events_repository.get_event, data.evento_id, not_found=EVENT_NOT_FOUND)

        row = await repository.update_ticket(ticket_id, **_fields(data))
        if row is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
        return row


async def delete_ticket(raw_id: str) -> None:
    ticket_id = parse_id(raw_id)
    with storage_errors("Erro ao deletar ingresso"):
        await require_row(repository.get_ticket, ticket_id, not_found=NOT_FOUND)
        if not await repository.delete_ticket(ticket_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
