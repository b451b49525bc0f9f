"""
Ticket persistence (raw SQL).

Every read returns tickets with their event embedded under "evento".
"""

from __future__ import annotations

from typing import Any

from core import db
from events import repository as events_repository

TICKET_COLUMNS = 'id, evento_id AS "eventoId", tipo, preco, quantidade'


async def _with_events(tickets: list[dict[str, Any]]) -> list[dict[str, Any]]:
    events = await events_repository.get_events_by_ids([int(t["eventoId"]) for t in tickets])
    return [{**t, "evento": events.get(int(t["eventoId"]))} for t in tickets]


async def _with_event(ticket: dict[str, Any] | None) -> dict[str, Any] | None:
    if ticket is None:
        return None
    return (await _with_events([ticket]))[0]


async def list_tickets() -> list[dict[str, Any]]:
    rows = await db.fetch_all(
        f"""
        SELECT {TICKET_COLUMNS}
        FROM ingressos
        ORDER BY id
        """
    )
    return await _with_events(rows)


async def get_ticket(ticket_id: int) -> dict[str, Any] | None:
    row = await db.fetch_one(
        f"""
        SELECT {TICKET_COLUMNS}
        FROM ingressos
        WHERE id = $1
        """,
        ticket_id,
    )
    return await _with_event(row)


async def create_ticket(*, evento_id: int, tipo: str, preco: float, quantidade: int) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO ingressos (evento_id, tipo, preco, quantidade)
        VALUES ($1, $2, $3, $4)
        RETURNING {TICKET_COLUMNS}
        """,
        evento_id,
        tipo,
        preco,
        quantidade,
    )
    if row is None:
        raise RuntimeError("Failed to insert ticket.")
    return await _with_event(row)


async def update_ticket(
    ticket_id: int,
    *,
    evento_id: int,
    tipo: str,
    preco: float,
    quantidade: int,
) -> dict[str, Any] | None:
    row = await db.fetch_one(
        f"""
        UPDATE ingressos
        SET evento_id = $2,
            tipo = $3,
            preco = $4,
            quantidade = $5
        WHERE id = $1
        RETURNING {TICKET_COLUMNS}
        """,
        ticket_id,
        evento_id,
        tipo,
        preco,
        quantidade,
    )
    return await _with_event(row)


async def delete_ticket(ticket_id: int) -> bool:
    status = await db.execute("DELETE FROM ingressos WHERE id = $1", ticket_id)
    return db.affected_rows(status) > 0
