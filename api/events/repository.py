"""
Event persistence (raw SQL).

`list_events()` eager-loads each event's artist links (with the artist row)
and its tickets using two extra queries instead of a wide join, then groups
the children in Python.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from typing import Any

from core import db

EVENT_COLUMNS = 'id, nome, data_hora AS "dataHora", "local", preco_base, descricao'


async def list_events() -> list[dict[str, Any]]:
    events = await db.fetch_all(
        f"""
        SELECT {EVENT_COLUMNS}
        FROM eventos
        ORDER BY id
        """
    )
    if not events:
        return []

    event_ids = [int(e["id"]) for e in events]
    links = await db.fetch_all(
        """
        SELECT
          ae.artista_id AS "artistaId",
          ae.evento_id AS "eventoId",
          a.nome AS artista_nome,
          a.genero AS artista_genero
        FROM artistas_eventos ae
        JOIN artistas a ON a.id = ae.artista_id
        WHERE ae.evento_id = ANY($1::int[])
        ORDER BY ae.evento_id, ae.artista_id
        """,
        event_ids,
    )
    tickets = await db.fetch_all(
        """
        SELECT id, evento_id AS "eventoId", tipo, preco, quantidade
        FROM ingressos
        WHERE evento_id = ANY($1::int[])
        ORDER BY id
        """,
        event_ids,
    )
    return attach_children(events, links=links, tickets=tickets)


def attach_children(
    events: list[dict[str, Any]],
    *,
    links: list[dict[str, Any]],
    tickets: list[dict[str, Any]],
) -> list[dict[str, Any]]:
    """
    Nest link rows (as {"artistaId", "eventoId", "artista": {...}}) and
    ticket rows under their events.
    """
    links_by_event: dict[int, list[dict[str, Any]]] = defaultdict(list)
    for link in links:
        links_by_event[int(link["eventoId"])].append(
            {
                "artistaId": link["artistaId"],
                "eventoId": link["eventoId"],
                "artista": {
                    "id": link["artistaId"],
                    "nome": link["artista_nome"],
                    "genero": link["artista_genero"],
                },
            }
        )

    tickets_by_event: dict[int, list[dict[str, Any]]] = defaultdict(list)
    for ticket in tickets:
        tickets_by_event[int(ticket["eventoId"])].append(ticket)

    return [
        {
            **event,
            "artistas": links_by_event.get(int(event["id"]), []),
            "ingressos": tickets_by_event.get(int(event["id"]), []),
        }
        for event in events
    ]


async def get_event(event_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {EVENT_COLUMNS}
        FROM eventos
        WHERE id = $1
        """,
        event_id,
    )


async def get_events_by_ids(event_ids: list[int]) -> dict[int, dict[str, Any]]:
    if not event_ids:
        return {}
    rows = await db.fetch_all(
        f"""
        SELECT {EVENT_COLUMNS}
        FROM eventos
        WHERE id = ANY($1::int[])
        """,
        sorted(set(event_ids)),
    )
    return {int(row["id"]): row for row in rows}


async def create_event(
    *,
    nome: str,
    data_hora: datetime,
    local: str,
    preco_base: float,
    descricao: str | None = None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO eventos (nome, data_hora, "local", preco_base, descricao)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {EVENT_COLUMNS}
        """,
        nome,
        data_hora,
        local,
        preco_base,
        descricao,
    )
    if row is None:
        raise RuntimeError("Failed to insert event.")
    return row


async def update_event(
    event_id: int,
    *,
    nome: str,
    data_hora: datetime,
    local: str,
    preco_base: float,
    descricao: str | None = None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE eventos
        SET nome = $2,
            data_hora = $3,
            "local" = $4,
            preco_base = $5,
            descricao = $6
        WHERE id = $1
        RETURNING {EVENT_COLUMNS}
        """,
        event_id,
        nome,
        data_hora,
        local,
        preco_base,
        descricao,
    )


async def delete_event(event_id: int) -> bool:
    status = await db.execute("DELETE FROM eventos WHERE id = $1", event_id)
    return db.affected_rows(status) > 0
