"""
Artist/event association persistence (raw SQL).

Rows are keyed by the (artista_id, evento_id) pair and always returned with
the related artist and event embedded under "artista" and "evento".
"""

from __future__ import annotations

from typing import Any

from artists import repository as artists_repository
from core import db
from events import repository as events_repository

LINK_COLUMNS = 'artista_id AS "artistaId", evento_id AS "eventoId"'


async def _with_related(links: list[dict[str, Any]]) -> list[dict[str, Any]]:
    artists = await artists_repository.get_artists_by_ids([int(link["artistaId"]) for link in links])
    events = await events_repository.get_events_by_ids([int(link["eventoId"]) for link in links])
    return [
        {
            **link,
            "artista": artists.get(int(link["artistaId"])),
            "evento": events.get(int(link["eventoId"])),
        }
        for link in links
    ]


async def list_links() -> list[dict[str, Any]]:
    rows = await db.fetch_all(
        f"""
        SELECT {LINK_COLUMNS}
        FROM artistas_eventos
        ORDER BY evento_id, artista_id
        """
    )
    return await _with_related(rows)


async def get_link(artista_id: int, evento_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {LINK_COLUMNS}
        FROM artistas_eventos
        WHERE artista_id = $1
          AND evento_id = $2
        """,
        artista_id,
        evento_id,
    )


async def create_link(*, artista_id: int, evento_id: int) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO artistas_eventos (artista_id, evento_id)
        VALUES ($1, $2)
        RETURNING {LINK_COLUMNS}
        """,
        artista_id,
        evento_id,
    )
    if row is None:
        raise RuntimeError("Failed to insert artist/event link.")
    return (await _with_related([row]))[0]


async def update_link(
    current: tuple[int, int],
    *,
    artista_id: int,
    evento_id: int,
) -> dict[str, Any] | None:
    """
    Replace the pair `current` = (artista_id, evento_id) with the new one.
    """
    row = await db.fetch_one(
        f"""
        UPDATE artistas_eventos
        SET artista_id = $3,
            evento_id = $4
        WHERE artista_id = $1
          AND evento_id = $2
        RETURNING {LINK_COLUMNS}
        """,
        current[0],
        current[1],
        artista_id,
        evento_id,
    )
    if row is None:
        return None
    return (await _with_related([row]))[0]


async def delete_link(artista_id: int, evento_id: int) -> bool:
    status = await db.execute(
        """
        DELETE FROM artistas_eventos
        WHERE artista_id = $1
          AND evento_id = $2
        """,
        artista_id,
        evento_id,
    )
    return db.affected_rows(status) > 0
