"""
Artist persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

ARTIST_COLUMNS = "id, nome, genero"


async def list_artists() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {ARTIST_COLUMNS}
        FROM artistas
        ORDER BY id
        """
    )


async def get_artist(artist_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {ARTIST_COLUMNS}
        FROM artistas
        WHERE id = $1
        """,
        artist_id,
    )


async def get_artists_by_ids(artist_ids: list[int]) -> dict[int, dict[str, Any]]:
    if not artist_ids:
        return {}
    rows = await db.fetch_all(
        f"""
        SELECT {ARTIST_COLUMNS}
        FROM artistas
        WHERE id = ANY($1::int[])
        """,
        sorted(set(artist_ids)),
    )
    return {int(row["id"]): row for row in rows}


async def create_artist(*, nome: str, genero: str) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO artistas (nome, genero)
        VALUES ($1, $2)
        RETURNING {ARTIST_COLUMNS}
        """,
        nome,
        genero,
    )
    if row is None:
        raise RuntimeError("Failed to insert artist.")
    return row


async def update_artist(artist_id: int, *, nome: str, genero: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE artistas
        SET nome = $2,
            genero = $3
        WHERE id = $1
        RETURNING {ARTIST_COLUMNS}
        """,
        artist_id,
        nome,
        genero,
    )


async def delete_artist(artist_id: int) -> bool:
    status = await db.execute("DELETE FROM artistas WHERE id = $1", artist_id)
    return db.affected_rows(status) > 0
