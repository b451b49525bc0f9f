"""
Artist/event association API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Response, status

from . import service

router = APIRouter()


@router.get("/artistas-eventos")
async def list_links() -> list[dict]:
    """
    List every association with its artist and event embedded.
    """
    return await service.list_links()


@router.post("/artistas-eventos", status_code=status.HTTP_201_CREATED)
async def create_link(payload: Any = Body(default=None)) -> dict:
    return await service.create_link(payload)


@router.put("/artistas-eventos/{artista_id}/{evento_id}")
async def update_link(
    artista_id: str,
    evento_id: str,
    payload: Any = Body(default=None),
) -> dict:
    return await service.update_link(artista_id, evento_id, payload)


@router.delete("/artistas-eventos/{artista_id}/{evento_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_link(artista_id: str, evento_id: str) -> Response:
    await service.delete_link(artista_id, evento_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
