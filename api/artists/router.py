"""
Artist API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Response, status

from . import service

router = APIRouter()


@router.get("/artistas")
async def list_artists() -> list[dict]:
    return await service.list_artists()


@router.post("/artistas", status_code=status.HTTP_201_CREATED)
async def create_artist(payload: Any = Body(default=None)) -> dict:
    return await service.create_artist(payload)


@router.put("/artistas/{artist_id}")
async def update_artist(artist_id: str, payload: Any = Body(default=None)) -> dict:
    return await service.update_artist(artist_id, payload)


@router.delete("/artistas/{artist_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_artist(artist_id: str) -> Response:
    await service.delete_artist(artist_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
