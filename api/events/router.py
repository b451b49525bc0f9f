"""
Event API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Response, status

from . import service

router = APIRouter()


@router.get("/eventos")
async def list_events() -> list[dict]:
    """
    List events with their artist links and tickets.
    """
    return await service.list_events()


@router.post("/eventos", status_code=status.HTTP_201_CREATED)
async def create_event(payload: Any = Body(default=None)) -> dict:
    return await service.create_event(payload)


@router.put("/eventos/{event_id}")
async def update_event(event_id: str, payload: Any = Body(default=None)) -> dict:
    return await service.update_event(event_id, payload)


@router.delete("/eventos/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: str) -> Response:
    await service.delete_event(event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
