"""
Ticket API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Response, status

from . import service

router = APIRouter()


@router.get("/ingressos")
async def list_tickets() -> list[dict]:
    return await service.list_tickets()


@router.post("/ingressos", status_code=status.HTTP_201_CREATED)
async def create_ticket(payload: Any = Body(default=None)) -> dict:
    return await service.create_ticket(payload)


@router.put("/ingressos/{ticket_id}")
async def update_ticket(ticket_id: str, payload: Any = Body(default=None)) -> dict:
    return await service.update_ticket(ticket_id, payload)


@router.delete("/ingressos/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ticket(ticket_id: str) -> Response:
    await service.delete_ticket(ticket_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
