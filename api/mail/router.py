"""
Transactional e-mail endpoint.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body

from . import service

router = APIRouter()


@router.post("/mail/send")
async def send_mail(payload: Any = Body(default=None)) -> dict:
    return await service.send_mail(payload)
