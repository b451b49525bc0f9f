"""
Payload validation and existence checks shared by the resource services.

Each resource declares a pydantic schema (see `<resource>/schemas.py`).
`validate_payload()` runs a raw JSON body through it and returns either the
typed model or the list of human-readable messages, one per violated
constraint. It never raises; `require_valid()` is the thin wrapper services
use to turn the message list into a 400.
"""

from __future__ import annotations

import re
from collections.abc import Awaitable, Callable
from typing import Any, ClassVar, TypeVar

from fastapi import HTTPException, status
from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import INVALID_BODY_MESSAGE

INVALID_ID_MESSAGE = "ID inválido"

# Upper bound of a Postgres `integer` column.
PG_INT_MAX = 2**31 - 1

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class ResourceSchema(BaseModel):
    """
    Base for request schemas.

    `error_messages` maps a field (by its JSON name) to the message reported
    for any constraint it violates. `field_labels` names the field in the
    "is required" message; it defaults to the capitalized field name.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    error_messages: ClassVar[dict[str, str]] = {}
    field_labels: ClassVar[dict[str, str]] = {}


SchemaT = TypeVar("SchemaT", bound=ResourceSchema)


def _message_for(schema: type[ResourceSchema], error: dict[str, Any]) -> str:
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else ""
    if error.get("type") == "missing":
        label = schema.field_labels.get(field, field[:1].upper() + field[1:])
        return f"{label} é obrigatório"
    return schema.error_messages.get(field) or str(error.get("msg") or INVALID_BODY_MESSAGE)


def validate_payload(schema: type[SchemaT], payload: Any) -> tuple[SchemaT | None, list[str]]:
    if not isinstance(payload, dict):
        return None, [INVALID_BODY_MESSAGE]

    try:
        return schema.model_validate(payload), []
    except ValidationError as exc:
        messages: list[str] = []
        for error in exc.errors():
            message = _message_for(schema, error)
            if message not in messages:
                messages.append(message)
        return None, messages


def require_valid(schema: type[SchemaT], payload: Any) -> SchemaT:
    model, messages = validate_payload(schema, payload)
    if model is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages)
    return model


def parse_id(raw: str, *, message: str = INVALID_ID_MESSAGE) -> int:
    """
    Parse a path identifier. Runs before any database access.

    Only plain decimal digits with an optional sign are accepted; `int()`
    forms such as "1_0" are rejected.
    """
    text = str(raw).strip()
    if not _ID_PATTERN.fullmatch(text):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
    return int(text)


def id_in_range(value: int) -> bool:
    return 0 < value <= PG_INT_MAX


async def require_row(
    lookup: Callable[..., Awaitable[dict | None]],
    *ids: int,
    not_found: str,
) -> dict:
    """
    Call `lookup(*ids)` and 404 with `not_found` when it yields nothing.

    Ids that cannot exist in an `integer` serial column are answered with
    404 without touching the database.
    """
    if not all(id_in_range(i) for i in ids):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
    row = await lookup(*ids)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
    return row
