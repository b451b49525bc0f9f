"""
Error rendering shared by every resource.

All error responses use the same envelope:

    {"error": "message"}            # single message
    {"error": ["msg 1", "msg 2"]}   # validation failures
    {"error": "...", "details": "Traceback ..."}  # 500s, debug only

Services raise `fastapi.HTTPException` for expected failures (bad ids,
missing rows, invalid payloads). Anything else coming out of the database or
the SMTP transport is caught by `storage_errors()` at the service boundary,
logged, and turned into a 500 with a generic resource-specific message.
Whatever still escapes a handler is rendered as a 500 in the same envelope.
"""

from __future__ import annotations

import logging
import os
import traceback
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Corpo da requisição inválido"
INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"


def debug_details_enabled() -> bool:
    return os.environ.get("API_DEBUG_ERRORS", "").strip().lower() in {"1", "true", "yes"}


class ServerError(HTTPException):
    """
    500 carrying an optional traceback for the `details` field.
    """

    def __init__(self, message: str, *, trace: str | None = None) -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)
        self.trace = trace


def server_error(message: str, exc: BaseException) -> ServerError:
    trace = None
    if debug_details_enabled():
        trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return ServerError(message, trace=trace)


@contextmanager
def storage_errors(message: str) -> Iterator[None]:
    """
    Convert unexpected persistence failures into a 500 with `message`.

    HTTPExceptions raised inside the block (404, 409, ...) pass through.
    """
    try:
        yield
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("storage_error message=%r", message)
        raise server_error(message, exc) from exc


def error_body(detail: Any, *, trace: str | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"error": detail}
    if trace:
        body["details"] = trace
    return body


def _validation_messages(exc: RequestValidationError) -> list[str]:
    messages = []
    for err in exc.errors():
        if err.get("type") == "json_invalid":
            messages.append(INVALID_BODY_MESSAGE)
        else:
            messages.append(str(err.get("msg") or INVALID_BODY_MESSAGE))
    return messages or [INVALID_BODY_MESSAGE]


async def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    trace = getattr(exc, "trace", None)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.detail, trace=trace),
        headers=getattr(exc, "headers", None),
    )


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("request_validation_failed path=%s errors=%s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(_validation_messages(exc)),
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error path=%s", request.url.path, exc_info=exc)
    error = server_error(INTERNAL_ERROR_MESSAGE, exc)
    return JSONResponse(
        status_code=error.status_code,
        content=error_body(error.detail, trace=error.trace),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
