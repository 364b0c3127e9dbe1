"""
Error envelopes and exception handlers.

Response shapes:
- validation failures: 400 {"errors": [{"type", "location", "path", "msg", "value"}, ...]}
- everything else:      {"error": "<message>"}

Database failures and unhandled exceptions never leak details to the caller;
they are logged and rendered as a generic 500.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

import asyncpg
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

DATABASE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)

# FastAPI error `loc[0]` -> location reported to the client.
_LOCATIONS = {"path": "params"}


def internal_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_ERROR_MESSAGE,
    )


@contextmanager
def database_errors(action: str) -> Iterator[None]:
    """
    Turn driver/connection failures inside the block into a generic 500.

    Usage:
        with database_errors("creating food item"):
            await repository.insert_food(conn, ...)
    """
    try:
        yield
    except DATABASE_ERRORS as exc:
        logger.exception("db_query_failed action=%r", action)
        raise internal_error() from exc


def field_error(error: dict[str, Any]) -> dict[str, Any]:
    """
    Reshape one pydantic error (`{"loc", "msg", "type", "input"}`) into a field error item.
    """
    loc = error.get("loc") or ()
    location = str(loc[0]) if loc else "body"
    return {
        "type": "field",
        "location": _LOCATIONS.get(location, location),
        "path": ".".join(str(part) for part in loc[1:]),
        "msg": error.get("msg", "Invalid value"),
        "value": None if error.get("type") == "missing" else error.get("input"),
    }


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def _request_invalid(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [field_error(e) for e in exc.errors()]
        logger.info("request_invalid path=%s errors=%s", request.url.path, len(errors))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder({"errors": errors}),
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("request_failed path=%s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
