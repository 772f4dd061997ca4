"""App-wide exception handlers. Every error body is ``{"error": message}``."""

import logging
import sqlite3

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.db.stores import DuplicateCallError

log = logging.getLogger(__name__)


def _field_name(loc: tuple) -> str:
    # Drop the leading "body"/"query" marker
    parts = [str(p) for p in loc[1:]] or [str(p) for p in loc]
    return ".".join(parts)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = [f"{_field_name(e['loc'])}: {e['msg']}" for e in exc.errors()]
    fields = sorted({_field_name(e["loc"]) for e in exc.errors()})
    log.info("Rejected %s %s: %s", request.method, request.url.path, problems)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": f"Invalid request: {', '.join(fields)}",
            "details": problems,
        },
    )


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def duplicate_call_handler(
    request: Request, exc: DuplicateCallError
) -> JSONResponse:
    log.warning("Duplicate call id=%s", exc.call_id)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"error": str(exc)},
    )


async def database_error_handler(
    request: Request, exc: sqlite3.Error
) -> JSONResponse:
    log.error("Database error on %s %s", request.method, request.url.path,
              exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(DuplicateCallError, duplicate_call_handler)
    app.add_exception_handler(sqlite3.Error, database_error_handler)
