"""
Error taxonomy and the exception handlers that render it as JSON.

Every failure becomes a body of the form ``{"message": "<label>: <detail>"}``.
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

SERVER_EXCEPTION_LABEL = "Server Exception"
VALIDATION_ERROR_LABEL = "Validation Error"


class RosterError(Exception):
    """Base class for failures with a fixed HTTP status and label."""

    status_code = 500
    label = SERVER_EXCEPTION_LABEL

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class StorageError(RosterError):
    """Raised for any failure surfaced by the database driver."""

    status_code = 501
    label = "MongoDB Exception"


class TeamNotFoundError(RosterError):
    status_code = 404
    label = "Not Found"

    def __init__(self, team_id: str):
        self.team_id = team_id
        super().__init__(f"no team with id {team_id}")


def error_body(label: str, detail: str) -> dict:
    return {"message": f"{label}: {detail}"}


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        # Drop the leading "body"/"path" segment.
        loc = [str(p) for p in err.get("loc", ())[1:]]
        where = ".".join(loc) if loc else "request"
        parts.append(f"{where}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "invalid request"


async def roster_error_handler(request: Request, exc: RosterError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s: %s",
            request.method,
            request.url.path,
            exc.label,
            exc.detail,
            exc_info=exc,
        )
    else:
        logger.warning(
            "%s %s rejected: %s: %s",
            request.method,
            request.url.path,
            exc.label,
            exc.detail,
        )
    return JSONResponse(
        status_code=exc.status_code, content=error_body(exc.label, exc.detail)
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    detail = _format_validation_errors(exc)
    logger.warning(
        "%s %s invalid request: %s", request.method, request.url.path, detail
    )
    return JSONResponse(
        status_code=400, content=error_body(VALIDATION_ERROR_LABEL, detail)
    )


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    label = HTTPStatus(exc.status_code).phrase
    detail = exc.detail
    if not detail or detail == label:
        detail = f"{request.method} {request.url.path}"
    logger.warning(
        "%s %s rejected: %s: %s", request.method, request.url.path, label, detail
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(label, detail),
        headers=getattr(exc, "headers", None),
    )


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=500, content=error_body(SERVER_EXCEPTION_LABEL, str(exc))
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RosterError, roster_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, server_error_handler)
