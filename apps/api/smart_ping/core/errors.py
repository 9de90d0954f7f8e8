from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

SERVER_ERROR = "Server Error"


class SmartPingError(Exception):
    status_code = 500
    public_message = SERVER_ERROR


class ValidationError(SmartPingError):
    """Missing or empty input the caller can fix."""

    status_code = 400

    def __init__(self, message: str = "Please enter all fields"):
        super().__init__(message)
        self.public_message = message


class NotFoundError(SmartPingError):
    """
    Unknown update id. `reason` separates a well-formed id with no record
    ("missing") from an id the store can't parse ("malformed_id"); callers
    see the same 404 either way.
    """

    status_code = 404
    public_message = "Update not found"

    MISSING = "missing"
    MALFORMED_ID = "malformed_id"

    def __init__(self, update_id: str, reason: str = MISSING):
        super().__init__(f"update {update_id!r} not found ({reason})")
        self.update_id = update_id
        self.reason = reason


class NoContentError(SmartPingError):
    status_code = 404

    def __init__(self, window_hours: int, detail: str = ""):
        super().__init__(detail or f"no updates in the last {window_hours} hours")
        self.public_message = f"No updates found in the last {window_hours} hours"


class CompletionError(SmartPingError):
    """Any failure talking to the completion endpoint."""


class StoreError(SmartPingError):
    """Any persistence failure other than not-found."""


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message})


async def smart_ping_error_handler(request: Request, exc: SmartPingError) -> JSONResponse:
    where = f"{request.method} {request.url.path}"
    if exc.status_code >= 500:
        logger.error("{} failed: {}: {}", where, type(exc).__name__, exc)
    elif isinstance(exc, NotFoundError):
        logger.info("{} -> 404 reason={} id={}", where, exc.reason, exc.update_id)
    else:
        logger.info("{} -> {} {}", where, exc.status_code, exc)
    return _error_response(exc.status_code, exc.public_message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error("{} {} crashed: {}", request.method, request.url.path, exc)
    return _error_response(500, SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SmartPingError, smart_ping_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
