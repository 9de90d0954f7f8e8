import time
from typing import Callable

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        level = "INFO" if response.status_code < 400 else "WARNING"
        logger.log(
            level,
            "{} {} {} {:.1f}ms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response
