"""Request logging middleware."""

from __future__ import annotations

import time
import uuid

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from claims_backend.core.logging import get_logger

logger = get_logger("http")

SKIP_PATHS = {"/health"}


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag every request with an id and emit one access log line."""

    async def dispatch(self, request: Request, call_next) -> Response:
        req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.req_id = req_id
        structlog.contextvars.bind_contextvars(req_id=req_id)

        start = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = req_id
            return response
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            if request.url.path not in SKIP_PATHS:
                logger.info(
                    "http.access",
                    method=request.method,
                    path=request.url.path,
                    status=getattr(response, "status_code", None),
                    elapsed_ms=round(elapsed_ms, 2),
                )
            structlog.contextvars.unbind_contextvars("req_id")
