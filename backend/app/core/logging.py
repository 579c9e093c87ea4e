"""Logging setup for the estimator.

Records go to a single root handler as either plain text or one JSON
object per line. Every record emitted while a request is in flight is
tagged with that request's ID, and each request produces one line on the
``solar.access`` logger carrying the query string that drove the estimate.
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from contextvars import ContextVar
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

ACCESS_LOGGER = "solar.access"
REQUEST_ID_HEADER = "X-Request-ID"
TEXT_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# ``extra=`` keys copied onto JSON records when present
RECORD_EXTRAS = ("method", "path", "query", "origin", "status_code", "duration_ms", "client_ip")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class JSONFormatter(logging.Formatter):
    """One JSON object per record, including the current request ID."""

    def format(self, record: logging.LogRecord) -> str:
        entry = self._core_fields(record)
        for key in RECORD_EXTRAS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value
        return json.dumps(entry, default=str)

    def _core_fields(self, record: logging.LogRecord) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": request_id_var.get("") or None,
            "exception": (
                self.formatException(record.exc_info)
                if record.exc_info and record.exc_info[1]
                else None
            ),
        }
        return {k: v for k, v in fields.items() if v is not None}


def _access_fields(request: Request, status_code: int, duration_ms: float) -> dict[str, Any]:
    return {
        "method": request.method,
        "path": request.url.path,
        "query": request.url.query or None,
        "status_code": status_code,
        "duration_ms": duration_ms,
        "client_ip": request.client.host if request.client else "unknown",
    }


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag the request with an ID, echo it back, and write the access line."""

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        token = request_id_var.set(request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8])
        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
            fields = _access_fields(
                request,
                response.status_code,
                round((time.perf_counter() - started) * 1000, 1),
            )
            response.headers[REQUEST_ID_HEADER] = request_id_var.get()
            logging.getLogger(ACCESS_LOGGER).info(
                "%(method)s %(path)s -> %(status_code)s (%(duration_ms).1fms)", fields, extra=fields
            )
        finally:
            request_id_var.reset(token)
        return response


def setup_logging(json_format: bool = False, level: int = logging.INFO) -> None:
    """Install a single stream handler on the root logger.

    Use ``json_format=True`` when logs are shipped to an aggregator.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(
        JSONFormatter()
        if json_format
        else logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
