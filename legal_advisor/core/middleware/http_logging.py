"""Access log for the legal advisor API.

One record per request, metadata only. Prompts and generated documents travel in
bodies, document keys embed the owner's identity, and the identity header names the
caller, so none of those are logged. What is logged:

- the correlation id (propagated `X-Request-ID` when safe, else a new one)
- the route template, e.g. `/documents/{key}`
- whether a caller identity was presented at all (boolean)
- the generation workflow, when the route ran one (`request.state.workflow`)
"""

from __future__ import annotations

import logging
import re
import time
import uuid
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from legal_advisor.core.settings import get_settings

logger = logging.getLogger("legal_advisor.http")

REQUEST_ID_HEADER = "X-Request-ID"
_SAFE_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]{0,127}$")


def _request_id(request: Request) -> str:
    candidate = request.headers.get(REQUEST_ID_HEADER)
    if candidate and _SAFE_REQUEST_ID_PATTERN.fullmatch(candidate):
        return candidate
    return uuid.uuid4().hex


def _caller_identified(request: Request) -> bool:
    value = request.headers.get(get_settings().caller_identity_header)
    return bool(value and value.strip())


def _log_fields(
    *, request: Request, request_id: str, status_code: int, started: float
) -> dict[str, Any]:
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return {
        "request_id": request_id,
        "http_method": request.method,
        "request_path": path if isinstance(path, str) and path else "unmatched",
        "status_code": status_code,
        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
        "caller_identified": _caller_identified(request),
        "workflow": getattr(request.state, "workflow", None),
    }


class HttpLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = _request_id(request)
        started = time.perf_counter()
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception:  # noqa: BLE001 - logged with stack trace, then re-raised
            logger.exception(
                "Unhandled exception while processing request",
                extra=_log_fields(
                    request=request, request_id=request_id, status_code=500, started=started
                ),
            )
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "Request completed",
            extra=_log_fields(
                request=request,
                request_id=request_id,
                status_code=response.status_code,
                started=started,
            ),
        )
        return response
