from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from legal_advisor.domain.exceptions import (
    LegalAdvisorError,
    MissingField,
    NotFound,
    ProxyCallError,
    Unauthorized,
)

logger = logging.getLogger("legal_advisor.errors")

_STATUS_BY_ERROR: tuple[tuple[type[LegalAdvisorError], int], ...] = (
    (Unauthorized, status.HTTP_401_UNAUTHORIZED),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (MissingField, status.HTTP_400_BAD_REQUEST),
    (ProxyCallError, status.HTTP_502_BAD_GATEWAY),
)


def status_for(exc: LegalAdvisorError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers."""

    @app.exception_handler(LegalAdvisorError)
    async def handle_legal_advisor_error(
        request: Request,
        exc: LegalAdvisorError,
    ) -> JSONResponse:
        # Do not log request bodies, query values or the caller identity.
        status_code = status_for(exc)
        logger.info(
            "Request failed",
            extra={
                "request_id": getattr(request.state, "request_id", None),
                "http_method": request.method,
                "request_path": getattr(request.scope.get("route"), "path", "unmatched"),
                "status_code": status_code,
                "error": exc.code,
            },
        )
        headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
        return JSONResponse(
            status_code=status_code,
            content={"detail": exc.message, "error": exc.code},
            headers=headers,
        )
