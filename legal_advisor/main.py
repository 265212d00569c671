from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from legal_advisor.api.exception_handlers import register_exception_handlers
from legal_advisor.api.schemas import HealthOut
from legal_advisor.core.logging import setup_logging
from legal_advisor.core.metrics import PrometheusMetricsMiddleware, metrics_router
from legal_advisor.core.middleware.http_logging import HttpLoggingMiddleware
from legal_advisor.core.state import init_state
from legal_advisor.documents.router import router as documents_router
from legal_advisor.legal.router import router as legal_router
from legal_advisor.profiles.router import router as profiles_router

setup_logging()


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Fresh, empty stores per application instance; nothing survives a restart.
        init_state(app=app)
        yield

    app = FastAPI(
        title="Legal Advisor API",
        description=(
            "Authenticated legal-assistance API backed by an AI completion proxy.\n\n"
            "Design principles:\n"
            "- Every operation requires a non-anonymous caller identity, supplied by the "
            "authentication gateway.\n"
            "- Generated documents are immutable and addressed by a key that encodes the "
            "owner and creation time.\n"
            "- Logs and metrics never include prompts, generated text or caller identities."
        ),
        lifespan=lifespan,
        docs_url="/swagger",
        openapi_tags=[
            {
                "name": "health",
                "description": "Basic uptime check for load balancers and monitoring.",
            },
            {
                "name": "legal",
                "description": "Generate legal advice and legal documents through the AI proxy.",
            },
            {
                "name": "documents",
                "description": "Read stored documents. There is no update or delete.",
            },
            {
                "name": "profile",
                "description": "Per-caller usage profile (name, document count, last activity).",
            },
            {
                "name": "metrics",
                "description": "Prometheus-compatible metrics endpoint.",
            },
        ],
    )

    app.add_middleware(PrometheusMetricsMiddleware)
    app.add_middleware(HttpLoggingMiddleware)

    register_exception_handlers(app)

    @app.get(
        "/health",
        response_model=HealthOut,
        tags=["health"],
        summary="Health check",
        description=(
            "Lightweight endpoint to verify the API process is running.\n\n"
            "Does not contact the AI proxy."
        ),
    )
    async def health() -> HealthOut:
        return HealthOut(status="ok")

    app.include_router(metrics_router)
    app.include_router(legal_router)
    app.include_router(documents_router)
    app.include_router(profiles_router)
    return app


app = create_app()
