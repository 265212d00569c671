"""Unit tests for the HTTP logging middleware.

Log fields are asserted on `legal_advisor.http` record attributes, not on captured text:
- X-Request-ID is generated, or propagated when safe
- path is the route template, never the raw path or the query string
- the caller identity is reduced to a presence flag
- the workflow label set by a route reaches the access log
- unhandled exceptions produce one ERROR record with exc_info
"""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from legal_advisor.core.middleware.http_logging import HttpLoggingMiddleware
from tests._helpers import ALICE, caller_headers

LOGGER = "legal_advisor.http"


def _make_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(HttpLoggingMiddleware)

    @app.get("/documents/{key}")
    async def read(key: str) -> dict[str, str]:
        return {"key": key}

    @app.post("/legal/advice")
    async def advise(request: Request) -> dict[str, str]:
        request.state.workflow = "advice"
        return {"status": "success"}

    @app.post("/explode")
    async def explode() -> None:
        raise RuntimeError("explode")

    return app


def _records(caplog: pytest.LogCaptureFixture, level: int) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.name == LOGGER and r.levelno == level]


def test_logs_route_template_not_document_key(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=LOGGER)

    with TestClient(_make_app()) as client:
        res = client.get(
            f"/documents/doc_{ALICE}_1700000000000000000?prompt=secret",
            headers=caller_headers(ALICE),
        )

    assert res.status_code == 200
    assert res.headers["x-request-id"]

    infos = _records(caplog, logging.INFO)
    assert len(infos) == 1
    record = infos[0]
    assert record.__dict__["request_path"] == "/documents/{key}"
    assert record.__dict__["http_method"] == "GET"
    assert record.__dict__["status_code"] == 200
    assert record.__dict__["request_id"] == res.headers["x-request-id"]
    assert record.__dict__["duration_ms"] >= 0
    assert record.__dict__["workflow"] is None
    for value in [record.getMessage(), *map(str, record.__dict__.values())]:
        assert ALICE not in value
        assert "secret" not in value


def test_caller_identity_is_logged_as_presence_only(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=LOGGER)

    with TestClient(_make_app()) as client:
        client.get("/documents/x", headers=caller_headers(ALICE))
        client.get("/documents/x")
        client.get("/documents/x", headers=caller_headers("   "))

    flags = [r.__dict__["caller_identified"] for r in _records(caplog, logging.INFO)]
    assert flags == [True, False, False]


def test_workflow_set_by_route_reaches_access_log(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=LOGGER)

    with TestClient(_make_app()) as client:
        client.post("/legal/advice", headers=caller_headers(ALICE))

    (record,) = _records(caplog, logging.INFO)
    assert record.__dict__["workflow"] == "advice"
    assert record.__dict__["request_path"] == "/legal/advice"


def test_full_app_document_request_is_labelled(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger=LOGGER)

    res = client.post(
        "/legal/documents",
        json={"prompt": "p", "document_type": "will"},
        headers=caller_headers(ALICE),
    )
    assert res.status_code == 200, res.text

    (record,) = _records(caplog, logging.INFO)
    assert record.__dict__["workflow"] == "document"
    assert record.__dict__["caller_identified"] is True
    assert record.__dict__["request_id"] == res.headers["x-request-id"]


def test_propagates_safe_request_id_and_replaces_unsafe(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=LOGGER)

    with TestClient(_make_app()) as client:
        ok = client.get("/documents/x", headers={"X-Request-ID": "req_abc-123"})
        bad = client.get("/documents/x", headers={"X-Request-ID": "bad id with spaces"})

    assert ok.headers["x-request-id"] == "req_abc-123"
    assert bad.headers["x-request-id"] != "bad id with spaces"
    assert [r.__dict__["request_id"] for r in _records(caplog, logging.INFO)] == [
        "req_abc-123",
        bad.headers["x-request-id"],
    ]


def test_unhandled_exception_logs_error_with_stack(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=LOGGER)

    with TestClient(_make_app(), raise_server_exceptions=False) as client:
        res = client.post("/explode", headers={"X-Request-ID": "req_err_001"})

    assert res.status_code == 500
    errors = _records(caplog, logging.ERROR)
    assert len(errors) == 1
    assert errors[0].__dict__["request_id"] == "req_err_001"
    assert errors[0].__dict__["request_path"] == "/explode"
    assert errors[0].__dict__["status_code"] == 500
    assert errors[0].exc_info
