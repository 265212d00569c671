from __future__ import annotations

from typing import Any

from fastapi import Request

from legal_advisor.core.clock import Clock
from legal_advisor.documents.store import DocumentStore
from legal_advisor.profiles.store import ProfileStore


def init_state(*, app: Any, clock: Clock | None = None) -> None:
    """Attach the in-memory stores to the app. Contents live as long as the process."""

    clock = clock or Clock()
    app.state.clock = clock
    app.state.profile_store = ProfileStore(clock=clock)
    app.state.document_store = DocumentStore()


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


def get_profile_store(request: Request) -> ProfileStore:
    return request.app.state.profile_store


def get_document_store(request: Request) -> DocumentStore:
    return request.app.state.document_store
