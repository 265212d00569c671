from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from legal_advisor.auth.identity import CallerIdentity, get_authenticated_caller
from legal_advisor.core.clock import Clock
from legal_advisor.core.proxy.deps import get_proxy_client
from legal_advisor.core.state import get_clock, get_document_store, get_profile_store
from legal_advisor.documents.store import DocumentStore
from legal_advisor.domain.exceptions import LegalAdvisorError
from legal_advisor.legal.schemas import LegalRequestIn, LegalResponseOut
from legal_advisor.legal.service import LegalAssistantService
from legal_advisor.profiles.store import ProfileStore

router = APIRouter(prefix="/legal", tags=["legal"])
logger = logging.getLogger("legal_advisor.legal")


def get_legal_service(
    profiles: ProfileStore = Depends(get_profile_store),
    documents: DocumentStore = Depends(get_document_store),
    clock: Clock = Depends(get_clock),
    proxy_client=Depends(get_proxy_client),
) -> LegalAssistantService:
    return LegalAssistantService(
        profiles=profiles, documents=documents, proxy_client=proxy_client, clock=clock
    )


def _log_outcome(*, request: Request, workflow: str, error: LegalAdvisorError | None) -> None:
    # Never log prompts, generated text or the caller identity.
    logger.info(
        "Legal workflow failed" if error else "Legal workflow completed",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "workflow": workflow,
            "success": error is None,
            "error": error.code if error else None,
        },
    )


@router.post(
    "/advice",
    response_model=LegalResponseOut,
    summary="Generate legal advice",
    description=(
        "Sends the question to the AI proxy and returns the answer. When `document_type` is "
        "given, the answer is also returned formatted as a document, but it is not stored."
    ),
)
async def generate_legal_advice(
    payload: LegalRequestIn,
    request: Request,
    caller: CallerIdentity = Depends(get_authenticated_caller),
    service: LegalAssistantService = Depends(get_legal_service),
) -> LegalResponseOut:
    request.state.workflow = "advice"
    try:
        out = await service.generate_advice(caller=caller, request=payload)
    except LegalAdvisorError as exc:
        _log_outcome(request=request, workflow="advice", error=exc)
        raise
    _log_outcome(request=request, workflow="advice", error=None)
    return out


@router.post(
    "/documents",
    response_model=LegalResponseOut,
    summary="Generate and store a legal document",
    description=(
        "Generates a document of `document_type`, stores it and returns it. "
        "`request_id` is the key to fetch it again from `/documents/{key}`."
    ),
)
async def generate_legal_document(
    payload: LegalRequestIn,
    request: Request,
    caller: CallerIdentity = Depends(get_authenticated_caller),
    service: LegalAssistantService = Depends(get_legal_service),
) -> LegalResponseOut:
    request.state.workflow = "document"
    try:
        out = await service.generate_document(caller=caller, request=payload)
    except LegalAdvisorError as exc:
        _log_outcome(request=request, workflow="document", error=exc)
        raise
    _log_outcome(request=request, workflow="document", error=None)
    return out
