from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from legal_advisor.auth.identity import CallerIdentity, get_authenticated_caller
from legal_advisor.core.clock import ns_to_datetime
from legal_advisor.core.state import get_document_store
from legal_advisor.documents.keys import created_ns_from_key
from legal_advisor.documents.schemas import DocumentListItemOut, DocumentListOut, DocumentOut
from legal_advisor.documents.store import DocumentStore

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("", response_model=DocumentListOut, summary="List the caller's documents")
async def get_user_documents(
    caller: CallerIdentity = Depends(get_authenticated_caller),
    documents: DocumentStore = Depends(get_document_store),
) -> DocumentListOut:
    items = [DocumentListItemOut.from_entry(k, v) for k, v in documents.list_by_owner(caller)]
    return DocumentListOut(items=items)


@router.get(
    "/{key}",
    response_model=DocumentOut,
    summary="Get a document by key",
    description="Any authenticated caller holding the key can read the document.",
)
async def get_document(
    key: str,
    caller: CallerIdentity = Depends(get_authenticated_caller),
    documents: DocumentStore = Depends(get_document_store),
) -> DocumentOut:
    return DocumentOut(key=key, text=documents.get(key))


@router.get(
    "/{key}/download",
    response_class=PlainTextResponse,
    summary="Download a document as a text file",
)
async def download_document(
    key: str,
    caller: CallerIdentity = Depends(get_authenticated_caller),
    documents: DocumentStore = Depends(get_document_store),
) -> PlainTextResponse:
    text = documents.get(key)
    created_ns = created_ns_from_key(key)
    suffix = ns_to_datetime(created_ns).date().isoformat() if created_ns is not None else "document"
    return PlainTextResponse(
        content=text,
        headers={"Content-Disposition": f'attachment; filename="legal_document_{suffix}.txt"'},
    )
