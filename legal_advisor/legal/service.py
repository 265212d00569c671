from __future__ import annotations

from typing import Protocol

from legal_advisor.auth.identity import CallerIdentity, require_authenticated
from legal_advisor.core.clock import Clock
from legal_advisor.core.proxy.schemas import ProxyRequest
from legal_advisor.documents.formatter import format_document
from legal_advisor.documents.keys import make_document_key
from legal_advisor.documents.store import DocumentStore
from legal_advisor.domain.exceptions import MissingField, ProxyCallError, TransportError
from legal_advisor.legal.prompt import build_advice_prompt, build_document_prompt
from legal_advisor.legal.schemas import LegalRequestIn, LegalResponseOut
from legal_advisor.profiles.store import ProfileStore

ADVICE_MAX_TOKENS = 1000
ADVICE_TEMPERATURE = 0.7
DOCUMENT_MAX_TOKENS = 1500
DOCUMENT_TEMPERATURE = 0.5

DOCUMENT_GENERATED_MESSAGE = "Document generated successfully"


class CompletionClient(Protocol):
    async def complete(self, request: ProxyRequest) -> str: ...


class LegalAssistantService:
    """
    The two generation workflows.

    Ordering: guard, profile touch, prompt, proxy call, then (documents only) store
    write and count increment. Nothing after the touch is written unless the proxy
    call succeeded, and no store state is held across the await.
    """

    def __init__(
        self,
        *,
        profiles: ProfileStore,
        documents: DocumentStore,
        proxy_client: CompletionClient | None,
        clock: Clock,
    ):
        self._profiles = profiles
        self._documents = documents
        self._proxy = proxy_client
        self._clock = clock

    async def _call_proxy(self, request: ProxyRequest) -> str:
        if self._proxy is None:
            raise TransportError("Proxy error: proxy is not configured")
        try:
            return await self._proxy.complete(request)
        except ProxyCallError as exc:
            # Keep the specific failure type; prefix the message for the caller.
            raise type(exc)(f"Proxy error: {exc.message}") from exc

    async def generate_advice(
        self, *, caller: CallerIdentity, request: LegalRequestIn
    ) -> LegalResponseOut:
        require_authenticated(caller)
        self._profiles.touch(caller)

        prompt = build_advice_prompt(
            prompt=request.prompt,
            document_type=request.document_type,
            context=request.context,
            confidential=request.confidential,
        )
        result = await self._call_proxy(
            ProxyRequest(
                prompt=prompt,
                max_tokens=ADVICE_MAX_TOKENS,
                temperature=ADVICE_TEMPERATURE,
                is_legal=True,
            )
        )

        now_ns = self._clock.now_ns()
        document = None
        if request.document_type is not None:
            # Formatted for the caller only; advice is never stored.
            document = format_document(
                content=result, document_type=request.document_type, timestamp_ns=now_ns
            )
        return LegalResponseOut(response=result, document=document, request_id=str(now_ns))

    async def generate_document(
        self, *, caller: CallerIdentity, request: LegalRequestIn
    ) -> LegalResponseOut:
        require_authenticated(caller)
        self._profiles.touch(caller)

        document_type = request.document_type
        if document_type is None:
            raise MissingField("Document type is required")

        prompt = build_document_prompt(
            prompt=request.prompt,
            document_type=document_type,
            context=request.context,
            confidential=request.confidential,
        )
        result = await self._call_proxy(
            ProxyRequest(
                prompt=prompt,
                max_tokens=DOCUMENT_MAX_TOKENS,
                temperature=DOCUMENT_TEMPERATURE,
                is_legal=True,
            )
        )

        now_ns = self._clock.now_ns()
        document = format_document(content=result, document_type=document_type, timestamp_ns=now_ns)
        key = make_document_key(caller=caller, created_ns=now_ns)
        self._documents.put(key, document)
        self._profiles.increment_document_count(caller)

        return LegalResponseOut(
            response=DOCUMENT_GENERATED_MESSAGE, document=document, request_id=key
        )
