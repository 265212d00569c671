from __future__ import annotations

import asyncio
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from legal_advisor.core.metrics import proxy_requests_total
from legal_advisor.core.proxy.sanitizer import SanitizingTransport
from legal_advisor.core.proxy.schemas import ProxyRequest, ProxyResponse
from legal_advisor.domain.exceptions import (
    EncodingError,
    ProtocolError,
    ProxyCallError,
    ProxyError,
    TransportError,
)

UNKNOWN_PROXY_ERROR = "Unknown proxy error"


@dataclass(frozen=True)
class ProxyConfig:
    url: str
    auth_token: str
    timeout_seconds: float
    max_response_bytes: int = 8192


class ProxyClient:
    """
    Client for the AI proxy.

    Design notes:
    - Exactly one POST per `complete` call; failures surface immediately.
    - The whole round-trip (connect, send, read) shares one time budget.
    - No logging in this module; outcomes are only counted in metrics.
    """

    def __init__(
        self,
        *,
        config: ProxyConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        # Network transport beneath the sanitizer; owned by the caller and never closed here.
        self._transport = transport

    async def complete(self, request: ProxyRequest) -> str:
        """Send `request` to the proxy and return the completion text."""

        try:
            result = await self._complete(request)
        except ProxyCallError as exc:
            proxy_requests_total.labels(outcome=exc.code).inc()
            raise
        proxy_requests_total.labels(outcome="success").inc()
        return result

    async def _complete(self, request: ProxyRequest) -> str:
        body = request.model_dump_json(exclude_none=True)

        try:
            async with asyncio.timeout(self._config.timeout_seconds):
                raw = await self._post(body)
        except TimeoutError as exc:
            raise TransportError("Proxy request exceeded its time budget") from exc

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingError("Failed to parse response body as UTF-8") from exc

        try:
            parsed = ProxyResponse.model_validate_json(text)
        except ValidationError as exc:
            raise ProtocolError(
                f"Failed to parse JSON response ({exc.error_count()} validation error(s))"
            ) from exc

        if parsed.success:
            if not parsed.result:
                raise ProtocolError("No result in successful response")
            return parsed.result

        # Only an absent message gets the generic text; an empty one is passed through.
        raise ProxyError(parsed.error if parsed.error is not None else UNKNOWN_PROXY_ERROR)

    async def _post(self, body: str) -> bytes:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._config.auth_token}",
            # Content-Encoding is stripped by the sanitizer, so ask for an unencoded body.
            "Accept-Encoding": "identity",
        }
        transport = SanitizingTransport(self._transport)

        try:
            async with httpx.AsyncClient(
                transport=transport, timeout=self._config.timeout_seconds
            ) as client:
                async with client.stream(
                    "POST", self._config.url, headers=headers, content=body
                ) as resp:
                    if resp.status_code != 200:
                        raise TransportError(f"HTTP error: status {resp.status_code}")
                    return await self._read_capped(resp)
        except httpx.TimeoutException as exc:
            raise TransportError("Proxy request timed out") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"HTTP request failed: {type(exc).__name__}") from exc

    async def _read_capped(self, resp: httpx.Response) -> bytes:
        limit = self._config.max_response_bytes
        buf = bytearray()
        async for chunk in resp.aiter_bytes():
            buf.extend(chunk)
            if len(buf) > limit:
                raise TransportError(f"Proxy response exceeded {limit} bytes")
        return bytes(buf)
