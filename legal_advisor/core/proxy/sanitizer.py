from __future__ import annotations

import httpx

# Replaces whatever the proxy sent: no cookies, cache directives or tracking headers
# survive into anything sitting between this service and the network.
SANITIZED_HEADERS: tuple[tuple[str, str], ...] = (
    ("content-security-policy", "default-src 'self'"),
    ("referrer-policy", "strict-origin"),
)


def sanitize_response(response: httpx.Response) -> httpx.Response:
    """Return a response with the same status and body but a fixed minimal header set."""

    return httpx.Response(
        status_code=response.status_code,
        headers=list(SANITIZED_HEADERS),
        stream=response.stream,
        extensions=response.extensions,
    )


class SanitizingTransport(httpx.AsyncBaseTransport):
    """
    Transport wrapper applying `sanitize_response` to every inbound response.

    Sits directly on top of the network transport, so client-level hooks and any
    cache layered on the client only ever observe sanitized headers.

    An injected `inner` transport belongs to the caller and is left open on `aclose`;
    only a transport created here is closed.
    """

    def __init__(self, inner: httpx.AsyncBaseTransport | None = None):
        self._owns_inner = inner is None
        self._inner = inner if inner is not None else httpx.AsyncHTTPTransport()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        response = await self._inner.handle_async_request(request)
        return sanitize_response(response)

    async def aclose(self) -> None:
        if self._owns_inner:
            await self._inner.aclose()
