from __future__ import annotations

from pydantic import BaseModel, Field


class ProxyRequest(BaseModel):
    """Body POSTed to the proxy."""

    prompt: str
    max_tokens: int | None = Field(default=None, ge=1)
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    is_legal: bool = True


class ProxyResponse(BaseModel):
    """
    Body returned by the proxy.

    `success=True` requires `result`; `success=False` is expected to carry `error`.
    The consistency check happens in the client so it can map to ProtocolError.
    """

    success: bool
    result: str | None = None
    error: str | None = None
