"""Caller identity handling.

The authentication gateway in front of this service verifies the caller and forwards
an opaque identity in a header. This module only reads that value and refuses the
anonymous sentinel; it does not verify credentials itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, Request

from legal_advisor.core.settings import get_settings
from legal_advisor.domain.exceptions import Unauthorized

# Opaque to this service; only bounded for header and log safety.
MAX_IDENTITY_CHARS = 256

UNAUTHORIZED_MESSAGE = "Unauthorized: authenticated identity required"


@dataclass(frozen=True)
class CallerIdentity:
    text: str
    is_anonymous: bool = False

    def __str__(self) -> str:
        return self.text


def anonymous() -> CallerIdentity:
    return CallerIdentity(text=get_settings().anonymous_identity, is_anonymous=True)


def require_authenticated(caller: CallerIdentity) -> CallerIdentity:
    """Identity guard: reject the anonymous caller, pass everyone else through unchanged."""

    if caller.is_anonymous or caller.text == get_settings().anonymous_identity:
        raise Unauthorized(UNAUTHORIZED_MESSAGE)
    return caller


def get_caller_identity(request: Request) -> CallerIdentity:
    settings = get_settings()
    raw = request.headers.get(settings.caller_identity_header)
    if raw is None or not raw.strip():
        return anonymous()

    text = raw.strip()
    if len(text) > MAX_IDENTITY_CHARS or not text.isprintable():
        raise Unauthorized("Unauthorized: malformed caller identity")
    return CallerIdentity(text=text, is_anonymous=text == settings.anonymous_identity)


def get_authenticated_caller(
    caller: CallerIdentity = Depends(get_caller_identity),
) -> CallerIdentity:
    return require_authenticated(caller)
