from __future__ import annotations


class LegalAdvisorError(Exception):
    """Base class for errors surfaced verbatim to the caller."""

    code = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthorized(LegalAdvisorError):
    """Raised when the caller is anonymous or the identity is malformed."""

    code = "unauthorized"


class NotFound(LegalAdvisorError):
    """Raised when a profile or document does not exist."""

    code = "not_found"


class MissingField(LegalAdvisorError):
    """Raised when a required input is absent."""

    code = "missing_field"


class ProxyCallError(LegalAdvisorError):
    """Base error for a failed round-trip to the AI proxy (maps to 502)."""

    code = "proxy_call_failed"


class TransportError(ProxyCallError):
    """Network failure, timeout, oversized body or non-200 status."""

    code = "transport_error"


class EncodingError(ProxyCallError):
    """Proxy body was not valid UTF-8."""

    code = "encoding_error"


class ProtocolError(ProxyCallError):
    """Proxy body was not the expected JSON or contradicted itself."""

    code = "protocol_error"


class ProxyError(ProxyCallError):
    """The proxy answered and explicitly reported a failure."""

    code = "proxy_error"
