from __future__ import annotations

from legal_advisor.core.proxy.client import ProxyClient, ProxyConfig
from legal_advisor.core.settings import get_settings


def get_proxy_client() -> ProxyClient | None:
    """
    Dependency provider for ProxyClient.

    Returns None when the proxy URL or token is not configured; workflows turn that
    into a TransportError instead of failing during dependency resolution.
    """

    settings = get_settings()
    if not settings.proxy_configured:
        return None

    config = ProxyConfig(
        url=str(settings.proxy_url),
        auth_token=str(settings.proxy_auth_token),
        timeout_seconds=float(settings.proxy_timeout_seconds),
        max_response_bytes=int(settings.proxy_max_response_bytes),
    )
    return ProxyClient(config=config)
