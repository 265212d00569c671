from __future__ import annotations

import pytest

from tests._helpers import FakeProxyClient


@pytest.fixture(autouse=True)
def _proxy_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROXY_URL", "http://proxy.test/openai")
    monkeypatch.setenv("PROXY_AUTH_TOKEN", "test-token")
    # Settings are cached via @lru_cache; clear so each test sees its own environment.
    from legal_advisor.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_proxy() -> FakeProxyClient:
    return FakeProxyClient(result="Use form X")


@pytest.fixture
def client(fake_proxy: FakeProxyClient):
    from fastapi.testclient import TestClient

    from legal_advisor.core.proxy.deps import get_proxy_client
    from legal_advisor.main import create_app

    app = create_app()
    app.dependency_overrides[get_proxy_client] = lambda: fake_proxy
    with TestClient(app) as c:
        yield c
