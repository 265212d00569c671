from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from legal_advisor.auth.identity import CallerIdentity, require_authenticated
from legal_advisor.domain.exceptions import Unauthorized
from tests._helpers import ALICE, ANONYMOUS, FakeProxyClient, caller_headers

ROUTES = [
    ("POST", "/legal/advice", {"prompt": "p"}),
    ("POST", "/legal/documents", {"prompt": "p", "document_type": "will"}),
    ("GET", "/documents", None),
    ("GET", f"/documents/doc_{ALICE}_1", None),
    ("GET", f"/documents/doc_{ALICE}_1/download", None),
    ("GET", "/profile", None),
    ("PUT", "/profile/name", {"name": "Someone"}),
]


def test_require_authenticated_passes_identity_through() -> None:
    caller = CallerIdentity(text=ALICE)
    assert require_authenticated(caller) is caller


def test_require_authenticated_rejects_anonymous_sentinel() -> None:
    with pytest.raises(Unauthorized):
        require_authenticated(CallerIdentity(text=ANONYMOUS))


@pytest.mark.parametrize("method,path,payload", ROUTES)
@pytest.mark.parametrize(
    "headers",
    [{}, caller_headers(ANONYMOUS), caller_headers("   ")],
    ids=["missing", "sentinel", "blank"],
)
def test_anonymous_caller_is_rejected_everywhere(
    client: TestClient,
    fake_proxy: FakeProxyClient,
    method: str,
    path: str,
    payload: dict | None,
    headers: dict[str, str],
) -> None:
    res = client.request(method, path, json=payload, headers=headers)
    assert res.status_code == 401
    assert res.json()["error"] == "unauthorized"
    assert fake_proxy.requests == []
    assert len(client.app.state.profile_store) == 0


@pytest.mark.parametrize("identity", ["user_42", "user@example.com", "has spaces", "x" * 256])
def test_opaque_identities_are_accepted_unchanged(client: TestClient, identity: str) -> None:
    res = client.put("/profile/name", json={"name": "Someone"}, headers=caller_headers(identity))
    assert res.status_code == 200, res.text

    caller = CallerIdentity(text=identity)
    assert caller in client.app.state.profile_store
    assert client.app.state.profile_store.get(caller).name == "Someone"


def test_overlong_identity_is_rejected(client: TestClient) -> None:
    res = client.get("/profile", headers=caller_headers("x" * 257))
    assert res.status_code == 401
    assert res.json()["detail"] == "Unauthorized: malformed caller identity"


def test_anonymous_sentinel_is_configurable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANONYMOUS_IDENTITY", "nobody")
    from legal_advisor.core.settings import get_settings
    from legal_advisor.main import create_app

    get_settings.cache_clear()
    with TestClient(create_app()) as client:
        assert client.get("/profile", headers=caller_headers("nobody")).status_code == 401
        assert client.get("/profile", headers=caller_headers(ANONYMOUS)).status_code == 404
