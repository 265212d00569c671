from __future__ import annotations

import pytest

from legal_advisor.auth.identity import CallerIdentity
from legal_advisor.documents.keys import created_ns_from_key, is_owned_by, make_document_key
from legal_advisor.documents.store import DocumentStore
from legal_advisor.domain.exceptions import NotFound

ALICE = CallerIdentity(text="alice")
ALICE_2 = CallerIdentity(text="alice-2")
BOB = CallerIdentity(text="bob")


def test_put_then_get_returns_identical_text() -> None:
    store = DocumentStore()
    text = "Clause 1.\n\tUnicode: é ü 法律 § end\r\n"
    store.put("doc_alice_1", text)
    assert store.get("doc_alice_1") == text
    assert store.get("doc_alice_1").encode("utf-8") == text.encode("utf-8")


def test_get_missing_raises_not_found() -> None:
    with pytest.raises(NotFound, match="Document not found"):
        DocumentStore().get("doc_nobody_1")


def test_put_overwrites_colliding_key() -> None:
    store = DocumentStore()
    store.put("doc_alice_1", "first")
    store.put("doc_alice_1", "second")
    assert store.get("doc_alice_1") == "second"
    assert len(store) == 1


def test_list_by_owner_returns_only_that_callers_documents() -> None:
    store = DocumentStore()
    mine = {
        make_document_key(caller=ALICE, created_ns=1): "a1",
        make_document_key(caller=ALICE, created_ns=2): "a2",
    }
    for key, text in mine.items():
        store.put(key, text)
    # An identity that extends Alice's must not leak into her listing, nor hers into its.
    store.put(make_document_key(caller=ALICE_2, created_ns=3), "a-2")
    store.put(make_document_key(caller=BOB, created_ns=4), "b")
    store.put("doc_alice_notatimestamp", "garbage")

    assert dict(store.list_by_owner(ALICE)) == mine
    assert dict(store.list_by_owner(ALICE_2)) == {"doc_alice-2_3": "a-2"}
    assert store.list_by_owner(CallerIdentity(text="carol")) == []


def test_key_helpers() -> None:
    key = make_document_key(caller=BOB, created_ns=1_700_000_000_123_456_789)
    assert key == "doc_bob_1700000000123456789"
    assert created_ns_from_key(key) == 1_700_000_000_123_456_789
    assert created_ns_from_key("free-form") is None
    assert is_owned_by(key, BOB)
    assert not is_owned_by(key, ALICE)


def test_list_by_owner_with_underscore_identities() -> None:
    store = DocumentStore()
    user = CallerIdentity(text="a")
    user_1 = CallerIdentity(text="a_1")
    store.put(make_document_key(caller=user, created_ns=5), "mine")
    store.put(make_document_key(caller=user_1, created_ns=6), "theirs")

    assert store.list_by_owner(user) == [("doc_a_5", "mine")]
    assert store.list_by_owner(user_1) == [("doc_a_1_6", "theirs")]
