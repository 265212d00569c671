from __future__ import annotations

from legal_advisor.auth.identity import CallerIdentity

KEY_PREFIX = "doc"


def owner_prefix(caller: CallerIdentity) -> str:
    return f"{KEY_PREFIX}_{caller.text}_"


def make_document_key(*, caller: CallerIdentity, created_ns: int) -> str:
    """Key format: doc_<caller identity>_<creation time in ns>."""

    return f"{owner_prefix(caller)}{created_ns}"


def is_owned_by(key: str, caller: CallerIdentity) -> bool:
    prefix = owner_prefix(caller)
    return key.startswith(prefix) and key[len(prefix) :].isdigit()


def created_ns_from_key(key: str) -> int | None:
    """Return the timestamp encoded in a well-formed key, else None."""

    _, sep, tail = key.rpartition("_")
    if not sep or not tail.isdigit():
        return None
    return int(tail)
