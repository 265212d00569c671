from __future__ import annotations

from legal_advisor.auth.identity import CallerIdentity
from legal_advisor.documents.keys import is_owned_by
from legal_advisor.domain.exceptions import NotFound


class DocumentStore:
    """
    Process-wide key -> document text mapping.

    Append-only from the API's point of view: there is no update or delete. The
    owner of a document is whoever's identity is encoded in its key.
    """

    def __init__(self) -> None:
        self._documents: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, key: str) -> bool:
        return key in self._documents

    def put(self, key: str, text: str) -> None:
        self._documents[key] = text

    def get(self, key: str) -> str:
        try:
            return self._documents[key]
        except KeyError:
            raise NotFound("Document not found") from None

    def list_by_owner(self, caller: CallerIdentity) -> list[tuple[str, str]]:
        return [(k, v) for k, v in self._documents.items() if is_owned_by(k, caller)]
