from __future__ import annotations

from pydantic import BaseModel, Field

from legal_advisor.documents.keys import created_ns_from_key

PREVIEW_CHARS = 100


def _preview(text: str) -> str:
    if len(text) <= PREVIEW_CHARS:
        return text
    return text[:PREVIEW_CHARS] + "..."


class DocumentOut(BaseModel):
    key: str = Field(description="Opaque document handle.", examples=["doc_abc-123_1718000000000000000"])
    text: str = Field(description="Full document text.")


class DocumentListItemOut(BaseModel):
    key: str
    text: str
    created_at_ns: int | None = Field(
        default=None, description="Creation time decoded from the key (ns since epoch)."
    )
    preview: str = Field(description=f"First {PREVIEW_CHARS} characters of the document.")

    @classmethod
    def from_entry(cls, key: str, text: str) -> DocumentListItemOut:
        return cls(key=key, text=text, created_at_ns=created_ns_from_key(key), preview=_preview(text))


class DocumentListOut(BaseModel):
    items: list[DocumentListItemOut] = Field(description="Documents owned by the caller.")
