from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class LegalRequestIn(BaseModel):
    prompt: str = Field(
        min_length=1,
        description="The legal question or the requirements for the document.",
        examples=["I need a one-year residential lease for a flat in Nairobi."],
    )
    document_type: str | None = Field(
        default=None,
        max_length=100,
        description="Kind of document, e.g. `contract`, `will`, `lease`. Required for documents.",
        examples=["lease"],
    )
    context: str | None = Field(
        default=None,
        description="Optional background the model should take into account.",
    )
    is_confidential: bool | None = Field(
        default=None,
        description="If true, the model is instructed to leave out identifying information.",
    )

    @field_validator("document_type", "context")
    @classmethod
    def _blank_is_absent(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @property
    def confidential(self) -> bool:
        return bool(self.is_confidential)


class LegalResponseOut(BaseModel):
    response: str = Field(description="Raw model answer, or a confirmation for documents.")
    document: str | None = Field(default=None, description="Formatted document, when produced.")
    status: Literal["success"] = "success"
    request_id: str | None = Field(
        default=None,
        description="Timestamp (ns) for advice; the stored document key for documents.",
    )
