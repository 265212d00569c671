from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from legal_advisor.core.clock import ns_to_datetime
from legal_advisor.profiles.models import UserProfile


class UserProfileOut(BaseModel):
    name: str | None = Field(default=None, description="Display name, if the caller set one.")
    document_count: int = Field(ge=0, description="Documents generated by this caller.")
    last_active: int = Field(description="Last activity, nanoseconds since the Unix epoch.")
    last_active_at: datetime = Field(description="Last activity as an ISO-8601 UTC timestamp.")

    @classmethod
    def from_profile(cls, profile: UserProfile) -> UserProfileOut:
        return cls(
            name=profile.name,
            document_count=profile.document_count,
            last_active=profile.last_active_ns,
            last_active_at=ns_to_datetime(profile.last_active_ns),
        )


class UpdateNameIn(BaseModel):
    name: str | None = Field(
        default=None,
        max_length=255,
        description="New display name. Surrounding whitespace is removed; blank is rejected.",
        examples=["Amina Njoroge"],
    )


class UpdateNameOut(BaseModel):
    success: bool = True
