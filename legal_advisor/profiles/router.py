from __future__ import annotations

from fastapi import APIRouter, Depends

from legal_advisor.auth.identity import CallerIdentity, get_authenticated_caller
from legal_advisor.core.state import get_profile_store
from legal_advisor.domain.exceptions import MissingField
from legal_advisor.profiles.schemas import UpdateNameIn, UpdateNameOut, UserProfileOut
from legal_advisor.profiles.store import ProfileStore

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "",
    response_model=UserProfileOut,
    summary="Get the caller's profile",
    description="Returns 404 until the caller has generated something or set a name.",
)
async def get_user_profile(
    caller: CallerIdentity = Depends(get_authenticated_caller),
    profiles: ProfileStore = Depends(get_profile_store),
) -> UserProfileOut:
    return UserProfileOut.from_profile(profiles.get(caller))


@router.put("/name", response_model=UpdateNameOut, summary="Set the caller's display name")
async def update_user_name(
    payload: UpdateNameIn,
    caller: CallerIdentity = Depends(get_authenticated_caller),
    profiles: ProfileStore = Depends(get_profile_store),
) -> UpdateNameOut:
    name = (payload.name or "").strip()
    if not name:
        raise MissingField("Name is required")
    profiles.set_name(caller, name)
    return UpdateNameOut(success=True)
