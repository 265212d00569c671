from __future__ import annotations

from dataclasses import replace

from legal_advisor.auth.identity import CallerIdentity
from legal_advisor.core.clock import Clock
from legal_advisor.domain.exceptions import NotFound
from legal_advisor.profiles.models import UserProfile


class ProfileStore:
    """
    Process-wide caller -> profile mapping.

    All methods are synchronous and run on the event loop, so each one observes a
    consistent state and completes without interleaving. Callers must not hold a
    reference across an await expecting it to stay current; `get` returns a copy.
    """

    def __init__(self, *, clock: Clock):
        self._clock = clock
        self._profiles: dict[str, UserProfile] = {}

    def __contains__(self, caller: CallerIdentity) -> bool:
        return caller.text in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)

    def _get_or_create(self, caller: CallerIdentity) -> UserProfile:
        profile = self._profiles.get(caller.text)
        if profile is None:
            profile = UserProfile(name=None, document_count=0, last_active_ns=self._clock.now_ns())
            self._profiles[caller.text] = profile
        return profile

    def _refresh(self, profile: UserProfile) -> None:
        profile.last_active_ns = max(profile.last_active_ns, self._clock.now_ns())

    def touch(self, caller: CallerIdentity) -> UserProfile:
        profile = self._get_or_create(caller)
        self._refresh(profile)
        return replace(profile)

    def increment_document_count(self, caller: CallerIdentity) -> UserProfile:
        profile = self._profiles.get(caller.text)
        if profile is None:
            # Workflows always touch first; reaching this is a programming error.
            raise RuntimeError("increment_document_count called before touch")
        profile.document_count += 1
        self._refresh(profile)
        return replace(profile)

    def set_name(self, caller: CallerIdentity, name: str) -> UserProfile:
        profile = self._get_or_create(caller)
        profile.name = name
        self._refresh(profile)
        return replace(profile)

    def get(self, caller: CallerIdentity) -> UserProfile:
        profile = self._profiles.get(caller.text)
        if profile is None:
            raise NotFound("Profile not found")
        return replace(profile)
