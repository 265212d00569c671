from __future__ import annotations

from dataclasses import dataclass


@dataclass
class UserProfile:
    """Per-caller usage record. Never deleted; count and last_active_ns only move forward."""

    name: str | None
    document_count: int
    last_active_ns: int
