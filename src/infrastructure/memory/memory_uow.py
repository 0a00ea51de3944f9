"""In-memory profile repository and Unit of Work.

Writes are staged on the unit of work and only reach the shared table on
``commit()``, so a failed request leaves the store untouched.
"""

from dataclasses import replace
from typing import Any, Optional

from domain.entities.profile import Profile, ProfileSummary


class InMemoryProfileRepository:
    """Dict-backed implementation of IProfileRepository."""

    def __init__(self, table: dict[str, Profile], pending: dict[str, Profile]) -> None:
        self._table = table
        self._pending = pending

    def _lookup(self, id: str) -> Profile | None:
        return self._pending.get(id) or self._table.get(id)

    async def get(self, id: str) -> Profile | None:
        """Get a copy of a profile by ID."""
        profile = self._lookup(id)
        return _copy(profile) if profile else None

    async def create(self, profile: Profile) -> Profile:
        """Stage a new profile."""
        if self._lookup(profile.id):
            raise ValueError(f"Profile {profile.id} already exists")
        self._pending[profile.id] = _copy(profile)
        return _copy(profile)

    async def update(self, profile: Profile) -> Profile | None:
        """Stage a full overwrite of an existing profile."""
        if not self._lookup(profile.id):
            return None
        self._pending[profile.id] = _copy(profile)
        return _copy(profile)

    async def list_summaries(self) -> list[ProfileSummary]:
        """List committed and staged profiles newest first."""
        merged = {**self._table, **self._pending}
        ordered = sorted(merged.values(), key=lambda p: (p.created_at, p.id), reverse=True)
        return [ProfileSummary(id=p.id, name=p.name, created_at=p.created_at) for p in ordered]


def _copy(profile: Profile) -> Profile:
    return replace(profile, social_handles=dict(profile.social_handles))


class InMemoryUnitOfWork:
    """Unit of Work over a shared dict."""

    def __init__(self, table: dict[str, Profile]) -> None:
        self._table = table
        self._pending: Optional[dict[str, Profile]] = None

    @property
    def profiles(self) -> InMemoryProfileRepository:
        """Get profile repository."""
        if self._pending is None:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return InMemoryProfileRepository(self._table, self._pending)

    async def commit(self) -> None:
        """Apply staged writes."""
        if self._pending:
            self._table.update(self._pending)
            self._pending.clear()

    async def rollback(self) -> None:
        """Discard staged writes."""
        if self._pending:
            self._pending.clear()

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        self._pending = {}
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        await self.rollback()
        self._pending = None
