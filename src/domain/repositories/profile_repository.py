"""Profile repository protocol."""

from typing import Protocol

from domain.entities.profile import Profile, ProfileSummary


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get(self, id: str) -> Profile | None:
        """Get a profile by ID."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Persist a new profile. The caller assigns a unique ID."""
        ...

    async def update(self, profile: Profile) -> Profile | None:
        """Overwrite an existing profile, or return None if it does not exist."""
        ...

    async def list_summaries(self) -> list[ProfileSummary]:
        """List all profiles, newest first by creation time."""
        ...
