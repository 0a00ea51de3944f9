"""Profile service layer with business logic."""

from collections.abc import Mapping
from datetime import datetime
from typing import Callable, List, Optional

import structlog

from core.exceptions import ProfileNotFoundError
from domain.entities.profile import Profile, ProfileSummary, SocialPlatform
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ProfileService:
    """Service layer for Profile business logic.

    Updates are full replacements: every editable field is overwritten, and a
    field the caller leaves out becomes an empty string.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        clock: Callable[[], datetime] = datetime.utcnow,
    ) -> None:
        self._uow_factory = uow_factory
        self._clock = clock

    async def create(
        self,
        name: str = "",
        phone: str = "",
        email: str = "",
        social_handles: Optional[Mapping[SocialPlatform, str]] = None,
        extra_links: str = "",
    ) -> Profile:
        """Create a new profile with a freshly assigned ID."""
        now = self._clock()
        profile = Profile(
            name=name,
            phone=phone,
            email=email,
            social_handles=dict(social_handles or {}),
            extra_links=extra_links,
            created_at=now,
            updated_at=now,
        )
        async with self._uow_factory() as uow:
            created = await uow.profiles.create(profile)
            await uow.commit()

        logger.info("profile_created", profile_id=created.id)
        return created

    async def get(self, profile_id: str) -> Profile:
        """Get a profile or raise ProfileNotFoundError."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(profile_id)
            if not profile:
                raise ProfileNotFoundError(profile_id)
            return profile

    async def update(
        self,
        profile_id: str,
        name: str = "",
        phone: str = "",
        email: str = "",
        social_handles: Optional[Mapping[SocialPlatform, str]] = None,
        extra_links: str = "",
    ) -> Profile:
        """Replace all editable fields of an existing profile."""
        async with self._uow_factory() as uow:
            existing = await uow.profiles.get(profile_id)
            if not existing:
                raise ProfileNotFoundError(profile_id)

            replacement = Profile(
                id=existing.id,
                name=name,
                phone=phone,
                email=email,
                social_handles=dict(social_handles or {}),
                extra_links=extra_links,
                created_at=existing.created_at,
                updated_at=self._clock(),
            )
            updated = await uow.profiles.update(replacement)
            if not updated:
                # Removed between the read and the write.
                raise ProfileNotFoundError(profile_id)
            await uow.commit()

        logger.info("profile_updated", profile_id=profile_id)
        return updated

    async def list(self) -> List[ProfileSummary]:
        """List profiles, newest first."""
        async with self._uow_factory() as uow:
            return await uow.profiles.list_summaries()
