"""SQLAlchemy implementation of Profile repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Profile, ProfileSummary, SocialPlatform
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: str) -> Profile | None:
        """Get a profile by ID."""
        model = await self._session.get(ProfileModel, id)
        return self._to_entity(model) if model else None

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = self._to_model(profile)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile | None:
        """Overwrite every editable column of an existing profile."""
        model = await self._session.get(ProfileModel, profile.id)
        if not model:
            return None

        model.name = profile.name
        model.phone = profile.phone
        model.email = profile.email
        for platform in SocialPlatform:
            setattr(model, platform.value, profile.handle(platform))
        model.extra_links = profile.extra_links
        model.updated_at = profile.updated_at

        await self._session.flush()
        return self._to_entity(model)

    async def list_summaries(self) -> list[ProfileSummary]:
        """List profiles newest first."""
        stmt = select(ProfileModel.id, ProfileModel.name, ProfileModel.created_at).order_by(
            ProfileModel.created_at.desc(),
            ProfileModel.id.desc(),
        )
        result = await self._session.execute(stmt)
        return [
            ProfileSummary(id=row.id, name=row.name, created_at=row.created_at)
            for row in result
        ]

    @staticmethod
    def _to_entity(model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            name=model.name,
            phone=model.phone,
            email=model.email,
            social_handles={
                platform: getattr(model, platform.value) for platform in SocialPlatform
            },
            extra_links=model.extra_links,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _to_model(entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            name=entity.name,
            phone=entity.phone,
            email=entity.email,
            extra_links=entity.extra_links,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            **{platform.value: entity.handle(platform) for platform in SocialPlatform},
        )
