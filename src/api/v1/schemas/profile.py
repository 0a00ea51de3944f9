"""Pydantic schemas for Profile API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.entities.link import LinkDescriptor
from domain.entities.profile import Profile, ProfileSummary, SocialPlatform


class ProfileWrite(BaseModel):
    """Body for creating or replacing a profile. Missing fields become ""."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ana Souza",
                "phone": "+55 11 99999-8888",
                "email": "ana@example.com",
                "instagram": "@ana",
                "whatsapp": "+55 (11) 9999-8888",
                "facebook": "",
                "linkedin": "ana-souza",
                "website": "ana.dev",
                "extra_links": "GitHub|github.com/ana,Blog|https://blog.ana.dev",
            }
        },
    )

    name: str = Field("", max_length=255)
    phone: str = Field("", max_length=64)
    email: str = Field("", max_length=255)
    instagram: str = Field("", max_length=255)
    whatsapp: str = Field("", max_length=255)
    facebook: str = Field("", max_length=255)
    linkedin: str = Field("", max_length=255)
    website: str = Field("", max_length=500)
    extra_links: str = Field("", max_length=5000)

    @field_validator("*", mode="before")
    @classmethod
    def none_to_empty(cls, v: object) -> object:
        return "" if v is None else v

    def social_handles(self) -> dict[SocialPlatform, str]:
        return {platform: getattr(self, platform.value) for platform in SocialPlatform}


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    id: str
    name: str
    phone: str
    email: str
    instagram: str
    whatsapp: str
    facebook: str
    linkedin: str
    website: str
    extra_links: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            id=profile.id,
            name=profile.name,
            phone=profile.phone,
            email=profile.email,
            extra_links=profile.extra_links,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
            **{platform.value: profile.handle(platform) for platform in SocialPlatform},
        )


class ProfileSummaryResponse(BaseModel):
    """Schema for one row of the profile list."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    created_at: datetime


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileSummaryResponse]

    @classmethod
    def from_summaries(cls, summaries: list[ProfileSummary]) -> "ProfileListResponse":
        return cls(data=[ProfileSummaryResponse.model_validate(s) for s in summaries])


class LinkResponse(BaseModel):
    """Schema for a normalized card link."""

    model_config = ConfigDict(from_attributes=True)

    label: str
    url: str
    color: str
    icon: str


class LinkListResponse(BaseModel):
    """Schema for the normalized links of a profile."""

    data: list[LinkResponse]

    @classmethod
    def from_links(cls, links: list[LinkDescriptor]) -> "LinkListResponse":
        return cls(data=[LinkResponse.model_validate(link) for link in links])
