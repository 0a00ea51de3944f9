"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import uuid4


class SocialPlatform(StrEnum):
    """Social platforms a profile can link to, in card display order."""

    INSTAGRAM = "instagram"
    WHATSAPP = "whatsapp"
    FACEBOOK = "facebook"
    LINKEDIN = "linkedin"
    WEBSITE = "website"


def new_profile_id() -> str:
    """Generate an opaque profile identifier."""
    return uuid4().hex


@dataclass
class Profile:
    """Domain entity for one digital business card."""

    id: str = field(default_factory=new_profile_id)
    name: str = ""
    phone: str = ""
    email: str = ""
    social_handles: dict[SocialPlatform, str] = field(default_factory=dict)
    extra_links: str = ""
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Default every text field to an empty string and fill all platforms."""
        self.name = self.name or ""
        self.phone = self.phone or ""
        self.email = self.email or ""
        self.extra_links = self.extra_links or ""
        raw = self.social_handles or {}
        # StrEnum members hash like their values, so plain string keys work too.
        self.social_handles = {platform: raw.get(platform) or "" for platform in SocialPlatform}
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    def handle(self, platform: SocialPlatform) -> str:
        """Raw user-entered value for a platform."""
        return self.social_handles.get(platform, "")


@dataclass(frozen=True, slots=True)
class ProfileSummary:
    """Read-only listing row for a profile."""

    id: str
    name: str
    created_at: datetime
