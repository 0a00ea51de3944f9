"""Turn raw profile fields into canonical, renderable links.

Everything here is a pure function of the profile: the same profile always
yields the same ordered list of ``LinkDescriptor`` values.
"""

import re
from dataclasses import dataclass
from typing import Callable

from domain.entities.link import LinkDescriptor
from domain.entities.profile import Profile, SocialPlatform

DEFAULT_EXTRA_LABEL = "Link"
EXTRA_LINK_COLOR = "#34495E"
EXTRA_LINK_ICON = "+"
CONTACT_COLOR = "#4A90E2"

_NON_DIGITS = re.compile(r"\D")
_NON_DIAL = re.compile(r"[^\d+]")


@dataclass(frozen=True, slots=True)
class PlatformStyle:
    """How a social platform is labelled and how handles become URLs."""

    label: str
    color: str
    icon: str
    to_url: Callable[[str], str]


def _instagram_url(value: str) -> str:
    return f"https://instagram.com/{value.removeprefix('@')}"


def _whatsapp_url(value: str) -> str:
    return f"https://wa.me/{_NON_DIGITS.sub('', value)}"


def _facebook_url(value: str) -> str:
    return f"https://facebook.com/{value}"


def _linkedin_url(value: str) -> str:
    return f"https://linkedin.com/in/{value}"


def _website_url(value: str) -> str:
    return f"https://{value}"


# Insertion order is the order links appear on the card.
PLATFORM_STYLES: dict[SocialPlatform, PlatformStyle] = {
    SocialPlatform.INSTAGRAM: PlatformStyle("Instagram", "#E4405F", "IG", _instagram_url),
    SocialPlatform.WHATSAPP: PlatformStyle("WhatsApp", "#25D366", "WA", _whatsapp_url),
    SocialPlatform.FACEBOOK: PlatformStyle("Facebook", "#1877F2", "f", _facebook_url),
    SocialPlatform.LINKEDIN: PlatformStyle("LinkedIn", "#0A66C2", "in", _linkedin_url),
    SocialPlatform.WEBSITE: PlatformStyle("Website", "#4A90E2", "www", _website_url),
}


def normalize_handle(platform: SocialPlatform, value: str) -> str:
    """Build the absolute URL for a platform value. URLs pass through as-is."""
    if value.startswith("http"):
        return value
    return PLATFORM_STYLES[platform].to_url(value)


def parse_extra_links(raw: str) -> list[LinkDescriptor]:
    """
    Parse the free-form ``label|url,label|url`` list.

    Segments without a URL are dropped; a blank label becomes ``"Link"`` and a
    URL without a scheme gets ``https://``.
    """
    links: list[LinkDescriptor] = []
    if not raw:
        return links

    for segment in raw.split(","):
        label, sep, url = segment.partition("|")
        url = url.strip()
        if not sep or not url:
            continue
        if not url.startswith("http"):
            url = f"https://{url}"
        links.append(
            LinkDescriptor(
                label=label.strip() or DEFAULT_EXTRA_LABEL,
                url=url,
                color=EXTRA_LINK_COLOR,
                icon=EXTRA_LINK_ICON,
            )
        )
    return links


def normalize_links(profile: Profile) -> list[LinkDescriptor]:
    """Social links in platform order, followed by the extra links as listed."""
    links: list[LinkDescriptor] = []
    for platform, style in PLATFORM_STYLES.items():
        value = profile.handle(platform)
        if not value:
            continue
        links.append(
            LinkDescriptor(
                label=style.label,
                url=normalize_handle(platform, value),
                color=style.color,
                icon=style.icon,
            )
        )
    links.extend(parse_extra_links(profile.extra_links))
    return links


def contact_links(profile: Profile) -> list[LinkDescriptor]:
    """Phone and email as ``tel:`` / ``mailto:`` links for the contact block."""
    links: list[LinkDescriptor] = []
    if profile.phone:
        links.append(
            LinkDescriptor(
                label=profile.phone,
                url=f"tel:{_NON_DIAL.sub('', profile.phone)}",
                color=CONTACT_COLOR,
                icon="tel",
            )
        )
    if profile.email:
        links.append(
            LinkDescriptor(
                label=profile.email,
                url=f"mailto:{profile.email.strip()}",
                color=CONTACT_COLOR,
                icon="@",
            )
        )
    return links
