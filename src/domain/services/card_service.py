"""Card service: load a profile, normalize its links, render the card."""

import re
from dataclasses import dataclass
from typing import List, Protocol, Sequence

import structlog
from starlette.concurrency import run_in_threadpool

from domain.entities.link import LinkDescriptor
from domain.entities.profile import Profile
from domain.services.link_normalizer import contact_links, normalize_links
from domain.services.profile_service import ProfileService

logger = structlog.get_logger()

_WHITESPACE = re.compile(r"\s+")


class RenderResult(Protocol):
    content: bytes
    page_count: int
    link_count: int
    dropped_count: int


class ICardRenderer(Protocol):
    """Anything that can turn a profile and its links into document bytes."""

    def render(
        self,
        profile: Profile,
        links: Sequence[LinkDescriptor],
        contacts: Sequence[LinkDescriptor] = (),
    ) -> RenderResult:
        ...


@dataclass(frozen=True, slots=True)
class CardFile:
    """A rendered card ready to be sent to a client."""

    content: bytes
    filename: str
    media_type: str = "application/pdf"


def card_filename(name: str) -> str:
    """Suggested download name: whitespace runs in the name become dashes."""
    slug = _WHITESPACE.sub("-", name.strip()) or "profile"
    return f"card-{slug}.pdf"


class CardService:
    """Service layer for rendering business cards."""

    def __init__(self, profile_service: ProfileService, renderer: ICardRenderer) -> None:
        self._profiles = profile_service
        self._renderer = renderer

    async def links_for(self, profile_id: str) -> List[LinkDescriptor]:
        """Normalized link list for a profile, in card order."""
        profile = await self._profiles.get(profile_id)
        return normalize_links(profile)

    async def render_card(self, profile_id: str) -> CardFile:
        """Render the card for a profile. Rendering runs in a worker thread."""
        profile = await self._profiles.get(profile_id)
        links = normalize_links(profile)
        contacts = contact_links(profile)

        rendered = await run_in_threadpool(self._renderer.render, profile, links, contacts)

        logger.info(
            "card_rendered",
            profile_id=profile_id,
            pages=rendered.page_count,
            links=rendered.link_count,
            dropped=rendered.dropped_count,
            size_bytes=len(rendered.content),
        )
        return CardFile(content=rendered.content, filename=card_filename(profile.name))
