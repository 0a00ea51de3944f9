"""Shareable card download endpoint."""

import re
from urllib.parse import quote

from fastapi import APIRouter, Depends, Request, Response

from api.v1.dependencies import get_card_service
from core.config import CardDisposition
from core.rate_limit import RENDER_LIMIT, limiter
from domain.services.card_service import CardService

router = APIRouter(tags=["cards"])

_QUOTED_SPECIALS = re.compile(r'["\\]')


def content_disposition(disposition: CardDisposition, filename: str) -> str:
    """Header value with an ASCII fallback plus the RFC 5987 UTF-8 name."""
    ascii_name = filename.encode("ascii", "ignore").decode("ascii")
    # Quote and backslash are the two specials inside a quoted-string.
    fallback = _QUOTED_SPECIALS.sub("", ascii_name) or "card.pdf"
    return f"{disposition.value}; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


@router.get(
    "/c/{profile_id}",
    summary="Download a business card",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}, "description": "Rendered card"},
        404: {"description": "Profile not found"},
        500: {"description": "Card could not be rendered"},
    },
)
@limiter.limit(RENDER_LIMIT)  # type: ignore[untyped-decorator]
async def download_card(
    request: Request,
    profile_id: str,
    download: bool | None = None,
    service: CardService = Depends(get_card_service),
) -> Response:
    """Render the profile's card as a PDF.

    ``download`` overrides the configured disposition for this request.
    """
    card = await service.render_card(profile_id)

    disposition: CardDisposition = request.app.state.card_disposition
    if download is not None:
        disposition = CardDisposition.ATTACHMENT if download else CardDisposition.INLINE

    return Response(
        content=card.content,
        media_type=card.media_type,
        headers={
            "Content-Disposition": content_disposition(disposition, card.filename),
            "Cache-Control": "no-store",
        },
    )
