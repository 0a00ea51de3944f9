"""Profile API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import get_card_service, get_profile_service
from api.v1.schemas.profile import (
    LinkListResponse,
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileResponse,
    ProfileWrite,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.card_service import CardService
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="List profiles",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """List every profile, newest first."""
    return ProfileListResponse.from_summaries(await service.list())


@router.post(
    "",
    response_model=ProfileDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    responses={201: {"description": "Profile created successfully"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_profile(
    request: Request,
    body: ProfileWrite,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Create a new profile. The server assigns the ID."""
    profile = await service.create(
        name=body.name,
        phone=body.phone,
        email=body.email,
        social_handles=body.social_handles(),
        extra_links=body.extra_links,
    )
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))


@router.get(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    profile_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get one profile by ID."""
    profile = await service.get(profile_id)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))


@router.put(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Replace a profile",
    responses={
        200: {"description": "Profile replaced successfully"},
        404: {"description": "Profile not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    profile_id: str,
    body: ProfileWrite,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Replace every editable field. Fields left out of the body are cleared."""
    profile = await service.update(
        profile_id,
        name=body.name,
        phone=body.phone,
        email=body.email,
        social_handles=body.social_handles(),
        extra_links=body.extra_links,
    )
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))


@router.get(
    "/{profile_id}/links",
    response_model=LinkListResponse,
    summary="Preview card links",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile_links(
    request: Request,
    profile_id: str,
    service: CardService = Depends(get_card_service),
) -> LinkListResponse:
    """The normalized links exactly as they will appear on the card."""
    return LinkListResponse.from_links(await service.links_for(profile_id))
