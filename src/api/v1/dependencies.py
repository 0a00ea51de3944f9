"""Dependency injection factories for API v1.

Services are built per request from the store and renderer the application
created at startup (see ``main.lifespan``).
"""

from typing import Callable

from fastapi import Depends, Request

from core.config import Settings
from domain.repositories.profile_store import IProfileStore
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.card_service import CardService
from domain.services.profile_service import ProfileService
from infrastructure.rendering.card_renderer import CardRenderer


def get_app_settings(request: Request) -> Settings:
    """The settings the running application was created with."""
    return request.app.state.settings  # type: ignore[no-any-return]


def get_profile_store(request: Request) -> IProfileStore:
    """The store handle owned by the running application."""
    return request.app.state.profile_store  # type: ignore[no-any-return]


def get_card_renderer(request: Request) -> CardRenderer:
    """The renderer configured at startup."""
    return request.app.state.card_renderer  # type: ignore[no-any-return]


def get_uow_factory(
    store: IProfileStore = Depends(get_profile_store),
) -> Callable[[], IUnitOfWork]:
    """Factory for creating Unit of Work instances."""
    return store.unit_of_work


def get_profile_service(
    uow_factory: Callable[[], IUnitOfWork] = Depends(get_uow_factory),
) -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(uow_factory)


def get_card_service(
    profile_service: ProfileService = Depends(get_profile_service),
    renderer: CardRenderer = Depends(get_card_renderer),
) -> CardService:
    """Get Card service instance."""
    return CardService(profile_service, renderer)
