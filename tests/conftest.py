"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Generator
from pathlib import Path

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.entities.profile import Profile, SocialPlatform
from infrastructure.storage import InMemoryProfileStore, SQLProfileStore


@pytest.fixture(params=["sql", "memory"])
async def store(
    request: pytest.FixtureRequest, tmp_path: Path
) -> AsyncGenerator[SQLProfileStore | InMemoryProfileStore, None]:
    """A fresh profile store, once per backend."""
    if request.param == "sql":
        backend: SQLProfileStore | InMemoryProfileStore = await SQLProfileStore.connect(
            f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"
        )
    else:
        backend = InMemoryProfileStore()
    yield backend
    await backend.close()


@pytest.fixture
def app(store: SQLProfileStore | InMemoryProfileStore) -> Generator[FastAPI, None, None]:
    """
    Create the application wired to the test store.

    ASGITransport does not run the lifespan, so the store the lifespan would
    open is provided through a dependency override instead.
    """
    from api.v1.dependencies import get_profile_store
    from main import create_app

    application = create_app()
    application.dependency_overrides[get_profile_store] = lambda: store
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client for the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def full_profile() -> Profile:
    """A profile with every field filled in."""
    return Profile(
        name="Ana Souza",
        phone="+55 11 99999-8888",
        email="ana@example.com",
        social_handles={
            SocialPlatform.INSTAGRAM: "@ana",
            SocialPlatform.WHATSAPP: "+55 (11) 9999-8888",
            SocialPlatform.FACEBOOK: "ana.souza",
            SocialPlatform.LINKEDIN: "ana-souza",
            SocialPlatform.WEBSITE: "ana.dev",
        },
        extra_links="GitHub|github.com/ana,Blog|https://blog.ana.dev",
    )
