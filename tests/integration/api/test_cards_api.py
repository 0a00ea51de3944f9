"""Integration tests for the card download endpoint."""

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from core.config import CardDisposition, Settings, StorageBackend
from main import create_app


async def _create(client: AsyncClient, **fields: str) -> str:
    body = {"name": "Ana Souza", "instagram": "@ana", "website": "ana.dev", **fields}
    response = await client.post("/api/v1/profiles", json=body)
    assert response.status_code == 201
    return response.json()["data"]["id"]


class TestDownloadCard:
    @pytest.mark.asyncio
    async def test_returns_pdf_attachment(self, client: AsyncClient):
        profile_id = await _create(client)

        response = await client.get(f"/c/{profile_id}")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content.startswith(b"%PDF")
        disposition = response.headers["content-disposition"]
        assert disposition.startswith("attachment;")
        assert 'filename="card-Ana-Souza.pdf"' in disposition
        assert response.headers["cache-control"] == "no-store"

    @pytest.mark.asyncio
    async def test_download_false_renders_inline(self, client: AsyncClient):
        profile_id = await _create(client)

        response = await client.get(f"/c/{profile_id}", params={"download": "false"})

        assert response.headers["content-disposition"].startswith("inline;")

    @pytest.mark.asyncio
    async def test_profile_without_links_still_renders(self, client: AsyncClient):
        profile_id = await _create(client, instagram="", website="")

        response = await client.get(f"/c/{profile_id}")

        assert response.status_code == 200
        assert response.content.startswith(b"%PDF")

    @pytest.mark.asyncio
    async def test_blank_name_gets_fallback_filename(self, client: AsyncClient):
        profile_id = await _create(client, name="")

        response = await client.get(f"/c/{profile_id}")

        assert 'filename="card-profile.pdf"' in response.headers["content-disposition"]

    @pytest.mark.asyncio
    async def test_non_ascii_name_is_encoded(self, client: AsyncClient):
        profile_id = await _create(client, name="João Araújo")

        response = await client.get(f"/c/{profile_id}")

        disposition = response.headers["content-disposition"]
        assert "filename*=UTF-8''card-Jo%C3%A3o-Ara%C3%BAjo.pdf" in disposition

    @pytest.mark.asyncio
    async def test_same_profile_renders_same_bytes(self, client: AsyncClient):
        profile_id = await _create(client)

        first = await client.get(f"/c/{profile_id}")
        second = await client.get(f"/c/{profile_id}")

        assert first.content == second.content

    @pytest.mark.asyncio
    async def test_unknown_profile_is_404(self, client: AsyncClient):
        response = await client.get("/c/missing")

        assert response.status_code == 404
        assert response.json()["error_code"] == "PROFILE_NOT_FOUND"


class TestApplicationLifespan:
    @pytest.mark.asyncio
    async def test_memory_backend_serves_cards(self):
        config = Settings(
            storage_backend=StorageBackend.MEMORY,
            card_disposition=CardDisposition.INLINE,
        )
        app = create_app(config)

        async with app.router.lifespan_context(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as c:
                profile_id = await _create(c)
                response = await c.get(f"/c/{profile_id}")
                health = await c.get("/health/detailed")

        assert response.status_code == 200
        assert response.headers["content-disposition"].startswith("inline;")
        assert health.json()["storage"] == "memory: healthy"

    @pytest.mark.asyncio
    async def test_sql_backend_persists_across_restarts(self, tmp_path: Path):
        config = Settings(
            storage_backend=StorageBackend.SQL,
            database_url=f"sqlite:///{tmp_path / 'cards.db'}",
        )

        app = create_app(config)
        async with app.router.lifespan_context(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as c:
                profile_id = await _create(c)

        app = create_app(config)
        async with app.router.lifespan_context(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as c:
                response = await c.get(f"/api/v1/profiles/{profile_id}")

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Ana Souza"
