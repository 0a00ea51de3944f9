"""Application configuration using Pydantic Settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageBackend(StrEnum):
    """Profile store backend."""

    SQL = "sql"
    MEMORY = "memory"


class OverflowPolicy(StrEnum):
    """What the card renderer does when link entries no longer fit on a page."""

    NEW_PAGE = "new_page"
    TRUNCATE = "truncate"


class CardDisposition(StrEnum):
    """Content-Disposition used when serving rendered cards."""

    ATTACHMENT = "attachment"
    INLINE = "inline"


class LogFormat(StrEnum):
    """Log output format."""

    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Cardlink API")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Storage
    storage_backend: StorageBackend = Field(
        default=StorageBackend.SQL,
        description="Profile store: 'sql' (durable) or 'memory' (ephemeral)",
    )
    database_url: str = Field(
        default="sqlite+aiosqlite:///./cardlink.db",
        description="SQLAlchemy async connection URL, used by the sql backend",
    )

    # Card rendering
    card_overflow_policy: OverflowPolicy = Field(
        default=OverflowPolicy.NEW_PAGE,
        description="Start a new page or drop entries when links overflow the card",
    )
    card_disposition: CardDisposition = Field(
        default=CardDisposition.ATTACHMENT,
        description="Serve cards as downloads (attachment) or previews (inline)",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: LogFormat = Field(default=LogFormat.CONSOLE)

    # Rate Limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable/disable rate limiting (disable for tests)",
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def async_database_url(self) -> str:
        """Ensure the database URL uses an async driver scheme.

        Hosting providers usually hand out ``postgresql://`` or ``sqlite://``
        URLs; SQLAlchemy's async engine needs the driver spelled out.
        """
        url = self.database_url
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        elif url.startswith("sqlite://"):
            url = url.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return url

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
