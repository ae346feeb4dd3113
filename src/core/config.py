"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Hack Buddy API")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Persistence
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/hack_buddy.db",
        description="Snapshot database URL (async driver)",
    )
    snapshot_interval_seconds: int = Field(
        default=300,
        ge=1,
        description="Seconds between periodic snapshots of the entity store",
    )

    # Matchmaking
    max_team_members: int = Field(default=5, ge=1)
    match_display_limit: int = Field(
        default=5,
        ge=1,
        description="How many ranked matches are shown to the requester",
    )

    # Verification
    verification_keywords: str = Field(
        default=(
            "Congratulations,TDX Bengaluru,Bangalore International Exhibition Center,"
            "Madavara,Agentblazer,Agentforce"
        ),
        description="Comma-separated keywords looked for in the confirmation screenshot",
    )
    verification_min_keywords: int = Field(default=2, ge=1)

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool | None = Field(
        default=None,
        description="Force JSON logs on/off (defaults to on in production)",
    )

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
        """Ensure a Postgres URL uses the asyncpg driver scheme."""
        url = self.database_url
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def verification_keyword_list(self) -> list[str]:
        """Parse verification keywords into a list."""
        return [kw.strip() for kw in self.verification_keywords.split(",") if kw.strip()]

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
