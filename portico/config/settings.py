"""
Application Settings

Centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with sensible defaults.

Configuration Categories:
=========================
- Application: Basic app info (name, version, debug mode)
- Server: Host, port and route prefix
- Store: Seeding and cluster-name rules for the in-memory store
- Layout: Canvas size and persisted layout state for the graph renderer
- Client: API base URL and polling windows for the query cache

Environment Variables:
======================
Settings are loaded from environment variables or .env file.
Environment variables take precedence over .env file values.

Usage:
======
    from portico.config.settings import settings

    port = settings.PORT
    is_dev = settings.is_development
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Use .env file for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # APPLICATION
    # ═══════════════════════════════════════════════════════════════════════════════

    APP_NAME: str = "Portico"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ═══════════════════════════════════════════════════════════════════════════════
    # SERVER
    # ═══════════════════════════════════════════════════════════════════════════════

    HOST: str = "0.0.0.0"
    PORT: int = 8000
    API_PREFIX: str = "/api"

    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # STORE
    # ═══════════════════════════════════════════════════════════════════════════════

    SEED_DEFAULT_CLUSTERS: bool = Field(
        default=True,
        description="Seed the four default clusters (ids 1-4) when the store boots",
    )
    ENFORCE_UNIQUE_CLUSTER_NAMES: bool = Field(
        default=True,
        description="Reject cluster names that already exist (case-insensitive) with 409",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # LAYOUT
    # ═══════════════════════════════════════════════════════════════════════════════

    LAYOUT_STATE_PATH: str = Field(
        default="",
        description="JSON file holding saved node positions and zoom transform; empty keeps it in memory",
    )
    CANVAS_WIDTH: int = Field(default=800, ge=1)
    CANVAS_HEIGHT: int = Field(default=600, ge=1)

    # ═══════════════════════════════════════════════════════════════════════════════
    # CLIENT
    # ═══════════════════════════════════════════════════════════════════════════════

    API_BASE_URL: str = "http://localhost:8000"
    NETWORK_REFETCH_INTERVAL_SECONDS: float = Field(
        default=10.0,
        description="How often cached queries are refetched in the background",
    )
    NETWORK_STALE_SECONDS: float = Field(
        default=8.0,
        description="Age after which cached query data is considered stale",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # PROPERTIES
    # ═══════════════════════════════════════════════════════════════════════════════

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.

    Returns:
        Settings: Application settings instance
    """
    return Settings()


# Global settings instance for convenient import
settings = get_settings()
