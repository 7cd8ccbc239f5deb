"""Application configuration using Pydantic Settings."""
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    database_url: str = "sqlite+aiosqlite:///./workhours.db"
    database_ssl: Literal["auto", "require", "disable"] = "auto"
    environment: str = "development"

    # Session / admin
    session_secret: str = "change-me"
    session_https_only: bool = False
    admin_password: Optional[str] = None

    # API
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "http://localhost:3000"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def async_database_url(self) -> str:
        """
        Database URL with an async driver.

        Hosting platforms hand out plain ``postgres://`` URLs, which are
        rewritten to use asyncpg.
        """
        url = self.database_url
        for prefix in ("postgres://", "postgresql://"):
            if url.startswith(prefix):
                return "postgresql+asyncpg://" + url[len(prefix):]
        return url

    @property
    def database_ssl_enabled(self) -> bool:
        """TLS for the database connection; ``auto`` means production only."""
        if self.database_ssl == "auto":
            return self.is_production
        return self.database_ssl == "require"


settings = Settings()
