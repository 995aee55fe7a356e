"""
Centralized configuration for the Bookshelf backend.

All settings are loaded from environment variables with sensible defaults.
The settings object is built once per process and passed by reference into
the service container; modules never read the environment directly.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


# Used when JWT_SECRET is unset. Tokens signed with it are forgeable by anyone
# who knows the default, so the app logs a warning and /ready reports it.
DEV_JWT_SECRET = "dev_secret_key_change_me"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Bookshelf API"
    app_version: str = "0.1.0"
    environment: str = "production"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False
    log_level: str = "info"

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Session tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    token_expire_days: int = 7

    # Supabase (document store)
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Direct Postgres URL, only needed by run_migrations.py
    supabase_db_url: str = ""

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def uses_insecure_secret(self) -> bool:
        """True when tokens will be signed with the built-in development secret."""
        return not self.jwt_secret or self.jwt_secret == DEV_JWT_SECRET


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
