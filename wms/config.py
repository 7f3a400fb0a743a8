"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (dev defaults only)
    - get_settings() is cached (lru_cache), one instance per process
    - Session lifetime is fixed at session_ttl_hours (24 by default)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://wms:wms@db:5432/wms"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    # Create tables on startup (sqlite/dev). Production uses alembic.
    database_create_all: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Sessions
    session_cookie_name: str = "wms_session"
    session_ttl_hours: int = 24
    session_cookie_secure: bool = False

    # Passwords
    bcrypt_rounds: int = 12

    # Seed data
    seed_defaults: bool = True
    seed_admin_username: str = "admin"
    seed_admin_password: str = "password"
    seed_admin_email: str = "admin@example.com"
    seed_organization_name: str = "Default Organization"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
