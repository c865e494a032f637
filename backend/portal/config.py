"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - DATABASE_URL keeps the form the operator wrote; helpers derive the
      async SQLAlchemy URL and the on-disk file path from it
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

_SQLITE_PREFIXES = ("sqlite+aiosqlite:///", "sqlite+pysqlite:///", "sqlite:///")
_FILE_PREFIXES = ("file://", "file:")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Database: a file path, file:// or file: URI, or an sqlite SQLAlchemy URL
    database_url: str = "file:./dev.db"
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Auth
    session_cookie_name: str = "better-auth.session_token"

    # Email (Resend)
    resend_api_key: str | None = None
    resend_from_email: str = "onboarding@resend.dev"
    resend_api_url: str = "https://api.resend.com/emails"
    email_timeout_seconds: float = 10.0
    app_url: str = "http://localhost:3000"

    # Payments: without both Stripe keys, purchases are simulated
    stripe_secret_key: str | None = None
    stripe_publishable_key: str | None = None
    use_simulated_purchases: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:3000"]
    environment: str = "development"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def use_stripe(self) -> bool:
        configured = bool(self.stripe_secret_key and self.stripe_publishable_key)
        return configured and not self.use_simulated_purchases


def database_file_path(database_url: str) -> str:
    """Strip URI prefixes from DATABASE_URL, leaving the sqlite file path."""
    for prefix in _SQLITE_PREFIXES + _FILE_PREFIXES:
        if database_url.startswith(prefix):
            return database_url[len(prefix):]
    return database_url


def async_database_url(database_url: str) -> str:
    """Convert DATABASE_URL to a URL the async engine accepts.

    Non-sqlite SQLAlchemy URLs (anything else with ``://``) pass through.
    """
    if database_url.startswith("sqlite+aiosqlite:///"):
        return database_url
    is_sqlite = database_url.startswith(_SQLITE_PREFIXES + _FILE_PREFIXES)
    if "://" in database_url and not is_sqlite:
        return database_url
    return f"sqlite+aiosqlite:///{database_file_path(database_url)}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
