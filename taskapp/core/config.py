"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix mounted in front of every router.
        database_url: SQLAlchemy URL of the task store.
        database_echo: Log every SQL statement.
        cors_origins: Origins allowed to call the API from a browser.
        rate_limit_enabled: Turn request rate limiting on or off.
        rate_limit_default: Default rate limit for all endpoints.

    When ``database_url`` is unset and ``postgres_host`` is given, a
    PostgreSQL DSN is assembled from the postgres_* values instead.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Task Service"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = ""

    database_url: Optional[str] = None
    database_echo: bool = False

    cors_origins: list[str] = ["*"]

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    # Postgres settings, used only when DATABASE_URL is not set
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: Optional[str] = None
    postgres_port: int = 5432
    postgres_db: str = "tasks"

    def get_database_url(self) -> str:
        """Return the effective database URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. DSN built from postgres_* values when `POSTGRES_HOST` is set
        3. Local SQLite file
        """
        if self.database_url:
            return self.database_url
        if self.postgres_host:
            return (
                f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
                f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
            )
        return "sqlite:///./tasks.db"


settings = Settings()
