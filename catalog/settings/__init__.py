"""Settings module with nested configuration groups."""

import os
from enum import Enum
from typing import Any

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog.settings.models import DatabaseSettings, LoggingSettings


class Environment(str, Enum):
    """Application environment types."""

    DEV = "dev"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):  # type: ignore[misc]
    """
    Main settings class.

    Flat env vars like DB_USER are read directly and grouped into nested
    models through the ``database`` and ``logging`` properties.
    """

    model_config = SettingsConfigDict(case_sensitive=True)

    # Environment configuration
    ENV: Environment = Environment.DEV

    # Database settings
    DB_USER: str
    DB_PASSWORD: SecretStr
    DB_HOST: str = "catalog-db"
    DB_PORT: int = 5432
    DB_NAME: str = "catalog"
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True
    DB_INIT_RETRY_INTERVAL: int = 2
    DB_INIT_MAX_RETRIES: int = 5

    # Full URL override (takes precedence over DB_* parts)
    DATABASE_URL: str | None = None

    # Logging settings
    LOG_FILE_PATH: str = "logs/logging_errors.log"
    LOG_EXCLUDED_PATHS: list[str] = ["/metrics", "/health"]
    LOG_LEVEL: str = "INFO"
    LOG_CONSOLE_FORMAT: str = "human"

    # Pagination
    DEFAULT_PAGE_SIZE: int = 10

    def __init__(self, **kwargs: Any) -> None:
        """Initialize settings with environment-specific defaults."""
        super().__init__(**kwargs)
        self._apply_environment_defaults()

    def _apply_environment_defaults(self) -> None:
        """Apply environment-specific configuration defaults."""
        if self.ENV == Environment.PRODUCTION:
            if os.getenv("LOG_CONSOLE_FORMAT") is None:
                self.LOG_CONSOLE_FORMAT = "json"
            if os.getenv("LOG_LEVEL") is None:
                self.LOG_LEVEL = "WARNING"

        elif self.ENV == Environment.STAGING:
            if os.getenv("LOG_CONSOLE_FORMAT") is None:
                self.LOG_CONSOLE_FORMAT = "json"
            if os.getenv("LOG_LEVEL") is None:
                self.LOG_LEVEL = "INFO"

        else:  # Environment.DEV
            if os.getenv("LOG_CONSOLE_FORMAT") is None:
                self.LOG_CONSOLE_FORMAT = "human"
            if os.getenv("LOG_LEVEL") is None:
                self.LOG_LEVEL = "DEBUG"

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings as nested model."""
        return DatabaseSettings(
            USER=self.DB_USER,
            PASSWORD=self.DB_PASSWORD,
            HOST=self.DB_HOST,
            PORT=self.DB_PORT,
            NAME=self.DB_NAME,
            POOL_SIZE=self.DB_POOL_SIZE,
            MAX_OVERFLOW=self.DB_MAX_OVERFLOW,
            POOL_RECYCLE=self.DB_POOL_RECYCLE,
            POOL_PRE_PING=self.DB_POOL_PRE_PING,
            INIT_RETRY_INTERVAL=self.DB_INIT_RETRY_INTERVAL,
            INIT_MAX_RETRIES=self.DB_INIT_MAX_RETRIES,
        )

    @property
    def logging(self) -> LoggingSettings:
        """Get logging settings as nested model."""
        return LoggingSettings(
            FILE_PATH=self.LOG_FILE_PATH,
            EXCLUDED_PATHS=self.LOG_EXCLUDED_PATHS,
            LEVEL=self.LOG_LEVEL,
            CONSOLE_FORMAT=self.LOG_CONSOLE_FORMAT,
        )

    @property
    def database_url(self) -> str:
        """Database URL, honouring the DATABASE_URL override."""
        return self.DATABASE_URL or self.database.url


app_settings = Settings()
