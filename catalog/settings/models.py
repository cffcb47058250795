"""Nested settings models (BaseModel, not BaseSettings)."""

from pydantic import BaseModel, SecretStr


class DatabaseSettings(BaseModel):  # type: ignore[misc]
    """Database configuration."""

    USER: str
    PASSWORD: SecretStr
    HOST: str = "catalog-db"
    PORT: int = 5432
    NAME: str = "catalog"
    POOL_SIZE: int = 20
    MAX_OVERFLOW: int = 10
    POOL_RECYCLE: int = 3600
    POOL_PRE_PING: bool = True
    INIT_RETRY_INTERVAL: int = 2
    INIT_MAX_RETRIES: int = 5

    @property
    def url(self) -> str:
        """Construct database URL."""
        password = self.PASSWORD.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.USER}:{password}"
            f"@{self.HOST}:{self.PORT}/{self.NAME}"
        )


class LoggingSettings(BaseModel):  # type: ignore[misc]
    """Logging configuration."""

    FILE_PATH: str = "logs/logging_errors.log"
    EXCLUDED_PATHS: list[str] = ["/metrics", "/health"]
    LEVEL: str = "INFO"
    CONSOLE_FORMAT: str = "human"
