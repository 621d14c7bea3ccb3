"""Application settings using environment variables."""
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the marketplace backend."""

    MARKET_DB_HOST: str = "localhost"
    MARKET_DB_PORT: int = 3306
    MARKET_DB_NAME: str = "batterymarket"
    MARKET_DB_USER: str = "root"
    MARKET_DB_PASSWORD: str = ""
    MARKET_DB_CHARSET: str = "utf8mb4"
    # Full SQLAlchemy URL; wins over the MySQL parts above when set.
    MARKET_DATABASE_URL: Optional[str] = None
    MARKET_STORE_TIMEOUT_SECONDS: int = 5

    MARKET_SESSION_TTL_MINUTES: int = 60 * 24 * 7

    MARKET_DEFAULT_PAGE_SIZE: int = 20
    MARKET_FEATURED_LIMIT: int = 4

    MARKET_ADMIN_USERNAME: Optional[str] = None
    MARKET_ADMIN_PASSWORD: Optional[str] = None

    MARKET_CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    def sqlalchemy_url(self) -> str:
        """Build a SQLAlchemy URL, defaulting to MySQL through the pymysql driver."""
        if self.MARKET_DATABASE_URL:
            return self.MARKET_DATABASE_URL
        return (
            f"mysql+pymysql://{self.MARKET_DB_USER}:{self.MARKET_DB_PASSWORD}"
            f"@{self.MARKET_DB_HOST}:{self.MARKET_DB_PORT}/{self.MARKET_DB_NAME}"
            f"?charset={self.MARKET_DB_CHARSET}"
        )

    def session_ttl_seconds(self) -> Optional[float]:
        if self.MARKET_SESSION_TTL_MINUTES <= 0:
            return None
        return self.MARKET_SESSION_TTL_MINUTES * 60.0


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid re-parsing env."""
    return Settings()


settings = get_settings()
