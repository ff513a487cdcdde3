"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)
    app_host: str = Field(default="127.0.0.1")
    app_port: int = Field(default=8000)
    # Public URL used to build confirmation links
    app_base_url: str = Field(default="http://127.0.0.1:8000")

    # Database
    database_host: str = Field(default="localhost")
    database_port: int = Field(default=5432)
    database_username: str = Field(default="postgres")
    database_password: SecretStr = Field(default=SecretStr("password"))
    database_name: str = Field(default="newsletter")
    # Full URL override (e.g. provided by the hosting platform)
    database_url: Optional[SecretStr] = Field(default=None)

    # Email provider
    email_base_url: str = Field(default="http://localhost:8025")
    email_sender: str = Field(default="newsletter@domain.com")
    email_authorization_token: SecretStr = Field(default=SecretStr(""))
    email_timeout_milliseconds: int = Field(default=10_000)

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def email_timeout_seconds(self) -> float:
        return self.email_timeout_milliseconds / 1000

    def async_database_url(self) -> URL:
        """Build the SQLAlchemy URL for the asyncpg driver.

        The returned URL masks its password when rendered with ``str()``.
        """
        if self.database_url is not None:
            url = make_url(self.database_url.get_secret_value())
            if url.drivername in ("postgresql", "postgresql+psycopg", "postgres"):
                url = url.set(drivername="postgresql+asyncpg")
            return url

        return URL.create(
            drivername="postgresql+asyncpg",
            username=self.database_username,
            password=self.database_password.get_secret_value(),
            host=self.database_host,
            port=self.database_port,
            database=self.database_name,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
