"""Environment-driven configuration for the Computadoras service.

``AppSettings`` lists every variable the service reads. It is built once at
startup (``get_settings``) and handed to ``create_app``; nothing else reads the
environment directly. The variable names used by the older Node deployments
(``MYSQLHOST``, ``MYSQLPASSWORD``, ``URL``...) are accepted as aliases so
existing ``.env`` files keep working.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any, Iterable

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class AppSettings(BaseSettings):
    """Environment-driven application configuration."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Computadoras API"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    PUBLIC_URL: str | None = Field(default=None, validation_alias=AliasChoices("PUBLIC_URL", "URL"))

    # A full SQLAlchemy URL wins over the individual DB_* parts below.
    DB_URL: str | None = Field(default=None, validation_alias=AliasChoices("DB_URL", "DATABASE_URL"))
    DB_DRIVER: str = "mysql+pymysql"
    DB_HOST: str = Field(default="localhost", validation_alias=AliasChoices("DB_HOST", "MYSQLHOST"))
    DB_PORT: int = Field(default=3306, validation_alias=AliasChoices("DB_PORT", "MYSQLPORT"))
    DB_USER: str = Field(default="root", validation_alias=AliasChoices("DB_USER", "MYSQLUSER"))
    # No default on purpose: a missing password aborts startup.
    DB_PASSWORD: str | None = Field(default=None, validation_alias=AliasChoices("DB_PASSWORD", "MYSQLPASSWORD"))
    DB_NAME: str = Field(default="computadoras", validation_alias=AliasChoices("DB_NAME", "MYSQL_DATABASE"))

    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800
    DB_CONNECT_TIMEOUT: int = 10
    DB_QUERY_TIMEOUT: int = 30

    AUTO_MIGRATE: bool = True

    # Expected value of ``Authorization: Bearer <token>``. Empty means any (or
    # no) token is accepted.
    API_TOKEN: str = ""
    ALLOWED_ORIGINS: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def parse_allowed_origins(cls, value: Any) -> list[str]:
        if value in (None, "", []):
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, Iterable):
            return [str(item).strip() for item in value if str(item).strip()]
        raise TypeError("ALLOWED_ORIGINS must be a comma separated string or list")

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @model_validator(mode="after")
    def require_store_credentials(self) -> "AppSettings":
        if not self.DB_URL and not self.DB_PASSWORD:
            raise ValueError("DB_PASSWORD (or MYSQLPASSWORD) must be set when DATABASE_URL is not provided")
        return self

    @property
    def database_url(self) -> URL:
        if self.DB_URL:
            return make_url(self.DB_URL)
        return URL.create(
            self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()
