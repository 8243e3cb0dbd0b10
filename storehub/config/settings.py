from typing import Any
from urllib.parse import quote_plus

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Service configuration loaded from environment variables (and `.env`).
    """

    # API Configuration
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "StoreHub"
    PROJECT_DESCRIPTION: str = "Store lifecycle service: stores, accounts and lifecycle events"
    VERSION: str = "0.1.0"

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Runtime environment")

    # PostgreSQL Database Settings
    DB_HOST: str = Field("localhost", description="PostgreSQL host")
    DB_PORT: int = Field(5432, description="PostgreSQL port")
    DB_NAME: str = Field("storehub", description="Database name")
    DB_USER: str = Field("postgres", description="PostgreSQL user")
    DB_PASSWORD: str | None = Field(None, description="PostgreSQL password")
    DB_ECHO: bool = Field(False, description="Log SQL queries (debug only)")

    # Database connection pool settings
    DB_POOL_SIZE: int = Field(10, description="Connection pool size")
    DB_MAX_OVERFLOW: int = Field(20, description="Maximum pool overflow")
    DB_POOL_RECYCLE: int = Field(3600, description="Recycle connections every N seconds")
    DB_POOL_TIMEOUT: int = Field(30, description="Seconds to wait for a pooled connection")

    # Redis Settings
    REDIS_HOST: str = Field("localhost", description="Redis host")
    REDIS_PORT: int = Field(6379, description="Redis port")
    REDIS_DB: int = Field(0, description="Redis database")
    REDIS_PASSWORD: str | None = Field(None, description="Redis password")

    # Store lifecycle
    REQUEST_TIMEOUT_SECONDS: float = Field(5.0, description="Default deadline for one store operation")
    MAX_PAGE_LIMIT: int = Field(100, description="Largest page size accepted when listing stores")
    STORE_NEW_TOPIC: str = Field("store.new", description="Topic for created stores")
    STORE_UPDATE_TOPIC: str = Field("store.update", description="Topic for updated stores")
    STORE_DELETE_TOPIC: str = Field("store.delete", description="Topic for deleted stores")
    EVENT_STREAM_MAXLEN: int = Field(100_000, description="Approximate length cap of each event stream")

    # Backends
    STORAGE_BACKEND: str = Field("postgres", description="Repository backend: postgres or memory")
    EVENT_BACKEND: str = Field("redis", description="Event publisher backend: redis or memory")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    LOG_FORMAT: str = Field("colored", description="Console log format: colored, json or plain")
    LOG_FILE: str | None = Field(None, description="Optional JSON log file")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("DB_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v):
        if v < 1:
            raise ValueError("DB_POOL_SIZE must be at least 1")
        if v > 100:
            raise ValueError("DB_POOL_SIZE should not exceed 100")
        return v

    @field_validator("DB_MAX_OVERFLOW")
    @classmethod
    def validate_max_overflow(cls, v):
        if v < 0:
            raise ValueError("DB_MAX_OVERFLOW must be 0 or greater")
        return v

    @field_validator("REQUEST_TIMEOUT_SECONDS", "DB_POOL_TIMEOUT")
    @classmethod
    def validate_positive_timeout(cls, v):
        if v <= 0:
            raise ValueError("Timeouts must be greater than 0")
        return v

    @field_validator("MAX_PAGE_LIMIT", "EVENT_STREAM_MAXLEN")
    @classmethod
    def validate_positive_size(cls, v):
        if v < 1:
            raise ValueError("Sizes must be at least 1")
        return v

    @field_validator("STORAGE_BACKEND")
    @classmethod
    def validate_storage_backend(cls, v):
        v = v.lower()
        if v not in ("postgres", "memory"):
            raise ValueError("STORAGE_BACKEND must be 'postgres' or 'memory'")
        return v

    @field_validator("EVENT_BACKEND")
    @classmethod
    def validate_event_backend(cls, v):
        v = v.lower()
        if v not in ("redis", "memory"):
            raise ValueError("EVENT_BACKEND must be 'redis' or 'memory'")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        v = v.lower()
        if v not in ("colored", "json", "plain"):
            raise ValueError("LOG_FORMAT must be 'colored', 'json' or 'plain'")
        return v

    @computed_field
    @property
    def database_url(self) -> str:
        """Synchronous PostgreSQL URL (Alembic, tooling)"""
        return self._build_database_url("postgresql")

    @computed_field
    @property
    def async_database_url(self) -> str:
        """asyncpg URL used by the service"""
        return self._build_database_url("postgresql+asyncpg")

    @computed_field
    @property
    def redis_url(self) -> str:
        if self.REDIS_PASSWORD:
            return f"redis://:{quote_plus(self.REDIS_PASSWORD)}@{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"
        return f"redis://{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"

    @computed_field
    @property
    def is_development(self) -> bool:
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local"]

    def _build_database_url(self, scheme: str) -> str:
        user = quote_plus(self.DB_USER)
        if self.DB_PASSWORD:
            credentials = f"{user}:{quote_plus(self.DB_PASSWORD)}"
        else:
            credentials = user
        return f"{scheme}://{credentials}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"


# Settings singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the cached settings instance.

    Environment variables are read only on the first call.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached instance so the next get_settings() re-reads the environment."""
    global _settings_instance
    _settings_instance = None
