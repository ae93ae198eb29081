"""
Configuration and settings for the Eco5 backend.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_prefix: str = Field(default="/api")

    # Database (Postgres expected). DATABASE_URL wins over the PG* variables.
    database_url: Optional[str] = Field(default=None)
    pghost: Optional[str] = Field(default=None)
    pgdatabase: Optional[str] = Field(default=None)
    pguser: Optional[str] = Field(default=None)
    pgpassword: Optional[str] = Field(default=None)
    pgport: int = Field(default=5432)
    db_pool_size: int = Field(default=5, ge=1)

    # Development toggles
    use_in_memory_backends: bool = Field(
        default=False, validation_alias="ECO5_USE_IN_MEMORY_BACKENDS"
    )
    environment: str = Field(default="production")
    log_level: str = Field(default="INFO")

    # Auth
    jwt_secret: str = Field(default="eco5-secret-key")
    jwt_algorithm: str = Field(default="HS256")
    jwt_expire_days: int = Field(default=7, ge=1)
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # Frontend
    frontend_url: str = Field(default="http://localhost:5173")
    frontend_dist_dir: str = Field(default="public")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    def resolved_database_url(self) -> Optional[str]:
        """
        Return the SQLAlchemy URL for the store, or None for the in-memory one.
        """
        if self.use_in_memory_backends:
            return None
        if self.database_url:
            return self.database_url
        if self.pghost:
            return URL.create(
                "postgresql+psycopg2",
                username=self.pguser,
                password=self.pgpassword,
                host=self.pghost,
                port=self.pgport,
                database=self.pgdatabase,
            ).render_as_string(hide_password=False)
        return None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
