from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_report.repositories.sql import InterpolationMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="APP_",
        case_sensitive=False,
    )

    env: str = Field(default="development")
    debug: bool = Field(default=False)
    docs_enabled: bool = Field(default=True)

    secret_key: str = Field(min_length=32)
    algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=30, ge=1, le=60 * 24 * 30)

    admin_username: str = Field(default="admin", min_length=3, max_length=64)
    admin_password_hash: str = Field(min_length=10)

    cors_origins: list[str] = Field(default_factory=list)
    trusted_hosts: list[str] = Field(default_factory=lambda: ["localhost", "127.0.0.1"])

    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    store_lock_timeout_seconds: float = Field(default=5.0, gt=0, le=60.0)

    # Inserts default to bound parameters; history keeps the raw concatenation
    # and analysis the quote-doubling of the reference service.
    insert_query_mode: InterpolationMode = Field(default=InterpolationMode.PARAMETERIZED)
    history_query_mode: InterpolationMode = Field(default=InterpolationMode.RAW)
    analysis_query_mode: InterpolationMode = Field(default=InterpolationMode.ESCAPED)

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"


def load_settings() -> Settings:
    settings = Settings()
    if not settings.cors_origins:
        settings.cors_origins = ["http://localhost:3000", "http://localhost:8000"]
    return settings
