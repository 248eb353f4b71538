from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Bookstore API"
    app_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8081
    # seconds an idle keep-alive connection stays open
    idle_timeout: int = 10
    max_header_bytes: int = 1 << 20
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="BOOKSTORE_", extra="ignore")


settings = Settings()
