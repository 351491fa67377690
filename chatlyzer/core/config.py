from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    app_name: str = "Chatlyzer Export Converter API"
    environment: Literal["dev", "test", "prod"] = "dev"
    debug: bool = False

    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"])
    default_timezone: str = "UTC"
    max_upload_size_mb: int = 15
    rate_limit_per_minute: int = 60

    # Bounds applied before a converted chat is handed to the analysis service.
    analysis_max_messages: int = 25000
    analysis_max_message_chars: int = 500


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
