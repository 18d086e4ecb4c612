from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    maps_api_key: str = ""
    routes_api_base_url: str = "https://routes.googleapis.com"

    log_level: str = "INFO"

    @field_validator("maps_api_key", mode="before")
    @classmethod
    def strip_api_key(cls, value: object) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("routes_api_base_url", mode="before")
    @classmethod
    def normalize_base_url(cls, value: object) -> str:
        # Endpoints are joined with a single "/".
        return str(value).strip().rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
