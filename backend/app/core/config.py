from __future__ import annotations

from typing import List

from pydantic import AnyUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    # Core
    DATABASE_URL: str
    ALLOWED_ORIGINS: str | None = "*"
    LOG_LEVEL: str = "INFO"

    # Geocoding provider
    GEOCODER_PROVIDER: str = "opendatafrance"
    GEOCODER_BASE_URL: AnyUrl | str = "https://api-adresse.data.gouv.fr"
    GEOCODER_TIMEOUT_SECONDS: int = 10
    GEOCODER_RESULT_LIMIT: int = 5

    # Auth
    AUTH_TOKEN_SECRET: str
    AUTH_TOKEN_TTL_SECONDS: int = 86400

    # Default administrator bootstrap
    ADMIN_EMAIL: str | None = None
    ADMIN_PASSWORD: str | None = None
    ADMIN_FULL_NAME: str | None = None

    @property
    def cors_origins(self) -> List[str]:
        if not self.ALLOWED_ORIGINS:
            return []
        raw = self.ALLOWED_ORIGINS
        if isinstance(raw, str):
            return [o.strip() for o in raw.split(",") if o.strip()]
        return list(raw)


settings = Settings()  # type: ignore[call-arg]
