from __future__ import annotations

import logging
from functools import lru_cache

from app.core.config import settings

from .base import GeocoderProvider
from .opendatafrance import OpenDataFranceProvider

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_geocoder_provider() -> GeocoderProvider:
    """Instantiate the configured geocoding provider."""
    provider_name = (settings.GEOCODER_PROVIDER or "opendatafrance").lower()
    logger.info("Initialising geocoding provider: %s", provider_name)
    if provider_name in {"opendatafrance", "adresse", "ban"}:
        return OpenDataFranceProvider(
            base_url=str(settings.GEOCODER_BASE_URL),
            timeout=settings.GEOCODER_TIMEOUT_SECONDS,
            limit=settings.GEOCODER_RESULT_LIMIT,
        )
    raise ValueError(f"Unsupported geocoding provider: {provider_name}")
