from __future__ import annotations

import logging
from typing import Any, Mapping

import requests
from requests import RequestException

from .base import GeocodeHit, GeocoderError, GeocoderProvider

logger = logging.getLogger(__name__)


class OpenDataFranceProvider(GeocoderProvider):
    """Client for the French national address API (``/search`` and ``/reverse``)."""

    COUNTRY = "France"
    COUNTRY_CODE = "FR"

    def __init__(self, *, base_url: str, timeout: int, limit: int = 5) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.limit = limit
        self.session = requests.Session()

    def name(self) -> str:
        return "opendatafrance"

    def forward(self, address: str) -> list[GeocodeHit]:
        return self._query("/search/", {"q": address, "limit": self.limit})

    def reverse(self, latitude: float, longitude: float) -> list[GeocodeHit]:
        return self._query("/reverse/", {"lat": latitude, "lon": longitude, "limit": self.limit})

    def _query(self, path: str, params: dict[str, Any]) -> list[GeocodeHit]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (RequestException, ValueError) as exc:
            logger.warning("Geocoder request to %s failed: %s", url, exc)
            raise GeocoderError(str(exc)) from exc
        if not isinstance(data, dict) or not isinstance(data.get("features"), list):
            raise GeocoderError(f"Unexpected response from geocoder: {data!r}")
        return [self._to_hit(feature) for feature in data["features"]]

    @classmethod
    def _to_hit(cls, feature: Any) -> GeocodeHit:
        try:
            lon, lat = feature["geometry"]["coordinates"][:2]
            longitude, latitude = float(lon), float(lat)
            props = feature.get("properties") or {}
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise GeocoderError(f"Malformed geocoder feature: {feature!r}") from exc
        if not isinstance(props, Mapping):
            raise GeocoderError(f"Malformed geocoder feature properties: {props!r}")

        street_number = props.get("housenumber")
        street_name = props.get("street")
        if street_name is None and props.get("type") == "street":
            street_name = props.get("name")
        return GeocodeHit(
            latitude=latitude,
            longitude=longitude,
            formatted_address=props.get("label"),
            street_number=street_number,
            street_name=street_name,
            city=props.get("city"),
            zipcode=props.get("postcode"),
            country=cls.COUNTRY,
            country_code=cls.COUNTRY_CODE,
        )
