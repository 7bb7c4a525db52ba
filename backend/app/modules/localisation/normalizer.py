from __future__ import annotations

from dataclasses import dataclass
from typing import Any


FALLBACK_STREET_NUMBER = "N/A"
FALLBACK_STREET_NAME = "Unknown Street"
FALLBACK_CITY = "Unknown City"
FALLBACK_COUNTRY = "Unknown Country"


@dataclass(frozen=True)
class SplitAddress:
    street_number: str | None = None
    street_name: str | None = None
    city: str | None = None
    country: str | None = None


@dataclass(frozen=True)
class NormalizedAddress:
    address: str
    location: str
    city: str
    country: str

    def as_dict(self) -> dict[str, str]:
        return {
            "address": self.address,
            "location": self.location,
            "city": self.city,
            "country": self.country,
        }


def _or(value: Any, fallback: str) -> str:
    if value is None:
        return fallback
    return str(value)


def legacy_properties(street_number: str, street_name: str, city: str, country: str) -> dict[str, str]:
    """Flatten complete address components into the legacy ``address``/``location`` pair."""
    return {
        "address": f"{street_number} {street_name}",
        "location": f"{city}, {country}",
    }


def normalize(split: SplitAddress) -> NormalizedAddress:
    """Apply per-field fallbacks, then build the legacy fields.

    Total over its input: any subset of components may be absent.
    """
    street_number = _or(split.street_number, FALLBACK_STREET_NUMBER)
    street_name = _or(split.street_name, FALLBACK_STREET_NAME)
    city = _or(split.city, FALLBACK_CITY)
    country = _or(split.country, FALLBACK_COUNTRY)
    legacy = legacy_properties(street_number, street_name, city, country)
    return NormalizedAddress(
        address=legacy["address"],
        location=legacy["location"],
        city=city,
        country=country,
    )
