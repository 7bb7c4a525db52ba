from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..normalizer import SplitAddress


class GeocoderError(RuntimeError):
    """Raised when the upstream provider cannot answer a lookup."""


@dataclass(frozen=True)
class GeocodeHit:
    latitude: float
    longitude: float
    formatted_address: str | None = None
    street_number: str | None = None
    street_name: str | None = None
    city: str | None = None
    zipcode: str | None = None
    country: str | None = None
    country_code: str | None = None

    def split_address(self) -> SplitAddress:
        return SplitAddress(
            street_number=self.street_number,
            street_name=self.street_name,
            city=self.city,
            country=self.country,
        )


class GeocoderProvider(ABC):
    """Abstract contract for forward and reverse geocoding providers.

    Both lookups return zero or more hits; an empty list means nothing matched.
    Transport or payload failures raise :class:`GeocoderError`.
    """

    @abstractmethod
    def forward(self, address: str) -> list[GeocodeHit]:
        """Resolve a free-form address to candidate coordinates."""

    @abstractmethod
    def reverse(self, latitude: float, longitude: float) -> list[GeocodeHit]:
        """Resolve coordinates to candidate addresses."""

    @abstractmethod
    def name(self) -> str:
        """Return provider identifier."""
