from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_geocoder
from .normalizer import normalize
from .providers.base import GeocoderError, GeocoderProvider
from .schemas import AddressRead, CoordinatesRead, GeocodeRequest, ReverseGeocodeRequest


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/localisation", tags=["localisation"])

GeocoderDep = Annotated[GeocoderProvider, Depends(get_geocoder)]


@router.post("/coordinates", response_model=CoordinatesRead)
def get_coordinates(payload: GeocodeRequest, geocoder: GeocoderDep):
    logger.info("Geocoding request for address: %s", payload.address)
    try:
        hits = geocoder.forward(payload.address)
    except GeocoderError as exc:
        logger.error("Geocoding error: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving coordinates",
        )

    if not hits:
        logger.warning("Address not found: %s", payload.address)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Address not found")

    best = hits[0]
    logger.info("Address found: %s", best.formatted_address)
    return CoordinatesRead(
        latitude=best.latitude,
        longitude=best.longitude,
        formatted_address=best.formatted_address,
    )


@router.post("/address", response_model=AddressRead)
def reverse_geocode(payload: ReverseGeocodeRequest, geocoder: GeocoderDep):
    logger.info(
        "Reverse geocoding request for coordinates: %s, %s", payload.latitude, payload.longitude
    )
    try:
        hits = geocoder.reverse(payload.latitude, payload.longitude)
    except GeocoderError as exc:
        logger.error("Reverse geocoding error: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving address",
        )

    if not hits:
        logger.warning(
            "Location not found for coordinates: %s, %s", payload.latitude, payload.longitude
        )
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")

    normalized = normalize(hits[0].split_address())
    logger.info("Location found: %s, %s", normalized.address, normalized.location)
    return AddressRead(**normalized.as_dict())
