from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GeocodeRequest(BaseModel):
    address: str = Field(..., min_length=1)


class ReverseGeocodeRequest(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class CoordinatesRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    latitude: float
    longitude: float
    formatted_address: str | None = Field(default=None, alias="formattedAddress")


class AddressRead(BaseModel):
    address: str
    location: str
    city: str
    country: str
