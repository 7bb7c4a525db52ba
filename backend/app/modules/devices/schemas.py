from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class DeviceCreate(BaseModel):
    name: NonEmptyStr
    type: int
    serial_number: NonEmptyStr


class DeviceUpdate(BaseModel):
    name: NonEmptyStr | None = None
    type: int | None = None
    serial_number: NonEmptyStr | None = None


class DeviceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    type: int
    serial_number: str
    created_at: datetime
    updated_at: datetime | None = None
