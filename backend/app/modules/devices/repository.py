from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .models import Device
from .schemas import DeviceCreate, DeviceUpdate


class DevicesRepository:
    def __init__(self, db: Session):
        self.db = db

    def list(self) -> list[Device]:
        return list(self.db.scalars(select(Device).order_by(Device.id)))

    def get(self, device_id: int) -> Optional[Device]:
        return self.db.get(Device, device_id)

    def create(self, data: DeviceCreate) -> Device:
        return self._commit(Device(**data.model_dump()))

    def update(self, device: Device, data: DeviceUpdate) -> Device:
        for field, value in data.model_dump(exclude_none=True).items():
            setattr(device, field, value)
        return self._commit(device)

    def delete(self, device: Device) -> None:
        self.db.delete(device)
        self.db.commit()

    def _commit(self, device: Device) -> Device:
        self.db.add(device)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ValueError(f"Serial number '{device.serial_number}' already registered") from exc
        self.db.refresh(device)
        return device
