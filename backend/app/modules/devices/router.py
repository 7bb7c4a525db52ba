from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from .models import Device
from .repository import DevicesRepository
from .schemas import DeviceCreate, DeviceRead, DeviceUpdate


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/devices", tags=["devices"])

DbDep = Annotated[Session, Depends(get_db)]


def _get_or_404(repo: DevicesRepository, device_id: int) -> Device:
    device = repo.get(device_id)
    if not device:
        logger.warning("Device not found with ID: %s", device_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Device not found")
    return device


@router.get("", response_model=list[DeviceRead])
def list_devices(db: DbDep):
    logger.info("Listing devices")
    return DevicesRepository(db).list()


@router.get("/{device_id}", response_model=DeviceRead)
def read_device(device_id: int, db: DbDep):
    return _get_or_404(DevicesRepository(db), device_id)


@router.post("", response_model=DeviceRead, status_code=status.HTTP_201_CREATED)
def create_device(payload: DeviceCreate, db: DbDep):
    try:
        device = DevicesRepository(db).create(payload)
    except ValueError as exc:
        logger.error("Error creating device: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Error creating device")
    logger.info("Device created successfully with ID: %s", device.id)
    return device


@router.put("/{device_id}", response_model=DeviceRead)
def update_device(device_id: int, payload: DeviceUpdate, db: DbDep):
    repo = DevicesRepository(db)
    device = _get_or_404(repo, device_id)
    try:
        device = repo.update(device, payload)
    except ValueError as exc:
        logger.error("Error updating device %s: %s", device_id, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Error updating device")
    logger.info("Device updated successfully with ID: %s", device_id)
    return device


@router.delete("/{device_id}", response_model=DeviceRead)
def delete_device(device_id: int, db: DbDep):
    repo = DevicesRepository(db)
    device = _get_or_404(repo, device_id)
    # Snapshot before the row is gone so the caller gets the deleted record back
    snapshot = DeviceRead.model_validate(device)
    repo.delete(device)
    logger.info("Device deleted successfully with ID: %s", device_id)
    return snapshot
