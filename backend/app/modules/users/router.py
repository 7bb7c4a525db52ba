from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
import logging
from sqlalchemy.orm import Session

from app.core.database import get_db
from .schemas import UserCreate, UserRead, UserUpdate
from .service import UserNotFound, UsersService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

DbDep = Annotated[Session, Depends(get_db)]


@router.get("", response_model=list[UserRead])
def list_users(
    db: DbDep,
    limit: Annotated[int, Query(ge=1, le=500)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
):
    return UsersService(db).list_users(limit=limit, offset=offset)


@router.get("/{user_id}", response_model=UserRead)
def read_user(user_id: str, db: DbDep):
    try:
        return UsersService(db).get_user(user_id)
    except UserNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(data: UserCreate, db: DbDep):
    svc = UsersService(db)
    try:
        logger.info("Creating user %s", data.email)
        user = svc.register_user(data)
    except ValueError as e:
        logger.info("User creation failed for %s: %s", data.email, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    logger.info("User %s created with id %s", user.email, user.id)
    return user


@router.put("/{user_id}", response_model=UserRead)
def update_user(user_id: str, data: UserUpdate, db: DbDep):
    svc = UsersService(db)
    try:
        user = svc.update_user(user_id, data)
    except UserNotFound as e:
        logger.warning("Update requested for missing user %s", user_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    logger.info("User %s updated", user_id)
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, db: DbDep):
    try:
        UsersService(db).delete_user(user_id)
    except UserNotFound as e:
        logger.warning("Delete requested for missing user %s", user_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    logger.info("User %s deleted", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
