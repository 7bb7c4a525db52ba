from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.api.deps import get_current_user
from app.modules.users.models import User
from app.modules.users.schemas import UserRead
from .schemas import AuthResponse, LoginRequest, RegisterRequest
from .service import AuthService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Annotated[Session, Depends(get_db)]):
    svc = AuthService(db)
    try:
        user, token = svc.register(payload)
    except ValueError as e:
        logger.info("Registration failed for %s: %s", payload.email, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    logger.info("User %s registered with id %s", user.email, user.id)
    return AuthResponse(
        message="User registered successfully",
        user=UserRead.model_validate(user),
        token=token,
    )


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: Annotated[Session, Depends(get_db)]):
    result = AuthService(db).login(payload.email, payload.password)
    if not result:
        logger.info("Rejected login for %s", payload.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    user, token = result
    return AuthResponse(
        message="User logged in successfully",
        user=UserRead.model_validate(user),
        token=token,
    )


@router.get("/me", response_model=UserRead)
def me(current: Annotated[User, Depends(get_current_user)]):
    return current
