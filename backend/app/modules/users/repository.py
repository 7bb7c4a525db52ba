from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import User


class UsersRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        return self.db.scalar(stmt)

    def list(self, limit: int = 50, offset: int = 0) -> list[User]:
        stmt = select(User).order_by(User.created_at).limit(limit).offset(offset)
        return list(self.db.scalars(stmt))

    def create(self, user: User) -> User:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def save(self, user: User) -> User:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    # ---- Parameters ----
    def load_parameters(self, user_id: str) -> Optional[dict[str, Any]]:
        user = self.get_by_id(user_id)
        if user is None:
            return None
        return dict(user.parameters or {})

    def save_parameters(self, user_id: str, parameters: dict[str, Any]) -> Optional[dict[str, Any]]:
        user = self.get_by_id(user_id)
        if user is None:
            return None
        user.parameters = parameters
        return dict(self.save(user).parameters or {})

    def delete(self, user: User) -> None:
        self.db.delete(user)
        self.db.commit()
