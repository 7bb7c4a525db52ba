from __future__ import annotations

from sqlalchemy.orm import Session

from app.core.security import get_password_hash, verify_password
from .models import User
from .schemas import UserCreate, UserUpdate
from .repository import UsersRepository


class UserNotFound(LookupError):
    def __init__(self, user_id: str):
        super().__init__("User not found")
        self.user_id = user_id


class UsersService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = UsersRepository(db)

    def register_user(self, data: UserCreate, is_superuser: bool = False) -> User:
        existing = self.repo.get_by_email(data.email)
        if existing:
            raise ValueError("Email already registered")
        user = User(
            email=data.email,
            full_name=data.full_name,
            hashed_password=get_password_hash(data.password),
            is_active=True,
            is_superuser=is_superuser,
            parameters=dict(data.parameters),
        )
        return self.repo.create(user)

    def authenticate(self, email: str, password: str) -> User | None:
        user = self.repo.get_by_email(email)
        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user

    def list_users(self, limit: int = 50, offset: int = 0) -> list[User]:
        return self.repo.list(limit=limit, offset=offset)

    def get_user(self, user_id: str) -> User:
        user = self.repo.get_by_id(user_id)
        if not user:
            raise UserNotFound(user_id)
        return user

    def update_user(self, user_id: str, data: UserUpdate) -> User:
        user = self.get_user(user_id)
        if data.email is not None and data.email != user.email:
            if self.repo.get_by_email(data.email):
                raise ValueError("Email already registered")
            user.email = data.email
        if data.full_name is not None:
            user.full_name = data.full_name
        if data.password is not None:
            user.hashed_password = get_password_hash(data.password)
        if data.parameters is not None:
            user.parameters = dict(data.parameters)
        return self.repo.save(user)

    def delete_user(self, user_id: str) -> None:
        self.repo.delete(self.get_user(user_id))
