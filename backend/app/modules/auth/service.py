from __future__ import annotations

from sqlalchemy.orm import Session

from app.core.security import create_access_token
from app.modules.users.models import User
from app.modules.users.schemas import UserCreate
from app.modules.users.service import UsersService
from .schemas import RegisterRequest, TokenResponse


class AuthService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UsersService(db)

    def register(self, data: RegisterRequest) -> tuple[User, TokenResponse]:
        user = self.users.register_user(
            UserCreate(email=data.email, password=data.password, full_name=data.full_name)
        )
        return user, self.issue_token(user)

    def login(self, email: str, password: str) -> tuple[User, TokenResponse] | None:
        user = self.users.authenticate(email, password)
        if not user or not user.is_active:
            return None
        return user, self.issue_token(user)

    @staticmethod
    def issue_token(user: User) -> TokenResponse:
        return TokenResponse(access_token=create_access_token(subject=user.id))
