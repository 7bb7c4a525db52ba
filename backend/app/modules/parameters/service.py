from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from app.modules.users.repository import UsersRepository
from app.modules.users.service import UserNotFound
from . import store
from .store import ParameterMap


class ParametersService:
    """Load a user's parameter map, apply one pure mutation, persist the result."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = UsersRepository(db)

    def _load(self, user_id: str) -> ParameterMap:
        current = self.repo.load_parameters(user_id)
        if current is None:
            raise UserNotFound(user_id)
        return current

    def get(self, user_id: str) -> ParameterMap:
        return store.read(self._load(user_id))

    def _save(self, user_id: str, parameters: ParameterMap) -> ParameterMap:
        saved = self.repo.save_parameters(user_id, parameters)
        if saved is None:
            raise UserNotFound(user_id)
        return saved

    def update(self, user_id: str, patch: Any) -> ParameterMap:
        return self._save(user_id, store.merge(self._load(user_id), patch))

    def delete(self, user_id: str, key: Any) -> ParameterMap:
        return self._save(user_id, store.delete_key(self._load(user_id), key))
