from __future__ import annotations

import logging
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import get_password_hash
from .service import UsersService
from .schemas import UserCreate
from .repository import UsersRepository


logger = logging.getLogger(__name__)


def ensure_default_admin(db: Session) -> None:
    email = settings.ADMIN_EMAIL
    password = settings.ADMIN_PASSWORD
    if not email or not password:
        logger.debug("ADMIN_EMAIL or ADMIN_PASSWORD not set; skipping admin bootstrap")
        return

    # Sanity check: ensure users table exists
    try:
        db.execute(text("SELECT 1 FROM users LIMIT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Users table not ready yet: %s", exc)
        db.rollback()
        return

    existing = UsersRepository(db).get_by_email(email)
    if existing:
        # Ensure admin account has correct flags and the env-provided password
        existing.is_superuser = True
        existing.is_active = True
        existing.hashed_password = get_password_hash(password)
        UsersRepository(db).save(existing)
        logger.info("Default admin '%s' refreshed", existing.email)
        return

    try:
        user = UsersService(db).register_user(
            UserCreate(email=email, password=password, full_name=settings.ADMIN_FULL_NAME),
            is_superuser=True,
        )
    except (SQLAlchemyError, ValueError) as exc:
        db.rollback()
        logger.error("Failed to create default admin: %s", exc)
        return
    logger.info("Default admin '%s' created", user.email)
