# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User account operations."""

import logging
import uuid

from sqlalchemy.orm import Session

from rolegate.exceptions import ConflictError, NotFoundError, ValidationError
from rolegate.models import User, UserType
from rolegate.services import auth_service

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def list_users(db: Session) -> list[User]:
    """Get all users ordered by display name."""
    return db.query(User).order_by(User.display_name).all()


def create_user(
    db: Session,
    email: str,
    display_name: str,
    user_type: UserType = UserType.STAFF,
) -> User:
    """Create a user account without roles."""
    if not email or not display_name:
        raise ValidationError("Missing required fields: email, display_name")
    if get_user_by_email(db, email):
        raise ConflictError("User with this email already exists")

    user = User(email=email, display_name=display_name, type=user_type)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"Created {user_type.value} user {user.id}")
    return user


def set_user_type(db: Session, user_id: uuid.UUID, user_type: UserType) -> User:
    """Change the account type of a user."""
    user = db.get(User, user_id)
    if not user:
        raise NotFoundError("User not found")

    user.type = user_type
    db.commit()
    db.refresh(user)
    logger.info(f"Changed type of user {user.id} to {user_type.value}")
    return user


def set_user_active(db: Session, user_id: uuid.UUID, is_active: bool) -> User:
    """Enable or disable a user account.

    Disabling also revokes every session of the user, so the change takes
    effect on their next request.
    """
    user = db.get(User, user_id)
    if not user:
        raise NotFoundError("User not found")

    try:
        user.is_active = is_active
        if not is_active:
            revoked = auth_service.delete_user_sessions(db, user.id)
            logger.info(f"Revoked {revoked} sessions of user {user.id}")
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(user)
    logger.info(f"{'Enabled' if is_active else 'Disabled'} user {user.id}")
    return user
