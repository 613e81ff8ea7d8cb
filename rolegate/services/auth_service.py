# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Session lookup and revocation for the authenticated principal.

Sessions are issued by the external login flow. This module resolves a
cookie token to its session, revokes sessions on logout or when a user is
disabled, and purges expired rows at startup.
"""

import logging
import uuid
from datetime import datetime

from sqlalchemy.orm import Session

from rolegate.models import User
from rolegate.models.session import Session as SessionModel

logger = logging.getLogger(__name__)


def get_session(db: Session, token: str) -> SessionModel | None:
    """Get a live session by token, deleting it if it has expired."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if not session:
        return None
    if session.is_expired():
        db.delete(session)
        db.commit()
        return None
    return session


def delete_session(db: Session, token: str) -> bool:
    """Revoke a single session. Returns False if the token is unknown."""
    deleted = db.query(SessionModel).filter(SessionModel.token == token).delete()
    db.commit()
    return deleted > 0


def delete_user_sessions(db: Session, user_id: uuid.UUID) -> int:
    """Revoke every session of a user. The caller commits."""
    return db.query(SessionModel).filter(SessionModel.user_id == user_id).delete()


def get_user_by_id(db: Session, user_id: uuid.UUID) -> User | None:
    """Get a user by ID."""
    return db.query(User).filter(User.id == user_id).first()


def cleanup_expired_sessions(db: Session) -> int:
    """Delete all expired sessions. Returns count of deleted sessions."""
    count = (
        db.query(SessionModel)
        .filter(SessionModel.expires_at <= datetime.utcnow())
        .delete()
    )
    db.commit()
    if count:
        logger.info(f"Removed {count} expired sessions")
    return count
