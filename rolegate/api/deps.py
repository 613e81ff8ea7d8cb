# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from collections.abc import Callable, Sequence

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from rolegate.config import settings
from rolegate.database import get_db
from rolegate.models import User
from rolegate.rbac.permissions import Permission
from rolegate.services import auth_service, authorization_service
from rolegate.services.authorization_service import AccessDecision

FORBIDDEN_DETAIL = "Forbidden: You do not have the necessary permissions."

__all__ = [
    "get_current_admin",
    "get_current_user",
    "get_db",
    "require_permission",
]


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
) -> User:
    """Get current authenticated user from the session cookie."""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    session_obj = auth_service.get_session(db, token)
    if not session_obj:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
        )

    user = auth_service.get_user_by_id(db, session_obj.user_id)
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )

    return user


def get_current_admin(
    current_user: User = Depends(get_current_user),
) -> User:
    """Get current user and verify they are an administrator."""
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


def require_permission(
    required: Permission | Sequence[Permission], require_all: bool = True
) -> Callable[..., User]:
    """Dependency for permission-based authorization."""

    def dependency(
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ) -> User:
        decision = authorization_service.authorize(
            db, current_user, required, require_all=require_all
        )
        if decision == AccessDecision.DENY:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN_DETAIL
            )
        return current_user

    return dependency
