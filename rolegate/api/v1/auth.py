# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Session endpoints. Login itself happens in the external OAuth flow."""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from rolegate.api.deps import get_current_user, get_db
from rolegate.config import settings
from rolegate.models import User
from rolegate.services import auth_service

router = APIRouter()


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT, summary="End the current session")
def logout(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> None:
    """Revoke the current session and clear its cookie."""
    auth_service.delete_session(db, request.cookies[settings.SESSION_COOKIE_NAME])
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME)
