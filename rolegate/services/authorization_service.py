# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authorization decisions for privileged operations."""

import logging
from collections.abc import Sequence
from enum import Enum

from sqlalchemy.orm import Session

from rolegate.models import User
from rolegate.rbac.permissions import Permission
from rolegate.services import permission_service

logger = logging.getLogger(__name__)


class AccessDecision(str, Enum):
    """Outcome of an authorization check."""

    ALLOW = "allow"
    DENY = "deny"


def _codes(required: str | Sequence[str]) -> list[str]:
    # A Permission is itself a str, so check for the single-key case first
    if isinstance(required, str):
        required = [required]
    return [Permission(p).value if isinstance(p, Permission) else str(p) for p in required]


def authorize(
    db: Session,
    user: User,
    required: Permission | Sequence[Permission],
    require_all: bool = True,
) -> AccessDecision:
    """Decide whether a user may perform an operation.

    Administrators are always allowed. Everyone else needs the required
    permission, or for a list either every entry (``require_all``) or at
    least one of them.
    """
    if user.is_admin:
        return AccessDecision.ALLOW

    granted = {p.value for p in permission_service.effective_permissions(db, user)}
    codes = _codes(required)

    if require_all or isinstance(required, str):
        allowed = all(code in granted for code in codes)
    else:
        allowed = any(code in granted for code in codes)

    if not allowed:
        joiner = " and " if require_all else " or "
        logger.info(
            f"Denied user {user.id}: requires {joiner.join(codes) or 'nothing'}"
        )
        return AccessDecision.DENY
    return AccessDecision.ALLOW


def is_allowed(
    db: Session,
    user: User,
    required: Permission | Sequence[Permission],
    require_all: bool = True,
) -> bool:
    """Return True when authorize() allows the user."""
    return authorize(db, user, required, require_all) == AccessDecision.ALLOW
