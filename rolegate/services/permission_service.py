# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Effective permission resolution.

A user's effective permissions are the union of the permissions of the
roles assigned to them directly. The role hierarchy plays no part here and
account type is not considered; the administrator bypass lives in
authorization_service.
"""

import uuid
from collections.abc import Iterable

from sqlalchemy.orm import Session

from rolegate.models import User
from rolegate.rbac.permissions import Permission, parse_permissions
from rolegate.services import role_store


def role_permissions(db: Session, role_ids: Iterable[uuid.UUID]) -> set[Permission]:
    """Get the union of permissions granted by the given roles."""
    codes: set[str] = set()
    for role in role_store.find_roles_by_ids(db, role_ids):
        codes.update(role.permission_codes)

    # Codes no longer in the catalogue grant nothing
    valid, _ = parse_permissions(codes)
    return valid


def effective_permissions(db: Session, user: User) -> set[Permission]:
    """Get the set of permissions a user holds through directly assigned roles."""
    return role_permissions(db, user.role_ids)
