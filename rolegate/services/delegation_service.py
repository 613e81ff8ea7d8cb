# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Delegated role assignment.

A non-administrator may only grant or revoke roles that lie within the
subtrees rooted at their own directly assigned roles (those roles included).
"""

import logging
import uuid

from sqlalchemy.orm import Session

from rolegate.exceptions import ForbiddenError, NotFoundError
from rolegate.models import User
from rolegate.rbac import hierarchy
from rolegate.services import role_store

logger = logging.getLogger(__name__)


def delegable_role_ids(db: Session, acting_user: User) -> set[uuid.UUID]:
    """Get the IDs of every role the user may hand out or take away."""
    if acting_user.is_admin:
        return {role.id for role in role_store.find_all_roles(db)}
    return hierarchy.descendant_ids(
        role_store.find_all_roles(db), acting_user.role_ids
    )


def can_delegate(db: Session, acting_user: User, role_id: uuid.UUID) -> bool:
    """Check if a user may assign or remove the given role on others."""
    if acting_user.is_admin:
        return True
    return role_id in delegable_role_ids(db, acting_user)


def _load_parties(
    db: Session,
    acting_user_id: uuid.UUID,
    target_user_id: uuid.UUID,
    role_id: uuid.UUID,
) -> tuple[User, User]:
    acting_user = role_store.find_user_by_id(db, acting_user_id)
    if not acting_user:
        raise NotFoundError("Performing user not found")
    target_user = role_store.find_user_by_id(db, target_user_id)
    if not target_user:
        raise NotFoundError("User not found")
    if role_store.find_role_by_id(db, role_id) is None:
        raise NotFoundError("Role not found")

    if not can_delegate(db, acting_user, role_id):
        logger.warning(
            f"User {acting_user.id} tried to delegate role {role_id} outside their hierarchy"
        )
        raise ForbiddenError("You can only manage roles within your own hierarchy")
    return acting_user, target_user


def assign_role(
    db: Session,
    acting_user_id: uuid.UUID,
    target_user_id: uuid.UUID,
    role_id: uuid.UUID,
) -> User:
    """Assign a role to a user on behalf of the acting user.

    Assigning a role the target already holds is a no-op.
    """
    acting_user, target_user = _load_parties(db, acting_user_id, target_user_id, role_id)

    try:
        added = role_store.add_role_to_user(
            db, target_user.id, role_id, assigned_by_id=acting_user.id
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    if added:
        logger.info(f"User {acting_user.id} assigned role {role_id} to {target_user.id}")
    db.refresh(target_user)
    return target_user


def remove_role(
    db: Session,
    acting_user_id: uuid.UUID,
    target_user_id: uuid.UUID,
    role_id: uuid.UUID,
) -> User:
    """Remove a role from a user on behalf of the acting user.

    Removing a role the target does not hold is a no-op.
    """
    acting_user, target_user = _load_parties(db, acting_user_id, target_user_id, role_id)

    try:
        removed = role_store.remove_role_from_user(db, target_user.id, role_id)
        db.commit()
    except Exception:
        db.rollback()
        raise

    if removed:
        logger.info(f"User {acting_user.id} removed role {role_id} from {target_user.id}")
    db.refresh(target_user)
    return target_user
