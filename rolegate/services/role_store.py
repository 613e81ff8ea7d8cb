# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Persistence operations for roles and user role assignments.

These helpers only read and stage changes; committing is left to the calling
service so that validation and writes happen in one transaction.
"""

import uuid
from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from rolegate.models import Role, RolePermission, User, UserRole


def find_role_by_id(db: Session, role_id: uuid.UUID) -> Role | None:
    """Get a role by its ID."""
    return db.get(Role, role_id)


def find_role_by_name(db: Session, name: str) -> Role | None:
    """Get a role by its name."""
    return db.query(Role).filter(Role.name == name).first()


def find_all_roles(db: Session, for_update: bool = False) -> list[Role]:
    """Get every role.

    With ``for_update`` the rows are reloaded and stay locked until the
    transaction ends, so a hierarchy check and the write that follows see the
    same tree. SQLite has no row locks; there the engine opens every
    transaction with BEGIN IMMEDIATE instead (see rolegate.database).
    """
    stmt = select(Role).order_by(Role.name)
    if for_update:
        stmt = stmt.with_for_update().execution_options(populate_existing=True)
    return list(db.scalars(stmt).all())


def find_roles_by_ids(db: Session, role_ids: Iterable[uuid.UUID]) -> list[Role]:
    """Get the roles matching the given IDs; unknown IDs are skipped."""
    ids = list(role_ids)
    if not ids:
        return []
    return list(db.scalars(select(Role).where(Role.id.in_(ids))).all())


def save_role(db: Session, role: Role) -> Role:
    """Stage a new or modified role and flush it to obtain its ID."""
    db.add(role)
    db.flush()
    return role


def set_role_permissions(db: Session, role: Role, codes: Iterable[str]) -> None:
    """Replace the permission set of a role."""
    wanted = set(codes)
    role.permissions = [
        rp for rp in role.permissions if rp.permission_code in wanted
    ]
    existing = role.permission_codes
    for code in sorted(wanted - existing):
        role.permissions.append(RolePermission(permission_code=code))


def delete_role_by_id(db: Session, role_id: uuid.UUID) -> bool:
    """Stage deletion of a role. Returns False if it does not exist."""
    role = db.get(Role, role_id)
    if not role:
        return False
    db.delete(role)
    db.flush()
    return True


def count_child_roles(db: Session, role_id: uuid.UUID) -> int:
    """Count the roles whose parent is the given role."""
    return db.scalar(
        select(func.count()).select_from(Role).where(Role.parent_id == role_id)
    )


def count_role_holders(db: Session, role_id: uuid.UUID) -> int:
    """Count the users the given role is assigned to."""
    return db.scalar(
        select(func.count()).select_from(UserRole).where(UserRole.role_id == role_id)
    )


def find_user_by_id(db: Session, user_id: uuid.UUID) -> User | None:
    """Get a user by ID."""
    return db.get(User, user_id)


def add_role_to_user(
    db: Session,
    user_id: uuid.UUID,
    role_id: uuid.UUID,
    assigned_by_id: uuid.UUID | None = None,
) -> bool:
    """Add a role to a user's assignments. Returns False if already assigned."""
    existing = (
        db.query(UserRole)
        .filter(UserRole.user_id == user_id, UserRole.role_id == role_id)
        .first()
    )
    if existing:
        return False

    db.add(
        UserRole(user_id=user_id, role_id=role_id, assigned_by_id=assigned_by_id)
    )
    db.flush()
    return True


def remove_role_from_user(db: Session, user_id: uuid.UUID, role_id: uuid.UUID) -> bool:
    """Remove a role from a user's assignments. Returns False if not assigned."""
    user_role = (
        db.query(UserRole)
        .filter(UserRole.user_id == user_id, UserRole.role_id == role_id)
        .first()
    )
    if not user_role:
        return False

    db.delete(user_role)
    db.flush()
    return True
