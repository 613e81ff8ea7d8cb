# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role management: CRUD over roles and safe edits of the role tree.

This module is the only writer of roles. Every code path that changes a
role's parent goes through ``_check_new_parent`` before anything is written.
"""

import logging
import uuid
from collections.abc import Iterable

from sqlalchemy.orm import Session

from rolegate.exceptions import (
    CircularDependencyError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from rolegate.models import DEFAULT_ROLE_COLOR, Role
from rolegate.rbac import hierarchy
from rolegate.rbac.hierarchy import RoleNode
from rolegate.rbac.permissions import parse_permissions
from rolegate.services import role_store

logger = logging.getLogger(__name__)


def _validate_name(name: str | None) -> str:
    if name is None or not name.strip():
        raise ValidationError("Missing required fields: name, permissions")
    return name.strip()


def _validate_permissions(permissions: Iterable[str] | None) -> set[str]:
    if permissions is None:
        raise ValidationError("Missing required fields: name, permissions")
    valid, invalid = parse_permissions(permissions)
    if invalid:
        raise ValidationError(f"Unknown permissions: {', '.join(sorted(invalid))}")
    return {p.value for p in valid}


def _ensure_unique_name(db: Session, name: str, role_id: uuid.UUID | None = None) -> None:
    existing = role_store.find_role_by_name(db, name)
    if existing and existing.id != role_id:
        raise ConflictError("Role with this name already exists")


def _check_new_parent(
    db: Session, role_id: uuid.UUID, new_parent_id: uuid.UUID | None
) -> None:
    """Validate a parent reassignment against a locked snapshot of the tree."""
    if new_parent_id is None:
        return
    if role_store.find_role_by_id(db, new_parent_id) is None:
        raise NotFoundError("New parent role not found")

    snapshot = role_store.find_all_roles(db, for_update=True)
    if hierarchy.would_create_cycle(snapshot, role_id, new_parent_id):
        logger.warning(
            f"Rejected moving role {role_id} under {new_parent_id}: circular dependency"
        )
        raise CircularDependencyError()


def get_role_tree(db: Session) -> list[RoleNode]:
    """Get all roles structured as a forest."""
    return hierarchy.build_tree(role_store.find_all_roles(db))


def list_roles(db: Session) -> list[Role]:
    """Get all roles as a flat list ordered by name."""
    return role_store.find_all_roles(db)


def get_role(db: Session, role_id: uuid.UUID) -> Role:
    """Get a role by ID or raise NotFoundError."""
    role = role_store.find_role_by_id(db, role_id)
    if not role:
        raise NotFoundError("Role not found")
    return role


def create_role(
    db: Session,
    name: str | None,
    permissions: Iterable[str] | None,
    parent_id: uuid.UUID | None = None,
    color: str | None = None,
) -> Role:
    """Create a new role, optionally below an existing parent."""
    name = _validate_name(name)
    codes = _validate_permissions(permissions)
    _ensure_unique_name(db, name)
    if parent_id is not None and role_store.find_role_by_id(db, parent_id) is None:
        raise NotFoundError("Parent role not found")

    try:
        role = Role(name=name, color=color or DEFAULT_ROLE_COLOR, parent_id=parent_id)
        role_store.set_role_permissions(db, role, codes)
        role_store.save_role(db, role)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(role)
    logger.info(f"Created role '{role.name}' ({role.id}) under parent {parent_id}")
    return role


def update_role(
    db: Session,
    role_id: uuid.UUID,
    name: str | None,
    permissions: Iterable[str] | None,
    parent_id: uuid.UUID | None = None,
    color: str | None = None,
) -> Role:
    """Replace a role's name, permissions, color and parent.

    A changed parent is subject to the same checks as update_role_parent.
    """
    role = get_role(db, role_id)
    name = _validate_name(name)
    codes = _validate_permissions(permissions)

    try:
        _ensure_unique_name(db, name, role_id=role.id)
        if parent_id != role.parent_id:
            _check_new_parent(db, role.id, parent_id)

        role.name = name
        role.color = color or DEFAULT_ROLE_COLOR
        role.parent_id = parent_id
        role_store.set_role_permissions(db, role, codes)
        role_store.save_role(db, role)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(role)
    logger.info(f"Updated role '{role.name}' ({role.id})")
    return role


def update_role_parent(
    db: Session, role_id: uuid.UUID, new_parent_id: uuid.UUID | None
) -> Role:
    """Move a role under a new parent, or to the root level when None.

    Raises CircularDependencyError and leaves the tree untouched if the move
    would make the role its own ancestor.
    """
    role = role_store.find_role_by_id(db, role_id)
    if not role:
        raise NotFoundError("Role to move not found")

    try:
        _check_new_parent(db, role.id, new_parent_id)
        role.parent_id = new_parent_id
        role_store.save_role(db, role)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(role)
    logger.info(f"Moved role '{role.name}' ({role.id}) under parent {new_parent_id}")
    return role


def delete_role(db: Session, role_id: uuid.UUID) -> None:
    """Delete a role that has no child roles and is assigned to nobody."""
    role = get_role(db, role_id)
    role_name = role.name

    if role_store.count_child_roles(db, role.id) > 0:
        raise ConflictError(
            "Cannot delete a role that has child roles. Please reassign children first."
        )
    if role_store.count_role_holders(db, role.id) > 0:
        raise ConflictError("Cannot delete a role that is currently assigned to users.")

    try:
        role_store.delete_role_by_id(db, role.id)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Deleted role '{role_name}' ({role_id})")
