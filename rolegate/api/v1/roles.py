# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role management endpoints."""

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rolegate.api.deps import get_db, require_permission
from rolegate.exceptions import RbacError, to_http_exception
from rolegate.models import User
from rolegate.rbac.permissions import Permission
from rolegate.schemas.rbac import (
    RoleCreateSchema,
    RoleNodeSchema,
    RoleParentUpdateSchema,
    RoleSchema,
    RoleUpdateSchema,
)
from rolegate.services import role_service

router = APIRouter()


@router.get("", response_model=list[RoleNodeSchema], summary="Get the role tree")
def get_role_tree(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.ROLES_VIEW)),
):
    """Retrieve all roles structured as a forest of trees.
    Requires roles.view permission.
    """
    return [RoleNodeSchema.model_validate(node) for node in role_service.get_role_tree(db)]


@router.get("/flat", response_model=list[RoleSchema], summary="List all roles")
def list_roles(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.ROLES_VIEW)),
):
    """Retrieve all roles as a flat list ordered by name.
    Requires roles.view permission.
    """
    return [RoleSchema.model_validate(role) for role in role_service.list_roles(db)]


@router.get("/{role_id}", response_model=RoleSchema, summary="Get a role by ID")
def get_role(
    role_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.ROLES_VIEW)),
):
    """Retrieve a specific role by its ID.
    Requires roles.view permission.
    """
    try:
        role = role_service.get_role(db, role_id)
    except RbacError as e:
        raise to_http_exception(e) from e
    return RoleSchema.model_validate(role)


@router.post(
    "",
    response_model=RoleSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new role",
)
def create_role(
    role_in: RoleCreateSchema,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.ROLES_CREATE)),
):
    """Create a new role, optionally below a parent role.
    Requires roles.create permission.
    """
    try:
        role = role_service.create_role(
            db,
            name=role_in.name,
            permissions=role_in.permissions,
            parent_id=role_in.parent_id,
            color=role_in.color,
        )
    except RbacError as e:
        raise to_http_exception(e) from e
    return RoleSchema.model_validate(role)


@router.put("/{role_id}", response_model=RoleSchema, summary="Replace an existing role")
def update_role(
    role_id: uuid.UUID,
    role_in: RoleUpdateSchema,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.ROLES_EDIT)),
):
    """Replace a role's name, permissions, color and parent.
    Moving the role is checked for circular dependencies.
    Requires roles.edit permission.
    """
    try:
        role = role_service.update_role(
            db,
            role_id,
            name=role_in.name,
            permissions=role_in.permissions,
            parent_id=role_in.parent_id,
            color=role_in.color,
        )
    except RbacError as e:
        raise to_http_exception(e) from e
    return RoleSchema.model_validate(role)


@router.patch(
    "/{role_id}/parent", response_model=RoleSchema, summary="Move a role in the tree"
)
def update_role_parent(
    role_id: uuid.UUID,
    parent_in: RoleParentUpdateSchema,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.ROLES_EDIT)),
):
    """Attach a role to a new parent, or to the root level with null.
    Requires roles.edit permission.
    """
    try:
        role = role_service.update_role_parent(db, role_id, parent_in.new_parent_id)
    except RbacError as e:
        raise to_http_exception(e) from e
    return RoleSchema.model_validate(role)


@router.delete(
    "/{role_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a role"
)
def delete_role(
    role_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.ROLES_DELETE)),
):
    """Delete a role without child roles or holders.
    Requires roles.delete permission.
    """
    try:
        role_service.delete_role(db, role_id)
    except RbacError as e:
        raise to_http_exception(e) from e
    return
