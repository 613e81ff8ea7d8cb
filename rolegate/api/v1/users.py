# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User role assignment endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from rolegate.api.deps import get_current_admin, get_current_user, get_db, require_permission
from rolegate.exceptions import RbacError, to_http_exception
from rolegate.models import User
from rolegate.rbac.permissions import Permission
from rolegate.schemas.rbac import UserPermissionsSchema, UserRoleAssignmentSchema
from rolegate.schemas.user import UserSchema, UserTypeUpdateSchema
from rolegate.services import delegation_service, permission_service, user_service

router = APIRouter()


@router.get("", response_model=list[UserSchema], summary="List users")
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.USERS_VIEW)),
):
    """Retrieve all users with their directly assigned roles.
    Requires users.view permission.
    """
    return [UserSchema.model_validate(user) for user in user_service.list_users(db)]


@router.get(
    "/me/permissions",
    response_model=UserPermissionsSchema,
    summary="Get current user's effective permissions",
)
def get_my_permissions(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Retrieve the current user's effective permissions and the roles
    they may assign to others.
    """
    permissions = permission_service.effective_permissions(db, current_user)
    delegable = delegation_service.delegable_role_ids(db, current_user)
    return UserPermissionsSchema(
        is_admin=current_user.is_admin,
        permissions=sorted(p.value for p in permissions),
        delegable_role_ids=sorted(delegable, key=str),
    )


@router.post("/{user_id}/roles", response_model=UserSchema, summary="Assign a role to a user")
def assign_role(
    user_id: uuid.UUID,
    assignment: UserRoleAssignmentSchema,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.USERS_MANAGE_ROLES)),
):
    """Assign a role to a user. Non-administrators can only assign roles
    within their own hierarchy. Assigning a held role is a no-op.
    Requires users.manage_roles permission.
    """
    try:
        user = delegation_service.assign_role(
            db, current_user.id, user_id, assignment.role_id
        )
    except RbacError as e:
        raise to_http_exception(e) from e
    return UserSchema.model_validate(user)


@router.delete(
    "/{user_id}/roles/{role_id}",
    response_model=UserSchema,
    summary="Remove a role from a user",
)
def remove_role(
    user_id: uuid.UUID,
    role_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.USERS_MANAGE_ROLES)),
):
    """Remove a role from a user. Non-administrators can only remove roles
    within their own hierarchy. Removing a role that is not held is a no-op.
    Requires users.manage_roles permission.
    """
    try:
        user = delegation_service.remove_role(db, current_user.id, user_id, role_id)
    except RbacError as e:
        raise to_http_exception(e) from e
    return UserSchema.model_validate(user)


@router.post("/{user_id}/type", response_model=UserSchema, summary="Change a user's type")
def set_user_type(
    user_id: uuid.UUID,
    type_in: UserTypeUpdateSchema,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
):
    """Change a user's account type. Administrators only."""
    try:
        user = user_service.set_user_type(db, user_id, type_in.type)
    except RbacError as e:
        raise to_http_exception(e) from e
    return UserSchema.model_validate(user)


@router.post("/{user_id}/disable", response_model=UserSchema, summary="Disable a user")
def disable_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
):
    """Disable a user account and revoke its sessions. Administrators only."""
    if user_id == current_user.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot disable your own account",
        )
    try:
        user = user_service.set_user_active(db, user_id, False)
    except RbacError as e:
        raise to_http_exception(e) from e
    return UserSchema.model_validate(user)


@router.post("/{user_id}/enable", response_model=UserSchema, summary="Enable a user")
def enable_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
):
    """Re-enable a disabled user account. Administrators only."""
    try:
        user = user_service.set_user_active(db, user_id, True)
    except RbacError as e:
        raise to_http_exception(e) from e
    return UserSchema.model_validate(user)
