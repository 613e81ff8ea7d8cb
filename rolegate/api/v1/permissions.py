# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission catalogue endpoint."""

from fastapi import APIRouter, Depends

from rolegate.api.deps import require_permission
from rolegate.models import User
from rolegate.rbac.permissions import PERMISSION_DESCRIPTIONS, Permission, module_of
from rolegate.schemas.rbac import PermissionSchema

router = APIRouter()


@router.get("", response_model=list[PermissionSchema], summary="List all available permissions")
def list_permissions(
    current_user: User = Depends(require_permission(Permission.ROLES_VIEW)),
):
    """Retrieve the catalogue of permissions that can be granted to roles.
    Requires roles.view permission.
    """
    return [
        PermissionSchema(
            code=permission.value,
            module=module_of(permission),
            description=PERMISSION_DESCRIPTIONS.get(permission, ""),
        )
        for permission in Permission
    ]
