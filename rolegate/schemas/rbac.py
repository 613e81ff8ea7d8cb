# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role and permission schemas."""

from __future__ import annotations

import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"


def _codes(value: Any) -> list[str]:
    # ORM roles expose RolePermission rows, tree nodes expose plain codes
    codes = [getattr(item, "permission_code", item) for item in value or []]
    return sorted(str(getattr(code, "value", code)) for code in codes)


class PermissionSchema(BaseModel):
    """Schema representing a permission in the catalogue."""

    code: str
    module: str
    description: str


class RoleSchema(BaseModel):
    """Schema representing a role."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    color: str
    parent_id: uuid.UUID | None
    permissions: list[str]

    @field_validator("permissions", mode="before")
    @classmethod
    def permission_codes(cls, v: Any) -> list[str]:
        return _codes(v)


class RoleNodeSchema(RoleSchema):
    """Schema representing a role with its child roles."""

    children: list[RoleNodeSchema] = []


RoleNodeSchema.model_rebuild()


class RoleCreateSchema(BaseModel):
    """Schema for creating a new role.

    Missing name or permissions are reported by the service as a 400.
    """

    name: str | None = None
    permissions: list[str] | None = None  # List of permission codes
    parent_id: uuid.UUID | None = None
    color: str | None = Field(default=None, pattern=COLOR_PATTERN)


class RoleUpdateSchema(RoleCreateSchema):
    """Schema for replacing a role. Every field is written as given."""


class RoleParentUpdateSchema(BaseModel):
    """Schema for moving a role in the tree. None moves it to the root level."""

    new_parent_id: uuid.UUID | None


class UserRoleAssignmentSchema(BaseModel):
    """Schema for assigning a role to a user."""

    role_id: uuid.UUID


class UserPermissionsSchema(BaseModel):
    """Schema representing a user's effective permissions."""

    is_admin: bool
    permissions: list[str]
    delegable_role_ids: list[uuid.UUID]
