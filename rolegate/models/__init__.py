# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from rolegate.models.base import Base, TimestampMixin
from rolegate.models.enums import UserType
from rolegate.models.role import DEFAULT_ROLE_COLOR, Role
from rolegate.models.role_permission import RolePermission
from rolegate.models.session import Session
from rolegate.models.user import User
from rolegate.models.user_role import UserRole

__all__ = [
    "DEFAULT_ROLE_COLOR",
    "Base",
    "Role",
    "RolePermission",
    "Session",
    "TimestampMixin",
    "User",
    "UserRole",
    "UserType",
]
