# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rolegate.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from rolegate.models.role_permission import RolePermission
    from rolegate.models.user_role import UserRole

DEFAULT_ROLE_COLOR = "#808080"


class Role(Base, TimestampMixin):
    """A named set of permissions placed in the role hierarchy."""

    __tablename__ = "roles"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    color: Mapped[str] = mapped_column(
        String(20), default=DEFAULT_ROLE_COLOR, nullable=False
    )
    # NULL = root of a tree in the role forest
    parent_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("roles.id"),
        nullable=True,
        index=True,
    )

    permissions: Mapped[list[RolePermission]] = relationship(
        "RolePermission",
        back_populates="role",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    user_roles: Mapped[list[UserRole]] = relationship(
        "UserRole", back_populates="role"
    )

    @property
    def permission_codes(self) -> set[str]:
        """Permission codes granted by this role."""
        return {rp.permission_code for rp in self.permissions}
