# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User model for authorization."""

from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Enum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rolegate.models.base import Base, TimestampMixin
from rolegate.models.enums import UserType

if TYPE_CHECKING:
    from rolegate.models.session import Session
    from rolegate.models.user_role import UserRole


class User(Base, TimestampMixin):
    """User account carrying a type and a set of directly assigned roles."""

    __tablename__ = "users"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    display_name: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[UserType] = mapped_column(
        Enum(UserType),
        default=UserType.STAFF,
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    sessions: Mapped[list[Session]] = relationship(
        "Session",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    user_roles: Mapped[list[UserRole]] = relationship(
        "UserRole",
        foreign_keys="[UserRole.user_id]",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def is_admin(self) -> bool:
        """Administrators bypass permission checks."""
        return self.type == UserType.ADMIN

    @property
    def role_ids(self) -> set[uuid_lib.UUID]:
        """Ids of the roles directly assigned to this user."""
        return {user_role.role_id for user_role in self.user_roles}
