# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
from sqlalchemy import Column, ForeignKey, PrimaryKeyConstraint, String, Uuid
from sqlalchemy.orm import relationship

from rolegate.models.base import Base


class RolePermission(Base):
    """Association table mapping roles to their granted permission codes.

    The composite primary key keeps a role's permissions a set.
    """

    __tablename__ = "role_permissions"

    role_id = Column(
        Uuid(as_uuid=True), ForeignKey("roles.id", ondelete="CASCADE"), nullable=False
    )
    permission_code = Column(String(100), nullable=False)

    __table_args__ = (PrimaryKeyConstraint("role_id", "permission_code"),)

    role = relationship("Role", back_populates="permissions")
