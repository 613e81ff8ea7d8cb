# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Cookie session resolving a request to its principal."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rolegate.models.base import Base

if TYPE_CHECKING:
    from rolegate.models.user import User


class Session(Base):
    """Opaque cookie token bound to a user until it expires.

    Rows are written by the login flow in front of this service. Here they
    are only looked up, expired and revoked.
    """

    __tablename__ = "sessions"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    user_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    token: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False,
    )

    user: Mapped[User] = relationship("User", back_populates="sessions")

    def is_expired(self, now: datetime | None = None) -> bool:
        """True once the expiry time has been reached (naive UTC)."""
        return self.expires_at <= (now or datetime.utcnow())
